from typing import Any

import pytest

from kvshortener.types import LambdaEvent


def make_event(method: str = 'GET', path: str = '/', headers: dict[str, str] | None = None, body: str | None = None, **extra: Any) -> LambdaEvent:
    """Build a REST API (payload v1.0) proxy event"""
    event = {
        'httpMethod': method,
        'path': path,
        'headers': headers or {},
        'body': body,
        'isBase64Encoded': False,
        'requestContext': {'domainName': 'sho.rt', 'stage': 'Prod'},
    }
    event.update(extra)
    return event


@pytest.fixture
def event_factory():
    return make_event
