"""Unit tests for runtime detection in runtime.py."""

import pytest
from pytest import MonkeyPatch

from kvshortener.constants import ENV
from kvshortener.utils.runtime import running_locally


@pytest.mark.parametrize(
    'app_env, sam_local, expected',
    [
        ('local', None, True),
        ('LOCAL', None, True),
        ('prod', 'true', True),
        (None, 'true', True),
        ('prod', None, False),
        ('dev', 'false', False),
        (None, None, False),
    ],
)
def test_running_locally(monkeypatch: MonkeyPatch, app_env, sam_local, expected):
    for name, value in ((ENV.App.APP_ENV, app_env), (ENV.App.AWS_SAM_LOCAL, sam_local)):
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    assert running_locally() is expected
