from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def redis_client() -> redis.Redis:
    _redis_client = MagicMock(
        spec=redis.Redis, connection_pool=MagicMock(spec=redis.ConnectionPool, connection_kwargs={'host': 'redis', 'port': 6379, 'db': 0})
    )
    _redis_client.ping.return_value = True
    return _redis_client
