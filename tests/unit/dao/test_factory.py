"""Unit tests for the key-value store DAO factory.

Test coverage includes:
    1. Backend selection
       - 'memory' builds a KeyValueMemoryDAO sharing process-wide data.
       - 'redis' builds a KeyValueRedisDAO from the 'redis' section.
    2. Misconfiguration
       - Missing or unknown backends raise BadConfigurationError.
"""

from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from kvshortener.dao import factory
from kvshortener.dao.factory import kv_store_dao
from kvshortener.dao.memory import KeyValueMemoryDAO
from kvshortener.exceptions import BadConfigurationError


# -------------------------------
# 1. Backend selection
# -------------------------------


def test_memory_backend():
    first = kv_store_dao({'active_backend': 'memory'})
    second = kv_store_dao({'active_backend': 'memory'})

    assert isinstance(first, KeyValueMemoryDAO)
    assert first.data is second.data


def test_redis_backend(monkeypatch: MonkeyPatch):
    redis_dao = MagicMock()
    monkeypatch.setattr(factory, 'KeyValueRedisDAO', redis_dao)
    config = {'active_backend': 'redis', 'redis': {'host': 'redis.test', 'port': 6380, 'db': 2}}

    result = kv_store_dao(config, prefix='kvshortener:test')

    assert result is redis_dao.return_value
    redis_dao.assert_called_once_with(redis_host='redis.test', redis_port=6380, redis_db=2, prefix='kvshortener:test')


# -------------------------------
# 2. Misconfiguration
# -------------------------------


@pytest.mark.parametrize('config', [{}, {'active_backend': 'dynamodb'}, {'active_backend': None}])
def test_unknown_backend(config):
    with pytest.raises(BadConfigurationError, match='Unknown key-value store backend'):
        kv_store_dao(config)
