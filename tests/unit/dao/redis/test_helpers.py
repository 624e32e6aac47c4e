"""Unit tests for handle_redis_connection_error decorator.

Test coverage includes:
    1. Normal function execution
       - Ensures the wrapped method executes and returns its result.
    2. Connection error handling
       - Ensures Redis connection errors are converted into DataStoreError.
       - Ensures other Redis errors propagate untouched.
    3. Function metadata preservation
       - Confirms functools.wraps preserves the original function's name and docstring.
"""

from unittest.mock import MagicMock

import pytest
import redis

from kvshortener.dao.redis.helpers import handle_redis_connection_error, connection_label
from kvshortener.dao.exceptions import DataStoreError


class DummyDAO:
    def __init__(self):
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {
            'host': 'localhost',
            'port': 6379,
            'db': 0,
        }

    @handle_redis_connection_error
    def ping(self):
        return 'OK'

    @handle_redis_connection_error
    def fail(self):
        raise redis.exceptions.ConnectionError('Cannot connect')

    @handle_redis_connection_error
    def bad_response(self):
        raise redis.exceptions.ResponseError('WRONGTYPE')


# -------------------------------
# 1. Normal execution
# -------------------------------


def test_decorator_allows_normal_execution():
    """Ensure the wrapped function executes normally when no error occurs."""
    assert DummyDAO().ping() == 'OK'


# -------------------------------
# 2. Connection error handling
# -------------------------------


def test_decorator_transforms_redis_connection_error():
    """Ensure Redis ConnectionError is caught and re-raised as DataStoreError."""
    with pytest.raises(DataStoreError, match="Can't connect to Redis at localhost:6379/0."):
        DummyDAO().fail()


def test_decorator_ignores_other_redis_errors():
    """Ensure non-connectivity Redis errors are not masked."""
    with pytest.raises(redis.exceptions.ResponseError):
        DummyDAO().bad_response()


def test_connection_label():
    assert connection_label(DummyDAO().redis) == 'localhost:6379/0'


# -------------------------------
# 3. Function metadata preservation
# -------------------------------


def test_decorator_preserves_function_metadata():
    """Ensure function name and docstring are preserved via functools.wraps."""

    @handle_redis_connection_error
    def sample_function():
        """This is a sample docstring."""
        return 'OK'

    assert sample_function.__name__ == 'sample_function'
    assert 'sample docstring' in sample_function.__doc__
