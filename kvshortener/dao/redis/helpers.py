import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from kvshortener.dao.exceptions import DataStoreError


__all__ = ['handle_redis_connection_error', 'connection_label']

F = TypeVar('F', bound=Callable[..., Any])


def connection_label(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' for a Redis client (used in error messages)"""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle connection errors

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.ConnectionError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on connectivity issues with Redis.

    Example:
        >>> @handle_redis_connection_error
        ... def get(self, key):
        ...     return self.redis.get(key)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {connection_label(self.redis)}.") from e

    return wrapper
