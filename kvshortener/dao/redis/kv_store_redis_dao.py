"""Data Access Object (DAO) implementation of the key-value store in Redis

This module provides a Redis-based implementation of KeyValueStoreBaseDAO.
Every key is namespaced via RedisKeySchema ('<prefix>:kv:<key>'), so several
apps and environments can share one Redis database.

Responsibilities:
    - Read and write plain string values;
    - Provide an atomic put-if-absent primitive (SET NX) for key allocation;
    - Raise DataStoreError on Redis connectivity issues.

Classes:
    KeyValueRedisDAO:
        DAO for storing and retrieving string values in a Redis datastore.

Example:
    >>> from kvshortener.dao.redis import KeyValueRedisDAO

    >>> dao = KeyValueRedisDAO(prefix="app:dev")
    >>> dao.put_if_absent("abc123", "https://example.com/page")
    True
    >>> dao.get("abc123")
    'https://example.com/page'
"""

from beartype import beartype

from kvshortener.dao.base import KeyValueStoreBaseDAO
from kvshortener.dao.redis.mixins import RedisClientMixin
from kvshortener.dao.redis.helpers import handle_redis_connection_error


class KeyValueRedisDAO(RedisClientMixin, KeyValueStoreBaseDAO):
    """Redis-based Data Access Object (DAO) for the flat key-value store

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        get(key: str, **kwargs) -> str | None:
            GET the namespaced key. None when missing.

        put(key: str, value: str, **kwargs) -> KeyValueRedisDAO:
            SET the namespaced key unconditionally.

        put_if_absent(key: str, value: str, **kwargs) -> bool:
            SET NX the namespaced key. False when the key already exists.

        All methods raise DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def get(self, key: str, **kwargs) -> str | None:
        """Retrieve a stored value by key

        Example:
            >>> dao.get('abc123')
            'https://example.com'
        """
        return self.redis.get(self.keys.kv_key(key))

    @handle_redis_connection_error
    @beartype
    def put(self, key: str, value: str, **kwargs) -> 'KeyValueRedisDAO':
        """Store a value under key (last write wins)

        Example:
            >>> dao.put('targets:9f8e...', 'abc123')
            <KeyValueRedisDAO>
        """
        self.redis.set(self.keys.kv_key(key), value)
        return self

    @handle_redis_connection_error
    @beartype
    def put_if_absent(self, key: str, value: str, **kwargs) -> bool:
        """Store a value under key only if the key doesn't exist yet

        NOTE: SET NX is a single atomic Redis command. Two concurrent writers
              racing for the same key can't both succeed:

              (lambda 1): SET <app>:kv:<key> <url 1> NX  => OK
              (lambda 2): SET <app>:kv:<key> <url 2> NX  => nil

              so lambda 2 learns about the collision instead of silently
              overwriting lambda 1's mapping.

        Example:
            >>> dao.put_if_absent('abc123', 'https://example.com')
            True
            >>> dao.put_if_absent('abc123', 'https://example.org')
            False
        """
        return bool(self.redis.set(self.keys.kv_key(key), value, nx=True))
