from kvshortener.dao.redis.redis_key_schema import RedisKeySchema
from kvshortener.dao.redis.mixins import RedisClientMixin
from kvshortener.dao.redis.kv_store_redis_dao import KeyValueRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'KeyValueRedisDAO',
]
