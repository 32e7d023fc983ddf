from edgeshortener.dao.redis.redis_key_schema import RedisKeySchema
from edgeshortener.dao.redis.mixins import RedisClientMixin
from edgeshortener.dao.redis.short_url_redis_dao import ShortURLRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortURLRedisDAO',
]
