from hexshortener.dao.redis.redis_key_schema import RedisKeySchema
from hexshortener.dao.redis.mixins import RedisClientMixin
from hexshortener.dao.redis.short_url_redis_dao import ShortURLRedisDAO


__all__ = [
    'RedisKeySchema',
    'ShortURLRedisDAO',
    'RedisClientMixin',
]
