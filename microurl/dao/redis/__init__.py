from microurl.dao.redis.redis_key_schema import RedisKeySchema
from microurl.dao.redis.mixins import RedisClientMixin
from microurl.dao.redis.helpers import handle_redis_connection_error


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'handle_redis_connection_error',
]
