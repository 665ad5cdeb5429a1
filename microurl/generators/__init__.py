from microurl.generators.counter_id_generator import CounterIdGenerator
from microurl.generators.redis_id_generator import RedisIdGenerator


__all__ = [
    'CounterIdGenerator',
    'RedisIdGenerator',
]
