"""Redis-backed id generator

Ids come from a single Redis counter (INCR), so every process talking to the
same Redis database and key prefix gets unique ids.

Classes:
    RedisIdGenerator:
        Id generator using `INCR <prefix>:ids:counter`.

Example:
    >>> from microurl.generators import RedisIdGenerator
    >>> generator = RedisIdGenerator(redis_host='localhost', prefix='microurl:dev')
    >>> generator.generate('https://example.com')
    1
    >>> generator.generate('https://example.com')
    2
"""

import logging

from microurl.dao.exceptions import DataStoreError
from microurl.dao.redis import RedisClientMixin, handle_redis_connection_error
from microurl.exceptions import GeneratorUnavailableError


logger = logging.getLogger(__name__)


class RedisIdGenerator(RedisClientMixin):
    """Id generator backed by a Redis counter

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        generate(original_url: str) -> int:
            Increment the counter and return its new value.
            Raises GeneratorUnavailableError on connectivity issues with Redis.

        current() -> int:
            Return the last issued id (0 if none was issued yet).
            Raises GeneratorUnavailableError on connectivity issues with Redis.
    """

    def __init__(self, *args, **kwargs):
        """Initialize the generator (see RedisClientMixin for arguments)

        Raises:
            GeneratorUnavailableError:
                If Redis can't be reached.
        """
        try:
            super().__init__(*args, **kwargs)
        except DataStoreError as e:
            raise GeneratorUnavailableError(str(e)) from e

    def generate(self, original_url: str) -> int:
        try:
            return self._incr()
        except DataStoreError as e:
            logger.error('Redis id counter is unreachable.', extra={'counterKey': self.keys.counter_key()})
            raise GeneratorUnavailableError(str(e)) from e

    def current(self) -> int:
        try:
            return self._get()
        except DataStoreError as e:
            raise GeneratorUnavailableError(str(e)) from e

    @handle_redis_connection_error
    def _incr(self) -> int:
        return int(self.redis.incr(self.keys.counter_key()))

    @handle_redis_connection_error
    def _get(self) -> int:
        value = self.redis.get(self.keys.counter_key())
        return 0 if value is None else int(value)
