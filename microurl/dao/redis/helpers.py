import functools
import redis
from typing import Any
from collections.abc import Callable

from microurl.dao.exceptions import DataStoreError


__all__ = ['handle_redis_connection_error']

# Failures meaning "Redis can't be reached right now"
REDIS_UNAVAILABLE_ERRORS = (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError)


def redis_location(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_connection_error[F: Callable[..., Any]](method: F) -> F:
    """Wrap Redis-interacting methods to handle connection errors

    Args:
        method (Callable[..., Any]):
            Method of an object with a `redis` attribute, performing Redis
            operations which may raise redis.exceptions.ConnectionError or
            redis.exceptions.TimeoutError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on connectivity issues with Redis.

    Example:
        >>> @handle_redis_connection_error
        ... def next_id(self):
        ...     return self.redis.incr('ids:counter')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except REDIS_UNAVAILABLE_ERRORS as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e

    return wrapper
