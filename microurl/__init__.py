from microurl.models import UrlRecord
from microurl.services import MicroUrlService
from microurl.generators import CounterIdGenerator, RedisIdGenerator
from microurl.exceptions import (
    MicroUrlError,
    InvalidUrlError,
    InvalidIdError,
    InvalidCodeError,
    GeneratorUnavailableError,
)
from microurl.dao.exceptions import NotFoundError, DuplicateIdError


__all__ = [
    'UrlRecord',
    'MicroUrlService',
    'CounterIdGenerator',
    'RedisIdGenerator',
    'MicroUrlError',
    'InvalidUrlError',
    'InvalidIdError',
    'InvalidCodeError',
    'GeneratorUnavailableError',
    'NotFoundError',
    'DuplicateIdError',
]
