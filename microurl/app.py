"""Service composition from configuration

Functions:
    create_generator(config: dict) -> IdGenerator
        Build the id generator selected by `config['backend']`.
    create_service(config: dict | None = None) -> MicroUrlService
        Build a MicroUrlService from a configuration document,
        loading one via `load_config()` when none is given.

Example:
    >>> from microurl.app import create_service
    >>> service = create_service({'base_url': 'https://s.example/', 'generator': {'backend': 'counter'}})
    >>> service.shorten('https://example.com')
    'https://s.example/b'
"""

import logging

from microurl.constants import DEFAULT_BASE_URL, GeneratorBackend
from microurl.exceptions import BadConfigurationError
from microurl.generators import CounterIdGenerator, RedisIdGenerator
from microurl.services import MicroUrlService
from microurl.types import GeneratorConfig, IdGenerator, ServiceConfig
from microurl.utils.config import app_prefix, load_config


logger = logging.getLogger(__name__)


def create_generator(config: GeneratorConfig) -> IdGenerator:
    """Build the id generator selected by the 'backend' key

    Args:
        config (dict):
            Generator section of the configuration document, e.g.
            {'backend': 'redis', 'redis': {'host': 'localhost', 'port': 6379}}.

    Returns:
        IdGenerator: CounterIdGenerator or RedisIdGenerator.

    Raises:
        BadConfigurationError:
            If the backend is unknown or its section is malformed.
        GeneratorUnavailableError:
            If the Redis backend can't be reached.
    """
    backend = config.get('backend', GeneratorBackend.COUNTER)
    try:
        backend = GeneratorBackend(backend)
    except ValueError as e:
        raise BadConfigurationError(f'Unknown id generator backend {backend!r}.') from e

    options = config.get(backend.value) or {}
    if not isinstance(options, dict):
        raise BadConfigurationError(f"Generator section '{backend.value}' must be a mapping.")

    logger.debug('Creating id generator.', extra={'backend': backend.value})
    if backend is GeneratorBackend.REDIS:
        redis_config = {f'redis_{k}': v for k, v in options.items()}
        return RedisIdGenerator(**redis_config, prefix=app_prefix())
    try:
        return CounterIdGenerator(**options)
    except TypeError as e:
        raise BadConfigurationError(f'Invalid counter generator options: {sorted(options)}.') from e


def create_service(config: ServiceConfig | None = None) -> MicroUrlService:
    """Build a MicroUrlService from a configuration document

    Args:
        config (dict | None):
            Configuration document (see microurl.utils.config). Loaded with
            `load_config()` if omitted.

    Returns:
        MicroUrlService: service with its own generator and in-memory store.
    """
    if config is None:
        config = load_config()

    base_url = config.get('base_url') or DEFAULT_BASE_URL
    generator = create_generator(config.get('generator') or {})
    logger.info('Created MicroUrl service.', extra={'baseUrl': base_url, 'generator': type(generator).__name__})
    return MicroUrlService(generator=generator, base_url=base_url)
