"""Utility functions for application configuration management.

The service is configured by a single JSON document:

    {
        "base_url": "https://micro.url/",
        "generator": {
            "backend": "redis",
            "counter": {"start": 1},
            "redis": {"host": "localhost", "port": 6379, "db": 0}
        }
    }

In deployed environments the document lives in **AWS AppConfig** and is
fetched with boto3. When the AppConfig identifiers aren't set (local runs,
tests) the same document is assembled from environment variables instead.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the key namespace for Redis, or None if `APP_NAME` is not set.

    environment_config() -> dict
        Build the configuration document from environment variables.

    load_config() -> dict
        Load the configuration document from AWS AppConfig, falling back
        to `environment_config()`.

Example:
    >>> from microurl.utils.config import load_config
    >>> config = load_config()
    >>> config['generator']['backend']
    'counter'
"""

import os
import json
import functools
import logging
from collections.abc import Callable

import boto3

from microurl.constants import ENV, DEFAULT_BASE_URL, DEFAULT_COUNTER_START, GeneratorBackend
from microurl.exceptions import AppConfigError, BadConfigurationError, MissingEnvironmentVariableError
from microurl.utils.helpers import require_environment


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for Redis keys

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'microurl'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'microurl:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be an integer (given value: {value!r}).") from e


def environment_config() -> dict:
    """Build the configuration document from environment variables

    Returns:
        dict: configuration document (see module docstring).

    Raises:
        BadConfigurationError:
            If a numeric environment variable doesn't hold an integer.
    """
    return {
        'base_url': os.environ.get(ENV.Service.BASE_URL) or DEFAULT_BASE_URL,
        'generator': {
            'backend': os.environ.get(ENV.Service.GENERATOR) or GeneratorBackend.COUNTER.value,
            'counter': {
                'start': _int_env(ENV.Service.COUNTER_START, DEFAULT_COUNTER_START),
            },
            'redis': {
                'host': os.environ.get(ENV.Redis.HOST) or 'localhost',
                'port': _int_env(ENV.Redis.PORT, 6379),
                'db': _int_env(ENV.Redis.DB, 0),
                'username': os.environ.get(ENV.Redis.USERNAME),
                'password': os.environ.get(ENV.Redis.PASSWORD),
            },
        },
    }


def fallback_to_environment(func: Callable[[], dict]) -> Callable[[], dict]:
    """Decorator: use `environment_config()` when AppConfig isn't configured

    Args:
        func (Callable[[], dict]):
            load_config()

    Returns:
        Callable[[], dict]:
            load_config() which returns the environment-based document
            whenever it raises MissingEnvironmentVariableError.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> dict:
        try:
            return func(*args, **kwargs)
        except MissingEnvironmentVariableError:
            logger.debug('AppConfig is not configured. Loading configuration from environment variables.')
            return environment_config()

    return wrapper


@fallback_to_environment
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config() -> dict:
    """Load the service configuration document from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    If any of them is missing, the document is built from environment
    variables instead (see `environment_config()`).

    Returns:
        dict: configuration document.

    Raises:
        AppConfigError:
            If AppConfig returns something other than a JSON object.
    """
    logger.debug('Trying to load configuration from AWS AppConfig.')

    appconfig = boto3.client('appconfigdata')

    # Start an AppConfig data session
    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    # Fetch the configuration
    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    try:
        document = json.loads(content.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise AppConfigError('AppConfig returned a configuration that is not valid JSON.') from e
    if not isinstance(document, dict):
        raise AppConfigError(f'AppConfig configuration must be a JSON object (given type: {type(document).__name__}).')

    logger.debug('Loaded configuration from AWS AppConfig.', extra={'build': document.get('build')})
    return document
