"""Helper utilities for composing and parsing short URLs.

Functions:
    get_short_url(code: str, base_url: str) -> str
        Get string representation of short URL for a given short code
    extract_code(short_url: str) -> str
        Extract the short code segment from a short URL
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    >>> from microurl.utils.helpers import get_short_url, extract_code
    >>> get_short_url('ba', 'https://micro.url/')
    'https://micro.url/ba'
    >>> extract_code('https://micro.url/ba')
    'ba'
"""

import os
import functools
from collections.abc import Callable

from microurl.exceptions import MissingEnvironmentVariableError


def get_short_url(code: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        code (str): short code
        base_url (str): public base URL of the service, with or without a trailing slash

    Returns:
        str: short url string representation
    """
    return f'{base_url.rstrip("/")}/{code}'


def extract_code(short_url: str) -> str:
    """Extract the short code from a short URL

    The code is everything after the final '/'. A string without any '/'
    is treated as a bare code.

    Args:
        short_url (str): full short URL, e.g. 'https://micro.url/ba'

    Returns:
        str: short code (may be empty if the URL ends with '/')
    """
    return short_url.rpartition('/')[2]


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
