"""Unit tests for helpers.py

Test coverage includes:

1. get_short_url() composes base URL and code.
2. extract_code() returns the segment after the final '/'.
3. require_environment() raises MissingEnvironmentVariableError for missing variables.
"""

import pytest

from microurl.exceptions import MissingEnvironmentVariableError, ConfigurationError
from microurl.utils.helpers import get_short_url, extract_code, require_environment


# -------------------------------
# 1. get_short_url
# -------------------------------


@pytest.mark.parametrize(
    'base_url, expected',
    [
        ('https://micro.url/', 'https://micro.url/Gho'),
        ('https://micro.url', 'https://micro.url/Gho'),
        ('http://localhost:3000/s/', 'http://localhost:3000/s/Gho'),
    ],
)
def test_get_short_url(base_url, expected):
    assert get_short_url('Gho', base_url) == expected


# -------------------------------
# 2. extract_code
# -------------------------------


@pytest.mark.parametrize(
    'short_url, expected',
    [
        ('https://micro.url/Gho', 'Gho'),
        ('https://other.host/a/b/c/ba', 'ba'),
        ('Gho', 'Gho'),
        ('https://micro.url/', ''),
        ('https://micro.url/!!!', '!!!'),
    ],
)
def test_extract_code(short_url, expected):
    assert extract_code(short_url) == expected


def test_extract_code_inverts_get_short_url():
    assert extract_code(get_short_url('Zz09', 'https://micro.url/')) == 'Zz09'


# -------------------------------
# 3. require_environment
# -------------------------------


def test_require_environment_passes(monkeypatch):
    monkeypatch.setenv('MICROURL_TEST_A', 'a')

    @require_environment('MICROURL_TEST_A')
    def func():
        return 'OK'

    assert func() == 'OK'


def test_require_environment_lists_missing_variables(monkeypatch):
    monkeypatch.setenv('MICROURL_TEST_A', 'a')
    monkeypatch.setenv('MICROURL_TEST_B', '')
    monkeypatch.delenv('MICROURL_TEST_C', raising=False)

    @require_environment('MICROURL_TEST_A', 'MICROURL_TEST_B', 'MICROURL_TEST_C')
    def func():
        return 'OK'  # pragma: no cover

    with pytest.raises(MissingEnvironmentVariableError, match="'MICROURL_TEST_B', 'MICROURL_TEST_C'") as exc_info:
        func()
    assert isinstance(exc_info.value, ConfigurationError)
