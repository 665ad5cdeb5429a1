"""Unit tests for the UrlRecord dataclass in url_record_model.py.

Test coverage includes:

1. Model creation and validation
2. Unpacking into (original_url, short_url, clicks)
3. Equality and ordering semantics
4. Immutability
"""

from dataclasses import FrozenInstanceError, replace

import pytest

from microurl.exceptions import InvalidIdError
from microurl.models import UrlRecord


# -------------------------------------------------
# 1. Model creation and validation
# -------------------------------------------------


def test_valid_record_creation():
    record = UrlRecord(id=62, original_url='https://example.com/article/123', short_url='https://micro.url/ba')

    assert record.id == 62
    assert record.original_url == 'https://example.com/article/123'
    assert record.short_url == 'https://micro.url/ba'
    assert record.clicks == 0


@pytest.mark.parametrize('record_id', [-1, True, '1', 1.0])
def test_invalid_id_raises_error(record_id):
    with pytest.raises(InvalidIdError):
        UrlRecord(id=record_id, original_url='https://example.com', short_url='https://micro.url/b')


def test_negative_clicks_raise_error():
    with pytest.raises(ValueError):
        UrlRecord(id=1, original_url='https://example.com', short_url='https://micro.url/b', clicks=-1)


# -------------------------------------------------
# 2. Unpacking
# -------------------------------------------------


def test_record_unpacks_like_a_tuple():
    """Structured unpacking yields original URL, short URL and clicks."""
    record = UrlRecord(id=1, original_url='http://italiancpp.org/win100million.believeme', short_url='https://micro.url/b')

    original, short, clicks = record

    assert original == 'http://italiancpp.org/win100million.believeme'
    assert short == 'https://micro.url/b'
    assert clicks == 0
    assert tuple(record) == (original, short, clicks)


# -------------------------------------------------
# 3. Equality and ordering semantics
# -------------------------------------------------


def test_identical_records_compare_equal():
    left = UrlRecord(id=1, original_url='http://google.com', short_url='url1')
    right = UrlRecord(id=1, original_url='http://google.com', short_url='url1')

    assert left == right
    assert not left < right
    assert not right < left


def test_ordering_uses_short_url_after_original_url():
    left = UrlRecord(id=2, original_url='http://google.com', short_url='url2')
    right = UrlRecord(id=1, original_url='http://google.com', short_url='url1')

    assert right < left


def test_ordering_uses_clicks_last():
    left = UrlRecord(id=1, original_url='http://google.com', short_url='url1')
    right = UrlRecord(id=1, original_url='http://google.com', short_url='url2', clicks=2)

    assert left < right
    assert left < replace(left, clicks=1)


def test_sorting_records():
    records = [
        UrlRecord(id=3, original_url='https://coding-gym.org', short_url='https://micro.url/d'),
        UrlRecord(id=1, original_url='https://google.com', short_url='https://micro.url/b'),
        UrlRecord(id=2, original_url='https://italiancpp.org', short_url='https://micro.url/c'),
    ]
    assert [record.id for record in sorted(records)] == [3, 1, 2]


# -------------------------------------------------
# 4. Immutability
# -------------------------------------------------


@pytest.mark.parametrize(
    'field, new_value',
    [
        ('id', 2),
        ('original_url', 'https://example.com/article/456'),
        ('short_url', 'https://micro.url/c'),
        ('clicks', 3000),
    ],
)
def test_record_immutability(field, new_value):
    record = UrlRecord(id=1, original_url='https://example.com/article/123', short_url='https://micro.url/b')

    with pytest.raises(FrozenInstanceError):
        setattr(record, field, new_value)
