"""Unit tests for the UrlRecordMemoryDAO

Test coverage includes:

1. Insertion behavior
   - Inserted records can be retrieved; duplicates raise DuplicateIdError.
   - Invalid argument types raise BeartypeCallHintParamViolation.

2. Retrieval behavior
   - Unknown ids raise NotFoundError.

3. Click accounting
   - hit() increments by exactly one and returns the new snapshot.
   - Snapshots handed out earlier never change.
   - Concurrent hits never lose updates.

4. Traversal
   - for_each() visits every record once, in insertion order.
   - Visitors can call back into the store.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from microurl.dao.base import UrlRecordBaseDAO
from microurl.dao.memory import UrlRecordMemoryDAO
from microurl.dao.exceptions import DuplicateIdError, NotFoundError
from microurl.models import UrlRecord


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def dao():
    return UrlRecordMemoryDAO()


def make_record(record_id: int, original_url: str = 'https://example.com') -> UrlRecord:
    return UrlRecord(id=record_id, original_url=original_url, short_url=f'https://micro.url/{record_id}')


# -------------------------------
# 1. Insertion behavior
# -------------------------------


def test_dao_implements_base_interface(dao):
    assert isinstance(dao, UrlRecordBaseDAO)


def test_insert_and_get(dao):
    record = make_record(1)

    assert dao.insert(record) is dao
    assert dao.get(1) == record
    assert dao.count() == 1


def test_insert_duplicate_id_raises_error(dao):
    dao.insert(make_record(1, 'https://first.example'))

    with pytest.raises(DuplicateIdError, match='id 1 already exists'):
        dao.insert(make_record(1, 'https://second.example'))

    assert dao.get(1).original_url == 'https://first.example'
    assert dao.count() == 1


@pytest.mark.parametrize('record', [None, 'record', {'id': 1}])
def test_insert_invalid_type_raises_error(dao, record):
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.insert(record)


# -------------------------------
# 2. Retrieval behavior
# -------------------------------


def test_get_unknown_id_raises_error(dao):
    with pytest.raises(NotFoundError, match='id 7 not found'):
        dao.get(7)


def test_not_found_error_is_key_error(dao):
    with pytest.raises(KeyError):
        dao.get(7)


# -------------------------------
# 3. Click accounting
# -------------------------------


def test_hit_increments_clicks(dao):
    dao.insert(make_record(1))

    assert dao.hit(1).clicks == 1
    assert dao.hit(1).clicks == 2
    assert dao.get(1).clicks == 2


def test_hit_unknown_id_raises_error(dao):
    with pytest.raises(NotFoundError):
        dao.hit(7)


def test_hit_leaves_earlier_snapshots_untouched(dao):
    dao.insert(make_record(1))
    before = dao.get(1)

    after = dao.hit(1)

    assert before.clicks == 0
    assert after.clicks == 1
    assert (after.id, after.original_url, after.short_url) == (before.id, before.original_url, before.short_url)


def test_concurrent_hits_are_not_lost(dao):
    dao.insert(make_record(1))
    dao.insert(make_record(2))

    with ThreadPoolExecutor(max_workers=16) as executor:
        list(executor.map(lambda i: dao.hit(1 + i % 2), range(2000)))

    assert dao.get(1).clicks == 1000
    assert dao.get(2).clicks == 1000


# -------------------------------
# 4. Traversal
# -------------------------------


def test_for_each_visits_in_insertion_order(dao):
    for record_id in (5, 1, 3):
        dao.insert(make_record(record_id))

    visited = []
    dao.for_each(visited.append)

    assert [record.id for record in visited] == [5, 1, 3]


def test_for_each_on_empty_store(dao):
    visited = []
    dao.for_each(visited.append)
    assert visited == []


def test_visitor_can_call_back_into_store(dao):
    """Visitors run outside the store lock."""
    dao.insert(make_record(1))
    dao.insert(make_record(2))

    dao.for_each(lambda record: dao.hit(record.id))

    assert dao.get(1).clicks == 1
    assert dao.get(2).clicks == 1


def test_records_inserted_during_traversal_are_not_visited(dao):
    dao.insert(make_record(1))
    visited = []

    def visitor(record):
        visited.append(record.id)
        if record.id == 1:
            dao.insert(make_record(2))

    dao.for_each(visitor)

    assert visited == [1]
    assert dao.count() == 2


def test_for_each_rejects_non_callable(dao):
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.for_each('not a visitor')
