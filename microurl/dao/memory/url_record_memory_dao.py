"""In-memory Data Access Object (DAO) for UrlRecord instances

Records live in a process-local dict guarded by a lock. Since UrlRecord is
frozen, a click replaces the stored snapshot with a new one under the lock:
increments are never lost and readers never observe a half-updated record.

Classes:
    UrlRecordMemoryDAO:
        Thread-safe, insertion-ordered record store.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from beartype import beartype

from microurl.models import UrlRecord
from microurl.dao.base import UrlRecordBaseDAO
from microurl.dao.exceptions import DuplicateIdError, NotFoundError


logger = logging.getLogger(__name__)


class UrlRecordMemoryDAO(UrlRecordBaseDAO):
    """In-memory record store keyed by record id.

    Traversal works on a snapshot of the stored records taken under the lock.
    Visitors run after the lock is released, so they may call back into the
    store (or the service) and records inserted meanwhile may be missed.

    Example:
        >>> dao = UrlRecordMemoryDAO()
        >>> dao.insert(UrlRecord(id=1, original_url='https://example.com', short_url='https://micro.url/b'))
        <UrlRecordMemoryDAO>
        >>> dao.count()
        1
    """

    def __init__(self):
        self._records: dict[int, UrlRecord] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @beartype
    def insert(self, record: UrlRecord, **kwargs) -> 'UrlRecordMemoryDAO':
        with self._lock:
            if record.id in self._records:
                raise DuplicateIdError(f'Record with id {record.id} already exists.')
            self._records[record.id] = record
        return self

    @beartype
    def get(self, record_id: int, **kwargs) -> UrlRecord:
        with self._lock:
            record = self._records.get(record_id)
        if record is None:
            raise NotFoundError(f'Record with id {record_id} not found.')
        return record

    @beartype
    def hit(self, record_id: int, **kwargs) -> UrlRecord:
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                raise NotFoundError(f'Record with id {record_id} not found.')
            record = replace(record, clicks=record.clicks + 1)
            self._records[record_id] = record
        return record

    @beartype
    def for_each(self, visitor: Callable[[UrlRecord], Any], **kwargs) -> None:
        with self._lock:
            snapshot = list(self._records.values())
        logger.debug('Visiting %d records.', len(snapshot))
        for record in snapshot:
            visitor(record)

    def count(self, **kwargs) -> int:
        with self._lock:
            return len(self._records)
