"""Abstract base class for UrlRecord data access objects (DAOs).

This class establishes a consistent contract for all record store
implementations used by MicroUrlService.

Responsibilities:
    - Provide an interface for inserting, retrieving and traversing UrlRecord objects.
    - Own click accounting so increments are atomic per record.
    - Standardize error handling across store implementations.

Example:
    Typical usage with a store-specific implementation:

        >>> from microurl.models import UrlRecord
        >>> from microurl.dao.memory import UrlRecordMemoryDAO

        >>> dao = UrlRecordMemoryDAO()
        >>> dao.insert(UrlRecord(id=1, original_url='https://example.com', short_url='https://micro.url/b'))
        <UrlRecordMemoryDAO>

        >>> dao.hit(1).clicks
        1
        >>> dao.get(1).clicks
        1
"""

from abc import ABC, abstractmethod

from microurl.models import UrlRecord
from microurl.types import Visitor


class UrlRecordBaseDAO(ABC):
    """Interface for UrlRecord data access objects (DAOs).

    Methods:
        insert(record: UrlRecord, **kwargs) -> UrlRecordBaseDAO:
            Store a new record keyed by its id.
            Raises DuplicateIdError if the id is already stored.

        get(record_id: int, **kwargs) -> UrlRecord:
            Retrieve a snapshot of the record stored under an id.
            Raises NotFoundError if the id is unknown.

        hit(record_id: int, **kwargs) -> UrlRecord:
            Atomically increment the record's click counter.
            Raises NotFoundError if the id is unknown.

        for_each(visitor: Callable[[UrlRecord], Any], **kwargs) -> None:
            Invoke visitor once per stored record, in insertion order.

        count(**kwargs) -> int:
            Return the number of stored records.

    NOTE:
        - Records are never deleted. The DAO does not provide an interface
          to remove entries.
    """

    @abstractmethod
    def insert(self, record: UrlRecord, **kwargs) -> 'UrlRecordBaseDAO':
        """Insert a new UrlRecord into the data store.

        Args:
            record (UrlRecord):
                The record to be inserted, keyed by `record.id`.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecordBaseDAO: self (for method chaining)

        Raises:
            DuplicateIdError:
                If a record with the same id already exists.
        """
        pass

    @abstractmethod
    def get(self, record_id: int, **kwargs) -> UrlRecord:
        """Retrieve a UrlRecord from the data store by its id.

        Args:
            record_id (int):
                The id of the record to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecord: snapshot of the stored record.

        Raises:
            NotFoundError:
                If no record with the given id exists.
        """
        pass

    @abstractmethod
    def hit(self, record_id: int, **kwargs) -> UrlRecord:
        """Increment the click counter of a stored record by exactly one.

        Args:
            record_id (int):
                The id of the record that was clicked.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            UrlRecord: snapshot of the record after the increment.

        Raises:
            NotFoundError:
                If no record with the given id exists.
        """
        pass

    @abstractmethod
    def for_each(self, visitor: Visitor, **kwargs) -> None:
        """Invoke `visitor(record)` once per stored record, in insertion order.

        Args:
            visitor (Callable[[UrlRecord], Any]):
                Caller-supplied callable. Return values are ignored.

            **kwargs:
                Additional keyword arguments, used by data store.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of stored records."""
        pass
