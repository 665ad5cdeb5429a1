"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    NotFoundError:
        Raised when no UrlRecord is stored under the requested id.

    DuplicateIdError:
        Raised when attempting to insert a UrlRecord whose id is already stored.
        Signals a defective identifier generator.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, etc.).

Example:
    >>> from microurl.dao.exceptions import NotFoundError
    >>> raise NotFoundError("Record with id 42 not found.")
    Traceback (most recent call last):
        ...
    microurl.dao.exceptions.NotFoundError: Record with id 42 not found.
"""

from microurl.exceptions import MicroUrlError


class DAOError(MicroUrlError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class NotFoundError(DAOError, KeyError):
    """Exception raised when a UrlRecord is not found in the data store."""

    error_code = 'dao:not_found_error'

    def __str__(self) -> str:
        # KeyError quotes its argument; keep plain messages
        return Exception.__str__(self)


class DuplicateIdError(DAOError):
    """Exception raised when attempting to insert a UrlRecord whose id already exists in the data store."""

    error_code = 'dao:duplicate_id_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    error_code = 'dao:data_store_error'
