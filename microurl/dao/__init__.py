from microurl.dao.base import UrlRecordBaseDAO
from microurl.dao.memory import UrlRecordMemoryDAO
from microurl.dao.exceptions import DAOError, NotFoundError, DuplicateIdError, DataStoreError


__all__ = [
    'UrlRecordBaseDAO',
    'UrlRecordMemoryDAO',
    'DAOError',
    'NotFoundError',
    'DuplicateIdError',
    'DataStoreError',
]
