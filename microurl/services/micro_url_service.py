"""URL shortening service

MicroUrlService ties the pieces together:

    shorten(url)       -> id generator -> encode_id() -> store insert -> short URL
    resolve(short_url) -> extract code -> decode_code() -> store hit -> original URL
    stats(short_url)   -> extract code -> decode_code() -> store get -> UrlRecord
    visit(visitor)     -> store traversal, visitor(record) per record

Only the service knows the short URL layout (`<base_url>/<code>`); the codec
only sees codes and the store only sees ids.

Example:
    >>> from microurl.services import MicroUrlService
    >>> service = MicroUrlService()
    >>> short_url = service.shorten('https://example.com/article/123')
    >>> short_url
    'https://micro.url/b'
    >>> service.resolve(short_url)
    'https://example.com/article/123'
    >>> service.stats(short_url).clicks
    1
"""

import logging
from collections.abc import Callable
from typing import Any

from beartype import beartype

from microurl.constants import DEFAULT_BASE_URL
from microurl.models import UrlRecord
from microurl.dao.base import UrlRecordBaseDAO
from microurl.dao.memory import UrlRecordMemoryDAO
from microurl.dao.exceptions import DuplicateIdError
from microurl.exceptions import InvalidUrlError, GeneratorUnavailableError
from microurl.generators import CounterIdGenerator
from microurl.types import IdGenerator
from microurl.utils.helpers import get_short_url, extract_code
from microurl.utils.shortener import encode_id, decode_code


logger = logging.getLogger(__name__)


class MicroUrlService:
    """Shorten URLs, resolve short URLs and expose the stored records

    Every public operation is atomic from the caller's point of view: a
    failed `shorten()` stores nothing and a failed `resolve()` counts no click.

    Attributes:
        generator (IdGenerator | Callable[[str], int]):
            Source of fresh ids. Defaults to a CounterIdGenerator owned by this service.
        dao (UrlRecordBaseDAO):
            Record store. Defaults to an in-memory store owned by this service.
        base_url (str):
            Prefix of every short URL, e.g. 'https://micro.url/'.

    Raises (any method):
        beartype.roar.BeartypeCallHintParamViolation:
            If an argument has the wrong type.
    """

    def __init__(
        self,
        generator: IdGenerator | Callable[[str], int] | None = None,
        dao: UrlRecordBaseDAO | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        if generator is None:
            generator = CounterIdGenerator()
        generate = getattr(generator, 'generate', generator)
        if not callable(generate):
            raise TypeError(f'Generator must be callable or provide generate() (given type: {type(generator)}).')

        self.generator = generator
        self.dao = dao if dao is not None else UrlRecordMemoryDAO()
        self.base_url = base_url
        self._generate = generate

    @beartype
    def shorten(self, url: str) -> str:
        """Shorten a URL

        Args:
            url (str): original URL. Any non-empty string is accepted.

        Returns:
            str: newly created short URL.

        Raises:
            InvalidUrlError: If `url` is empty.
            GeneratorUnavailableError: If the id generator failed.
            InvalidIdError: If the id generator returned a negative or non-integer id.
            DuplicateIdError: If the id generator returned an id that was already issued.
        """
        if not url:
            raise InvalidUrlError('URL to shorten must be a non-empty string.')

        try:
            record_id = self._generate(url)
        except GeneratorUnavailableError:
            logger.warning('Id generator unavailable. Nothing was shortened.', extra={'originalUrl': url})
            raise

        short_url = get_short_url(encode_id(record_id), self.base_url)
        record = UrlRecord(id=record_id, original_url=url, short_url=short_url)
        try:
            self.dao.insert(record)
        except DuplicateIdError:
            logger.error('Id generator issued an id twice.', extra={'recordId': record_id})
            raise

        logger.info('Shortened URL.', extra={'recordId': record_id, 'shortUrl': short_url})
        return short_url

    @beartype
    def resolve(self, short_url: str) -> str:
        """Resolve a short URL to its original URL and count one click

        Args:
            short_url (str): short URL returned by `shorten()`.

        Returns:
            str: the original URL.

        Raises:
            InvalidCodeError: If the code segment doesn't parse.
            NotFoundError: If the code doesn't belong to a stored record.
        """
        record = self.dao.hit(self._record_id(short_url))
        logger.debug('Resolved short URL.', extra={'recordId': record.id, 'clicks': record.clicks})
        return record.original_url

    @beartype
    def stats(self, short_url: str) -> UrlRecord:
        """Return a snapshot of the record behind a short URL without counting a click

        Raises:
            InvalidCodeError: If the code segment doesn't parse.
            NotFoundError: If the code doesn't belong to a stored record.
        """
        return self.dao.get(self._record_id(short_url))

    @beartype
    def visit(self, visitor: Callable[[UrlRecord], Any]) -> Any:
        """Invoke `visitor(record)` once per stored record, in insertion order

        Records are immutable snapshots, so visitors can't alter stored state.

        Args:
            visitor (Callable[[UrlRecord], Any]): record consumer.

        Returns:
            the visitor itself, e.g. `service.visit(UrlFrequencyVisitor()).most_popular()`.
        """
        self.dao.for_each(visitor)
        return visitor

    def count(self) -> int:
        """Return the number of stored records."""
        return self.dao.count()

    def _record_id(self, short_url: str) -> int:
        code = extract_code(short_url)
        return decode_code(code)
