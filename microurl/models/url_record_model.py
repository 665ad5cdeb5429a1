from collections.abc import Iterator
from dataclasses import dataclass, field

from microurl.exceptions import InvalidIdError


@dataclass(frozen=True, order=True)
class UrlRecord:
    """Represent a shortened URL mapping and its click counter.

    Records are immutable snapshots. The store replaces a record with a new
    snapshot on every click, so a record handed out to a caller never changes.

    Attributes:
        id (int):
            Non-negative identifier issued by the id generator. Excluded from
            comparisons since `short_url` is derived from it.
        original_url (str):
            The original long URL that the short URL resolves to.
        short_url (str):
            Full short URL, i.e. base URL followed by the encoded id.
        clicks (int):
            Number of successful resolutions of `short_url`.

    Example:
        >>> record = UrlRecord(id=62, original_url='https://example.com', short_url='https://micro.url/ba')
        >>> record.clicks
        0
        >>> original, short, clicks = record
        >>> short
        'https://micro.url/ba'
    """

    id: int = field(compare=False)
    original_url: str
    short_url: str
    clicks: int = 0

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 0:
            raise InvalidIdError(f'Record id must be a non-negative integer (given value: {self.id!r}).')
        if self.clicks < 0:
            raise ValueError(f'Clicks must be a non-negative integer (given value: {self.clicks}).')

    def __iter__(self) -> Iterator:
        yield self.original_url
        yield self.short_url
        yield self.clicks
