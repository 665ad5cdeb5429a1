"""Record visitors computing aggregates over all stored records.

Visitors are plain callables taking a UrlRecord. They keep their own state
and never touch the store; pass them to `MicroUrlService.visit()`.

Example:
    >>> visitor = service.visit(UrlFrequencyVisitor())
    >>> visitor.most_popular()
    'https://italiancpp.org'
    >>> visitor.starting_with('https://italian')
    10
"""

from collections import Counter

from microurl.models import UrlRecord


class UrlFrequencyVisitor:
    """Count how many records point at each original URL."""

    def __init__(self):
        self.frequencies: Counter[str] = Counter()

    def __call__(self, record: UrlRecord) -> None:
        self.frequencies[record.original_url] += 1

    def most_popular(self) -> str | None:
        """Return the most shortened original URL (first seen wins ties), or None."""
        top = self.frequencies.most_common(1)
        return top[0][0] if top else None

    def frequency(self, url: str) -> int:
        return self.frequencies[url]

    def starting_with(self, prefix: str) -> int:
        """Return the number of visited records whose original URL starts with `prefix`."""
        return sum(count for url, count in self.frequencies.items() if url.startswith(prefix))


class PrefixCountVisitor:
    """Count records whose original URL starts with a given prefix."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        self.count = 0

    def __call__(self, record: UrlRecord) -> None:
        if record.original_url.startswith(self.prefix):
            self.count += 1


class ClickTotalVisitor:
    """Sum the clicks of all visited records."""

    def __init__(self):
        self.total = 0

    def __call__(self, record: UrlRecord) -> None:
        self.total += record.clicks
