import threading

from microurl.constants import DEFAULT_COUNTER_START
from microurl.exceptions import InvalidIdError


class CounterIdGenerator:
    """In-process id generator backed by a lock-protected counter.

    Every instance owns its counter, so two services never share ids by
    accident. The original URL is ignored: the same URL shortened twice
    gets two different ids.

    Example:
        >>> generator = CounterIdGenerator(start=61)
        >>> generator.generate('https://example.com')
        61
        >>> generator.generate('https://example.com')
        62
    """

    def __init__(self, start: int = DEFAULT_COUNTER_START):
        if isinstance(start, bool) or not isinstance(start, int) or start < 0:
            raise InvalidIdError(f'Counter start must be a non-negative integer (given value: {start!r}).')
        self._next = start
        self._lock = threading.Lock()

    def generate(self, original_url: str) -> int:
        with self._lock:
            identifier = self._next
            self._next += 1
        return identifier

    def peek(self) -> int:
        """Return the id the next `generate()` call will issue."""
        with self._lock:
            return self._next
