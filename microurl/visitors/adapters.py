import functools
from collections.abc import Callable, Iterable
from typing import Any


def unpack_to(func: Callable[..., Any]) -> Callable[[Iterable], Any]:
    """Adapt a function of several positional arguments to a one-argument visitor.

    The visitor unpacks its argument into `func`. UrlRecord unpacks into
    `(original_url, short_url, clicks)`; tuples and other iterables work too.

    Example:
        >>> rows = []
        >>> _ = service.visit(unpack_to(lambda original, short, clicks: rows.append((original, clicks))))
        >>> rows
        [('https://example.com', 0)]
    """

    @functools.wraps(func)
    def visitor(item: Iterable) -> Any:
        return func(*item)

    return visitor
