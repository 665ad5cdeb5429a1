from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from microurl.models import UrlRecord


# Caller-supplied record consumer; return values are ignored
type Visitor = Callable[[UrlRecord], Any]

# Type aliases for configuration documents
type ServiceConfig = dict[str, Any]
type GeneratorConfig = dict[str, Any]


@runtime_checkable
class IdGenerator(Protocol):
    """Anything that can issue a fresh, never-before-issued id for a URL."""

    def generate(self, original_url: str) -> int: ...
