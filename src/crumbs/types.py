"""
Type definitions for Crumbs.
"""

from collections.abc import Callable, Iterator
from typing import Protocol, TypeAlias

# Parser Types
CookiePair: TypeAlias = tuple[str, str]
CookiePairs: TypeAlias = Iterator[CookiePair]

# Host Types
CookieGetter: TypeAlias = Callable[[], str]
CookieSetter: TypeAlias = Callable[[str], None]


class CookieAccessor(Protocol):
    """Protocol for a host owning a single mutable cookie string."""

    def read(self) -> str: ...

    def write(self, directive: str) -> None: ...
