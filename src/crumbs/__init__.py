"""
Crumbs - HTTP cookie string parsing and serialization

Parses cookie strings into raw or percent-decoded pairs, builds set and
delete directives from a name, a value and a set of options, and binds both
to a host's cookie string through an injected accessor.
"""

from crumbs.cookies import (
    CookieOptions,
    SameSite,
    build_delete,
    build_delete_raw,
    build_set,
    build_set_raw,
)
from crumbs.document import DocumentCookies, MemoryCookieStore
from crumbs.exceptions import (
    CookieError,
    CrumbsException,
    DecodeError,
    KeyDecodeError,
    ValueDecodeError,
)
from crumbs.parser import (
    get,
    get_raw,
    iter_pairs,
    iter_pairs_raw,
    parse_all,
    parse_all_raw,
)
from crumbs.types import CookieAccessor

__version__ = "0.1.0"
__all__ = [
    "CookieOptions",
    "SameSite",
    "build_set",
    "build_set_raw",
    "build_delete",
    "build_delete_raw",
    "iter_pairs",
    "iter_pairs_raw",
    "parse_all",
    "parse_all_raw",
    "get",
    "get_raw",
    "DocumentCookies",
    "MemoryCookieStore",
    "CookieAccessor",
    "CrumbsException",
    "CookieError",
    "DecodeError",
    "KeyDecodeError",
    "ValueDecodeError",
]
