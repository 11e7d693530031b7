"""
Binding of the cookie functions to a host's cookie string.

``DocumentCookies`` reads the host's current cookie string before every
lookup and hands every directive it builds to the host. It caches nothing,
so it always reflects the host's state.
"""

import logging
import time
from collections.abc import Callable
from datetime import timezone
from email.utils import parsedate_to_datetime

from crumbs import parser
from crumbs.cookies import (
    CookieOptions,
    build_delete,
    build_delete_raw,
    build_set,
    build_set_raw,
)
from crumbs.types import CookieAccessor, CookieGetter, CookieSetter


class _CallableAccessor:
    """Adapts a getter/setter pair to the ``CookieAccessor`` protocol."""

    def __init__(self, getter: CookieGetter, setter: CookieSetter) -> None:
        self._getter = getter
        self._setter = setter

    def read(self) -> str:
        return self._getter()

    def write(self, directive: str) -> None:
        self._setter(directive)


class DocumentCookies:
    """
    Cookie access bound to a host.

    Example:
        store = MemoryCookieStore()
        cookies = DocumentCookies(store)
        cookies.set("theme", "dark mode", CookieOptions().with_path("/"))
        cookies.get("theme")  # "dark mode"
    """

    def __init__(
        self,
        accessor: CookieAccessor,
        default_options: CookieOptions | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._accessor = accessor
        self._default_options = default_options or CookieOptions()
        self._logger = logger or logging.getLogger("crumbs.document")

    @classmethod
    def from_callables(
        cls,
        getter: CookieGetter,
        setter: CookieSetter,
        default_options: CookieOptions | None = None,
        logger: logging.Logger | None = None,
    ) -> "DocumentCookies":
        """Bind to a host exposed as a plain getter and setter."""
        return cls(_CallableAccessor(getter, setter), default_options, logger)

    @property
    def default_options(self) -> CookieOptions:
        return self._default_options

    def all_raw(self) -> dict[str, str]:
        """All cookies, with undecoded keys and values."""
        return parser.parse_all_raw(self._accessor.read())

    def all(self) -> dict[str, str]:
        """All cookies, decoded. Raises ``KeyDecodeError`` or ``ValueDecodeError``."""
        return parser.parse_all(self._accessor.read())

    def get_raw(self, name: str) -> str | None:
        return parser.get_raw(self._accessor.read(), name)

    def get(self, name: str) -> str | None:
        """Decoded cookie value, None if absent. Raises ``DecodeError``."""
        return parser.get(self._accessor.read(), name)

    def set_raw(
        self,
        name: str,
        value: str,
        options: CookieOptions | None = None,
    ) -> str:
        return self._write(build_set_raw(name, value, options or self._default_options))

    def set(
        self,
        name: str,
        value: str,
        options: CookieOptions | None = None,
    ) -> str:
        return self._write(build_set(name, value, options or self._default_options))

    def delete_raw(self, name: str) -> str:
        return self._write(build_delete_raw(name))

    def delete(self, name: str) -> str:
        return self._write(build_delete(name))

    def _write(self, directive: str) -> str:
        self._logger.debug("Writing cookie directive: %s", directive)
        self._accessor.write(directive)
        return directive


class MemoryCookieStore:
    """
    In-process host cookie string.

    Mimics a browser document: writing a directive replaces the cookie of
    the same name, an ``expires`` in the past removes it, and reading
    returns only ``name=value`` pairs. Cookies are not scoped by path or
    domain.
    """

    def __init__(
        self,
        cookie_string: str = "",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._cookies: dict[str, str] = parser.parse_all_raw(cookie_string)
        self._clock = clock
        self._logger = logging.getLogger("crumbs.store")

    def read(self) -> str:
        return "; ".join(f"{key}={value}" for key, value in self._cookies.items())

    def write(self, directive: str) -> None:
        head, *attributes = directive.split(";")
        key, sep, value = head.partition("=")
        if not sep:
            return
        key = key.strip()

        if self._is_expired(attributes):
            if self._cookies.pop(key, None) is not None:
                self._logger.debug("Expired cookie %r", key)
            return

        self._cookies[key] = value.strip()

    def clear(self) -> None:
        self._cookies.clear()

    def __len__(self) -> int:
        return len(self._cookies)

    def __contains__(self, key: object) -> bool:
        return key in self._cookies

    def _is_expired(self, attributes: list[str]) -> bool:
        for attribute in attributes:
            name, _, value = attribute.partition("=")
            if name.strip().lower() != "expires":
                continue
            try:
                expires = parsedate_to_datetime(value.strip())
            except (TypeError, ValueError):
                # Unparseable dates leave a session cookie, as browsers do
                return False
            if expires.tzinfo is None:
                # "-0000" zones parse as naive; they are still UTC
                expires = expires.replace(tzinfo=timezone.utc)
            return expires.timestamp() <= self._clock()
        return False
