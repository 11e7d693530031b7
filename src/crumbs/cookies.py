"""
Cookie options and directive serialization.
Builds the strings a host uses to set or expire a single cookie.
"""

import time
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from crumbs.encoding import (
    EPOCH_HTTP_DATE,
    encode_component,
    format_http_date,
    moment_from_timestamp,
)


class SameSite(Enum):
    """SameSite policy; the value is the attribute value written to the directive."""

    LAX = "lax"
    STRICT = "strict"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class CookieOptions:
    """
    Cookie configuration options (Immutable Value Object).

    The builder methods each return a copy with one field changed, so they
    can be chained in any order::

        CookieOptions().with_path("/").mark_secure().expires_after(timedelta(days=7))
    """

    path: str | None = None  # Host default: current document path
    domain: str | None = None  # Host default: current document host
    expires: str | None = None  # GMT string; None means session cookie
    secure: bool = False
    same_site: SameSite = SameSite.LAX

    def with_path(self, path: str) -> "CookieOptions":
        return replace(self, path=path)

    def with_domain(self, domain: str) -> "CookieOptions":
        return replace(self, domain=domain)

    def expires_at_date(self, date: datetime) -> "CookieOptions":
        """Expire at ``date``. Naive datetimes are taken as UTC; out-of-range dates are clamped."""
        return replace(self, expires=format_http_date(date))

    def expires_at_timestamp(self, timestamp: float) -> "CookieOptions":
        """Expire at a Unix timestamp, in seconds."""
        return self.expires_at_date(moment_from_timestamp(timestamp))

    def expires_after(self, duration: timedelta) -> "CookieOptions":
        """Expire ``duration`` from now."""
        return self.expires_at_timestamp(time.time() + duration.total_seconds())

    def mark_secure(self) -> "CookieOptions":
        """Only transmit the cookie over a secure protocol such as HTTPS."""
        return replace(self, secure=True)

    def with_same_site(self, same_site: SameSite) -> "CookieOptions":
        return replace(self, same_site=same_site)

    def to_attribute_string(self) -> str:
        """Convert options to the attribute suffix of a directive."""
        parts: list[str] = []

        if self.path is not None:
            parts.append(f";path={self.path}")
        if self.domain is not None:
            parts.append(f";domain={self.domain}")
        if self.expires is not None:
            parts.append(f";expires={self.expires}")
        if self.secure:
            parts.append(";secure")
        parts.append(f";samesite={self.same_site.value}")

        return "".join(parts)


def build_set_raw(
    name: str,
    value: str,
    options: CookieOptions | None = None,
) -> str:
    """Return the directive that sets a cookie, without encoding name or value."""
    options = options or CookieOptions()
    return f"{name}={value}{options.to_attribute_string()}"


def build_set(
    name: str,
    value: str,
    options: CookieOptions | None = None,
) -> str:
    """Return the directive that sets a cookie, percent-encoding name and value."""
    return build_set_raw(encode_component(name), encode_component(value), options)


def build_delete_raw(name: str) -> str:
    """
    Return the directive that expires a cookie, without encoding its name.

    No path or domain is written, so only cookies set with the host's
    default path and domain are removed.
    """
    return f"{name}=;expires={EPOCH_HTTP_DATE}"


def build_delete(name: str) -> str:
    """Return the directive that expires a cookie, percent-encoding its name."""
    return build_delete_raw(encode_component(name))
