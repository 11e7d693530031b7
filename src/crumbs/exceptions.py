"""
Crumbs exceptions.
Serialization and raw parsing never fail; the only error raised by the
library is a percent-decoding failure on a cookie key or value.
"""


class CrumbsException(Exception):
    """Base exception for all Crumbs errors."""

    def __init__(self, message: str = "An error occurred") -> None:
        self.message = message
        super().__init__(self.message)


class CookieError(CrumbsException):
    """Cookie-related errors."""
    pass


class DecodeError(CookieError):
    """
    Percent-decoding failed on a cookie key or value.

    ``key`` names the cookie the failure belongs to and ``cause`` holds the
    underlying ``UnicodeDecodeError``.
    """

    def __init__(
        self,
        key: str,
        cause: UnicodeDecodeError,
        message: str | None = None,
    ) -> None:
        self.key = key
        self.cause = cause
        super().__init__(message or f"Cannot decode value of cookie {key!r}: {cause}")


class KeyDecodeError(DecodeError):
    """Decoding a key failed. ``key`` is the raw, still-encoded key."""

    def __init__(self, key: str, cause: UnicodeDecodeError) -> None:
        super().__init__(key, cause, f"Cannot decode cookie key {key!r}: {cause}")


class ValueDecodeError(DecodeError):
    """Decoding a value failed. ``key`` is the already-decoded key."""

    def __init__(self, key: str, cause: UnicodeDecodeError) -> None:
        super().__init__(key, cause, f"Cannot decode value of cookie {key!r}: {cause}")
