"""
Cookie string parsing.

A cookie string is a ``;``-separated list of ``key=value`` segments, as
found in a ``Cookie`` header or a browser document's cookie property.
Keys and values are trimmed; segments without ``=`` are ignored.
"""

from crumbs.encoding import decode_component, encode_component
from crumbs.exceptions import KeyDecodeError, ValueDecodeError
from crumbs.types import CookiePair, CookiePairs


def _split_segment(segment: str) -> CookiePair | None:
    key, sep, value = segment.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip()


def iter_pairs_raw(cookie_string: str) -> CookiePairs:
    """Yield undecoded ``(key, value)`` pairs in input order, duplicates included."""
    for segment in cookie_string.split(";"):
        pair = _split_segment(segment)
        if pair is not None:
            yield pair


def iter_pairs(cookie_string: str) -> CookiePairs:
    """
    Yield percent-decoded ``(key, value)`` pairs in input order.

    Raises ``KeyDecodeError`` (carrying the raw key) or ``ValueDecodeError``
    (carrying the decoded key) when the offending pair is reached.
    """
    for raw_key, raw_value in iter_pairs_raw(cookie_string):
        try:
            key = decode_component(raw_key)
        except UnicodeDecodeError as exc:
            raise KeyDecodeError(raw_key, exc) from exc
        try:
            value = decode_component(raw_value)
        except UnicodeDecodeError as exc:
            raise ValueDecodeError(key, exc) from exc
        yield key, value


def parse_all_raw(cookie_string: str) -> dict[str, str]:
    """Parse a cookie string into a dict of undecoded keys and values."""
    return dict(iter_pairs_raw(cookie_string))


def parse_all(cookie_string: str) -> dict[str, str]:
    """
    Parse a cookie string into a dict of percent-decoded keys and values.

    The first undecodable pair aborts the whole parse. When several raw keys
    decode to the same key, the last one wins.
    """
    return dict(iter_pairs(cookie_string))


def get_raw(cookie_string: str, name: str) -> str | None:
    """Return the undecoded value of the first cookie named exactly ``name``."""
    for key, value in iter_pairs_raw(cookie_string):
        if key == name:
            return value
    return None


def get(cookie_string: str, name: str) -> str | None:
    """
    Return the decoded value of the first cookie whose key is ``name``
    percent-encoded.

    Returns None if there is no such cookie; raises ``ValueDecodeError`` if there
    is one but its value cannot be decoded.
    """
    raw_value = get_raw(cookie_string, encode_component(name))
    if raw_value is None:
        return None
    try:
        return decode_component(raw_value)
    except UnicodeDecodeError as exc:
        raise ValueDecodeError(name, exc) from exc
