"""
Percent-encoding and HTTP date helpers shared by the parser and serializer.
"""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from urllib.parse import quote, unquote

# Expiry used by delete directives, independent of the local clock.
EPOCH_HTTP_DATE = "Thu, 01 Jan 1970 00:00:00 GMT"

# Bounds of what can be formatted; out-of-range moments are clamped to them.
EARLIEST_MOMENT = datetime.min.replace(tzinfo=timezone.utc)
LATEST_MOMENT = datetime.max.replace(microsecond=0, tzinfo=timezone.utc)


def encode_component(text: str) -> str:
    """
    Percent-encode everything but ASCII alphanumerics and ``-_.~``.

    Lone surrogates are encoded as their UTF-8 byte pattern rather than
    rejected.
    """
    return quote(text, safe="", errors="surrogatepass")


def decode_component(text: str) -> str:
    """
    Percent-decode a key or value.

    Raises ``UnicodeDecodeError`` when the escapes do not form valid UTF-8
    (e.g. ``%AA``). Malformed escapes such as ``%zz`` are kept literally.
    """
    return unquote(text, errors="strict")


def moment_from_timestamp(timestamp: float) -> datetime:
    """UTC datetime for a Unix timestamp, clamped to the formattable range."""
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, ValueError, OSError):
        return EARLIEST_MOMENT if timestamp < 0 else LATEST_MOMENT


def format_http_date(moment: datetime) -> str:
    """Format a point in time as an RFC 1123 GMT string."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    try:
        moment = moment.astimezone(timezone.utc)
    except OverflowError:
        # Ahead of UTC near datetime.min underflows, behind it near datetime.max overflows
        offset = moment.utcoffset()
        moment = EARLIEST_MOMENT if offset and offset > timedelta(0) else LATEST_MOMENT
    return format_datetime(moment, usegmt=True)
