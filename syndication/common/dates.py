"""
Timestamp parsing and formatting.

Parsing tries RFC 3339 first, then RFC 822 (via email.utils), then a
fixed list of culture-invariant patterns. Values without an offset are
treated as UTC. Every parsed value is timezone-aware.
"""

import re
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

# "Never set" marker for timestamp fields.
DATETIME_UNSET = datetime.min.replace(tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[Tt ](?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?)?"
    r"\s*(?P<offset>[Zz]|[+-]\d{2}:?\d{2})?$"
)

_INVARIANT_PATTERNS = (
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%d %B %Y %H:%M:%S",
    "%d %b %Y",
    "%A, %d %B %Y",
    "%B %d, %Y",
)


def is_unset(value: Optional[datetime]) -> bool:
    return value is None or value == DATETIME_UNSET


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_rfc3339(value: str) -> Optional[datetime]:
    match = _RFC3339.match(value.strip())
    if not match:
        return None

    parts = match.groupdict()
    fraction = (parts["fraction"] or "0")[:6].ljust(6, "0")
    offset = parts["offset"]
    if offset is None or offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        digits = offset[1:].replace(":", "")
        tz = timezone(sign * timedelta(hours=int(digits[:2]), minutes=int(digits[2:])))

    try:
        return datetime(
            int(parts["year"]),
            int(parts["month"]),
            int(parts["day"]),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
            int(fraction),
            tzinfo=tz,
        )
    except ValueError:
        return None


def parse_rfc822(value: str) -> Optional[datetime]:
    try:
        return _as_utc(parsedate_to_datetime(value.strip()))
    except (TypeError, ValueError, IndexError):
        return None


def parse_invariant(value: str) -> Optional[datetime]:
    text = value.strip()
    for pattern in _INVARIANT_PATTERNS:
        try:
            return _as_utc(datetime.strptime(text, pattern))
        except ValueError:
            continue
    return None


def try_parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a timestamp in any supported format.

    Returns:
        Timezone-aware datetime, or None when nothing matched
    """
    if not value or not value.strip():
        return None
    return parse_rfc3339(value) or parse_rfc822(value) or parse_invariant(value)


def format_datetime(value: datetime) -> str:
    """
    Format as RFC 3339 in UTC.

    Two fractional digits are written unless the value carries finer
    precision, in which case all six are kept so the value round-trips.
    """
    utc = _as_utc(value).astimezone(timezone.utc)
    if utc.microsecond % 10000 == 0:
        fraction = f"{utc.microsecond // 10000:02d}"
    else:
        fraction = f"{utc.microsecond:06d}"
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}.{fraction}Z"
    )
