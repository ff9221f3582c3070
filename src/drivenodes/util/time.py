from __future__ import annotations

from datetime import datetime, timezone


def parse_rfc3339(value: str) -> datetime:
    """
    Parse a wire timestamp into a tz-aware UTC datetime.

    Accepts strings like:
      - 2015-01-01T12:34:56Z
      - 2015-01-01T12:34:56.173Z
      - 2015-01-01T12:34:56+09:00
    """
    if not isinstance(value, str) or not value:
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # fromisoformat doesn't accept 'Z' before 3.11, so normalize.
    if s.endswith("Z") or s.endswith("z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    return normalize_dt(dt).astimezone(timezone.utc)


def to_rfc3339(dt: datetime) -> str:
    """
    Format a tz-aware datetime as RFC3339 in UTC with a 'Z' suffix.

    Fractional seconds are written only when present.
    """
    dt = normalize_dt(dt).astimezone(timezone.utc)
    timespec = "microseconds" if dt.microsecond else "seconds"
    return dt.isoformat(timespec=timespec).replace("+00:00", "Z")


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt
