"""Parsing and formatting of ISO 8601 dates."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_TIME = r"T(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})"
_FRACTION = r"(?:\.(?P<fraction>\d+))?"
_SIGN_HOURS = r"(?P<sign>[+-])(?P<hours>\d{2})"

# Tried in order; a date without a time zone is taken as UTC.
_LAYOUTS = tuple(
    re.compile(pattern)
    for pattern in (
        _DATE + _TIME + _FRACTION + _SIGN_HOURS,
        _DATE + _TIME + _FRACTION + _SIGN_HOURS + r":(?P<minutes>\d{2})",
        _DATE + _TIME + _FRACTION,
        _DATE,
        _DATE + _TIME + _FRACTION + _SIGN_HOURS + r"(?P<minutes>\d{2})",
        _DATE + _TIME + r"(?:\.(?P<fraction>\d{1,9}))?Z",
    )
)


def _build(parts: dict[str, str | None]) -> datetime:
    tz = timezone.utc
    if parts.get("sign"):
        offset = timedelta(hours=int(parts["hours"]), minutes=int(parts.get("minutes") or 0))
        tz = timezone(-offset if parts["sign"] == "-" else offset)
    fraction = (parts.get("fraction") or "").ljust(6, "0")[:6]
    return datetime(
        int(parts["year"]),
        int(parts["month"]),
        int(parts["day"]),
        int(parts.get("hour") or 0),
        int(parts.get("minute") or 0),
        int(parts.get("second") or 0),
        int(fraction),
        tzinfo=tz,
    )


def parse_iso8601(date_time: str) -> datetime:
    """Parse an ISO 8601 date, with or without time and time zone.

    The result is always timezone-aware; dates without a zone are UTC.
    Raises ValueError when no supported form matches.
    """
    last_error: ValueError | None = None
    for layout in _LAYOUTS:
        match = layout.fullmatch(date_time)
        if match is None:
            continue
        try:
            return _build(match.groupdict())
        except ValueError as exc:
            last_error = exc
    raise ValueError(f"cannot parse {date_time!r} as an ISO 8601 date") from last_error


def must_parse_iso8601(date_time: str) -> datetime:
    """Parse an ISO 8601 date that is known to be valid; raises ValueError otherwise."""
    return parse_iso8601(date_time)


def format_iso8601(date_time: datetime) -> str:
    """Format ``date_time`` as ``YYYY-MM-DDThh:mm:ss[.fff]Z``.

    Milliseconds are truncated, trailing zeros dropped, and the clock time is
    written as it stands in the value's own zone.
    """
    text = (
        f"{date_time.year:04d}-{date_time.month:02d}-{date_time.day:02d}"
        f"T{date_time.hour:02d}:{date_time.minute:02d}:{date_time.second:02d}"
    )
    millis = date_time.microsecond // 1000
    if millis:
        text += "." + f"{millis:03d}".rstrip("0")
    return text + "Z"