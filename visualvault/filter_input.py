"""Parsing of the text a user types when adding date and size filters."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

DateBounds = tuple[datetime | None, datetime | None]
SizeBounds = tuple[float | None, float | None]

DATE_FORMAT_HELP = "Invalid date format. Use 'YYYY-MM-DD to YYYY-MM-DD' or 'last 7 days'"
SIZE_FORMAT_HELP = "Invalid size format. Use '>10MB', '<1GB', or '10MB-100MB'"

_START_OF_DAY = time(0, 0, 0)
_END_OF_DAY = time(23, 59, 59)

_RELATIVE_SPANS = {
    "last 7 days": 7,
    "last week": 7,
    "last 30 days": 30,
    "last month": 30,
    "last year": 365,
    "last 365 days": 365,
}

# Suffix and its factor to megabytes, checked in this order.
_SIZE_UNITS = (
    ("tb", 1024.0 * 1024.0),
    ("gb", 1024.0),
    ("mb", 1.0),
    ("kb", 0.001),
    ("b", 0.000_001),
)


def _at(day: date, moment: time, now: datetime) -> datetime:
    """Combine a day and a time of day in the same time zone as ``now``."""
    return datetime.combine(day, moment).replace(tzinfo=now.tzinfo)


def _whole_day(day: date, now: datetime) -> DateBounds:
    return _at(day, _START_OF_DAY, now), _at(day, _END_OF_DAY, now)


def _parse_day(text: str) -> date | None:
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_date_range(text: str, now: datetime | None = None) -> DateBounds:
    """Turn filter text into a ``(start, end)`` pair of optional datetimes.

    Accepts ``today``, ``yesterday``, the relative spans ``last 7 days``,
    ``last week``, ``last 30 days``, ``last month``, ``last year`` and
    ``last 365 days``, a range ``YYYY-MM-DD to YYYY-MM-DD`` (either side may
    be invalid, but not both) and a single ``YYYY-MM-DD`` day. Raises
    ``ValueError`` for anything else.
    """
    if now is None:
        now = datetime.now().astimezone()
    keyword = text.lower()

    if keyword == "today":
        return _whole_day(now.date(), now)
    if keyword == "yesterday":
        return _whole_day((now - timedelta(days=1)).date(), now)
    if keyword in _RELATIVE_SPANS:
        return now - timedelta(days=_RELATIVE_SPANS[keyword]), now

    parts = text.split(" to ")
    if len(parts) == 2:
        first, last = (_parse_day(part) for part in parts)
        start = _at(first, _START_OF_DAY, now) if first is not None else None
        end = _at(last, _END_OF_DAY, now) if last is not None else None
        if start is None and end is None:
            raise ValueError(DATE_FORMAT_HELP)
        return start, end

    day = _parse_day(text)
    if day is None:
        raise ValueError(DATE_FORMAT_HELP)
    return _whole_day(day, now)


def parse_size(text: str) -> float:
    """Parse a size such as ``10MB`` or ``1.5gb`` into megabytes.

    Units are ``tb``, ``gb``, ``mb``, ``kb`` and ``b`` in any case; a bare
    number is taken as megabytes. Raises ``ValueError`` if the number is invalid.
    """
    value = text.strip().lower()
    number, factor = value, 1.0
    for suffix, multiplier in _SIZE_UNITS:
        if value.endswith(suffix):
            number, factor = value[: -len(suffix)], multiplier
            break
    number = number.strip()
    if "_" in number or not number.isascii():
        raise ValueError(f"invalid size: {text!r}")
    try:
        return float(number) * factor
    except ValueError:
        raise ValueError(f"invalid size: {text!r}") from None


def parse_size_range(text: str) -> SizeBounds:
    """Parse ``>SIZE``, ``<SIZE`` or ``SIZE-SIZE`` into ``(min, max)`` megabytes.

    Raises ``ValueError`` when the text has none of these forms or a size is invalid.
    """
    value = text.strip().lower()
    try:
        if value.startswith(">"):
            return parse_size(value[1:]), None
        if value.startswith("<"):
            return None, parse_size(value[1:])
        if "-" in value:
            parts = value.split("-")
            if len(parts) == 2:
                return parse_size(parts[0]), parse_size(parts[1])
    except ValueError:
        raise ValueError(SIZE_FORMAT_HELP) from None
    raise ValueError(SIZE_FORMAT_HELP)