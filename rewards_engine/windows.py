"""
Month keys and query windows.

Timestamps are stored as naive UTC. Everything calendar-related (which
month a purchase falls in, where a month starts) is evaluated in the
configured rewards time zone, so both helpers below take it explicitly.
"""

import re
from datetime import UTC, datetime, tzinfo
from typing import Optional, Tuple

from rewards_engine.errors import InvalidArgumentError

MIN_RECENT_MONTHS = 1
MAX_RECENT_MONTHS = 36

_YEAR_MONTH_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")


def _as_aware(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp


def month_key(timestamp: datetime, tz: tzinfo = UTC) -> str:
    """
    Return the YYYY-MM bucket of a timestamp in the given time zone.

    Example:
        >>> month_key(datetime(2024, 9, 5, 10, 30))
        '2024-09'
    """
    return _as_aware(timestamp).astimezone(tz).strftime("%Y-%m")


def parse_year_month(year_month: str) -> Tuple[int, int]:
    """Split a literal YYYY-MM string into (year, month), rejecting anything else."""
    if not isinstance(year_month, str) or not _YEAR_MONTH_PATTERN.fullmatch(year_month):
        raise InvalidArgumentError(f"Invalid month format. Use yyyy-MM format: {year_month}")

    year, month = (int(part) for part in year_month.split("-"))
    if year < 1 or not 1 <= month <= 12:
        raise InvalidArgumentError(f"Invalid month format. Use yyyy-MM format: {year_month}")
    return year, month


def validate_months(months: int) -> int:
    if isinstance(months, bool) or not isinstance(months, int):
        raise InvalidArgumentError(
            f"Months must be between {MIN_RECENT_MONTHS} and {MAX_RECENT_MONTHS}"
        )
    if months < MIN_RECENT_MONTHS or months > MAX_RECENT_MONTHS:
        raise InvalidArgumentError(
            f"Months must be between {MIN_RECENT_MONTHS} and {MAX_RECENT_MONTHS}"
        )
    return months


def _first_of_month(year: int, month: int, tz: tzinfo) -> datetime:
    # month may overflow past 12; fold it back into the year
    year, month_index = divmod(year * 12 + (month - 1), 12)
    return datetime(year, month_index + 1, 1, tzinfo=tz)


def month_window(year_month: str, tz: tzinfo = UTC) -> Tuple[datetime, datetime]:
    """
    Bounds of a calendar month as aware UTC datetimes.

    The start is inclusive and the end exclusive (first instant of the
    following month), so sub-second timestamps on the last day are kept.
    """
    year, month = parse_year_month(year_month)
    try:
        start = _first_of_month(year, month, tz)
        end = _first_of_month(year, month + 1, tz)
        return start.astimezone(UTC), end.astimezone(UTC)
    except (OverflowError, ValueError):
        raise InvalidArgumentError(f"Month out of supported range: {year_month}")


def recent_window(
    months: int,
    tz: tzinfo = UTC,
    now: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """
    Window covering the last `months` calendar months up to `now`.

    The start is `now` minus `months` months, truncated to the first
    instant of that month in `tz`. Both bounds come back in UTC.

    Example:
        now = 2024-11-20, months = 3  ->  start = 2024-08-01 00:00
    """
    validate_months(months)
    now_local = _as_aware(now or datetime.now(UTC)).astimezone(tz)
    start = _first_of_month(now_local.year, now_local.month - months, tz)
    return start.astimezone(UTC), now_local.astimezone(UTC)
