"""Canonical time and date utilities.

This module provides the small set of clock and formatting helpers shared by
the parser, the resolver and the CLI:
- Current UTC instant and host-local civil date
- Fixed-offset helpers (pinning an aware datetime to its current offset)
- Display and RFC 3339 formatting of resolved instants

Internal operations use tz-aware datetime objects; naive datetimes only
exist between a pattern match and timezone resolution.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

from ..global_config import DATE_FORMAT


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime.

    Returns:
        Current UTC datetime with timezone.utc.
    """
    return datetime.now(UTC)


def local_today(now: datetime | None = None) -> date:
    """Return the host's local calendar date at ``now``.

    The date is taken from the host timezone, not from UTC, so shortly after
    local midnight it can differ from the UTC date.

    Args:
        now: Aware instant to evaluate. Defaults to the current UTC time.

    Returns:
        Host-local civil date.

    Raises:
        ValueError: If ``now`` is naive.
    """
    now = now or utc_now()
    if now.tzinfo is None:
        raise ValueError(f"Cannot derive local date from naive datetime {now}")
    return now.astimezone().date()


def format_civil_date(d: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return d.strftime(DATE_FORMAT)


def fix_offset(dt: datetime) -> timezone:
    """Return the fixed offset an aware datetime carries at its instant.

    Args:
        dt: Timezone-aware datetime (fixed offset or named zone).

    Returns:
        ``datetime.timezone`` with the offset in effect at ``dt``.

    Raises:
        ValueError: If dt is naive.
    """
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError(f"Cannot fix offset of naive datetime {dt}")
    return timezone(offset)


def host_local_offset(dt_naive: datetime) -> timezone:
    """Return the host's local offset applicable to a naive wall time."""
    if dt_naive.tzinfo is not None:
        raise ValueError(f"Expected naive datetime, got timezone-aware: {dt_naive}")
    return fix_offset(dt_naive.astimezone())


def format_offset(offset: timedelta) -> str:
    """Format a UTC offset as +HH:MM (or +HH:MM:SS when seconds are present)."""
    sign = "-" if offset < timedelta(0) else "+"
    total = abs(int(offset.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if seconds:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _wall_clock(dt: datetime) -> str:
    if dt.microsecond:
        return dt.strftime("%Y-%m-%d %H:%M:%S.%f")
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def format_fixed(dt: datetime) -> str:
    """Format an aware datetime as 'YYYY-MM-DD HH:MM:SS +HH:MM'.

    Raises:
        ValueError: If dt is naive.
    """
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError("Cannot display naive datetime")
    return f"{_wall_clock(dt)} {format_offset(offset)}"


def format_zoned(dt: datetime) -> str:
    """Format an aware datetime as 'YYYY-MM-DD HH:MM:SS ABBR'.

    Falls back to the numeric offset when the zone has no name at ``dt``.
    """
    name = dt.tzname()
    if not name:
        return format_fixed(dt)
    return f"{_wall_clock(dt)} {name}"


def format_rfc3339(dt: datetime) -> str:
    """Format an aware datetime as RFC 3339 (seconds precision unless fractional).

    Raises:
        ValueError: If dt is naive.
    """
    if dt.tzinfo is None:
        raise ValueError("Cannot format naive datetime as RFC 3339")
    timespec = "microseconds" if dt.microsecond else "seconds"
    return dt.isoformat(timespec=timespec)
