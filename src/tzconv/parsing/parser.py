"""Flexible datetime parsing.

``parse`` turns a human-supplied date/time string into a fixed-offset
datetime. Time-only input is dated with the host's local calendar date,
then every pattern is tried in priority order. A pattern that matches but
leaves an unresolvable remainder does not end the parse: the next pattern
may split the input differently.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timezone

from ..context import ParseContext
from ..errors import UnknownTimezoneError, UnrecognizedFormatError
from ..global_config import LOCAL_KEYWORD
from ..timezones.resolver import resolve_offset
from ..utils.time import fix_offset, format_civil_date, host_local_offset, local_today
from .patterns import DEFAULT_PATTERNS, EPOCH, DatetimePattern, match_time_only

logger = logging.getLogger(__name__)


def with_local_date(text: str, ctx: ParseContext) -> str:
    """Prefix time-only input with today's host-local date.

    Args:
        text: Raw input string.
        ctx: Parse context supplying the clock.

    Returns:
        The input unchanged if it does not start with HH:MM:SS, otherwise
        'YYYY-MM-DD <input>'.
    """
    stripped = text.strip()
    if match_time_only(stripped) is None:
        return stripped
    ctx.note("Date not provided, assuming today.")
    return f"{format_civil_date(local_today(ctx.clock()))} {stripped}"


def resolve_remainder(naive: datetime, remainder: str, ctx: ParseContext) -> timezone:
    """Pick the fixed offset for a pattern's remainder.

    Args:
        naive: Naive datetime produced by the pattern.
        remainder: Trimmed text trailing the matched prefix.
        ctx: Parse context.

    Returns:
        Fixed offset to bind to ``naive``.

    Raises:
        UnknownTimezoneError: If the remainder cannot be resolved.
    """
    if ctx.source_zone is not None:
        ctx.note(f"Forcing source timezone {ctx.source_zone.key}")
        return fix_offset(naive.replace(tzinfo=ctx.source_zone))
    if not remainder:
        ctx.note("Timezone not provided in the datetime string, assuming UTC.")
        return UTC
    if remainder.lower() == LOCAL_KEYWORD:
        ctx.note("Using the host's local timezone.")
        return host_local_offset(naive)
    return resolve_offset(naive, remainder, ctx)


def _attempt(
    pattern: DatetimePattern, text: str, ctx: ParseContext
) -> datetime | None:
    ctx.note(f"Trying out format {pattern.name}")
    matched = pattern(text)
    if matched is None:
        ctx.note(f"Error: input does not match {pattern.name}")
        return None
    naive, remainder = matched
    if pattern is EPOCH:
        ctx.note("Epoch seconds are absolute, binding UTC.")
        return naive.replace(tzinfo=UTC)
    try:
        offset = resolve_remainder(naive, remainder, ctx)
    except UnknownTimezoneError as exc:
        ctx.note(f"Error: {exc}")
        return None
    return naive.replace(tzinfo=offset)


def parse(text: str, ctx: ParseContext | None = None) -> datetime:
    """Parse a date/time string into a fixed-offset aware datetime.

    Args:
        text: Human-supplied date/time, optionally followed by a timezone
            token (numeric offset, abbreviation, zone name or 'local').
        ctx: Parse context. Defaults to a fresh non-verbose context.

    Returns:
        Datetime whose tzinfo is a fixed ``datetime.timezone``.

    Raises:
        UnrecognizedFormatError: If no pattern yields a resolvable instant.
    """
    ctx = ctx or ParseContext()
    expanded = with_local_date(text, ctx)

    patterns = ctx.patterns if ctx.patterns is not None else DEFAULT_PATTERNS
    for pattern in patterns:
        if pattern is EPOCH and not ctx.epoch:
            continue
        result = _attempt(pattern, expanded, ctx)
        if result is not None:
            return result

    logger.debug("No pattern matched %r after %d attempts", text, len(ctx.attempts))
    raise UnrecognizedFormatError(text, ctx.attempts)
