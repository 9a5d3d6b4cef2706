"""Resolve a trailing timezone token to a fixed UTC offset.

Tokens are tried against rigid numeric offset grammars first, so that a
well-formed offset such as "+09:00" never reaches the abbreviation database.
Only when every grammar fails is the token looked up as an abbreviation (or
zone name), and the zone's offset at the reference instant is used.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timezone

from ..context import ParseContext
from ..errors import UnknownTimezoneError
from ..global_config import REFERENCE_FORMAT
from ..utils.time import fix_offset


@dataclass(frozen=True)
class OffsetFormat:
    """A numeric offset grammar.

    ``shape`` must match the whole (uppercased) token; ``normalize`` rewrites
    the match into text accepted by strptime's ``%z`` directive.
    """

    name: str
    shape: re.Pattern[str]
    normalize: Callable[[re.Match[str]], str]


def _as_is(match: re.Match[str]) -> str:
    return match.group(0)


def _hours(match: re.Match[str]) -> str:
    sign = match.group("sign") or "+"
    return f"{sign}{int(match.group('hours')):02d}00"


OFFSET_FORMATS: tuple[OffsetFormat, ...] = (
    OffsetFormat("hours", re.compile(r"(?P<sign>[+-]?)(?P<hours>\d{1,2})"), _hours),
    OffsetFormat("hhmm", re.compile(r"[+-]\d{4}"), _as_is),
    OffsetFormat("hh:mm", re.compile(r"[+-]\d{2}:\d{2}"), _as_is),
    OffsetFormat("hh:mm:ss", re.compile(r"[+-]\d{2}:\d{2}:\d{2}"), _as_is),
    # Zone names the time grammar itself pins to a fixed offset.
    OffsetFormat("abbreviation", re.compile(r"UTC|GMT|UT|Z"), lambda _: "+0000"),
)


def _reference_utc(reference: datetime) -> datetime:
    if reference.tzinfo is None:
        return reference.replace(tzinfo=UTC)
    return reference.astimezone(UTC)


def _try_offset_format(
    fmt: OffsetFormat, reference_str: str, token: str, ctx: ParseContext
) -> timezone | None:
    ctx.note(f"Trying out offset format {fmt.name}")
    match = fmt.shape.fullmatch(token)
    if match is None:
        ctx.note(f"Error: {token!r} does not have the {fmt.name} shape")
        return None
    try:
        parsed = datetime.strptime(
            f"{reference_str} {fmt.normalize(match)}", f"{REFERENCE_FORMAT} %z"
        )
    except ValueError as exc:
        ctx.note(f"Error: {exc}")
        return None
    return fix_offset(parsed)


def resolve_offset(
    reference: datetime, token: str, ctx: ParseContext | None = None
) -> timezone:
    """Resolve a timezone token to the fixed offset in effect at ``reference``.

    Args:
        reference: The instant giving calendar context for DST. Naive values
            are interpreted as UTC; aware values are converted to UTC.
        token: Candidate timezone token (offset, abbreviation or zone name).
        ctx: Parse context. Defaults to a fresh non-verbose context.

    Returns:
        Fixed ``datetime.timezone`` offset.

    Raises:
        UnknownTimezoneError: If no grammar matches and the database has no
            entry for the token.
    """
    ctx = ctx or ParseContext()
    reference_utc = _reference_utc(reference)
    reference_str = reference_utc.strftime(REFERENCE_FORMAT)
    candidate = token.strip().upper()

    for fmt in OFFSET_FORMATS:
        offset = _try_offset_format(fmt, reference_str, candidate, ctx)
        if offset is not None:
            return offset

    ctx.note(f"Looking up {token.strip().lower()!r} in the timezone database")
    zone = ctx.database().zone(token)
    if zone is not None:
        return fix_offset(reference_utc.astimezone(zone))

    ctx.note(f"Error: {token!r} not found in the timezone database")
    raise UnknownTimezoneError(token)
