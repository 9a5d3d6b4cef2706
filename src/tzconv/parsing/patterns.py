"""Ordered date/time pattern specifications.

Each pattern is a pure function from the input string to either ``None`` or
a ``(naive_datetime, remainder)`` pair, where the remainder is whatever
trails the matched prefix, trimmed of whitespace. The parser walks the
patterns in order and hands each remainder to timezone resolution.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, time, timedelta
from email.utils import parsedate_tz

from ..utils.time import format_offset

PatternMatch = tuple[datetime, str]

_CLOCK = re.compile(r"\d{1,2}:\d{2}(?::\d{2})?")


@dataclass(frozen=True)
class DatetimePattern:
    """A named prefix matcher producing a naive datetime and a remainder."""

    name: str
    match: Callable[[str], PatternMatch | None]

    def __call__(self, text: str) -> PatternMatch | None:
        return self.match(text)


def strptime_prefix(prefix: re.Pattern[str], fmt: str) -> Callable[[str], PatternMatch | None]:
    """Build a matcher that parses the regex-selected prefix with strptime.

    Args:
        prefix: Regex anchored at the start of the input selecting the text
            handed to strptime.
        fmt: strptime format for the selected prefix.

    Returns:
        Matcher returning ``(naive, remainder)`` or None.
    """

    def _match(text: str) -> PatternMatch | None:
        found = prefix.match(text)
        if found is None:
            return None
        try:
            naive = datetime.strptime(found.group(0), fmt)
        except ValueError:
            return None
        return naive, text[found.end():].strip()

    return _match


_EPOCH = re.compile(r"\s*(-?\d+)\s*")


def match_epoch(text: str) -> PatternMatch | None:
    """Match raw Unix epoch seconds making up the whole input."""
    found = _EPOCH.fullmatch(text)
    if found is None:
        return None
    try:
        moment = datetime.fromtimestamp(int(found.group(1)), UTC)
    except (OverflowError, OSError, ValueError):
        return None
    return moment.replace(tzinfo=None), ""


def match_rfc2822(text: str) -> PatternMatch | None:
    """Match an RFC 2822 date ('Sun, 22 Oct 2023 10:34:16 +0900').

    The zone is returned as the remainder: a numeric offset when the header
    carried a non-zero one parsedate_tz understood, otherwise the original
    trailing zone token (empty when the date ends with the clock time).
    """
    parts = parsedate_tz(text)
    if parts is None:
        return None
    year, month, day, hour, minute, second = parts[:6]
    try:
        naive = datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None
    tail = text.strip().rsplit(None, 1)[-1]
    if _CLOCK.fullmatch(tail):
        return naive, ""
    offset_seconds = parts[9]
    if offset_seconds:
        return naive, format_offset(timedelta(seconds=offset_seconds))
    # Unreadable or zero zones go to the resolver verbatim.
    return naive, tail


ISO_T_FRACTION = DatetimePattern(
    "%Y-%m-%dT%H:%M:%S.%f",
    strptime_prefix(
        re.compile(r"\d{4}-\d{1,2}-\d{1,2}T\d{1,2}:\d{2}:\d{2}\.\d{1,6}"),
        "%Y-%m-%dT%H:%M:%S.%f",
    ),
)
ISO_T = DatetimePattern(
    "%Y-%m-%dT%H:%M:%S",
    strptime_prefix(
        re.compile(r"\d{4}-\d{1,2}-\d{1,2}T\d{1,2}:\d{2}:\d{2}"),
        "%Y-%m-%dT%H:%M:%S",
    ),
)
SPACE_FRACTION = DatetimePattern(
    "%Y-%m-%d %H:%M:%S.%f",
    strptime_prefix(
        re.compile(r"\d{4}-\d{1,2}-\d{1,2}\s+\d{1,2}:\d{2}:\d{2}\.\d{1,6}"),
        "%Y-%m-%d %H:%M:%S.%f",
    ),
)
SPACE = DatetimePattern(
    "%Y-%m-%d %H:%M:%S",
    strptime_prefix(
        re.compile(r"\d{4}-\d{1,2}-\d{1,2}\s+\d{1,2}:\d{2}:\d{2}"),
        "%Y-%m-%d %H:%M:%S",
    ),
)
EPOCH = DatetimePattern("%s", match_epoch)
RFC2822 = DatetimePattern("rfc2822", match_rfc2822)

DEFAULT_PATTERNS: tuple[DatetimePattern, ...] = (
    EPOCH,
    ISO_T_FRACTION,
    ISO_T,
    SPACE_FRACTION,
    SPACE,
    RFC2822,
)

_TIME_ONLY = re.compile(r"\d{1,2}:\d{2}:\d{2}")


def match_time_only(text: str) -> time | None:
    """Return the clock time if the input starts with HH:MM:SS, else None."""
    found = _TIME_ONLY.match(text.strip())
    if found is None:
        return None
    try:
        return datetime.strptime(found.group(0), "%H:%M:%S").time()
    except ValueError:
        return None
