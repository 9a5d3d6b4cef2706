"""Explicit per-run configuration threaded through the parser and resolver.

A ``ParseContext`` is created once (by the CLI, or by a caller of
``tzconv.parsing.parse``) and passed down through every core call. It carries
the settings that would otherwise be process-wide state: the verbose flag,
the clock, an optional forced source zone, and the timezone database. It also
collects the diagnostic trail of every attempt made during a parse.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from .timezones.database import TimezoneAbbreviationIndex, get_timezone_db
from .utils.time import utc_now

if TYPE_CHECKING:
    from .parsing.patterns import DatetimePattern

logger = logging.getLogger(__name__)


@dataclass
class ParseContext:
    """Settings and diagnostics for a single parse.

    Attributes:
        verbose: Report every attempt at INFO level instead of DEBUG.
        clock: Returns the current aware instant; used for time-only input.
        source_zone: When set, the remainder is ignored and this zone is applied.
        epoch: Whether raw Unix epoch seconds are recognized.
        patterns: Ordered pattern specifications. None means the defaults.
        timezone_db: Abbreviation index. None means the process-wide instance.
        attempts: Diagnostic trail, appended to by every core call.
    """

    verbose: bool = False
    clock: Callable[[], datetime] = utc_now
    source_zone: ZoneInfo | None = None
    epoch: bool = True
    patterns: Sequence[DatetimePattern] | None = None
    timezone_db: TimezoneAbbreviationIndex | None = None
    attempts: list[str] = field(default_factory=list)

    def note(self, message: str) -> None:
        """Record a diagnostic message and log it at the verbosity level."""
        self.attempts.append(message)
        logger.log(logging.INFO if self.verbose else logging.DEBUG, message)

    def database(self) -> TimezoneAbbreviationIndex:
        """Return the configured timezone database, building the shared one if unset."""
        if self.timezone_db is None:
            self.timezone_db = get_timezone_db()
        return self.timezone_db
