from __future__ import annotations

import os
import time
from collections.abc import Callable, Generator
from datetime import UTC, datetime

import pytest

from tzconv.context import ParseContext
from tzconv.timezones.database import TimezoneAbbreviationIndex, build_timezone_db

# Instant at which the small test catalog is evaluated: northern-hemisphere
# summer time is still in effect.
REFERENCE_NOW = datetime(2023, 10, 22, 12, 0, 0, tzinfo=UTC)

SMALL_CATALOG = [
    "America/Los_Angeles",
    "Asia/Tokyo",
    "Europe/London",
    "UTC",
]


@pytest.fixture
def host_tz() -> Generator[Callable[[str], None], None, None]:
    """
    Pin the host's local timezone with a POSIX TZ string (e.g. "JST-9").

    POSIX strings need no zoneinfo files, so local-time behavior is the same
    on every machine. The original TZ is restored afterwards.
    """
    original = os.environ.get("TZ")

    def _set(tz: str) -> None:
        os.environ["TZ"] = tz
        time.tzset()

    yield _set

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()


@pytest.fixture
def small_db() -> TimezoneAbbreviationIndex:
    """
    Abbreviation index over a handful of zones, observed at REFERENCE_NOW:
    pdt, jst, bst, utc.
    """
    return build_timezone_db(REFERENCE_NOW, catalog=SMALL_CATALOG)


@pytest.fixture
def ctx(small_db: TimezoneAbbreviationIndex) -> ParseContext:
    """
    Non-verbose parse context over the small database with a fixed clock.
    """
    return ParseContext(clock=lambda: REFERENCE_NOW, timezone_db=small_db)


@pytest.fixture
def reference_now() -> datetime:
    """The instant the small database is observed at."""
    return REFERENCE_NOW


@pytest.fixture
def small_catalog() -> list[str]:
    return list(SMALL_CATALOG)
