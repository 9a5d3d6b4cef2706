"""Timezone database and offset resolution.

The abbreviation database is exposed here; offset resolution lives in
``tzconv.timezones.resolver``.
"""

from .database import (
    COLLISION_POLICIES,
    TimezoneAbbreviationIndex,
    build_timezone_db,
    get_timezone_db,
)

__all__ = [
    "COLLISION_POLICIES",
    "TimezoneAbbreviationIndex",
    "build_timezone_db",
    "get_timezone_db",
]
