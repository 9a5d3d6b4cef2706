"""Timezone abbreviation database.

Maps lowercase zone abbreviations ("jst", "pst", "gmt") to canonical IANA
identifiers. The abbreviation of every zone is the one observed at a single
reference instant (the current UTC time by default), so DST-dependent
abbreviations reflect "now" rather than the datetime being parsed.

Several zones can share an abbreviation at the same instant. The collision
policy decides which one is kept:
- ``last`` (default): the last zone in catalog order wins.
- ``first``: the first zone in catalog order wins.
- ``strict``: a collision between zones raises AbbreviationCollisionError.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from ..errors import AbbreviationCollisionError
from ..global_config import DEFAULT_COLLISION_POLICY
from ..utils.time import utc_now

logger = logging.getLogger(__name__)

COLLISION_POLICIES = ("last", "first", "strict")


class TimezoneAbbreviationIndex:
    """Read-only lookup from abbreviation (or zone name) to IANA identifier."""

    def __init__(
        self,
        abbreviations: dict[str, str],
        zone_names: Iterable[str] = (),
    ) -> None:
        self._abbreviations = dict(abbreviations)
        self._zone_names = {name.lower(): name for name in zone_names}

    def get(self, token: str) -> str | None:
        """Return the IANA identifier for an abbreviation or zone name.

        Abbreviations are consulted first, then full identifiers. Both
        lookups are case-insensitive.
        """
        key = token.strip().lower()
        if key in self._abbreviations:
            return self._abbreviations[key]
        return self._zone_names.get(key)

    def zone(self, token: str) -> ZoneInfo | None:
        """Return the ZoneInfo for a token, or None if unknown."""
        name = self.get(token)
        return ZoneInfo(name) if name is not None else None

    def abbreviations(self) -> dict[str, str]:
        """Return a copy of the abbreviation mapping."""
        return dict(self._abbreviations)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.get(token) is not None

    def __len__(self) -> int:
        return len(self._abbreviations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._abbreviations)


def _insert(
    index: dict[str, str], abbreviation: str, zone_name: str, policy: str
) -> None:
    existing = index.get(abbreviation)
    if existing is None or existing == zone_name:
        index[abbreviation] = zone_name
        return
    if policy == "first":
        return
    if policy == "strict":
        raise AbbreviationCollisionError(abbreviation, existing, zone_name)
    index[abbreviation] = zone_name


def build_timezone_db(
    now: datetime | None = None,
    *,
    catalog: Iterable[str] | None = None,
    policy: str = DEFAULT_COLLISION_POLICY,
) -> TimezoneAbbreviationIndex:
    """Build the abbreviation index from the IANA zone catalog.

    Args:
        now: Aware instant at which abbreviations are observed. Defaults to
            the current UTC time.
        catalog: Zone identifiers to index, in insertion order. Defaults to
            the sorted system catalog (``zoneinfo.available_timezones``).
        policy: Collision policy, one of "last", "first", "strict".

    Returns:
        TimezoneAbbreviationIndex covering every loadable zone in the catalog.

    Raises:
        ValueError: If policy is unknown or now is naive.
        AbbreviationCollisionError: On a collision under the strict policy.
    """
    if policy not in COLLISION_POLICIES:
        raise ValueError(
            f"policy must be one of {', '.join(COLLISION_POLICIES)}, got: {policy}"
        )
    now = now or utc_now()
    if now.tzinfo is None:
        raise ValueError(f"Reference instant must be timezone-aware, got: {now}")

    zone_names = list(catalog) if catalog is not None else sorted(available_timezones())

    index: dict[str, str] = {}
    loaded: list[str] = []
    for zone_name in zone_names:
        try:
            zone = ZoneInfo(zone_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug("Skipping unloadable zone %s", zone_name)
            continue
        loaded.append(zone_name)
        abbreviation = now.astimezone(zone).tzname()
        if not abbreviation:
            continue
        _insert(index, abbreviation.lower(), zone_name, policy)

    logger.debug(
        "Built timezone database: %d abbreviations from %d zones",
        len(index),
        len(loaded),
    )
    return TimezoneAbbreviationIndex(index, loaded)


@lru_cache(maxsize=1)
def get_timezone_db() -> TimezoneAbbreviationIndex:
    """Return the process-wide timezone database, built on first use."""
    return build_timezone_db()
