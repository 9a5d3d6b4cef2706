"""Project resolved instants into a destination timezone for display."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

from .utils.time import format_fixed, format_rfc3339, format_zoned

OUTPUT_STYLES = ("display", "iso")


def convert(instant: datetime, target: tzinfo) -> datetime:
    """Express an aware instant in the target timezone.

    The absolute instant is unchanged; only the wall clock and offset move.

    Raises:
        ValueError: If instant is naive.
    """
    if instant.tzinfo is None:
        raise ValueError(f"Cannot convert naive datetime {instant}")
    return instant.astimezone(target)


def format_instant(dt: datetime, style: str = "display") -> str:
    """Render an aware datetime for output.

    Args:
        dt: Aware datetime, in a named zone or at a fixed offset.
        style: "display" for 'YYYY-MM-DD HH:MM:SS ABBR' (named zones) or
            'YYYY-MM-DD HH:MM:SS +HH:MM' (fixed offsets); "iso" for RFC 3339.

    Returns:
        Formatted string.

    Raises:
        ValueError: If style is unknown or dt is naive.
    """
    if style == "iso":
        return format_rfc3339(dt)
    if style != "display":
        raise ValueError(f"style must be one of {', '.join(OUTPUT_STYLES)}, got: {style}")
    if isinstance(dt.tzinfo, timezone):
        return format_fixed(dt)
    return format_zoned(dt)
