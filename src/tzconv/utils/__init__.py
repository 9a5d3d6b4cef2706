"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .time import (
    fix_offset,
    format_civil_date,
    format_fixed,
    format_offset,
    format_rfc3339,
    format_zoned,
    host_local_offset,
    local_today,
    utc_now,
)

__all__ = [
    "fix_offset",
    "format_civil_date",
    "format_fixed",
    "format_offset",
    "format_rfc3339",
    "format_zoned",
    "host_local_offset",
    "local_today",
    "utc_now",
]
