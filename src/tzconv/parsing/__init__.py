"""Datetime parsing: ordered patterns and the fallback parser."""

from .parser import parse, resolve_remainder, with_local_date
from .patterns import DEFAULT_PATTERNS, DatetimePattern, PatternMatch

__all__ = [
    "DEFAULT_PATTERNS",
    "DatetimePattern",
    "PatternMatch",
    "parse",
    "resolve_remainder",
    "with_local_date",
]
