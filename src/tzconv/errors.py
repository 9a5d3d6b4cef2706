"""Exception types for the project."""

from __future__ import annotations

from collections.abc import Sequence


class TzconvError(Exception):
    """Base exception for tzconv errors."""


class UnrecognizedFormatError(TzconvError, ValueError):
    """Raised when no date/time pattern produced a resolvable instant.

    Attributes:
        text: The input string that could not be parsed.
        attempts: Diagnostic trail of every format tried and why it failed.
    """

    def __init__(self, text: str, attempts: Sequence[str] = ()) -> None:
        super().__init__(f"Could not parse {text}")
        self.text = text
        self.attempts = list(attempts)


class UnknownTimezoneError(TzconvError, LookupError):
    """Raised when a timezone token resolves to no offset or zone."""

    def __init__(self, token: str, message: str | None = None) -> None:
        super().__init__(message or f"Unknown timezone: {token}")
        self.token = token


class AbbreviationCollisionError(TzconvError):
    """Raised by the strict collision policy when two zones share an abbreviation."""

    def __init__(self, abbreviation: str, existing: str, incoming: str) -> None:
        super().__init__(
            f"Abbreviation {abbreviation!r} is shared by {existing} and {incoming}"
        )
        self.abbreviation = abbreviation
        self.existing = existing
        self.incoming = incoming
