"""Tests for flexible datetime parsing."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from tzconv.context import ParseContext
from tzconv.errors import UnrecognizedFormatError
from tzconv.parsing import DEFAULT_PATTERNS, DatetimePattern, parse, with_local_date
from tzconv.parsing.patterns import match_epoch, match_rfc2822, match_time_only
from tzconv.timezones.database import TimezoneAbbreviationIndex
from tzconv.utils.time import format_fixed, format_rfc3339


class TestPatterns:
    """Unit tests for individual pattern specifications."""

    def test_default_priority_order(self) -> None:
        assert [p.name for p in DEFAULT_PATTERNS] == [
            "%s",
            "%Y-%m-%dT%H:%M:%S.%f",
            "%Y-%m-%dT%H:%M:%S",
            "%Y-%m-%d %H:%M:%S.%f",
            "%Y-%m-%d %H:%M:%S",
            "rfc2822",
        ]

    def test_space_pattern_splits_remainder(self) -> None:
        space = DEFAULT_PATTERNS[4]
        assert space("2023-10-22 10:34:16   jst ") == (
            datetime(2023, 10, 22, 10, 34, 16),
            "jst",
        )
        assert space("2023-10-22T10:34:16") is None

    def test_invalid_calendar_date_does_not_match(self) -> None:
        assert DEFAULT_PATTERNS[4]("2023-02-30 10:34:16") is None

    def test_epoch(self) -> None:
        assert match_epoch("1697970856") == (datetime(2023, 10, 22, 10, 34, 16), "")
        assert match_epoch("2023-10-22") is None

    def test_rfc2822_numeric_zone(self) -> None:
        assert match_rfc2822("Sun, 22 Oct 2023 10:34:16 +0900") == (
            datetime(2023, 10, 22, 10, 34, 16),
            "+09:00",
        )

    def test_rfc2822_named_zone_left_for_resolver(self) -> None:
        assert match_rfc2822("Sun, 22 Oct 2023 10:34:16 JST") == (
            datetime(2023, 10, 22, 10, 34, 16),
            "JST",
        )

    def test_rfc2822_without_zone(self) -> None:
        assert match_rfc2822("Sun, 22 Oct 2023 10:34:16") == (
            datetime(2023, 10, 22, 10, 34, 16),
            "",
        )

    def test_time_only(self) -> None:
        assert match_time_only("10:34:16 jst") is not None
        assert match_time_only("2023-10-22 10:34:16") is None
        assert match_time_only("25:00:00") is None


class TestParse:
    """End-to-end parsing with a fixed database and clock."""

    def test_abbreviation(self, ctx: ParseContext) -> None:
        assert format_fixed(parse("2023-10-22 10:34:16 jst", ctx)) == (
            "2023-10-22 10:34:16 +09:00"
        )

    def test_missing_timezone_is_utc(self, ctx: ParseContext) -> None:
        assert format_rfc3339(parse("2023-10-22 10:34:16", ctx)) == (
            "2023-10-22T10:34:16+00:00"
        )

    def test_rfc3339_round_trip(self, ctx: ParseContext) -> None:
        text = "2023-10-22T10:34:16+01:00"
        assert format_rfc3339(parse(text, ctx)) == text

    def test_fractional_seconds_round_trip(self, ctx: ParseContext) -> None:
        text = "2023-10-22T10:34:16.250000-03:30"
        assert format_rfc3339(parse(text, ctx)) == text

    def test_result_has_fixed_offset(self, ctx: ParseContext) -> None:
        result = parse("2023-10-22 10:34:16 Asia/Tokyo", ctx)
        assert isinstance(result.tzinfo, timezone)
        assert result.utcoffset() == timedelta(hours=9)

    def test_rfc2822(self, ctx: ParseContext) -> None:
        result = parse("Sun, 22 Oct 2023 10:34:16 PDT", ctx)
        assert format_fixed(result) == "2023-10-22 10:34:16 -07:00"

    def test_epoch_seconds(self, ctx: ParseContext) -> None:
        assert format_rfc3339(parse("1697970856", ctx)) == "2023-10-22T10:34:16+00:00"

    def test_epoch_disabled(self, small_db: TimezoneAbbreviationIndex) -> None:
        ctx = ParseContext(epoch=False, timezone_db=small_db)
        with pytest.raises(UnrecognizedFormatError):
            parse("1697970856", ctx)
        assert "Trying out format %s" not in ctx.attempts

    def test_rfc2822_zone_name_tail(self, ctx: ParseContext) -> None:
        result = parse("Sun, 22 Oct 2023 10:34:16 Asia/Tokyo", ctx)
        assert format_rfc3339(result) == "2023-10-22T10:34:16+09:00"

    def test_rfc2822_unknown_tail_is_unrecognized(self, ctx: ParseContext) -> None:
        with pytest.raises(UnrecognizedFormatError):
            parse("Sun, 22 Oct 2023 10:34:16 not-a-zone", ctx)
        assert any("not-a-zone" in line for line in ctx.attempts)

    def test_epoch_ignores_forced_source_zone(
        self, small_db: TimezoneAbbreviationIndex
    ) -> None:
        ctx = ParseContext(source_zone=ZoneInfo("Asia/Tokyo"), timezone_db=small_db)
        result = parse("0", ctx)
        assert result.timestamp() == 0
        assert format_rfc3339(result) == "1970-01-01T00:00:00+00:00"

    def test_forced_source_zone_ignores_remainder(
        self, small_db: TimezoneAbbreviationIndex
    ) -> None:
        ctx = ParseContext(source_zone=ZoneInfo("Asia/Tokyo"), timezone_db=small_db)
        assert format_fixed(parse("2023-10-22 10:34:16 pdt", ctx)) == (
            "2023-10-22 10:34:16 +09:00"
        )

    def test_local_keyword(
        self, ctx: ParseContext, host_tz: Callable[[str], None]
    ) -> None:
        host_tz("EST5")
        assert format_fixed(parse("2023-10-22 10:34:16 LOCAL", ctx)) == (
            "2023-10-22 10:34:16 -05:00"
        )

    def test_unrecognized_format(self, ctx: ParseContext) -> None:
        with pytest.raises(UnrecognizedFormatError) as excinfo:
            parse("yesterday at noon", ctx)
        assert excinfo.value.text == "yesterday at noon"
        assert str(excinfo.value) == "Could not parse yesterday at noon"
        assert "Trying out format %Y-%m-%d %H:%M:%S" in excinfo.value.attempts

    def test_unknown_remainder_is_unrecognized(self, ctx: ParseContext) -> None:
        with pytest.raises(UnrecognizedFormatError):
            parse("2023-10-22 10:34:16 notazone", ctx)
        assert any("notazone" in line for line in ctx.attempts)

    def test_unresolvable_remainder_falls_through_to_next_pattern(
        self, ctx: ParseContext
    ) -> None:
        greedy = DatetimePattern(
            "date-only", lambda text: (datetime(2000, 1, 1), text[10:].strip())
        )
        ctx.patterns = (greedy, *DEFAULT_PATTERNS[1:])

        result = parse("2023-10-22 10:34:16 jst", ctx)

        assert format_fixed(result) == "2023-10-22 10:34:16 +09:00"
        assert "Trying out format date-only" in ctx.attempts

    def test_numeric_offset_never_reaches_database(self, ctx: ParseContext) -> None:
        parse("2023-10-22 10:34:16 +09:00", ctx)
        assert not any("timezone database" in line for line in ctx.attempts)


class TestTimeOnly:
    """Time-only input is dated with the host's local calendar date."""

    @pytest.fixture
    def late_evening_ctx(self, small_db: TimezoneAbbreviationIndex) -> ParseContext:
        # 20:00 UTC on the 22nd is already the 23rd in Tokyo.
        return ParseContext(
            clock=lambda: datetime(2023, 10, 22, 20, 0, tzinfo=UTC),
            timezone_db=small_db,
        )

    def test_uses_host_local_date(
        self, late_evening_ctx: ParseContext, host_tz: Callable[[str], None]
    ) -> None:
        host_tz("JST-9")
        assert format_rfc3339(parse("10:34:16", late_evening_ctx)) == (
            "2023-10-23T10:34:16+00:00"
        )

    def test_local_date_ignores_token_timezone(
        self, late_evening_ctx: ParseContext, host_tz: Callable[[str], None]
    ) -> None:
        host_tz("EST5")
        assert format_fixed(parse("10:34:16 jst", late_evening_ctx)) == (
            "2023-10-22 10:34:16 +09:00"
        )

    def test_with_local_date_leaves_full_input(self, ctx: ParseContext) -> None:
        assert with_local_date("2023-10-22 10:34:16", ctx) == "2023-10-22 10:34:16"
        assert ctx.attempts == []
