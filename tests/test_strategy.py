"""
Tests for core.timeinput.strategy: 12/24 hour conversion rules.
"""

import datetime

import pytest

from core.timeinput import strategy as strategy_module
from core.timeinput import (
    EMPTY,
    DigitBuffer,
    HourFormatError,
    Time24Hours,
    TimeParts,
    TwelveHourModeStrategy,
    TwentyFourHourModeStrategy,
    strategy_for,
)

TWELVE = TwelveHourModeStrategy()
TWENTY_FOUR = TwentyFourHourModeStrategy()


def buffer_of(digits: str) -> DigitBuffer:
    buffer = DigitBuffer()
    for digit in digits:
        buffer.append(digit)
    return buffer


# ── Time24Hours ──────────────────────────────────────────────

class TestTime24Hours:
    def test_rejects_hours_out_of_range(self):
        with pytest.raises(ValueError, match="hours"):
            Time24Hours(hours=24, minutes=0)

    def test_rejects_minutes_out_of_range(self):
        with pytest.raises(ValueError, match="minutes"):
            Time24Hours(hours=0, minutes=60)

    def test_coerce_accepts_common_shapes(self):
        expected = Time24Hours(14, 10)
        assert Time24Hours.coerce(None) is None
        assert Time24Hours.coerce(expected) is expected
        assert Time24Hours.coerce({'hours': 14, 'minutes': 10}) == expected
        assert Time24Hours.coerce(datetime.time(14, 10)) == expected
        assert Time24Hours.coerce((14, 10)) == expected

    def test_coerce_rejects_unknown_type(self):
        with pytest.raises(TypeError):
            Time24Hours.coerce("14:10")

    def test_to_dict(self):
        assert Time24Hours(2, 10).to_dict() == {'hours': 2, 'minutes': 10}


# ── Conversion ───────────────────────────────────────────────

class TestTwentyFourHourConversion:
    def test_null_gives_empty_parts_without_period(self):
        parts = TWENTY_FOUR.to_parts(None)
        assert parts == TimeParts(hours=EMPTY, minutes=EMPTY, period=None)
        assert TWENTY_FOUR.is_empty(parts)
        assert TWENTY_FOUR.to_time(parts) is None

    def test_zero_pads(self):
        parts = TWENTY_FOUR.to_parts(Time24Hours(2, 5))
        assert (parts.hours, parts.minutes, parts.period) == ('02', '05', None)

    def test_partial_entry_is_null(self):
        assert TWENTY_FOUR.to_time(TimeParts('04', EMPTY, None)) is None
        assert TWENTY_FOUR.to_time(TimeParts(EMPTY, '30', None)) is None

    def test_round_trip_every_hour(self):
        for hours in range(24):
            time = Time24Hours(hours, 37)
            assert TWENTY_FOUR.to_time(TWENTY_FOUR.to_parts(time)) == time


class TestTwelveHourConversion:
    def test_null_gives_empty_parts_with_period(self):
        parts = TWELVE.to_parts(None)
        assert parts == TimeParts(hours=EMPTY, minutes=EMPTY, period=EMPTY)
        assert TWELVE.is_empty(parts)

    @pytest.mark.parametrize("hours, expected", [
        (0, ('12', 'AM')),
        (1, ('01', 'AM')),
        (11, ('11', 'AM')),
        (12, ('12', 'PM')),
        (14, ('02', 'PM')),
        (23, ('11', 'PM')),
    ])
    def test_display_hour_and_period(self, hours, expected):
        parts = TWELVE.to_parts(Time24Hours(hours, 10))
        assert (parts.hours, parts.period) == expected
        assert parts.minutes == '10'

    def test_twelve_am_is_midnight(self):
        assert TWELVE.to_time(TimeParts('12', '10', 'AM')) == Time24Hours(0, 10)

    def test_twelve_pm_is_noon(self):
        assert TWELVE.to_time(TimeParts('12', '00', 'PM')) == Time24Hours(12, 0)

    def test_missing_period_is_null(self):
        assert TWELVE.to_time(TimeParts('05', '30', EMPTY)) is None

    def test_round_trip_every_hour(self):
        for hours in range(24):
            time = Time24Hours(hours, 37)
            assert TWELVE.to_time(TWELVE.to_parts(time)) == time

    def test_unformattable_hour_raises_assertion(self, monkeypatch):
        monkeypatch.setattr(strategy_module, 'HOURS_12_HOUR', ())
        with pytest.raises(HourFormatError):
            TWELVE.to_parts(Time24Hours(14, 10))
        assert issubclass(HourFormatError, AssertionError)


# ── Digit rules ──────────────────────────────────────────────

class TestHourRules:
    def test_twenty_four_hour_clamps_to_23(self):
        assert TWENTY_FOUR.clamp_hour(25) == 23
        assert TWENTY_FOUR.clamp_hour(17) == 17

    def test_twelve_hour_wraps_above_12(self):
        assert TWELVE.clamp_hour(17) == 5
        assert TWELVE.clamp_hour(12) == 12
        assert TWELVE.clamp_hour(1) == 1
        assert TWELVE.clamp_hour(0) == 12

    def test_twenty_four_hour_single_digit_threshold(self):
        assert not TWENTY_FOUR.is_hour_buffer_full(buffer_of('2'))
        assert TWENTY_FOUR.is_hour_buffer_full(buffer_of('3'))

    def test_twelve_hour_single_digit_threshold(self):
        assert not TWELVE.is_hour_buffer_full(buffer_of('1'))
        assert TWELVE.is_hour_buffer_full(buffer_of('2'))

    def test_two_digits_always_full(self):
        assert TWENTY_FOUR.is_hour_buffer_full(buffer_of('10'))
        assert TWELVE.is_hour_buffer_full(buffer_of('10'))

    def test_minute_threshold(self):
        assert not TWELVE.is_minute_buffer_full(buffer_of('5'))
        assert TWELVE.is_minute_buffer_full(buffer_of('6'))
        assert TWENTY_FOUR.is_minute_buffer_full(buffer_of('45'))

    def test_hour_domains(self):
        assert TWENTY_FOUR.hour_values[0] == '00'
        assert TWENTY_FOUR.hour_values[-1] == '23'
        assert TWELVE.hour_values[0] == '01'
        assert TWELVE.hour_values[-1] == '12'


# ── Export ───────────────────────────────────────────────────

class TestExportFormat:
    def test_twenty_four_hour(self):
        parts = TWENTY_FOUR.to_parts(Time24Hours(2, 10))
        assert TWENTY_FOUR.format_for_export(parts) == '02:10'

    def test_twelve_hour(self):
        parts = TWELVE.to_parts(Time24Hours(14, 10))
        assert TWELVE.format_for_export(parts) == '02:10 PM'

    def test_twelve_hour_midnight(self):
        parts = TWELVE.to_parts(Time24Hours(0, 45))
        assert TWELVE.format_for_export(parts) == '12:45 AM'

    def test_empty_sentinels_verbatim(self):
        assert TWENTY_FOUR.format_for_export(TimeParts('04', EMPTY, None)) == '04:––'
        assert TWELVE.format_for_export(TWELVE.to_parts(None)) == '––:–– ––'


def test_strategy_for():
    assert isinstance(strategy_for(True), TwelveHourModeStrategy)
    assert isinstance(strategy_for(False), TwentyFourHourModeStrategy)
    assert strategy_for(True).has_period
    assert not strategy_for(False).has_period
