"""
Tests for core.timeinput.value_model and the display formatter.
"""

from core.timeinput import (
    EMPTY,
    DisplayFormatter,
    Segment,
    Time24Hours,
    TimeValueModel,
    TwelveHourModeStrategy,
    TwentyFourHourModeStrategy,
)


class TestTimeValueModel:
    def test_starts_empty(self):
        model = TimeValueModel()
        assert model.value is None
        assert model.is_empty
        assert model.is_blank
        assert model.parts.hours == EMPTY

    def test_value_round_trip(self):
        model = TimeValueModel()
        model.value = Time24Hours(9, 45)
        assert model.parts.hours == '09'
        assert model.parts.minutes == '45'
        assert model.value == Time24Hours(9, 45)

    def test_patch_notifies_with_derived_value(self):
        model = TimeValueModel()
        received = []
        model.add_listener(received.append)
        model.patch(Segment.HOURS, '04')
        model.patch(Segment.MINUTES, '02')
        assert received == [None, Time24Hours(4, 2)]

    def test_partial_entry_is_not_blank_but_empty(self):
        model = TimeValueModel()
        model.patch(Segment.HOURS, '04')
        assert model.is_empty
        assert not model.is_blank

    def test_patch_leaves_siblings(self):
        model = TimeValueModel(TwelveHourModeStrategy())
        model.value = Time24Hours(14, 10)
        model.patch(Segment.MINUTES, EMPTY)
        assert (model.parts.hours, model.parts.minutes, model.parts.period) == ('02', EMPTY, 'PM')

    def test_strategy_switch_preserves_value(self):
        model = TimeValueModel(TwentyFourHourModeStrategy())
        model.value = Time24Hours(14, 10)
        model.set_strategy(TwelveHourModeStrategy())
        assert (model.parts.hours, model.parts.minutes, model.parts.period) == ('02', '10', 'PM')
        model.set_strategy(TwentyFourHourModeStrategy())
        assert model.value == Time24Hours(14, 10)
        assert model.parts.period is None

    def test_strategy_switch_clears_partial_entry(self):
        model = TimeValueModel(TwentyFourHourModeStrategy())
        model.patch(Segment.HOURS, '04')
        model.set_strategy(TwelveHourModeStrategy())
        assert model.is_blank
        assert model.parts.period == EMPTY

    def test_flags_do_not_touch_value(self):
        model = TimeValueModel()
        model.value = Time24Hours(1, 2)
        model.set_disabled(True)
        model.set_required(True)
        assert model.disabled
        assert model.required
        assert model.value == Time24Hours(1, 2)

    def test_remove_listener(self):
        model = TimeValueModel()
        received = []
        model.add_listener(received.append)
        model.remove_listener(received.append)
        model.patch(Segment.HOURS, '01')
        assert received == []


class TestDisplayFormatter:
    def test_renders_incomplete_value(self):
        model = TimeValueModel()
        model.patch(Segment.HOURS, '04')
        assert DisplayFormatter().to_string(model) == '04:––'

    def test_renders_twelve_hour_value(self):
        model = TimeValueModel(TwelveHourModeStrategy())
        model.value = Time24Hours(14, 10)
        assert DisplayFormatter().to_string(model) == '02:10 PM'
