"""
Tests for forms: FormControl state and the required validator.
"""

from core.timeinput import Segment, Time24Hours, TimeInputController
from forms import FormControl, ValidationError, Validators


class TestValidators:
    def test_required_rejects_none(self):
        error = Validators.required(None)
        assert isinstance(error, ValidationError)
        assert error.error_type == 'REQUIRED'
        assert error.message == 'You must enter a value'

    def test_required_accepts_value(self):
        assert Validators.required(Time24Hours(1, 0)) is None


class TestFormControl:
    def test_invalid_when_required_and_empty(self):
        control = FormControl(None, validators=[Validators.required])
        assert control.invalid
        assert not control.valid

    def test_set_value_without_accessor_notifies(self):
        control = FormControl(None, validators=[Validators.required])
        received = []
        control.add_value_listener(received.append)
        control.set_value(Time24Hours(3, 0))
        assert received == [Time24Hours(3, 0)]
        assert control.valid

    def test_disabled_control_has_no_errors(self):
        control = FormControl(None, validators=[Validators.required])
        control.disable()
        assert control.valid
        control.enable()
        assert control.invalid

    def test_clear_validators(self):
        control = FormControl(None, validators=[Validators.required])
        assert control.has_validator(Validators.required)
        control.clear_validators()
        assert not control.has_validator(Validators.required)
        assert control.valid


class TestBinding:
    def test_bind_writes_initial_value(self):
        control = FormControl({'hours': 7, 'minutes': 5})
        controller = TimeInputController()
        control.bind(controller)
        assert controller.display_text == '07:05'
        assert control.value == Time24Hours(7, 5)

    def test_bind_propagates_disabled(self):
        control = FormControl(None)
        control.disable()
        controller = TimeInputController()
        control.bind(controller)
        assert controller.disabled

    def test_keystrokes_reach_control(self):
        control = FormControl(None, validators=[Validators.required])
        controller = TimeInputController()
        control.bind(controller)
        received = []
        control.add_value_listener(received.append)
        controller.on_key_down(Segment.HOURS, '4')
        controller.on_key_down(Segment.MINUTES, '3')
        controller.on_key_down(Segment.MINUTES, '0')
        assert received == [None, None, Time24Hours(4, 30)]
        assert control.valid
