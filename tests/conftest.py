"""
Shared fixtures: recording collaborators and the Qt application.
"""

import os

import pytest

# Qt widgets run without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from core.timeinput import Clipboard, FocusHandler, TimeInputController
from forms import FormControl, Validators


class RecordingFocus(FocusHandler):
    def __init__(self):
        self.requests = []

    def focus_segment(self, segment):
        self.requests.append(segment)


class RecordingClipboard(Clipboard):
    def __init__(self):
        self.copied = []

    def copy(self, text):
        self.copied.append(text)


@pytest.fixture
def focus():
    return RecordingFocus()


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def controller(focus, clipboard):
    return TimeInputController(focus_handler=focus, clipboard=clipboard)


@pytest.fixture
def time_control(controller):
    """Required form field bound to the controller."""
    control = FormControl(None, validators=[Validators.required])
    control.bind(controller)
    return control


@pytest.fixture(scope='session')
def qapp():
    QtWidgets = pytest.importorskip('PyQt5.QtWidgets')
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
