"""
分段時間輸入模組公開介面
"""

from .buffer import DigitBuffer
from .capabilities import Clipboard, FocusHandler
from .controller import TimeInputController
from .editor import KeyResult, SegmentEditor
from .formatter import DisplayFormatter
from .model import (
    EMPTY,
    HOURS_12_HOUR,
    HOURS_24_HOUR,
    MINUTES,
    TWELVE_HOUR_PERIOD_VALUES,
    Segment,
    Time24Hours,
    TimeParts,
)
from .strategy import (
    HourFormatError,
    HourModeStrategy,
    TwelveHourModeStrategy,
    TwentyFourHourModeStrategy,
    strategy_for,
)
from .value_model import TimeValueModel

__all__ = [
    'EMPTY',
    'HOURS_12_HOUR',
    'HOURS_24_HOUR',
    'MINUTES',
    'TWELVE_HOUR_PERIOD_VALUES',
    'Segment',
    'Time24Hours',
    'TimeParts',
    'DigitBuffer',
    'HourFormatError',
    'HourModeStrategy',
    'TwelveHourModeStrategy',
    'TwentyFourHourModeStrategy',
    'strategy_for',
    'KeyResult',
    'SegmentEditor',
    'TimeValueModel',
    'DisplayFormatter',
    'FocusHandler',
    'Clipboard',
    'TimeInputController',
]
