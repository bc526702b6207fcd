"""
GUI 元件公開介面
"""

from .time_input import QtClipboard, SegmentFocus, TimeInputWidget

__all__ = [
    'QtClipboard',
    'SegmentFocus',
    'TimeInputWidget',
]
