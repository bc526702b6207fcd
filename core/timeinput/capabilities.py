"""
呈現層能力介面

作用：
- 焦點移動與剪貼簿寫入由呈現層實作，核心只呼叫
"""

from abc import ABC, abstractmethod

from .model import Segment


class FocusHandler(ABC):
    """將焦點移到指定時間段"""

    @abstractmethod
    def focus_segment(self, segment: Segment):
        ...


class Clipboard(ABC):
    """寫入系統剪貼簿"""

    @abstractmethod
    def copy(self, text: str):
        ...
