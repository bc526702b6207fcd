"""
時制格式策略

作用：
- 12 小時制與 24 小時制的轉換規則
- 判斷數字緩衝是否已滿、時數夾限
- 匯出（複製）字串格式
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .buffer import DigitBuffer
from .model import (
    AM,
    EMPTY,
    HOURS_12_HOUR,
    HOURS_24_HOUR,
    PM,
    TWELVE_HOUR_PERIOD_VALUES,
    Time24Hours,
    TimeParts,
    two_digits,
)

logger = logging.getLogger(__name__)


class HourFormatError(AssertionError):
    """12 小時制顯示無法產生（策略本身的錯誤）"""


class HourModeStrategy(ABC):
    """時制策略介面（只有 12 與 24 小時兩種實作）"""

    # 是否為 12 小時制
    twelve_hour = False

    @property
    @abstractmethod
    def hour_values(self) -> Tuple[str, ...]:
        """時數的合法值列表"""

    @property
    def has_period(self) -> bool:
        """是否有上下午段"""
        return self.twelve_hour

    @abstractmethod
    def to_time(self, parts: TimeParts) -> Optional[Time24Hours]:
        """三段文字轉為時間值（未完成為 None）"""

    @abstractmethod
    def to_parts(self, time: Optional[Time24Hours]) -> TimeParts:
        """時間值轉為三段文字"""

    @abstractmethod
    def clamp_hour(self, value: int) -> int:
        """將輸入的時數限制在本時制範圍"""

    @abstractmethod
    def is_hour_buffer_full(self, buffer: DigitBuffer) -> bool:
        """時數緩衝是否已滿"""

    @abstractmethod
    def format_for_export(self, parts: TimeParts) -> str:
        """複製用字串"""

    def is_empty(self, parts: TimeParts) -> bool:
        """任一必要段未輸入即為空"""
        if parts.hours == EMPTY or parts.minutes == EMPTY:
            return True
        return self.has_period and parts.period == EMPTY

    def is_minute_buffer_full(self, buffer: DigitBuffer) -> bool:
        """分鐘緩衝：兩位數，或首位大於 5（60 以上不存在）"""
        return len(buffer) >= 2 or (len(buffer) == 1 and buffer.value > 5)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class TwentyFourHourModeStrategy(HourModeStrategy):
    """24 小時制"""

    twelve_hour = False

    @property
    def hour_values(self) -> Tuple[str, ...]:
        return HOURS_24_HOUR

    def to_time(self, parts: TimeParts) -> Optional[Time24Hours]:
        if self.is_empty(parts):
            return None
        return Time24Hours(hours=int(parts.hours), minutes=int(parts.minutes))

    def to_parts(self, time: Optional[Time24Hours]) -> TimeParts:
        if time is None:
            return TimeParts(hours=EMPTY, minutes=EMPTY, period=None)
        return TimeParts(
            hours=two_digits(time.hours),
            minutes=two_digits(time.minutes),
            period=None,
        )

    def clamp_hour(self, value: int) -> int:
        return min(value, 23)

    def is_hour_buffer_full(self, buffer: DigitBuffer) -> bool:
        # 首位 3 以上無法再接第二位
        return len(buffer) >= 2 or (len(buffer) == 1 and buffer.value > 2)

    def format_for_export(self, parts: TimeParts) -> str:
        return f"{parts.hours}:{parts.minutes}"


class TwelveHourModeStrategy(HourModeStrategy):
    """12 小時制（AM / PM）"""

    twelve_hour = True

    @property
    def hour_values(self) -> Tuple[str, ...]:
        return HOURS_12_HOUR

    def to_time(self, parts: TimeParts) -> Optional[Time24Hours]:
        if self.is_empty(parts):
            return None
        hours = int(parts.hours)
        # 12 AM 為 0 點，12 PM 為 12 點
        if hours == 12:
            hours = 0
        if parts.period == PM:
            hours += 12
        return Time24Hours(hours=hours, minutes=int(parts.minutes))

    def to_parts(self, time: Optional[Time24Hours]) -> TimeParts:
        if time is None:
            return TimeParts(hours=EMPTY, minutes=EMPTY, period=EMPTY)

        period = PM if time.hours >= 12 else AM
        display_hour = time.hours % 12
        display_hour = 12 if display_hour == 0 else display_hour
        parts = TimeParts(
            hours=two_digits(display_hour),
            minutes=two_digits(time.minutes),
            period=period,
        )
        if parts.hours not in HOURS_12_HOUR or parts.period not in TWELVE_HOUR_PERIOD_VALUES:
            logger.error(f"Cannot format {time} as hh:mm AM/PM: {parts}")
            raise HourFormatError(f"{time} did not format as hh:mm AM/PM")
        return parts

    def clamp_hour(self, value: int) -> int:
        # 例如輸入 17 → 5（17 點即下午 5 點）
        if value > 12:
            return value - 12
        # 12 小時制沒有 00 點
        if value == 0:
            return 12
        return value

    def is_hour_buffer_full(self, buffer: DigitBuffer) -> bool:
        return len(buffer) >= 2 or (len(buffer) == 1 and buffer.value >= 2)

    def format_for_export(self, parts: TimeParts) -> str:
        return f"{parts.hours}:{parts.minutes} {parts.period}"


def strategy_for(twelve_hour: bool) -> HourModeStrategy:
    """依設定選擇時制策略"""
    if twelve_hour:
        return TwelveHourModeStrategy()
    return TwentyFourHourModeStrategy()
