"""
時間輸入資料結構定義

作用：
- 定義結構化時間值與三段文字
- 定義各段的合法值列表
"""

import datetime
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

# 未輸入標記（兩個 en dash）
EMPTY = '––'

AM = 'AM'
PM = 'PM'


def two_digits(number: int) -> str:
    """整數轉為兩位數字串"""
    return f"{number:02d}"


HOURS_12_HOUR: Tuple[str, ...] = tuple(two_digits(hour) for hour in range(1, 13))  # 01..12
HOURS_24_HOUR: Tuple[str, ...] = tuple(two_digits(hour) for hour in range(24))  # 00..23
MINUTES: Tuple[str, ...] = tuple(two_digits(minute) for minute in range(60))  # 00..59
TWELVE_HOUR_PERIOD_VALUES: Tuple[str, ...] = (AM, PM)


class Segment(Enum):
    """可編輯的時間段"""

    HOURS = 'hours'
    MINUTES = 'minutes'
    PERIOD = 'period'


@dataclass(frozen=True)
class Time24Hours:
    """24 小時制的時間值"""

    hours: int  # 0..23
    minutes: int  # 0..59

    def __post_init__(self):
        if not 0 <= self.hours <= 23:
            raise ValueError(f"hours out of range: {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"minutes out of range: {self.minutes}")

    def to_dict(self) -> dict:
        """轉為字典"""
        return {'hours': self.hours, 'minutes': self.minutes}

    @classmethod
    def from_dict(cls, data: dict) -> 'Time24Hours':
        """由字典建立時間值"""
        return cls(hours=int(data['hours']), minutes=int(data['minutes']))

    @classmethod
    def coerce(cls, value) -> Optional['Time24Hours']:
        """將外部傳入的值轉為 Time24Hours（None 保持 None）"""
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls.from_dict(value)
        if isinstance(value, datetime.time):
            return cls(hours=value.hour, minutes=value.minute)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(hours=int(value[0]), minutes=int(value[1]))
        raise TypeError(f"Unsupported time value: {value!r}")


@dataclass(frozen=True)
class TimeParts:
    """三段顯示文字（時、分、上下午）"""

    hours: str = EMPTY
    minutes: str = EMPTY
    period: Optional[str] = EMPTY  # 24 小時制為 None

    def get(self, segment: Segment) -> Optional[str]:
        """取得指定段的文字"""
        return getattr(self, segment.value)

    def patch(self, segment: Segment, text: str) -> 'TimeParts':
        """回傳替換指定段後的新物件"""
        return replace(self, **{segment.value: text})

    @property
    def is_blank(self) -> bool:
        """所有段皆未輸入"""
        return (
            self.hours == EMPTY
            and self.minutes == EMPTY
            and self.period in (EMPTY, None)
        )
