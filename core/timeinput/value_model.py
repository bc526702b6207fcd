"""
時間值資料模型

作用：
- 以單一單位保存三段文字
- 透過目前的時制策略推導結構化時間值
- 任何變更後通知監聽者
"""

import logging
from typing import Callable, List, Optional

from .model import Segment, Time24Hours, TimeParts
from .strategy import HourModeStrategy, TwentyFourHourModeStrategy

logger = logging.getLogger(__name__)

ValueListener = Callable[[Optional[Time24Hours]], None]


class TimeValueModel:
    """三段時間文字與其結構化時間值"""

    def __init__(self, strategy: Optional[HourModeStrategy] = None):
        # 時制策略
        self._strategy = strategy or TwentyFourHourModeStrategy()
        # 三段文字（初始皆為未輸入）
        self._parts = self._strategy.to_parts(None)
        # 停用狀態（套用到三段）
        self.disabled = False
        # 必填（僅為中繼資料，None 表示未明確設定）
        self.required: Optional[bool] = None
        # 變更監聽者
        self._listeners: List[ValueListener] = []

    @property
    def strategy(self) -> HourModeStrategy:
        return self._strategy

    @property
    def parts(self) -> TimeParts:
        return self._parts

    @property
    def value(self) -> Optional[Time24Hours]:
        """目前的結構化時間值（未完成為 None）"""
        return self._strategy.to_time(self._parts)

    @value.setter
    def value(self, time: Optional[Time24Hours]):
        self._parts = self._strategy.to_parts(time)
        self._notify()

    @property
    def is_empty(self) -> bool:
        """任一必要段未輸入"""
        return self._strategy.is_empty(self._parts)

    @property
    def is_blank(self) -> bool:
        """所有段皆未輸入"""
        return self._parts.is_blank

    def get(self, segment: Segment) -> Optional[str]:
        return self._parts.get(segment)

    def patch(self, segment: Segment, text: str):
        """更新單一段並通知"""
        self._parts = self._parts.patch(segment, text)
        self._notify()

    def set_disabled(self, disabled: bool):
        self.disabled = bool(disabled)

    def set_required(self, required: bool):
        self.required = bool(required)

    def set_strategy(self, strategy: HourModeStrategy):
        """切換時制：以舊策略取值，再以新策略重建三段"""
        time = self.value
        self._strategy = strategy
        self._parts = strategy.to_parts(time)
        logger.debug(f"Strategy switched to {strategy!r}, value {time}")
        self._notify()

    def add_listener(self, listener: ValueListener):
        self._listeners.append(listener)

    def remove_listener(self, listener: ValueListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def clear_listeners(self):
        self._listeners.clear()

    def _notify(self):
        value = self.value
        for listener in list(self._listeners):
            listener(value)
