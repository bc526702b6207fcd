"""
時間輸入控制器

作用：
- 持有資料模型、時制策略、數字緩衝與三段編輯器
- 接收呈現層的按鍵與焦點事件
- 對表單層提供寫入值、變更與觸碰回呼
"""

import itertools
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .buffer import DIGITS, DigitBuffer
from .capabilities import Clipboard, FocusHandler
from .editor import (
    KEY_ARROW_DOWN,
    KEY_ARROW_UP,
    KEY_BACKSPACE,
    KEYS_TO_IGNORE,
    KeyResult,
    SegmentEditor,
)
from .formatter import DisplayFormatter
from .model import (
    AM,
    MINUTES,
    PM,
    TWELVE_HOUR_PERIOD_VALUES,
    Segment,
    Time24Hours,
    TimeParts,
    two_digits,
)
from .strategy import HourModeStrategy, strategy_for
from .value_model import TimeValueModel

logger = logging.getLogger(__name__)

# 這些按鍵會讓段文字與緩衝脫鉤，需清空緩衝
_BUFFER_RESET_KEYS = (KEY_BACKSPACE, KEY_ARROW_UP, KEY_ARROW_DOWN)


class TimeInputController:
    """分段時間輸入的狀態與事件處理"""

    _id_counter = itertools.count()

    def __init__(
        self,
        twelve_hour_format: bool = False,
        focus_handler: Optional[FocusHandler] = None,
        clipboard: Optional[Clipboard] = None,
    ):
        # 元件識別碼
        self.id = f"time-input-{next(TimeInputController._id_counter)}"
        self._twelve_hour_format = bool(twelve_hour_format)
        # 資料模型
        self.model = TimeValueModel(strategy_for(self._twelve_hour_format))
        self.model.add_listener(self._on_model_changed)
        # 呈現層能力
        self.focus_handler = focus_handler
        self.clipboard = clipboard
        self.formatter = DisplayFormatter()
        # 時、分兩段的數字緩衝
        self._buffers: Dict[Segment, DigitBuffer] = {
            Segment.HOURS: DigitBuffer(),
            Segment.MINUTES: DigitBuffer(),
        }
        # 焦點與觸碰狀態
        self.focused = False
        self.touched = False
        self.active_segment: Optional[Segment] = None
        self.placeholder = ''
        # 表單層提供的查詢
        self._required_query: Optional[Callable[[], bool]] = None
        self._invalid_query: Optional[Callable[[], bool]] = None
        # 表單層回呼
        self._on_change: Callable[[Optional[Time24Hours]], None] = lambda value: None
        self._on_touched: Callable[[], None] = lambda: None
        # 狀態變更監聽（呈現層重繪）
        self._state_listeners: List[Callable[[], None]] = []
        # 三段編輯器
        self._editors = self._build_editors()

    # ---- 設定 ----

    @property
    def twelve_hour_format(self) -> bool:
        return self._twelve_hour_format

    @twelve_hour_format.setter
    def twelve_hour_format(self, value: bool):
        value = bool(value)
        if value == self._twelve_hour_format:
            return
        self._twelve_hour_format = value
        self._reset_buffers()
        if self.active_segment is Segment.PERIOD and not value:
            self.active_segment = Segment.MINUTES
        self._editors = self._build_editors()
        self.model.set_strategy(strategy_for(value))
        logger.info(f"{self.id}: twelve hour format {'on' if value else 'off'}")

    @property
    def strategy(self) -> HourModeStrategy:
        return self.model.strategy

    @property
    def required(self) -> bool:
        """明確設定優先，否則依表單的必填驗證器"""
        if self.model.required is not None:
            return self.model.required
        if self._required_query is not None:
            return bool(self._required_query())
        return False

    @required.setter
    def required(self, value: bool):
        self.model.set_required(value)
        self._emit_state()

    @property
    def disabled(self) -> bool:
        return self.model.disabled

    @disabled.setter
    def disabled(self, value: bool):
        self.model.set_disabled(value)
        self._emit_state()

    def set_placeholder(self, text: str):
        self.placeholder = text
        self._emit_state()

    # ---- 值 ----

    @property
    def value(self) -> Optional[Time24Hours]:
        return self.model.value

    @value.setter
    def value(self, time: Optional[Time24Hours]):
        self.write_value(time)

    @property
    def parts(self) -> TimeParts:
        return self.model.parts

    @property
    def is_empty(self) -> bool:
        return self.model.is_empty

    @property
    def should_label_float(self) -> bool:
        """有焦點或已有輸入時標籤上浮"""
        return self.focused or not self.model.is_blank

    @property
    def error_state(self) -> bool:
        invalid = bool(self._invalid_query and self._invalid_query())
        return invalid and self.touched

    @property
    def display_text(self) -> str:
        return self.formatter.to_string(self.model)

    # ---- 表單層介面 ----

    def write_value(self, value):
        """外部指定時間值（None 清空）"""
        self._reset_buffers()
        self.model.value = Time24Hours.coerce(value)

    def register_on_change(self, callback: Callable[[Optional[Time24Hours]], None]):
        self._on_change = callback

    def register_on_touched(self, callback: Callable[[], None]):
        self._on_touched = callback

    def register_validation(
        self,
        required_query: Optional[Callable[[], bool]] = None,
        invalid_query: Optional[Callable[[], bool]] = None,
    ):
        """註冊表單的必填與無效狀態查詢"""
        self._required_query = required_query
        self._invalid_query = invalid_query

    def set_disabled_state(self, disabled: bool):
        self.disabled = disabled

    # ---- 呈現層介面 ----

    def on_key_down(self, segment: Segment, key: str) -> KeyResult:
        """處理某段的按鍵，回傳結果供呈現層決定是否攔截事件"""
        current = self.model.get(segment)
        if self.disabled:
            return KeyResult(text=current, handled=False)
        if key in KEYS_TO_IGNORE:
            # Tab 交給 Qt 移動焦點
            return KeyResult(text=current, handled=False)
        if segment is Segment.PERIOD and not self.strategy.has_period:
            # 24 小時制沒有上下午段
            return KeyResult(text=current)

        editor = self._editors[segment]
        result = editor.handle_key(key, current, self._values_for(segment))
        if not result.handled:
            return result

        if key in _BUFFER_RESET_KEYS:
            self._reset_buffer(segment)
        if result.patch:
            logger.debug(f"{self.id}: {segment.value} {key!r} {current!r} -> {result.text!r}")
            self.model.patch(segment, result.text)
        if result.focus is not None:
            self._move_focus(segment, result.focus)
        return result

    def on_focus_in(self):
        if not self.focused:
            self.focused = True
            self._emit_state()

    def on_focus_out(self, left_widget: bool):
        """焦點離開某段；left_widget 表示焦點已離開整個元件"""
        if not left_widget:
            return
        self.touched = True
        self.focused = False
        self.active_segment = None
        self._reset_buffers()
        self._on_touched()
        self._emit_state()

    def on_segment_focused(self, segment: Segment):
        """呈現層回報某段取得焦點（滑鼠、Tab 等）"""
        if segment is self.active_segment:
            return
        if self.active_segment is not None:
            self._reset_buffer(self.active_segment)
        self._reset_buffer(segment)
        self.active_segment = segment

    def on_container_click(self, on_segment: bool):
        """點擊元件空白處時聚焦時數段"""
        if not on_segment:
            self._request_focus(Segment.HOURS)

    def copy(self) -> str:
        """輸出複製字串並寫入剪貼簿"""
        text = self.display_text
        if self.clipboard is not None:
            self.clipboard.copy(text)
        logger.debug(f"{self.id}: copied {text!r}")
        return text

    def add_state_listener(self, listener: Callable[[], None]):
        self._state_listeners.append(listener)

    def destroy(self):
        """解除所有監聽與回呼"""
        self.model.clear_listeners()
        self._state_listeners.clear()
        self._on_change = lambda value: None
        self._on_touched = lambda: None
        self.focus_handler = None
        self.clipboard = None

    # ---- 內部 ----

    def _build_editors(self) -> Dict[Segment, SegmentEditor]:
        """依時制建立三段編輯器（24 小時制的分鐘段沒有下一段）"""
        period_next = Segment.PERIOD if self._twelve_hour_format else None
        return {
            Segment.HOURS: SegmentEditor(
                Segment.HOURS,
                next_segment=Segment.MINUTES,
                special_key=self._on_hours_key,
            ),
            Segment.MINUTES: SegmentEditor(
                Segment.MINUTES,
                previous_segment=Segment.HOURS,
                next_segment=period_next,
                special_key=self._on_minutes_key,
            ),
            Segment.PERIOD: SegmentEditor(
                Segment.PERIOD,
                previous_segment=Segment.MINUTES,
                special_key=self._on_period_key,
            ),
        }

    def _values_for(self, segment: Segment) -> Sequence[str]:
        if segment is Segment.HOURS:
            return self.strategy.hour_values
        if segment is Segment.MINUTES:
            return MINUTES
        return TWELVE_HOUR_PERIOD_VALUES

    def _on_hours_key(self, key: str, current: str) -> Tuple[str, bool]:
        if len(key) != 1 or key not in DIGITS:
            return current, False
        buffer = self._buffers[Segment.HOURS]
        buffer.append(key)
        hours = self.strategy.clamp_hour(buffer.value)
        return two_digits(hours), self.strategy.is_hour_buffer_full(buffer)

    def _on_minutes_key(self, key: str, current: str) -> Tuple[str, bool]:
        if len(key) != 1 or key not in DIGITS:
            return current, False
        buffer = self._buffers[Segment.MINUTES]
        # 已滿則第三個數字重新開始
        if self.strategy.is_minute_buffer_full(buffer):
            buffer.reset()
        buffer.append(key)
        minutes = min(buffer.value, 59)
        return two_digits(minutes), self.strategy.is_minute_buffer_full(buffer)

    def _on_period_key(self, key: str, current: str) -> Tuple[str, bool]:
        if key.lower() == 'a':
            return AM, False
        if key.lower() == 'p':
            return PM, False
        return current, False

    def _move_focus(self, source: Segment, target: Segment):
        self._reset_buffer(source)
        self._request_focus(target)

    def _request_focus(self, target: Segment):
        self._reset_buffer(target)
        self.active_segment = target
        if self.focus_handler is not None:
            self.focus_handler.focus_segment(target)

    def _reset_buffer(self, segment: Segment):
        buffer = self._buffers.get(segment)
        if buffer is not None:
            buffer.reset()

    def _reset_buffers(self):
        for buffer in self._buffers.values():
            buffer.reset()

    def _on_model_changed(self, value: Optional[Time24Hours]):
        self._on_change(value)
        self._emit_state()

    def _emit_state(self):
        for listener in list(self._state_listeners):
            listener()
