"""
時間段鍵盤編輯

作用：
- 三個時間段共用的按鍵處理流程
- 上下鍵循環、左右鍵切換焦點、Backspace 清除
- 其他按鍵交給各段的特殊處理（數字、A/P）
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .model import EMPTY, Segment

KEY_TAB = 'Tab'
KEY_BACKSPACE = 'Backspace'
KEY_ARROW_LEFT = 'ArrowLeft'
KEY_ARROW_RIGHT = 'ArrowRight'
KEY_ARROW_UP = 'ArrowUp'
KEY_ARROW_DOWN = 'ArrowDown'

KEYS_TO_IGNORE = (KEY_TAB,)
NAVIGATION_KEYS = (
    KEY_BACKSPACE,
    KEY_ARROW_LEFT,
    KEY_ARROW_RIGHT,
    KEY_ARROW_UP,
    KEY_ARROW_DOWN,
)

# 特殊按鍵處理：(key, 目前文字) -> (新文字, 是否跳到下一段)
SpecialKeyHandler = Callable[[str, str], Tuple[str, bool]]


@dataclass
class KeyResult:
    """單一按鍵的處理結果"""

    text: Optional[str]  # 處理後的段文字（24 小時制的上下午段為 None）
    focus: Optional[Segment] = None  # 要求移動焦點的目標段
    patch: bool = False  # 是否寫回資料模型
    handled: bool = True  # False 表示交回呈現層預設行為（Tab）


def keep_value(key: str, current: str) -> Tuple[str, bool]:
    """預設特殊處理：保持原值"""
    return current, False


class SegmentEditor:
    """單一時間段的按鍵狀態機"""

    def __init__(
        self,
        segment: Segment,
        previous_segment: Optional[Segment] = None,
        next_segment: Optional[Segment] = None,
        special_key: Optional[SpecialKeyHandler] = None,
    ):
        self.segment = segment
        # 左右鍵的目標段
        self.previous_segment = previous_segment
        self.next_segment = next_segment
        # 非導覽按鍵的處理
        self.special_key = special_key or keep_value

    def handle_key(self, key: str, current: str, values: Sequence[str]) -> KeyResult:
        """依優先順序處理按鍵"""
        if key in KEYS_TO_IGNORE:
            return KeyResult(text=current, handled=False)
        if key in NAVIGATION_KEYS:
            return self.navigate_by_key(key, current, values)

        text, advance = self.special_key(key, current)
        focus = self.next_segment if advance else None
        return KeyResult(text=text, focus=focus, patch=True)

    def navigate_by_key(self, key: str, current: str, values: Sequence[str]) -> KeyResult:
        """導覽按鍵：清除、左右移動、上下循環"""
        if key == KEY_BACKSPACE:
            return KeyResult(text=EMPTY, patch=True)
        if key == KEY_ARROW_LEFT:
            return KeyResult(text=current, focus=self.previous_segment)
        if key == KEY_ARROW_RIGHT:
            return KeyResult(text=current, focus=self.next_segment)

        if not values:
            return KeyResult(text=current, patch=True)
        current_idx = values.index(current) if current in values else -1
        if key == KEY_ARROW_UP:
            target_idx = (current_idx + 1) % len(values)
        elif current_idx == -1:
            target_idx = len(values) - 1
        else:
            target_idx = (current_idx - 1 + len(values)) % len(values)
        return KeyResult(text=values[target_idx], patch=True)

    def __repr__(self) -> str:
        return f"SegmentEditor({self.segment.value}, previous={self.previous_segment}, next={self.next_segment})"
