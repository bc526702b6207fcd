"""
分段時間輸入元件

作用：
- 以三個輸入框顯示時、分、上下午
- 鍵盤與焦點事件交給 TimeInputController
- 發出時間變更與觸碰訊號
"""

import logging
from typing import Dict, Optional

from PyQt5.QtCore import QEvent, Qt, pyqtSignal
from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import QApplication, QHBoxLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from core.timeinput import Clipboard, FocusHandler, Segment, Time24Hours, TimeInputController
from core.timeinput.editor import (
    KEY_ARROW_DOWN,
    KEY_ARROW_LEFT,
    KEY_ARROW_RIGHT,
    KEY_ARROW_UP,
    KEY_BACKSPACE,
    KEY_TAB,
)

logger = logging.getLogger(__name__)

# Qt 按鍵 → 控制器使用的按鍵名稱
_QT_KEY_NAMES = {
    Qt.Key_Tab: KEY_TAB,
    Qt.Key_Backtab: KEY_TAB,
    Qt.Key_Backspace: KEY_BACKSPACE,
    Qt.Key_Left: KEY_ARROW_LEFT,
    Qt.Key_Right: KEY_ARROW_RIGHT,
    Qt.Key_Up: KEY_ARROW_UP,
    Qt.Key_Down: KEY_ARROW_DOWN,
}

# 交回 Qt 預設處理的按鍵（對話框確認、取消）
_PASS_THROUGH_KEYS = (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Escape)


def key_name(event) -> str:
    """將 QKeyEvent 轉為按鍵名稱"""
    name = _QT_KEY_NAMES.get(event.key())
    if name:
        return name
    return event.text() or 'Unidentified'


class SegmentFocus(FocusHandler):
    """以 QLineEdit 實作焦點移動"""

    def __init__(self, edits: Dict[Segment, QLineEdit]):
        self._edits = edits

    def focus_segment(self, segment: Segment):
        edit = self._edits.get(segment)
        if edit is not None and edit.isEnabled() and not edit.isHidden():
            edit.setFocus(Qt.OtherFocusReason)


class QtClipboard(Clipboard):
    """系統剪貼簿"""

    def copy(self, text: str):
        QApplication.clipboard().setText(text)


class TimeInputWidget(QWidget):
    """分段時間輸入（時:分 上下午）"""

    # 值變更訊號（Time24Hours 或 None）
    value_changed = pyqtSignal(object)
    # 焦點離開整個元件
    touched = pyqtSignal()

    def __init__(self, label: str = '', twelve_hour_format: bool = False, parent=None):
        super().__init__(parent)
        # 三段輸入框
        self._edits: Dict[Segment, QLineEdit] = {}
        # 初始化 UI
        self._setup_ui(label)
        # 控制器
        self.controller = TimeInputController(
            twelve_hour_format=twelve_hour_format,
            focus_handler=SegmentFocus(self._edits),
            clipboard=QtClipboard(),
        )
        self.controller.model.add_listener(self._on_value_changed)
        self.controller.add_state_listener(self._refresh)
        QApplication.instance().focusChanged.connect(self._on_focus_changed)
        self._refresh()

    def _setup_ui(self, label: str):
        """建立 UI"""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        # 標籤（有焦點或有值時縮小上浮）
        self.label = QLabel(label)
        layout.addWidget(self.label)

        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(2)

        self.hours_edit = self._create_edit(Segment.HOURS, 'Hours')
        row.addWidget(self.hours_edit)
        # 分隔符號
        row.addWidget(QLabel(':'))
        self.minutes_edit = self._create_edit(Segment.MINUTES, 'Minutes')
        row.addWidget(self.minutes_edit)
        self.period_edit = self._create_edit(Segment.PERIOD, 'AM/PM')
        row.addWidget(self.period_edit)
        row.addStretch()

        layout.addLayout(row)
        self.setLayout(layout)

    def _create_edit(self, segment: Segment, accessible_name: str) -> QLineEdit:
        edit = QLineEdit()
        edit.setObjectName(segment.value)
        edit.setAccessibleName(accessible_name)
        edit.setAlignment(Qt.AlignCenter)
        edit.setFixedWidth(36)
        edit.setContextMenuPolicy(Qt.NoContextMenu)
        # 文字只經由控制器寫入，擋下拖放、中鍵貼上與輸入法
        edit.setReadOnly(True)
        edit.setAcceptDrops(False)
        edit.installEventFilter(self)
        self._edits[segment] = edit
        return edit

    # ---- 公開介面 ----

    @property
    def twelve_hour_format(self) -> bool:
        return self.controller.twelve_hour_format

    @twelve_hour_format.setter
    def twelve_hour_format(self, value: bool):
        self.controller.twelve_hour_format = value
        self._refresh()

    @property
    def value(self) -> Optional[Time24Hours]:
        return self.controller.value

    def set_value(self, value):
        """設定時間值並更新 UI"""
        self.controller.write_value(value)

    def set_disabled(self, disabled: bool):
        self.controller.set_disabled_state(disabled)

    def display_text(self) -> str:
        return self.controller.display_text

    def edit_for(self, segment: Segment) -> QLineEdit:
        return self._edits[segment]

    # ---- 事件 ----

    def eventFilter(self, obj, event):
        """攔截三段輸入框的按鍵"""
        segment = self._segment_of(obj)
        if segment is None or event.type() != QEvent.KeyPress:
            return super().eventFilter(obj, event)

        if event.matches(QKeySequence.Copy):
            self.controller.copy()
            return True
        if event.key() in _PASS_THROUGH_KEYS:
            return False
        result = self.controller.on_key_down(segment, key_name(event))
        return result.handled

    def mousePressEvent(self, event):
        """點擊空白處時聚焦時數段"""
        self.controller.on_container_click(on_segment=False)
        super().mousePressEvent(event)

    def _on_focus_changed(self, old, new):
        """追蹤焦點進出元件"""
        new_segment = self._segment_of(new)
        if new_segment is not None:
            self.controller.on_focus_in()
            self.controller.on_segment_focused(new_segment)
            return
        if self._segment_of(old) is not None:
            left_widget = new is None or not self.isAncestorOf(new)
            self.controller.on_focus_out(left_widget)
            if left_widget:
                self.touched.emit()

    def _on_value_changed(self, value: Optional[Time24Hours]):
        self.value_changed.emit(value)

    def _segment_of(self, widget) -> Optional[Segment]:
        for segment, edit in self._edits.items():
            if edit is widget:
                return segment
        return None

    def _refresh(self):
        """依控制器狀態更新輸入框"""
        parts = self.controller.parts
        self.hours_edit.setText(parts.hours)
        self.minutes_edit.setText(parts.minutes)
        self.period_edit.setText(parts.period or '')
        self.period_edit.setVisible(self.controller.twelve_hour_format)

        enabled = not self.controller.disabled
        for edit in self._edits.values():
            edit.setEnabled(enabled)

        # 標籤樣式
        if self.controller.error_state:
            color = '#e53935'
        else:
            color = '#888888' if self.controller.should_label_float else '#f5f5f5'
        size = 9 if self.controller.should_label_float else 11
        self.label.setStyleSheet(f"color: {color}; font-size: {size}pt;")
        self.setToolTip(self.controller.placeholder)
