"""
表單欄位狀態

作用：
- 保存欄位值、停用與觸碰狀態
- 執行驗證器並提供錯誤列表
- 與值存取器（如時間輸入控制器）雙向連結
"""

import logging
from typing import Callable, Iterable, List, Optional

from .validators import ValidationError, Validators

logger = logging.getLogger(__name__)

Validator = Callable[[object], Optional[ValidationError]]


class FormControl:
    """單一表單欄位"""

    def __init__(self, value=None, validators: Iterable[Validator] = ()):
        # 欄位值
        self._value = value
        # 驗證器列表
        self._validators: List[Validator] = list(validators)
        # 停用狀態
        self.disabled = False
        # 是否已觸碰（失去焦點過）
        self.touched = False
        # 目前錯誤
        self.errors: List[ValidationError] = []
        # 綁定的值存取器
        self._accessor = None
        # 值變更監聽者
        self._value_listeners: List[Callable[[object], None]] = []
        self._run_validators()

    @property
    def value(self):
        return self._value

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def invalid(self) -> bool:
        return bool(self.errors)

    def set_value(self, value):
        """程式設定值並同步到存取器"""
        self._value = value
        if self._accessor is None:
            self._after_value_change()
            return
        # 存取器會經由 _on_view_change 回報轉換後的值
        self._accessor.write_value(value)

    def disable(self):
        self.disabled = True
        self.errors = []
        if self._accessor is not None:
            self._accessor.set_disabled_state(True)

    def enable(self):
        self.disabled = False
        self._run_validators()
        if self._accessor is not None:
            self._accessor.set_disabled_state(False)

    def mark_as_touched(self):
        self.touched = True

    def has_validator(self, validator: Validator) -> bool:
        return validator in self._validators

    def set_validators(self, validators: Iterable[Validator]):
        self._validators = list(validators)
        self._run_validators()

    def clear_validators(self):
        self.set_validators(())

    def add_value_listener(self, listener: Callable[[object], None]):
        self._value_listeners.append(listener)

    def bind(self, accessor):
        """連結值存取器：寫入初值並註冊回呼"""
        self._accessor = accessor
        accessor.register_on_change(self._on_view_change)
        accessor.register_on_touched(self.mark_as_touched)
        if hasattr(accessor, 'register_validation'):
            accessor.register_validation(
                required_query=lambda: self.has_validator(Validators.required),
                invalid_query=lambda: self.invalid,
            )
        accessor.write_value(self._value)
        accessor.set_disabled_state(self.disabled)
        logger.debug(f"FormControl bound to {accessor!r}")

    def _on_view_change(self, value):
        """存取器回報的值（使用者輸入）"""
        self._value = value
        self._after_value_change()

    def _after_value_change(self):
        self._run_validators()
        for listener in list(self._value_listeners):
            listener(self._value)

    def _run_validators(self):
        if self.disabled:
            self.errors = []
            return
        errors = []
        for validator in self._validators:
            error = validator(self._value)
            if error is not None:
                errors.append(error)
        self.errors = errors
