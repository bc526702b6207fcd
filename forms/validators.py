"""
表單驗證器

作用：
- 定義驗證錯誤資料
- 提供必填驗證
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ValidationError:
    """驗證錯誤資訊"""

    error_type: str  # 錯誤類型代碼
    message: str  # 錯誤訊息


class Validators:
    """常用驗證器"""

    @staticmethod
    def required(value) -> Optional[ValidationError]:
        """值為 None 或空字串時回傳錯誤"""
        if value is None or value == '':
            return ValidationError(error_type='REQUIRED', message='You must enter a value')
        return None
