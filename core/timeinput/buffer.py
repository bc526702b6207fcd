"""
數字輸入緩衝

作用：
- 累積時、分兩段連續輸入的數字
- 提供目前數值供格式策略判斷
"""

from typing import List

DIGITS = '0123456789'


class DigitBuffer:
    """單一數字段的輸入緩衝"""

    def __init__(self):
        # 已輸入的數字字元
        self._digits: List[str] = []

    def append(self, digit: str):
        """加入一個數字"""
        if len(digit) != 1 or digit not in DIGITS:
            raise ValueError(f"Not a digit: {digit!r}")
        self._digits.append(digit)

    def reset(self):
        """清空緩衝"""
        self._digits.clear()

    @property
    def digits(self) -> str:
        return ''.join(self._digits)

    @property
    def value(self) -> int:
        """緩衝內數字的數值（空緩衝為 0）"""
        if not self._digits:
            return 0
        return int(self.digits)

    def __len__(self) -> int:
        return len(self._digits)

    def __repr__(self) -> str:
        return f"DigitBuffer({self.digits!r})"
