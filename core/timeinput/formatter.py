"""
顯示字串格式化

作用：
- 將目前三段文字組成複製/匯出字串（未完成時也可輸出）
"""

from .model import TimeParts
from .strategy import HourModeStrategy
from .value_model import TimeValueModel


class DisplayFormatter:
    """複製用顯示字串"""

    def to_string(self, model: TimeValueModel) -> str:
        """依模型目前的策略輸出，例如 04:––、02:10 PM"""
        return self.format_parts(model.parts, model.strategy)

    def format_parts(self, parts: TimeParts, strategy: HourModeStrategy) -> str:
        return strategy.format_for_export(parts)
