"""
表單層公開介面
"""

from .control import FormControl
from .validators import ValidationError, Validators

__all__ = [
    'FormControl',
    'ValidationError',
    'Validators',
]
