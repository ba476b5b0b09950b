"""
ストリーミング信号フィルタリング

1サンプルずつ届くデータに対して、有界な内部状態だけを保持しながら
平滑化・フィルタリングした値を返すフィルター群。
"""

__version__ = "0.2.0"

from .filters import (
    BaseFilter,
    FilterKind,
    ExponentialFilter,
    MovingAverageFilter,
    LowPassFilter,
    HighPassFilter,
    MultiStreamFilter,
)
from .utils.error_handler import (
    ErrorType,
    FilterError,
    FilterConfigurationError,
    ChannelMismatchError,
)

__all__ = [
    'BaseFilter',
    'FilterKind',
    'ExponentialFilter',
    'MovingAverageFilter',
    'LowPassFilter',
    'HighPassFilter',
    'MultiStreamFilter',
    'ErrorType',
    'FilterError',
    'FilterConfigurationError',
    'ChannelMismatchError',
]
