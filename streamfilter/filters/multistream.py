# streamfilter/filters/multistream.py
"""
マルチストリームフィルター

ベクトル形式のデータストリームをチャンネルごとに独立してフィルタリングする。
例: [x, y, z] が届く場合に x, y, z それぞれの系列を別々にフィルタリング。
"""

import copy
from typing import Sequence, Tuple

from .base_filter import BaseFilter
from ..utils.logger import get_logger
from ..utils.error_handler import (
    ChannelMismatchError,
    ErrorType,
    raise_filter_error,
    validate_positive_int,
)

logger = get_logger(__name__)


class MultiStreamFilter:
    """
    1つのプロトタイプフィルターを複製して各チャンネルに割り当てるフィルター

    BaseFilter を満たすフィルターであれば種類を問わず利用できる。
    生成後は各チャンネルのフィルターが完全に独立して状態を持つ。
    """

    def __init__(self, prototype: BaseFilter, channels: int):
        """
        Args:
            prototype: 各チャンネルに複製するフィルター
            channels: チャンネル数 N (>= 1)
        """
        if not isinstance(prototype, BaseFilter):
            raise_filter_error(
                f"Prototype must be a BaseFilter, got {type(prototype).__name__}"
            )
        channels = validate_positive_int(channels, "Channel count")

        self._filters: Tuple[BaseFilter, ...] = tuple(
            prototype.clone() for _ in range(channels)
        )

        logger.log_filter_created(type(self).__name__, prototype=type(prototype).__name__,
                                  channels=len(self._filters))

    @property
    def channels(self) -> int:
        return len(self._filters)

    @property
    def filters(self) -> Tuple[BaseFilter, ...]:
        """各チャンネルのフィルター（チャンネル順）"""
        return self._filters

    def __len__(self):
        return len(self._filters)

    def filter(self, values: Sequence) -> tuple:
        """
        各チャンネルのフィルターを対応する成分に適用

        Args:
            values: 長さ N の入力ベクトル

        Returns:
            tuple: フィルタリング後の N 個の値（チャンネル順）
        """
        if len(values) != len(self._filters):
            raise_filter_error(
                f"Expected {len(self._filters)} values, got {len(values)}",
                ErrorType.CHANNEL_MISMATCH,
                ChannelMismatchError,
            )

        return tuple(f.filter(v) for f, v in zip(self._filters, values))

    def __call__(self, values: Sequence) -> tuple:
        return self.filter(values)

    def reset(self):
        """全チャンネルのフィルターをリセット"""
        for f in self._filters:
            f.reset()

    def set_window_size(self, size):
        """全チャンネルのフィルターに同じ窓サイズを設定"""
        for f in self._filters:
            f.set_window_size(size)

    def clone(self):
        return copy.deepcopy(self)
