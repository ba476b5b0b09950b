# streamfilter/filters/exponential.py
import numpy as np

from .base_filter import BaseFilter, FilterKind
from ..config.filter_config import get_default_alpha
from ..utils.logger import get_logger
from ..utils.error_handler import raise_filter_error

logger = get_logger(__name__)


class ExponentialFilter(BaseFilter):
    """
    指数フィルター（単極IIR）

    入力 x、出力 y に対して:
        y[k] = a*x[k] + (1-a)*y[k-1],  y[-1] = 0
    """

    kind = FilterKind.EXPONENTIAL

    def __init__(self, filter_constant=None, dtype=np.float64):
        """
        Args:
            filter_constant: フィルター定数 a (0, 1]
                             - 大きいほど新しい入力に敏感
                             - 小さいほど過去の出力を保持（滑らか）
            dtype: サンプルの数値型
        """
        if filter_constant is None:
            filter_constant = get_default_alpha()
        if not 0 < filter_constant <= 1:
            raise_filter_error(
                f"Filter constant must be in the range (0, 1], got {filter_constant}"
            )

        self.dtype = dtype
        self._filter_constant = dtype(filter_constant)
        # 要素型への変換後にも範囲を満たすこと（整数型では0に切り捨てられる）
        if not 0 < self._filter_constant <= 1:
            raise_filter_error(
                f"Filter constant {filter_constant} is {self._filter_constant} as "
                f"{np.dtype(dtype).name}, outside the range (0, 1]"
            )
        self._filtered_data = dtype(0)

        logger.log_filter_created(type(self).__name__, filter_constant=filter_constant)

    @property
    def filter_constant(self):
        return self._filter_constant

    @property
    def filtered_data(self):
        """直前の出力値"""
        return self._filtered_data

    @filtered_data.setter
    def filtered_data(self, value):
        self._filtered_data = value

    def filter(self, value):
        value = self.dtype(value)
        a = self._filter_constant
        self._filtered_data = a * value + (1 - a) * self._filtered_data
        return self._filtered_data

    def reset(self):
        self._filtered_data = self.dtype(0)
        logger.log_reset(type(self).__name__)

    def set_window_size(self, size):
        # 指数フィルターは直前の1点しか保持しないので窓サイズは無関係
        return
