# streamfilter/filters/moving_average.py
import math
import numbers

import numpy as np

from .base_filter import BaseFilter, FilterKind
from ..config.filter_config import get_window_size
from ..utils.logger import get_logger
from ..utils.error_handler import ErrorType, validate_positive_int

logger = get_logger(__name__)


def _validate_window_size(size, error_type=ErrorType.CONFIGURATION_ERROR):
    """窓サイズが1以上の整数であることを確認"""
    return validate_positive_int(size, "Window size", error_type)


class MovingAverageFilter(BaseFilter):
    """
    移動平均フィルター

    直近 window_size 個のサンプルを循環バッファに保持し、
    累積和から平均を計算する。
    バッファが埋まるまでは未到着分を0として平均する。
    """

    kind = FilterKind.MOVING_AVERAGE

    def __init__(self, window_size=None, dtype=np.float64):
        """
        Args:
            window_size: 平均を取るサンプル数 (>= 1)
            dtype: サンプルの数値型
        """
        if window_size is None:
            window_size = get_window_size()

        self.dtype = dtype
        self.window_size = _validate_window_size(window_size)
        self._data = np.zeros(self.window_size, dtype=dtype)
        self._filter_sum = dtype(0)
        self._filter_ind = 0

        logger.log_filter_created(type(self).__name__, window_size=self.window_size)

    @classmethod
    def from_frequency(cls, call_frequency, filter_period, dtype=np.float64):
        """
        サンプリング周波数と平均化周期から移動平均フィルターを生成

        Args:
            call_frequency: 新しいデータが届く周波数 [Hz]
            filter_period: 平均を取る期間 [s]
            dtype: サンプルの数値型

        Returns:
            MovingAverageFilter: window_size = round(filter_period * call_frequency)
        """
        window_size = filter_period * call_frequency
        # 無限大・NaN は丸めずにそのまま検証でエラーにする
        if isinstance(window_size, numbers.Real) and math.isfinite(window_size):
            window_size = int(round(window_size))
        return cls(window_size, dtype=dtype)

    def filter(self, value):
        """
        新しいサンプルで最古のサンプルを置き換え、平均を返す

        Parameters:
        value: 新しく到着したサンプル

        Returns:
        窓内サンプルの平均値
        """
        value = self.dtype(value)
        ind = self._circular_ind(self._filter_ind)
        self._filter_ind += 1

        self._filter_sum = self._filter_sum - self._data[ind] + value
        self._data[ind] = value

        return self._filter_sum / self.window_size

    def reset(self):
        """バッファ・累積和・書き込み位置をすべて0に戻す"""
        self._data.fill(0)
        self._filter_sum = self.dtype(0)
        self._filter_ind = 0
        logger.log_reset(type(self).__name__)

    def set_window_size(self, size):
        """窓サイズを変更する（履歴は破棄してリセット）"""
        size = _validate_window_size(size, ErrorType.INVALID_RESIZE)
        logger.log_resize(type(self).__name__, self.window_size, size)

        self.window_size = size
        self._data = np.zeros(self.window_size, dtype=self.dtype)
        self.reset()

    @property
    def buffer(self):
        """循環バッファの読み取り専用ビュー"""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def running_sum(self):
        return self._filter_sum

    def _circular_ind(self, ind):
        return ind % self.window_size
