# streamfilter/filters/rc_filters.py
"""
RC回路を離散化したローパス・ハイパスフィルター

どちらも指数フィルター（ExponentialFilter）を内部に保持し、
フィルター定数を時定数 RC とサンプリング間隔 dt から求める。
"""

from abc import abstractmethod

import numpy as np

from .base_filter import BaseFilter, FilterKind
from .exponential import ExponentialFilter
from ..config.filter_config import get_rc, get_dt
from ..utils.logger import get_logger
from ..utils.error_handler import raise_filter_error

logger = get_logger(__name__)


def _validate_rc(rc, dt):
    """時定数とサンプリング間隔を検証"""
    if not dt > 0:
        raise_filter_error(f"Sampling interval dt must be > 0, got {dt}")
    if not rc >= 0:
        raise_filter_error(f"RC time constant must be >= 0, got {rc}")


def _validate_components(resistance, capacitance):
    if not resistance >= 0:
        raise_filter_error(f"Resistance must be >= 0, got {resistance}")
    if not capacitance >= 0:
        raise_filter_error(f"Capacitance must be >= 0, got {capacitance}")


class _RCFilter(BaseFilter):
    """RCフィルター共通部（指数フィルターのコアを保持）"""

    def __init__(self, rc, dt, dtype):
        if rc is None:
            rc = get_rc()
        if dt is None:
            dt = get_dt()
        _validate_rc(rc, dt)

        self.rc = rc
        self.dt = dt
        self.dtype = dtype
        self._core = ExponentialFilter(self._compute_constant(rc, dt), dtype=dtype)

        logger.log_filter_created(type(self).__name__, rc=rc, dt=dt,
                                  filter_constant=self._core.filter_constant)

    @staticmethod
    @abstractmethod
    def _compute_constant(rc, dt):
        """RC と dt からフィルター定数を求める"""

    @classmethod
    def from_components(cls, resistance, capacitance, dt=None, dtype=np.float64):
        """
        抵抗値と容量値からフィルターを生成（RC = R * C）

        Args:
            resistance: 抵抗値 R
            capacitance: 容量値 C
            dt: サンプリング間隔
            dtype: サンプルの数値型
        """
        _validate_components(resistance, capacitance)
        return cls(resistance * capacitance, dt, dtype=dtype)

    @property
    def filter_constant(self):
        return self._core.filter_constant

    @property
    def filtered_data(self):
        return self._core.filtered_data

    def reset(self):
        self._core.reset()

    def set_window_size(self, size):
        # 単極フィルターなので窓は存在しない
        return


class LowPassFilter(_RCFilter):
    """
    ローパスフィルター

    基本の指数フィルターと同じ漸化式で、a = dt / (RC + dt)。
    RC = 0 のとき a = 1 となり入力をそのまま通す。
    """

    kind = FilterKind.LOW_PASS

    def __init__(self, rc=None, dt=None, dtype=np.float64):
        """
        Args:
            rc: 抵抗と容量の積 [s]
            dt: サンプリング間隔 [s]
            dtype: サンプルの数値型
        """
        super().__init__(rc, dt, dtype)

    @staticmethod
    def _compute_constant(rc, dt):
        return dt / (rc + dt)

    def filter(self, value):
        return self._core.filter(value)


class HighPassFilter(_RCFilter):
    """
    ハイパスフィルター

    a = RC / (RC + dt) として、入力の差分に対して
        y[k] = a*y[k-1] + a*(x[k] - x[k-1]),  x[-1] = 0
    を計算する。一定入力に対する出力は0に収束する。
    """

    kind = FilterKind.HIGH_PASS

    def __init__(self, rc=None, dt=None, dtype=np.float64):
        """
        Args:
            rc: 抵抗と容量の積 [s] (> 0)
            dt: サンプリング間隔 [s]
            dtype: サンプルの数値型
        """
        super().__init__(rc, dt, dtype)
        self._last_data = dtype(0)

    @staticmethod
    def _compute_constant(rc, dt):
        return rc / (rc + dt)

    def filter(self, value):
        value = self.dtype(value)
        a = self._core.filter_constant
        filtered = a * self._core.filtered_data + a * (value - self._last_data)
        self._core.filtered_data = filtered
        self._last_data = value
        return filtered

    def reset(self):
        super().reset()
        self._last_data = self.dtype(0)
