# streamfilter/filters/base_filter.py
import copy
from abc import ABC, abstractmethod
from enum import Enum


class FilterKind(Enum):
    """フィルターの種類"""
    EXPONENTIAL = "exponential"
    MOVING_AVERAGE = "moving_average"
    LOW_PASS = "low_pass"
    HIGH_PASS = "high_pass"


class BaseFilter(ABC):
    """フィルターの基底クラス"""

    kind: FilterKind

    @abstractmethod
    def filter(self, value):
        """
        入力値にフィルターを適用する

        Parameters:
        value: 新しく到着したサンプル

        Returns:
        フィルタリング後の値
        """
        pass

    @abstractmethod
    def reset(self):
        """フィルターの状態を生成直後に戻す（パラメータは保持）"""
        pass

    @abstractmethod
    def set_window_size(self, size):
        """
        窓サイズを設定する

        窓を持たないフィルターでは何もしない（例外も送出しない）。
        """
        pass

    def clone(self):
        """
        設定と現在の内部状態をそのまま持つ独立したフィルターを返す

        Returns:
        BaseFilter: 新しいフィルターインスタンス
        """
        return copy.deepcopy(self)

    def __call__(self, value):
        return self.filter(value)
