import math
import numbers
from enum import Enum
from typing import NoReturn, Type

from .logger import get_logger


class ErrorType(Enum):
    """エラータイプの定義"""
    CONFIGURATION_ERROR = "Configuration Error"
    INVALID_RESIZE = "Invalid Resize"
    CHANNEL_MISMATCH = "Channel Mismatch"


class FilterError(Exception):
    """フィルター関連エラーの基底クラス"""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.CONFIGURATION_ERROR):
        super().__init__(message)
        self.error_type = error_type

    def __str__(self):
        return f"{self.error_type.value}: {self.args[0]}"


class FilterConfigurationError(FilterError, ValueError):
    """パラメータが不正でフィルターを構成できない"""


class ChannelMismatchError(FilterError, ValueError):
    """マルチストリームへの入力ベクトル幅がチャンネル数と一致しない"""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.CHANNEL_MISMATCH):
        super().__init__(message, error_type)


def raise_filter_error(message: str,
                       error_type: ErrorType = ErrorType.CONFIGURATION_ERROR,
                       exc_class: Type[FilterError] = FilterConfigurationError) -> NoReturn:
    """エラーを記録してから送出する"""
    get_logger().log_error(error_type.value, message)
    raise exc_class(message, error_type)


def validate_positive_int(value, name: str,
                          error_type: ErrorType = ErrorType.CONFIGURATION_ERROR) -> int:
    """1以上の有限な整数であることを確認して int で返す"""
    if (isinstance(value, bool) or not isinstance(value, numbers.Real)
            or not math.isfinite(value) or int(value) != value or value < 1):
        raise_filter_error(f"{name} must be an integer >= 1, got {value}", error_type)
    return int(value)
