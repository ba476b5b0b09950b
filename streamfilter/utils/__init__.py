from .logger import FilterLogger, get_logger
from .error_handler import (
    ErrorType,
    FilterError,
    FilterConfigurationError,
    ChannelMismatchError,
    raise_filter_error,
    validate_positive_int,
)

__all__ = [
    'FilterLogger',
    'get_logger',
    'ErrorType',
    'FilterError',
    'FilterConfigurationError',
    'ChannelMismatchError',
    'raise_filter_error',
    'validate_positive_int',
]
