# streamfilter/filters/__init__.py
from .base_filter import BaseFilter, FilterKind
from .exponential import ExponentialFilter
from .moving_average import MovingAverageFilter
from .rc_filters import LowPassFilter, HighPassFilter
from .multistream import MultiStreamFilter

__all__ = [
    'BaseFilter',
    'FilterKind',
    'ExponentialFilter',
    'MovingAverageFilter',
    'LowPassFilter',
    'HighPassFilter',
    'MultiStreamFilter',
]
