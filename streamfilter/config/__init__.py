from .filter_config import (
    FILTER_CONFIG,
    get_default_alpha,
    get_window_size,
    get_rc,
    get_dt,
    get_log_level,
    get_log_dir,
    get_demo_settings,
    validate_config,
    print_config_info,
)

__all__ = [
    'FILTER_CONFIG',
    'get_default_alpha',
    'get_window_size',
    'get_rc',
    'get_dt',
    'get_log_level',
    'get_log_dir',
    'get_demo_settings',
    'validate_config',
    'print_config_info',
]
