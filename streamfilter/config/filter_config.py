"""
フィルター設定ファイル
ストリーミングフィルターの既定パラメータとログ設定を一元管理
"""

import os
from typing import Dict, Any, Optional

# 環境変数で上書き可能な設定
FILTER_CONFIG: Dict[str, Any] = {
    # 指数フィルターの既定フィルター定数 (0, 1]
    'default_alpha': float(os.getenv('STREAMFILTER_DEFAULT_ALPHA', 0.1)),

    # 移動平均フィルターの既定窓サイズ（サンプル数）
    'window_size': int(os.getenv('STREAMFILTER_WINDOW_SIZE', 10)),

    # RCフィルターの既定時定数 [s] とサンプリング間隔 [s]
    'rc': float(os.getenv('STREAMFILTER_RC', 0.1)),
    'dt': float(os.getenv('STREAMFILTER_DT', 0.01)),

    # ログ設定
    'log_level': os.getenv('STREAMFILTER_LOG_LEVEL', 'INFO').upper(),
    'log_dir': os.getenv('STREAMFILTER_LOG_DIR') or None,

    # デモ（main.py / visualize_filters.py）の設定
    'demo': {
        'samples': int(os.getenv('STREAMFILTER_DEMO_SAMPLES', 5000)),
        'noise_std': 0.1,
        'period_samples': 360.0,
        'highlowpass_frequency': 10.0,
        'basic_window_size': 50,
        'basic_alpha': 0.1,
        'multi_window_size': 20,
        'figure_size': (12.0, 7.8),
        'dpi': 100,
        'seed': 0,
    },
}

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


# 設定値の取得用ヘルパー関数
def get_default_alpha() -> float:
    """指数フィルターの既定フィルター定数を取得"""
    return FILTER_CONFIG['default_alpha']

def get_window_size() -> int:
    """移動平均フィルターの既定窓サイズを取得"""
    return FILTER_CONFIG['window_size']

def get_rc() -> float:
    """RCフィルターの既定時定数を取得"""
    return FILTER_CONFIG['rc']

def get_dt() -> float:
    """既定のサンプリング間隔を取得"""
    return FILTER_CONFIG['dt']

def get_log_level() -> str:
    """ログレベル名を取得"""
    return FILTER_CONFIG['log_level']

def get_log_dir() -> Optional[str]:
    """ログ保存ディレクトリを取得（未設定ならNone）"""
    return FILTER_CONFIG['log_dir']

def get_demo_settings() -> Dict[str, Any]:
    """デモ用の設定を取得"""
    return FILTER_CONFIG['demo']


# 設定の検証
def validate_config() -> bool:
    """設定値の妥当性を検証"""
    alpha = FILTER_CONFIG['default_alpha']
    if not 0 < alpha <= 1:
        print(f"⚠️ フィルター定数が無効: {alpha}")
        return False

    if FILTER_CONFIG['window_size'] < 1:
        print(f"⚠️ 窓サイズが無効: {FILTER_CONFIG['window_size']}")
        return False

    if FILTER_CONFIG['rc'] < 0:
        print(f"⚠️ RC時定数が無効: {FILTER_CONFIG['rc']}")
        return False

    if FILTER_CONFIG['dt'] <= 0:
        print(f"⚠️ サンプリング間隔が無効: {FILTER_CONFIG['dt']}")
        return False

    if FILTER_CONFIG['log_level'] not in _LOG_LEVELS:
        print(f"⚠️ ログレベルが無効: {FILTER_CONFIG['log_level']}")
        return False

    return True


# 設定情報の表示
def print_config_info():
    """設定情報を表示"""
    print("📊 フィルター設定情報:")
    print(f"   フィルター定数: {FILTER_CONFIG['default_alpha']}")
    print(f"   窓サイズ: {FILTER_CONFIG['window_size']}")
    print(f"   RC時定数: {FILTER_CONFIG['rc']}")
    print(f"   サンプリング間隔: {FILTER_CONFIG['dt']}")
    print(f"   ログレベル: {FILTER_CONFIG['log_level']}")
    print(f"   ログディレクトリ: {FILTER_CONFIG['log_dir'] or '(なし)'}")


if __name__ == "__main__":
    print_config_info()
    validate_config()
