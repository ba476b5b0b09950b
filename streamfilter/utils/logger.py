"""
ログ管理機能
"""

import logging
import os
from datetime import datetime
from typing import Dict, Optional

from ..config.filter_config import get_log_dir, get_log_level


class FilterLogger:
    def __init__(self, name: str = "streamfilter", log_dir: Optional[str] = None,
                 level: Optional[str] = None):
        """
        フィルター用ロガーの初期化

        Args:
            name: ロガー名
            log_dir: ログ保存ディレクトリ（Noneならコンソール出力のみ）
            level: ログレベル名（Noneなら設定値を使用）
        """
        self.name = name
        self.log_dir = log_dir
        self.log_file = None

        level_value = getattr(logging, (level or get_log_level()).upper(), logging.INFO)

        # ロガーの設定
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level_value)
        self.logger.propagate = False

        # 既存のハンドラーをクリア
        self.logger.handlers.clear()

        # フォーマッターの設定
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # コンソールハンドラーの設定
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level_value)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        # ファイルハンドラーの設定（ログディレクトリ指定時のみ）
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = os.path.join(log_dir, f"{name}_{timestamp}.log")

            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(level_value)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

            self.logger.debug(f"ログファイル: {self.log_file}")

    def error(self, message: str):
        """エラーログを出力"""
        self.logger.error(message)

    def debug(self, message: str):
        """デバッグログを出力"""
        self.logger.debug(message)

    def log_filter_created(self, filter_name: str, **params):
        """フィルター生成をログに記録"""
        details = ", ".join(f"{key}={value}" for key, value in params.items())
        self.debug(f"フィルター生成 - {filter_name}({details})")

    def log_reset(self, filter_name: str):
        """フィルターのリセットをログに記録"""
        self.debug(f"フィルターリセット - {filter_name}")

    def log_resize(self, filter_name: str, old_size: int, new_size: int):
        """窓サイズ変更をログに記録"""
        self.debug(f"窓サイズ変更 - {filter_name}: {old_size} -> {new_size}")

    def log_error(self, error_type: str, error_message: str):
        """エラーをログに記録"""
        self.error(f"エラー発生 - タイプ: {error_type}, メッセージ: {error_message}")

    def get_log_file_path(self) -> Optional[str]:
        """ログファイルパスを取得"""
        return self.log_file


_loggers: Dict[str, FilterLogger] = {}

def get_logger(name: str = "streamfilter") -> FilterLogger:
    """ロガーを取得（名前ごとに1インスタンス）"""
    if name not in _loggers:
        _loggers[name] = FilterLogger(name, log_dir=get_log_dir())
    return _loggers[name]
