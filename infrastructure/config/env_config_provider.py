# infrastructure/config/env_config_provider.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values


class EnvConfigProvider:
    """
    環境変数と .env ファイルから設定値を提供するプロバイダ

    get() のたびに読み直す（呼び出しをまたいでキャッシュしない）。
    同じキーがあればプロセス環境変数を優先する。
    """

    def __init__(self, env_path: Optional[Path] = None):
        self._env_path = env_path

    def get(self) -> Dict[str, str]:
        values: Dict[str, str] = {}

        env_path = self._env_path or Path.cwd() / ".env"
        if env_path.exists():
            for key, value in dotenv_values(env_path).items():
                if value is not None:
                    values[key] = value

        values.update(os.environ)
        return values
