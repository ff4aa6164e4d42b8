# infrastructure/scenario/base_loader.py
"""
シナリオファイル (YAML / JSON) から Scenario ドメインオブジェクトを生成

    description: ログインしてダッシュボードが表示されることを確認する
    url: https://example.com/login
    options:
      browser: firefox
      headless: false
      screenshot: true
      timeout: 60000
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from domain.scenario import Scenario, ScenarioOptions

_OPTION_KEYS = ("browser", "headless", "screenshot", "timeout")


class ScenarioLoadError(Exception):
    pass


class ScenarioLoaderBase(ABC):
    def load_from_file(self, path: Union[str, Path]) -> Scenario:
        p = Path(path)
        if not p.exists():
            raise ScenarioLoadError(f"Scenario file not found: {path}")

        try:
            data = self._load_file(p)
        except ScenarioLoadError:
            raise
        except Exception as e:
            raise ScenarioLoadError(f"Failed to parse scenario file {path}: {e}") from e

        if data is None:
            raise ScenarioLoadError(f"Scenario file is empty: {path}")
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"Scenario file is invalid: {path}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> Scenario:
        description = data.get("description")
        if not isinstance(description, str) or not description.strip():
            raise ScenarioLoadError("Scenario description is required")

        url = data.get("url") or None
        if url is not None:
            url = str(url)

        return Scenario(
            description=description,
            url=url,
            options=self._load_options(data.get("options")),
        )

    def _load_options(self, data: Any) -> Optional[ScenarioOptions]:
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ScenarioLoadError("Scenario options must be a mapping")

        unknown = sorted(set(data) - set(_OPTION_KEYS))
        if unknown:
            raise ScenarioLoadError(f"Unknown scenario options: {', '.join(unknown)}")

        options = ScenarioOptions(
            browser=data.get("browser"),
            headless=data.get("headless"),
            screenshot=data.get("screenshot"),
            timeout=data.get("timeout"),
        )
        return None if options.is_empty() else options

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
