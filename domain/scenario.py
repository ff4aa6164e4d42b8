# domain/scenario.py
"""
Scenario domain model
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BROWSERS = ("chromium", "firefox", "webkit")

DEFAULT_HEADLESS = True
DEFAULT_SCREENSHOT = False
DEFAULT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class ScenarioOptions:
    """
    None はすべて「未指定」を意味する（生成側・実行エンジン側のデフォルトに任せる）。
    False / 0 と区別すること。
    """
    browser: Optional[str] = None
    headless: Optional[bool] = None
    screenshot: Optional[bool] = None
    timeout: Optional[int] = None

    def is_empty(self) -> bool:
        return (
            self.browser is None
            and self.headless is None
            and self.screenshot is None
            and self.timeout is None
        )


@dataclass(frozen=True)
class Scenario:
    """
    Natural-language test scenario (aggregate root)
    """
    description: str
    url: Optional[str] = None
    options: Optional[ScenarioOptions] = None
