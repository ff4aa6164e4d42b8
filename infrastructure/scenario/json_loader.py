# infrastructure/scenario/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infrastructure.scenario.base_loader import ScenarioLoaderBase


class JsonScenarioLoader(ScenarioLoaderBase):
    """
    JSON シナリオファイル:

        {
          "description": "Search for 'playwright' and open the first result",
          "url": "https://example.com",
          "options": {"browser": "webkit", "timeout": 45000}
        }
    """

    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
