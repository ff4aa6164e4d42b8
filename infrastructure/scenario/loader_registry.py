# infrastructure/scenario/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

from infrastructure.scenario.base_loader import ScenarioLoaderBase, ScenarioLoadError
from infrastructure.scenario.json_loader import JsonScenarioLoader
from infrastructure.scenario.yaml_loader import YamlScenarioLoader

SCENARIO_EXTENSIONS = (".yaml", ".yml", ".json")


class ScenarioLoaderRegistry:
    """拡張子 (大文字小文字は無視) でシナリオローダーを選ぶ"""

    def __init__(self) -> None:
        yaml_loader = YamlScenarioLoader()
        self._loaders: Dict[str, ScenarioLoaderBase] = {
            ".yaml": yaml_loader,
            ".yml": yaml_loader,
            ".json": JsonScenarioLoader(),
        }

    def get_loader(self, path: Union[str, Path]) -> ScenarioLoaderBase:
        ext = Path(path).suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            supported = ", ".join(SCENARIO_EXTENSIONS)
            raise ScenarioLoadError(f"Unsupported scenario format: {ext or '(none)'} (expected one of {supported})")
        return loader
