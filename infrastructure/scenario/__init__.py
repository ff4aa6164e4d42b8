# infrastructure/scenario/__init__.py
"""
Scenario files (YAML / JSON) -> domain.scenario.Scenario.
Pick a loader by extension with ScenarioLoaderRegistry.
"""
from infrastructure.scenario.base_loader import ScenarioLoadError, ScenarioLoaderBase
from infrastructure.scenario.json_loader import JsonScenarioLoader
from infrastructure.scenario.loader_registry import SCENARIO_EXTENSIONS, ScenarioLoaderRegistry
from infrastructure.scenario.yaml_loader import YamlScenarioLoader

__all__ = [
    "SCENARIO_EXTENSIONS",
    "ScenarioLoadError",
    "ScenarioLoaderBase",
    "ScenarioLoaderRegistry",
    "JsonScenarioLoader",
    "YamlScenarioLoader",
]
