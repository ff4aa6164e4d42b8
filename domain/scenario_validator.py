# domain/scenario_validator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from domain.exceptions import ValidationError
from domain.scenario import BROWSERS, Scenario, ScenarioOptions


@dataclass(frozen=True)
class ScenarioValidator:
    def validate(self, scenario: Scenario) -> None:
        problems: List[str] = []
        if not isinstance(scenario.description, str) or not scenario.description.strip():
            problems.append("description must not be empty")
        if scenario.url is not None and not isinstance(scenario.url, str):
            problems.append("url must be a string")
        if scenario.options is not None:
            problems.extend(self._option_problems(scenario.options))
        if problems:
            raise ValidationError(f"Invalid scenario: {'; '.join(problems)}")

    def _option_problems(self, options: ScenarioOptions) -> List[str]:
        problems: List[str] = []
        if options.browser is not None and options.browser not in BROWSERS:
            problems.append(f"browser must be one of {', '.join(BROWSERS)}: {options.browser}")
        for name in ("headless", "screenshot"):
            value: Optional[bool] = getattr(options, name)
            if value is not None and not isinstance(value, bool):
                problems.append(f"{name} must be a boolean")
        timeout = options.timeout
        # bool は int のサブクラスなので明示的に除外
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0):
            problems.append(f"timeout must be a positive integer (ms): {timeout}")
        return problems
