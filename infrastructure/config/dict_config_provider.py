# infrastructure/config/dict_config_provider.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class DictConfigProvider:
    values: Dict[str, str]

    def get(self) -> Dict[str, str]:
        return dict(self.values)
