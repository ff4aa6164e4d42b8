# application/ports/config_provider.py
from __future__ import annotations

from typing import Dict, Protocol


class ConfigProviderPort(Protocol):
    def get(self) -> Dict[str, str]:
        ...
