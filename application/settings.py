# application/settings.py
"""
Generation settings resolved from a flat key/value mapping
(environment variables and .env).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

PROVIDER_ANTHROPIC = "anthropic"
PROVIDER_LOCAL = "local"
PROVIDERS = (PROVIDER_ANTHROPIC, PROVIDER_LOCAL)

DEFAULT_ANTHROPIC_MODEL = "claude-3-opus-20240229"
DEFAULT_LOCAL_MODEL = "local-model"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class GenerationSettings:
    provider: str = PROVIDER_ANTHROPIC
    api_key: Optional[str] = None
    anthropic_model: str = DEFAULT_ANTHROPIC_MODEL
    local_base_url: Optional[str] = None
    local_model: str = DEFAULT_LOCAL_MODEL
    default_base_url: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[str]]) -> "GenerationSettings":
        provider = (_clean(values.get("AI_PROVIDER")) or PROVIDER_ANTHROPIC).lower()
        return cls(
            provider=provider,
            api_key=_clean(values.get("API_KEY")),
            anthropic_model=_clean(values.get("ANTHROPIC_MODEL")) or DEFAULT_ANTHROPIC_MODEL,
            local_base_url=_clean(values.get("LOCAL_LLM_BASE_URL")),
            local_model=_clean(values.get("LOCAL_LLM_MODEL")) or DEFAULT_LOCAL_MODEL,
            default_base_url=_clean(values.get("BASE_URL")),
        )
