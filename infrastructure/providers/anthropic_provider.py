# infrastructure/providers/anthropic_provider.py
from __future__ import annotations

from typing import Any, Dict

from application.exceptions import ConfigurationError
from application.settings import GenerationSettings
from domain.prompt import Prompt
from infrastructure.providers.http_provider_base import MAX_TOKENS, HttpGenerationProvider

MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class AnthropicGenerationProvider(HttpGenerationProvider):
    name = "anthropic"

    def _endpoint(self, settings: GenerationSettings) -> str:
        return MESSAGES_URL

    def _headers(self, settings: GenerationSettings) -> Dict[str, str]:
        if not settings.api_key:
            raise ConfigurationError("API_KEY is not set. Check your environment or .env file.")
        return {
            "x-api-key": settings.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }

    def _body(self, prompt: Prompt, settings: GenerationSettings) -> Dict[str, Any]:
        return {
            "model": settings.anthropic_model,
            "max_tokens": MAX_TOKENS,
            "system": prompt.system,
            "messages": [
                {"role": "user", "content": prompt.user},
            ],
        }

    def _completion(self, data: Any) -> Any:
        return data["content"][0]["text"]
