# infrastructure/providers/local_provider.py
from __future__ import annotations

from typing import Any, Dict

from application.exceptions import ConfigurationError
from application.settings import GenerationSettings
from domain.prompt import Prompt
from infrastructure.providers.http_provider_base import MAX_TOKENS, HttpGenerationProvider

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


class LocalGenerationProvider(HttpGenerationProvider):
    """OpenAI-compatible chat-completions server (LM Studio, llama.cpp, vLLM, ...)."""

    name = "local"

    def _endpoint(self, settings: GenerationSettings) -> str:
        if not settings.local_base_url:
            raise ConfigurationError("LOCAL_LLM_BASE_URL is not set. Check your environment or .env file.")
        return settings.local_base_url.rstrip("/") + CHAT_COMPLETIONS_PATH

    def _headers(self, settings: GenerationSettings) -> Dict[str, str]:
        return {}

    def _body(self, prompt: Prompt, settings: GenerationSettings) -> Dict[str, Any]:
        return {
            "model": settings.local_model,
            "max_tokens": MAX_TOKENS,
            "messages": [
                {"role": "system", "content": prompt.system},
                {"role": "user", "content": prompt.user},
            ],
        }

    def _completion(self, data: Any) -> Any:
        return data["choices"][0]["message"]["content"]
