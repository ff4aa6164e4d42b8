# infrastructure/providers/provider_factory.py
from __future__ import annotations

from typing import Dict, Type

from application.exceptions import ConfigurationError
from application.ports.config_provider import ConfigProviderPort
from application.ports.generation_provider import GenerationProviderPort
from application.ports.http_client import HttpClientPort
from application.ports.logger import LoggerPort
from application.settings import PROVIDER_ANTHROPIC, PROVIDER_LOCAL, PROVIDERS, GenerationSettings
from infrastructure.providers.anthropic_provider import AnthropicGenerationProvider
from infrastructure.providers.http_provider_base import HttpGenerationProvider
from infrastructure.providers.local_provider import LocalGenerationProvider

_PROVIDERS: Dict[str, Type[HttpGenerationProvider]] = {
    PROVIDER_ANTHROPIC: AnthropicGenerationProvider,
    PROVIDER_LOCAL: LocalGenerationProvider,
}


def build_generation_provider(
    config_provider: ConfigProviderPort,
    http_client: HttpClientPort,
    logger: LoggerPort,
) -> GenerationProviderPort:
    settings = GenerationSettings.from_mapping(config_provider.get())
    provider_cls = _PROVIDERS.get(settings.provider)
    if provider_cls is None:
        raise ConfigurationError(
            f"Unsupported AI_PROVIDER: {settings.provider} (expected one of {', '.join(PROVIDERS)})"
        )
    logger.info("ai.provider_selected", provider=settings.provider)
    return provider_cls(http_client, config_provider, logger)
