# infrastructure/providers/http_provider_base.py
from __future__ import annotations

import json
from abc import abstractmethod
from typing import Any, Dict

import requests

from application.exceptions import ProviderError
from application.ports.config_provider import ConfigProviderPort
from application.ports.generation_provider import GenerationProviderPort
from application.ports.http_client import HttpClientPort, HttpResponse
from application.ports.logger import LoggerPort
from application.services.redactor import mask_dict
from application.settings import GenerationSettings
from domain.prompt import Prompt

MAX_TOKENS = 4000


def extract_error_message(resp: HttpResponse) -> str:
    """
    {"error": {"message": "..."}} があればそれを、なければ reason phrase を使う。
    """
    try:
        data = json.loads(resp.text) if resp.text else None
    except ValueError:
        data = None

    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])

    return resp.reason or f"HTTP {resp.status}"


class HttpGenerationProvider(GenerationProviderPort):
    """
    Shared request/response handling for JSON-over-HTTP backends.
    Subclasses describe the endpoint, the request body and how to
    pull the completion out of their envelope.
    """

    def __init__(self, http_client: HttpClientPort, config_provider: ConfigProviderPort, logger: LoggerPort):
        self._http = http_client
        self._config = config_provider
        self._logger = logger

    def generate(self, prompt: Prompt) -> str:
        settings = GenerationSettings.from_mapping(self._config.get())
        url = self._endpoint(settings)
        headers = self._headers(settings)
        body = self._body(prompt, settings)

        self._logger.debug(
            "ai.request",
            provider=self.name,
            url=url,
            model=body.get("model"),
            headers=mask_dict(headers),
        )

        try:
            resp = self._http.post_json(url, body, headers=headers)
        except requests.RequestException as e:
            self._logger.error("ai.request_failed", provider=self.name, url=url, error=str(e))
            raise ProviderError(f"Request to {self.name} backend failed: {e}") from e

        self._logger.info("ai.response", provider=self.name, status=resp.status)

        if not resp.ok:
            message = extract_error_message(resp)
            self._logger.error("ai.api_error", provider=self.name, status=resp.status, error=message)
            raise ProviderError(f"API error: {message}")

        try:
            data = json.loads(resp.text)
        except ValueError as e:
            raise ProviderError(f"Invalid JSON response from {self.name} backend: {e}") from e

        try:
            completion = self._completion(data)
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"Unexpected response shape from {self.name} backend: {e!r}") from e

        if not isinstance(completion, str):
            raise ProviderError(f"Unexpected completion type from {self.name} backend: {type(completion).__name__}")
        return completion

    @abstractmethod
    def _endpoint(self, settings: GenerationSettings) -> str:
        ...

    @abstractmethod
    def _headers(self, settings: GenerationSettings) -> Dict[str, str]:
        ...

    @abstractmethod
    def _body(self, prompt: Prompt, settings: GenerationSettings) -> Dict[str, Any]:
        ...

    @abstractmethod
    def _completion(self, data: Any) -> Any:
        ...
