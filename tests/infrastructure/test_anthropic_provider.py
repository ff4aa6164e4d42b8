# tests/infrastructure/test_anthropic_provider.py
from __future__ import annotations

import pytest
import requests

from application.exceptions import ConfigurationError, ProviderError
from application.ports.http_client import HttpResponse
from domain.prompt import Prompt
from infrastructure.config.dict_config_provider import DictConfigProvider
from infrastructure.providers.anthropic_provider import MESSAGES_URL, AnthropicGenerationProvider
from tests.fakes import FakeHttpClient, RecordingLogger

PROMPT = Prompt(system="system text", user="user text")


def _provider(http: FakeHttpClient, config=None, logger=None) -> AnthropicGenerationProvider:
    values = {"API_KEY": "sk-test"} if config is None else config
    return AnthropicGenerationProvider(http, DictConfigProvider(values), logger or RecordingLogger())


def test_generate_sends_messages_request_and_returns_first_text() -> None:
    # Arrange
    http = FakeHttpClient.returning_json(200, {"content": [{"type": "text", "text": "completion"}]})

    # Act
    completion = _provider(http).generate(PROMPT)

    # Assert
    assert completion == "completion"
    request = http.requests[0]
    assert request["url"] == MESSAGES_URL
    assert request["headers"]["x-api-key"] == "sk-test"
    assert request["headers"]["anthropic-version"] == "2023-06-01"
    assert request["body"] == {
        "model": "claude-3-opus-20240229",
        "max_tokens": 4000,
        "system": "system text",
        "messages": [{"role": "user", "content": "user text"}],
    }


def test_generate_uses_configured_model() -> None:
    http = FakeHttpClient.returning_json(200, {"content": [{"text": "ok"}]})

    _provider(http, config={"API_KEY": "k", "ANTHROPIC_MODEL": "claude-test"}).generate(PROMPT)

    assert http.requests[0]["body"]["model"] == "claude-test"


@pytest.mark.parametrize("config", [{}, {"API_KEY": ""}, {"API_KEY": "   "}])
def test_generate_without_api_key_fails_before_sending(config) -> None:
    http = FakeHttpClient.returning_json(200, {"content": [{"text": "unused"}]})

    with pytest.raises(ConfigurationError) as exc_info:
        _provider(http, config=config).generate(PROMPT)

    assert "API_KEY" in str(exc_info.value)
    assert http.requests == []


def test_generate_reads_config_at_call_time() -> None:
    values = {}
    http = FakeHttpClient.returning_json(200, {"content": [{"text": "ok"}]})
    provider = AnthropicGenerationProvider(http, DictConfigProvider(values), RecordingLogger())

    with pytest.raises(ConfigurationError):
        provider.generate(PROMPT)

    values["API_KEY"] = "sk-later"

    assert provider.generate(PROMPT) == "ok"


def test_generate_embeds_upstream_error_message() -> None:
    http = FakeHttpClient.returning_json(400, {"error": {"message": "bad request"}}, reason="Bad Request")

    with pytest.raises(ProviderError) as exc_info:
        _provider(http).generate(PROMPT)

    assert "bad request" in str(exc_info.value)


def test_generate_falls_back_to_status_text() -> None:
    http = FakeHttpClient(
        response=HttpResponse(status=503, url=MESSAGES_URL, text="<html>down</html>", reason="Service Unavailable")
    )

    with pytest.raises(ProviderError) as exc_info:
        _provider(http).generate(PROMPT)

    assert str(exc_info.value) == "API error: Service Unavailable"


def test_generate_wraps_transport_failure() -> None:
    logger = RecordingLogger()
    http = FakeHttpClient(error=requests.ConnectionError("connection refused"))

    with pytest.raises(ProviderError) as exc_info:
        _provider(http, logger=logger).generate(PROMPT)

    assert "connection refused" in str(exc_info.value)
    assert "ai.request_failed" in logger.events("error")


def test_generate_rejects_unexpected_envelope() -> None:
    http = FakeHttpClient.returning_json(200, {"content": []})

    with pytest.raises(ProviderError) as exc_info:
        _provider(http).generate(PROMPT)

    assert "Unexpected response shape" in str(exc_info.value)


def test_generate_masks_api_key_in_logs() -> None:
    logger = RecordingLogger()
    http = FakeHttpClient.returning_json(200, {"content": [{"text": "ok"}]})

    _provider(http, logger=logger).generate(PROMPT)

    request_log = next(r for r in logger.records if r["event"] == "ai.request")
    assert request_log["headers"]["x-api-key"] == "********"
