# tests/application/test_scenario_pipeline.py
from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from application.executor.playwright_runner import PlaywrightTestRunner
from application.ports.artifact_store import ArtifactStorePort
from application.ports.generation_provider import GenerationProviderPort
from application.services.pipeline_deps import PipelineDeps
from application.services.scenario_pipeline import ScenarioPipeline
from domain.exceptions import ValidationError
from domain.generation import GeneratedTest
from domain.prompt import Prompt
from domain.scenario import Scenario, ScenarioOptions
from infrastructure.config.dict_config_provider import DictConfigProvider
from tests.fakes import FakeProcessRunner, RecordingLogger


class StubProvider(GenerationProviderPort):
    name = "stub"

    def __init__(self, completion: str):
        self.completion = completion
        self.prompts: List[Prompt] = []

    def generate(self, prompt: Prompt) -> str:
        self.prompts.append(prompt)
        return self.completion


class MemoryArtifactStore(ArtifactStorePort):
    def __init__(self):
        self.saved: List[GeneratedTest] = []

    def persist(self, test: GeneratedTest) -> Path:
        self.saved.append(test)
        return Path("generated-tests") / (test.filename or "test-1.spec.ts")


def _pipeline(completion: str, config=None, process=None, logger=None):
    logger = logger or RecordingLogger()
    provider = StubProvider(completion)
    store = MemoryArtifactStore()
    process = process or FakeProcessRunner(stdout="1 passed")
    pipeline = ScenarioPipeline(
        provider=provider,
        artifact_store=store,
        runner=PlaywrightTestRunner(process, logger),
        deps=PipelineDeps(config_provider=DictConfigProvider(config or {}), logger=logger),
    )
    return pipeline, provider, store, process


def test_generate_returns_parsed_test() -> None:
    # Arrange
    pipeline, provider, _, _ = _pipeline("```typescript\ntest('a', () => {});\n```\nOpens the page.")

    # Act
    generated = pipeline.generate(Scenario(description="Open the page"), filename="open.spec.ts")

    # Assert
    assert generated.code == "test('a', () => {});\n"
    assert generated.explanation == "Opens the page."
    assert generated.filename == "open.spec.ts"
    assert len(provider.prompts) == 1


def test_generate_uses_base_url_from_config() -> None:
    pipeline, provider, _, _ = _pipeline("no code", config={"BASE_URL": "http://localhost:3000"})

    pipeline.generate(Scenario(description="Open the page"))

    assert "Target URL: http://localhost:3000" in provider.prompts[0].user


def test_generate_rejects_invalid_scenario_before_calling_provider() -> None:
    pipeline, provider, _, _ = _pipeline("unused")

    with pytest.raises(ValidationError):
        pipeline.generate(Scenario(description="  "))

    assert provider.prompts == []


def test_generate_flags_empty_code_without_failing() -> None:
    logger = RecordingLogger()
    pipeline, _, _, _ = _pipeline("Sorry, I cannot help with that.", logger=logger)

    generated = pipeline.generate(Scenario(description="x"))

    assert generated.code == ""
    assert generated.explanation == "Sorry, I cannot help with that."
    assert "generation.empty_code" in logger.events("warning")


def test_generate_binds_run_id_to_log_events() -> None:
    logger = RecordingLogger()
    pipeline, _, _, _ = _pipeline("```typescript\nx\n```", logger=logger)

    pipeline.generate(Scenario(description="x"))

    start = next(r for r in logger.records if r["event"] == "generation.start")
    assert start["provider"] == "stub"
    assert len(start["run_id"]) == 12


def test_run_persists_then_executes_with_options() -> None:
    pipeline, _, store, process = _pipeline("unused")
    test = GeneratedTest(code="x\n", filename="a.spec.ts")

    result = pipeline.run(test, ScenarioOptions(browser="webkit"))

    assert store.saved == [test]
    assert process.calls == [
        ["npx", "playwright", "test", str(Path("generated-tests") / "a.spec.ts"), "--project=webkit"]
    ]
    assert result.success is True


def test_run_tolerates_empty_code() -> None:
    pipeline, _, store, _ = _pipeline("unused")

    result = pipeline.run(GeneratedTest(code=""))

    assert store.saved[0].code == ""
    assert result.success is True
