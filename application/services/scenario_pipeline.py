# application/services/scenario_pipeline.py
from __future__ import annotations

import uuid
from typing import Optional

from application.executor.playwright_runner import PlaywrightTestRunner
from application.ports.artifact_store import ArtifactStorePort
from application.ports.generation_provider import GenerationProviderPort
from application.services.completion_parser import CompletionParser
from application.services.pipeline_deps import PipelineDeps
from application.services.prompt_compiler import PromptCompiler
from domain.generation import GeneratedTest
from domain.results import TestResult
from domain.scenario import Scenario, ScenarioOptions
from domain.scenario_validator import ScenarioValidator


class ScenarioPipeline:
    """
    Compile -> generate -> parse, then persist -> execute.
    Stages run strictly one after another; nothing is retried.
    """

    def __init__(
        self,
        provider: GenerationProviderPort,
        artifact_store: ArtifactStorePort,
        runner: PlaywrightTestRunner,
        deps: PipelineDeps,
        compiler: Optional[PromptCompiler] = None,
        parser: Optional[CompletionParser] = None,
        validator: Optional[ScenarioValidator] = None,
    ):
        self._provider = provider
        self._store = artifact_store
        self._runner = runner
        self._deps = deps
        self._compiler = compiler or PromptCompiler()
        self._parser = parser or CompletionParser()
        self._validator = validator or ScenarioValidator()

    def generate(self, scenario: Scenario, filename: str = "") -> GeneratedTest:
        self._validator.validate(scenario)

        deps = self._deps.with_logger(self._deps.logger.bind(run_id=uuid.uuid4().hex[:12]))
        settings = deps.settings()

        prompt = self._compiler.compile(scenario, default_base_url=settings.default_base_url)
        deps.logger.info(
            "generation.start",
            provider=self._provider.name,
            user_prompt_len=len(prompt.user),
        )

        completion = self._provider.generate(prompt)
        parsed = self._parser.parse(completion)

        if not parsed.has_code:
            deps.logger.warning("generation.empty_code", completion_len=len(completion))
        deps.logger.info(
            "generation.done",
            code_len=len(parsed.code),
            explanation_len=len(parsed.explanation),
        )

        return GeneratedTest(
            code=parsed.code,
            filename=filename,
            explanation=parsed.explanation,
        )

    def run(self, test: GeneratedTest, options: Optional[ScenarioOptions] = None) -> TestResult:
        file_path = self._store.persist(test)
        return self._runner.execute(file_path, options)
