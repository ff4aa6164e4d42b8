# application/services/pipeline_deps.py
from __future__ import annotations

from dataclasses import dataclass, replace

from application.ports.config_provider import ConfigProviderPort
from application.ports.logger import LoggerPort
from application.settings import GenerationSettings


@dataclass(frozen=True)
class PipelineDeps:
    config_provider: ConfigProviderPort
    logger: LoggerPort

    def settings(self) -> GenerationSettings:
        # 呼び出しごとに読み直す（キャッシュしない）
        return GenerationSettings.from_mapping(self.config_provider.get())

    def with_logger(self, logger: LoggerPort) -> "PipelineDeps":
        return replace(self, logger=logger)
