# application/ports/artifact_store.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from domain.generation import GeneratedTest


class ArtifactStorePort(ABC):
    @abstractmethod
    def persist(self, test: GeneratedTest) -> Path:
        ...
