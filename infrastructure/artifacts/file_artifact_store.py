# infrastructure/artifacts/file_artifact_store.py
from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from application.exceptions import StorageError
from application.ports.artifact_store import ArtifactStorePort
from application.ports.logger import LoggerPort
from domain.generation import GeneratedTest

ARTIFACTS_DIRNAME = "generated-tests"
SPEC_EXTENSION = ".spec.ts"


def default_test_filename() -> str:
    return f"test-{int(time.time() * 1000)}{SPEC_EXTENSION}"


class FileArtifactStore(ArtifactStorePort):
    """
    生成コードを 1 テスト = 1 ファイルで保存する。
    同名ファイルは黙って上書きする（一意性はタイムスタンプ名のみ）。
    """

    def __init__(self, logger: LoggerPort, root: Optional[Path] = None):
        self._logger = logger
        self._root = root

    @property
    def root(self) -> Path:
        return self._root or Path.cwd() / ARTIFACTS_DIRNAME

    def persist(self, test: GeneratedTest) -> Path:
        root = self.root
        filename = test.filename or default_test_filename()
        path = root / filename
        try:
            root.mkdir(parents=True, exist_ok=True)
            # newline="" : 改行変換をしない（コードをバイト単位でそのまま書く）
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(test.code)
        except OSError as e:
            self._logger.error("artifact.save_failed", path=str(path), error=str(e))
            raise StorageError(f"Failed to save test file: {e}") from e

        self._logger.info("artifact.saved", path=str(path), code_len=len(test.code))
        return path
