# tests/infrastructure/test_file_artifact_store.py
from __future__ import annotations

from pathlib import Path

import pytest

from application.exceptions import StorageError
from domain.generation import GeneratedTest
from infrastructure.artifacts import file_artifact_store
from infrastructure.artifacts.file_artifact_store import FileArtifactStore
from tests.fakes import RecordingLogger


def test_persist_writes_code_byte_for_byte(tmp_path: Path) -> None:
    # Arrange
    code = "import { test } from '@playwright/test';\r\n\ntest('日本語', async () => {});\n"
    store = FileArtifactStore(RecordingLogger(), root=tmp_path / "nested" / "dir")

    # Act
    path = store.persist(GeneratedTest(code=code, filename="login.spec.ts"))

    # Assert
    assert path == tmp_path / "nested" / "dir" / "login.spec.ts"
    assert path.read_bytes() == code.encode("utf-8")


def test_persist_defaults_to_timestamp_filename(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(file_artifact_store.time, "time", lambda: 123456.789)
    store = FileArtifactStore(RecordingLogger(), root=tmp_path)

    path = store.persist(GeneratedTest(code="x", filename=""))

    assert path.name == "test-123456789.spec.ts"


def test_persist_uses_working_directory_by_default(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    path = FileArtifactStore(RecordingLogger()).persist(GeneratedTest(code="", filename="empty.spec.ts"))

    assert path == tmp_path / "generated-tests" / "empty.spec.ts"
    assert path.read_text(encoding="utf-8") == ""


def test_persist_overwrites_same_filename(tmp_path: Path) -> None:
    store = FileArtifactStore(RecordingLogger(), root=tmp_path)

    store.persist(GeneratedTest(code="first", filename="same.spec.ts"))
    path = store.persist(GeneratedTest(code="second", filename="same.spec.ts"))

    assert path.read_text(encoding="utf-8") == "second"


def test_persist_wraps_os_errors(tmp_path: Path) -> None:
    # root がファイルなので mkdir が失敗する
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    logger = RecordingLogger()
    store = FileArtifactStore(logger, root=blocker)

    with pytest.raises(StorageError) as exc_info:
        store.persist(GeneratedTest(code="x", filename="a.spec.ts"))

    assert str(exc_info.value).startswith("Failed to save test file: ")
    assert "artifact.save_failed" in logger.events("error")
