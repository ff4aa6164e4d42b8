# application/exceptions.py
from __future__ import annotations

from typing import Optional


class ScenarioTestError(Exception):
    pass


class ConfigurationError(ScenarioTestError):
    pass


class ProviderError(ScenarioTestError):
    pass


class StorageError(ScenarioTestError):
    pass


class ExecutionError(ScenarioTestError):
    pass


class ProcessFailedError(ScenarioTestError):
    """
    サブプロセスは起動できたが非0で終了した。
    部分的な stdout / stderr を保持する。
    """

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        super().__init__(message)
        self.message = message
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
