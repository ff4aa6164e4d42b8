# application/executor/playwright_runner.py
from __future__ import annotations

import shlex
import time
from pathlib import Path
from typing import List, Optional, Union

from application.exceptions import ExecutionError, ProcessFailedError
from application.ports.logger import LoggerPort
from application.ports.process_runner import ProcessRunnerPort
from domain.results import TestResult
from domain.scenario import ScenarioOptions

BASE_COMMAND = ("npx", "playwright", "test")
FALLBACK_ERROR = "Test execution failed"


def build_command(file_path: Union[str, Path], options: Optional[ScenarioOptions] = None) -> List[str]:
    """
    npx playwright test <path> [--project=<browser>] [--headed] [--timeout=<ms>]

    headless が None / True のときはフラグを付けない（エンジン側のデフォルト = headless）。
    """
    args = list(BASE_COMMAND)
    args.append(str(file_path))

    if options is None:
        return args

    if options.browser:
        args.append(f"--project={options.browser}")
    if options.headless is False:
        args.append("--headed")
    if options.timeout is not None:
        args.append(f"--timeout={options.timeout}")
    return args


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)


class PlaywrightTestRunner:
    def __init__(self, process_runner: ProcessRunnerPort, logger: LoggerPort):
        self._process = process_runner
        self._logger = logger

    def execute(self, file_path: Union[str, Path], options: Optional[ScenarioOptions] = None) -> TestResult:
        try:
            args = build_command(file_path, options)
            command = shlex.join(args)
            logs: List[str] = [f"Command: {command}"]

            self._logger.info("test.run_start", command=command)
            t0 = time.perf_counter()
            try:
                output = self._process.run(args)
            except ProcessFailedError as e:
                # テスト自体は起動したが失敗した: 例外ではなく通常の結果として返す
                duration = _elapsed_ms(t0)
                if e.stdout:
                    logs.append("stdout:")
                    logs.append(e.stdout)
                if e.stderr:
                    logs.append("stderr:")
                    logs.append(e.stderr)
                self._logger.info(
                    "test.run_end",
                    success=False,
                    returncode=e.returncode,
                    elapsed_ms=duration,
                )
                return TestResult(
                    success=False,
                    duration=duration,
                    error=e.message or FALLBACK_ERROR,
                    logs=logs,
                )
            duration = _elapsed_ms(t0)

            logs.append("stdout:")
            logs.append(output.stdout)
            if output.stderr:
                logs.append("stderr:")
                logs.append(output.stderr)

            self._logger.info("test.run_end", success=True, elapsed_ms=duration)
            return TestResult(success=True, duration=duration, logs=logs)

        except Exception as e:
            self._logger.error("test.run_failed", file_path=str(file_path), error=str(e))
            raise ExecutionError(f"Test execution failed: {e}") from e
