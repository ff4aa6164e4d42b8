# infrastructure/process/subprocess_runner.py
from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from application.exceptions import ProcessFailedError
from application.ports.process_runner import ProcessOutput, ProcessRunnerPort


class SubprocessRunner(ProcessRunnerPort):
    def __init__(self, cwd: Optional[Path] = None):
        self._cwd = cwd

    def run(self, args: List[str]) -> ProcessOutput:
        # 起動できない場合の OSError (FileNotFoundError 等) はそのまま伝播させる
        # 出力は UTF-8 として読み、不正なバイトは U+FFFD に置き換える
        proc = subprocess.run(
            args,
            cwd=self._cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        stdout = proc.stdout or ""
        stderr = proc.stderr or ""

        if proc.returncode != 0:
            message = f"Command failed: {shlex.join(args)}"
            if stderr:
                message += f"\n{stderr}"
            raise ProcessFailedError(
                message,
                returncode=proc.returncode,
                stdout=stdout,
                stderr=stderr,
            )

        return ProcessOutput(stdout=stdout, stderr=stderr)
