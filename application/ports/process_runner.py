# application/ports/process_runner.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ProcessOutput:
    stdout: str
    stderr: str


class ProcessRunnerPort(ABC):
    @abstractmethod
    def run(self, args: List[str]) -> ProcessOutput:
        """
        Run one subprocess to completion.

        Raises ProcessFailedError on a non-zero exit; OSError when the
        process cannot be started at all.
        """
        ...
