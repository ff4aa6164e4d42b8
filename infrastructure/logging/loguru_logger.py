# infrastructure/logging/loguru_logger.py
from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger as _loguru

from application.ports.logger import LoggerPort


class LoguruLogger(LoggerPort):
    """
    LoggerPort on top of loguru: the event name is the message,
    fields travel as loguru ``extra``.
    """

    def __init__(self, bound: Optional[Dict[str, Any]] = None, sink_logger: Any = None):
        self._bound: Dict[str, Any] = dict(bound or {})
        self._base = sink_logger if sink_logger is not None else _loguru

    @property
    def bound(self) -> Dict[str, Any]:
        return dict(self._bound)

    def bind(self, **fields: Any) -> "LoguruLogger":
        merged = dict(self._bound)
        merged.update(fields)
        return LoguruLogger(bound=merged, sink_logger=self._base)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("INFO", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit("WARNING", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("ERROR", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        payload = dict(self._bound)
        payload.update(fields)
        # opt(depth=2): 呼び出し元の位置を記録する
        self._base.bind(**payload).opt(depth=2).log(level, event)
