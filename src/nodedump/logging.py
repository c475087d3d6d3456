"""nodedump.logging

Structured logger used across the package.

Call sites pass an event message plus key/value fields:

    logger.warning("Skipping member without owner", member="Foo", type="Bar")

Fields are rendered as `key=value` pairs after the message so the output stays
grep-friendly on a plain stdlib handler.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

_ROOT = "nodedump"


def _render(msg: str, fields: dict[str, Any]) -> str:
    if not fields:
        return msg
    parts = [f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in fields.items()]
    return f"{msg} | " + " ".join(parts)


class StructuredLogger:
    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def isEnabledFor(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, msg: str, fields: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        exc_info = fields.pop("exc_info", None)
        self._logger.log(level, _render(msg, fields), exc_info=exc_info, stacklevel=3)

    def debug(self, msg: str, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, fields)

    def info(self, msg: str, **fields: Any) -> None:
        self._log(logging.INFO, msg, fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, fields)

    def error(self, msg: str, **fields: Any) -> None:
        self._log(logging.ERROR, msg, fields)


def get_logger(name: str) -> StructuredLogger:
    return StructuredLogger(logging.getLogger(name))


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stderr handler to the package logger (CLI use)."""
    raw = level if level is not None else os.getenv("NODEDUMP_LOG_LEVEL", "")
    name = str(raw or "").strip().upper() or "WARNING"
    lvl = logging.getLevelName(name)
    if not isinstance(lvl, int):
        lvl = logging.WARNING

    root = logging.getLogger(_ROOT)
    root.setLevel(lvl)
    if not any(getattr(h, "_nodedump", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        handler._nodedump = True  # type: ignore[attr-defined]
        root.addHandler(handler)
