from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, TextIO

from xbparams.logging.helpers import get_logger, resolve_level, setup_base_logger


class DefaultLoggerFactory:
    """Configure the 'xbparams' logger on first use and hand out child loggers.

    `from_env` reads XBPARAMS_JSON_LOGS=1 (JSON records) and
    XBPARAMS_LOG_LEVEL (level name, WARNING by default).
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, *, stream: Optional[TextIO] = None) -> "DefaultLoggerFactory":
        env = os.environ if environ is None else environ
        return cls(
            json_logs=env.get("XBPARAMS_JSON_LOGS") == "1",
            level=resolve_level(env.get("XBPARAMS_LOG_LEVEL")),
            stream=stream,
        )

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
            self._configured = True
        return get_logger(name)
