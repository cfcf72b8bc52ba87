from __future__ import annotations

"""Logger naming, handler setup and IO tracing for xbparams.

Every component logs under the 'xbparams' namespace (see `get_logger`). The
CLI installs one stderr handler on that base logger, in plain text or JSON
lines; `trace_io` adds response-file read traces when XBPARAMS_TRACE_IO=1.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

BASE_LOGGER = "xbparams"

# Marks the handler installed by setup_base_logger so it can be reconfigured.
_HANDLER_FLAG = "_xbparams_handler"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: ts, level, module, msg, version and optional ctx.

    `ctx` is taken from a dict passed as ``extra={"context": ...}``, which is
    how `trace_io` attaches the response file path.
    """

    def __init__(self) -> None:
        super().__init__()
        try:
            from xbparams import __version__ as version
        except ImportError:
            version = os.getenv("XBPARAMS_VERSION", "unknown")
        self._version = str(version)

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return JsonLogFormatter()
    return logging.Formatter("%(levelname)s: %(message)s")


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Install (or update) the stderr handler of the 'xbparams' logger.

    A second call does not add another handler: it resets the level and
    swaps the formatter of the handler installed by the first call, so a
    change between plain and JSON output takes effect. Handlers added by
    other code are left alone.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    base.propagate = False

    owned = [h for h in base.handlers if getattr(h, _HANDLER_FLAG, False)]
    if owned:
        for handler in owned:
            handler.setFormatter(_make_formatter(json_logs))
        return base

    handler = logging.StreamHandler(stream or sys.stderr)
    setattr(handler, _HANDLER_FLAG, True)
    handler.setFormatter(_make_formatter(json_logs))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under 'xbparams' ('response' -> 'xbparams.response')."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def resolve_level(raw: str | None, default: int = logging.WARNING) -> int:
    """Map a level name such as 'debug' or 'INFO' to its numeric value."""
    if not raw:
        return default
    value = logging.getLevelName(raw.strip().upper())
    return value if isinstance(value, int) else default


def is_trace_io_enabled() -> bool:
    return os.getenv("XBPARAMS_TRACE_IO") == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Log a debug IO trace with `ctx` attached, only when XBPARAMS_TRACE_IO=1."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
