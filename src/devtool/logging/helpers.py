from __future__ import annotations

"""Logger naming, handler setup and I/O tracing for devtool.

Every devtool logger lives under the 'devtool' namespace and writes to
stderr through a single handler installed on the base logger; stdout is
reserved for command results.

Environment switches:
    - DEVTOOL_JSON_LOGS=1: one JSON object per record (see JsonLogFormatter).
    - DEVTOOL_TRACE_IO=1: emit `trace_io` records and lower the base level
      to DEBUG so they are not filtered out.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

from devtool.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER = "devtool"
TRACE_IO_ENV = "DEVTOOL_TRACE_IO"
JSON_LOGS_ENV = "DEVTOOL_JSON_LOGS"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def _package_version() -> str:
    from devtool import __version__
    return __version__


class JsonLogFormatter(logging.Formatter):
    """Render a record as `{"ts", "level", "module", "msg", "version"[, "ctx", "exc"]}`.

    `ctx` carries the dict passed as `extra={"context": ...}`; `exc` holds the
    formatted traceback when the record has exception info.
    """

    def __init__(self, *, version: Optional[str] = None) -> None:
        super().__init__()
        self._version = version or _package_version()

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "ts": stamp.strftime("%Y-%m-%dT%H:%M:%S.") + f"{stamp.microsecond // 1000:03d}Z",
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        context = getattr(record, "context", None)
        if isinstance(context, dict) and context:
            payload["ctx"] = context
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def is_trace_io_enabled() -> bool:
    return os.getenv(TRACE_IO_ENV) == "1"


def effective_level(level: int) -> int:
    """Return *level*, lowered to DEBUG while I/O tracing is enabled."""
    return min(level, logging.DEBUG) if is_trace_io_enabled() else level


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """(Re)install the single stderr handler on the 'devtool' logger.

    Args:
        json_logs: Use JsonLogFormatter instead of the plain `LEVEL: message` form.
        level: Requested level; see `effective_level`.
        stream: Target stream, stderr when omitted.
    """
    base = logging.getLogger(BASE_LOGGER)
    for old in list(base.handlers):
        base.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    base.setLevel(effective_level(level))
    base.propagate = False
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return `devtool.<name>`; names already under 'devtool' are kept as is."""
    if not name or name == BASE_LOGGER or name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name or BASE_LOGGER)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx: Any) -> None:
    """Log an I/O event at DEBUG when DEVTOOL_TRACE_IO=1, with *ctx* as record context."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | %s", message, " ".join(f"{k}={v!r}" for k, v in ctx.items()),
                     extra={"context": ctx})
    else:
        logger.debug("%s", message)
