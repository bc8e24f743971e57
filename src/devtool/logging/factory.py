from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from devtool.logging.helpers import JSON_LOGS_ENV, get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Configure the devtool base logger from CLI flags and environment.

    `configure()` installs the handler; `get_logger()` configures lazily and
    returns a namespaced child logger.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self._stream = stream
        self._base: Optional[logging.Logger] = None

    @classmethod
    def from_env(cls, *, json_logs: bool = False, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """JSON output when requested on the command line or via DEVTOOL_JSON_LOGS=1."""
        return cls(json_logs=json_logs or os.getenv(JSON_LOGS_ENV) == '1', stream=stream)

    def configure(self) -> logging.Logger:
        if self._base is None:
            self._base = setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
        return self._base

    def get_logger(self, name: str) -> logging.Logger:
        self.configure()
        return get_logger(name)
