from __future__ import annotations
"""Acquire raw text from a file path or from standard input.

Text is decoded as UTF-8 with surrogate escapes so that arbitrary bytes
survive a read → transform → write cycle unchanged.
"""
import sys
from pathlib import Path
from typing import BinaryIO, Optional

from devtool.constants import STDIN_PATH
from devtool.core.errors import InputError
from devtool.core.interfaces.logging import LoggerLikeProtocol
from devtool.logging.helpers import get_logger, trace_io

ENCODING = 'utf-8'
ERRORS = 'surrogateescape'


class InputReader:
    def __init__(self, *, stdin: Optional[BinaryIO] = None, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._stdin = stdin
        self._log = logger or get_logger('io.reader')

    @staticmethod
    def is_stdin(path: Optional[str]) -> bool:
        return not path or path == STDIN_PATH

    def _stdin_stream(self) -> BinaryIO:
        return self._stdin if self._stdin is not None else sys.stdin.buffer

    def read_text(self, path: Optional[str]) -> str:
        """Return the whole content of *path* ('-' or empty reads stdin).

        Raises:
            InputError: The file cannot be read, or stdin is empty.
        """
        if self.is_stdin(path):
            data = self._stdin_stream().read()
            trace_io(self._log, 'read stdin', size=len(data))
            if not data:
                raise InputError('no input')
            return data.decode(ENCODING, errors=ERRORS)

        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise InputError(f'cannot read {path}: {exc.strerror or exc}') from exc
        trace_io(self._log, 'read file', path=str(path), size=len(data))
        return data.decode(ENCODING, errors=ERRORS)
