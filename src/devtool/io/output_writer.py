from __future__ import annotations

import sys
from typing import BinaryIO, Optional

from devtool.io.input_reader import ENCODING, ERRORS


class OutputWriter:
    """Write results to a binary stream, re-encoding surrogate escapes as raw bytes."""

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout.buffer
        stream.write(text.encode(ENCODING, errors=ERRORS))
        stream.flush()
