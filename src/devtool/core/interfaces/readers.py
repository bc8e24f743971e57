from __future__ import annotations
"""Input reader protocol definitions."""

from typing import Protocol


class InputReaderProtocol(Protocol):
    """Acquire raw text from a path, where '-' or '' means standard input."""

    def read_text(self, path: str) -> str:
        ...
