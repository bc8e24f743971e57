from __future__ import annotations
"""Text reformatter protocol definitions."""

from typing import Protocol


class TextReformatterProtocol(Protocol):
    """Protocol for comment-aware reformatters.

    Methods:
        strip: Remove comments and whitespace outside quoted strings.
        render: Re-indent text previously produced by `strip`.
    """

    def strip(self, text: str) -> str:
        ...

    def render(self, stripped: str) -> str:
        ...
