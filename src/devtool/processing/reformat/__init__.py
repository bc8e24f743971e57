"""Comment-aware minifier and pretty-printer for JSON-like documents."""
from .printer import render
from .stripper import ScanState, strip


def minify(text: str) -> str:
    """Return *text* without comments or whitespace outside strings."""
    return strip(text)


def pretty(text: str) -> str:
    """Strip *text*, then render it with two-space indentation."""
    return render(strip(text))


class Reformatter:
    """Stateless adapter exposing `strip`/`render` as a TextReformatterProtocol."""

    def strip(self, text: str) -> str:
        return strip(text)

    def render(self, stripped: str) -> str:
        return render(stripped)


__all__ = ["Reformatter", "ScanState", "minify", "pretty", "render", "strip"]
