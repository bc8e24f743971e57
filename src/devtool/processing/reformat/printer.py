from __future__ import annotations
"""Indenting renderer for stripped JSON-like text."""

from devtool.constants import INDENT_UNIT


def render(stripped: str) -> str:
    """Re-emit *stripped* with a newline and indentation at each structural character.

    The input is expected to come from `strip`; comments or whitespace left
    outside strings are copied verbatim. Closing delimiters without a
    matching opener keep the indent level at zero.
    """
    out: list[str] = []
    level = 0
    in_string = False
    escaped = False

    def newline_indent() -> None:
        out.append('\n')
        out.append(INDENT_UNIT * level)

    for ch in stripped:
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
        elif ch in '{[':
            out.append(ch)
            level += 1
            newline_indent()
        elif ch in '}]':
            level = max(0, level - 1)
            newline_indent()
            out.append(ch)
        elif ch == ',':
            out.append(ch)
            newline_indent()
        elif ch == ':':
            out.append(': ')
        else:
            out.append(ch)

    return ''.join(out)
