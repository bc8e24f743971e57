from __future__ import annotations
"""Comment and whitespace stripper for JSON-like text.

Removes line ('// ...') and block ('/* ... */') comments together with every
whitespace character found outside double-quoted strings. String literals
are copied byte-for-byte, honoring backslash escapes.

Notes:
    - A line comment keeps its terminating newline, so minified output still
      carries one newline per commented line.
    - Unterminated strings and block comments run to the end of the input.
"""

import enum

# ASCII whitespace as understood by C's isspace().
WHITESPACE = frozenset(' \t\n\r\v\f')


class ScanState(enum.Enum):
    NORMAL = 'normal'
    STRING = 'string'
    LINE_COMMENT = 'line_comment'
    BLOCK_COMMENT = 'block_comment'


def strip(text: str) -> str:
    """Strip comments and insignificant whitespace from *text*.

    Args:
        text: Raw document, possibly with // and /* */ comments.

    Returns:
        The compacted text. Never raises.
    """
    out: list[str] = []
    state = ScanState.NORMAL
    escaped = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ''

        if state is ScanState.LINE_COMMENT:
            if ch == '\n':
                out.append(ch)
                state = ScanState.NORMAL
            i += 1
            continue

        if state is ScanState.BLOCK_COMMENT:
            if ch == '*' and nxt == '/':
                state = ScanState.NORMAL
                i += 2
            else:
                i += 1
            continue

        if state is ScanState.STRING:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                state = ScanState.NORMAL
            i += 1
            continue

        if ch == '/' and nxt == '/':
            state = ScanState.LINE_COMMENT
            i += 2
            continue
        if ch == '/' and nxt == '*':
            state = ScanState.BLOCK_COMMENT
            i += 2
            continue
        if ch in WHITESPACE:
            i += 1
            continue
        if ch == '"':
            state = ScanState.STRING
            escaped = False
        out.append(ch)
        i += 1

    return ''.join(out)
