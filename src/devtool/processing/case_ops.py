# src/devtool/processing/case_ops.py
"""
case_ops – ASCII-oriented slug and identifier-case converters.

Provides:
  • slugify(str)    – lowercase alphanumerics joined by single dashes
  • to_kebab(str)   – kebab-case
  • to_snake(str)   – snake_case
  • to_camel(str)   – camelCase
  • to_pascal(str)  – PascalCase

Only ASCII letters and digits count as alphanumeric; any other character,
including non-ASCII text, is a separator for slugify/kebab.
"""

from __future__ import annotations

from typing import Callable, Dict


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_upper(ch: str) -> bool:
    return 'A' <= ch <= 'Z'


def _is_lower(ch: str) -> bool:
    return 'a' <= ch <= 'z'


def _lower(ch: str) -> str:
    return ch.lower() if ch.isascii() else ch


def _collapse(text: str, sep: str) -> str:
    """Collapse runs of *sep* into one and trim one leading/trailing *sep*."""
    out: list[str] = []
    prev_sep = False
    for ch in text:
        if ch == sep:
            if not prev_sep:
                out.append(sep)
            prev_sep = True
        else:
            out.append(ch)
            prev_sep = False
    collapsed = ''.join(out)
    if collapsed.startswith(sep):
        collapsed = collapsed[1:]
    if collapsed.endswith(sep):
        collapsed = collapsed[:-1]
    return collapsed


def _is_word_boundary(text: str, i: int) -> bool:
    """Return True when an uppercase letter at *i* starts a new word."""
    if i == 0 or not _is_upper(text[i]):
        return False
    if _is_lower(text[i - 1]):
        return True
    return i + 1 < len(text) and _is_lower(text[i + 1])


def slugify(text: str) -> str:
    return _collapse(''.join(_lower(ch) if _is_alnum(ch) else '-' for ch in text), '-')


def _split_words(text: str, sep: str, aliases: str) -> str:
    out: list[str] = []
    for i, ch in enumerate(text):
        if _is_word_boundary(text, i):
            out.append(sep)
        out.append(sep if ch in aliases else _lower(ch))
    return ''.join(out)


def to_kebab(text: str) -> str:
    return slugify(_split_words(text, '-', '_ '))


def to_snake(text: str) -> str:
    return _collapse(_split_words(text, '_', '- '), '_')


def to_camel(text: str) -> str:
    out: list[str] = []
    upper_next = False
    for ch in to_kebab(text):
        if ch == '-':
            upper_next = True
            continue
        out.append(ch.upper() if upper_next else ch)
        upper_next = False
    return ''.join(out)


def to_pascal(text: str) -> str:
    camel = to_camel(text)
    return camel[:1].upper() + camel[1:]


CASE_CONVERTERS: Dict[str, Callable[[str], str]] = {
    'kebab': to_kebab,
    'snake': to_snake,
    'camel': to_camel,
    'pascal': to_pascal,
}
