from __future__ import annotations

"""Project-wide constants used across modules."""

# Indentation unit emitted by the pretty-printer for each nesting level.
INDENT_UNIT: str = '  '

# Path value that selects standard input.
STDIN_PATH: str = '-'

CASE_MODES: tuple[str, ...] = ('kebab', 'snake', 'camel', 'pascal')
VERSION_PARTS: tuple[str, ...] = ('major', 'minor', 'patch')
