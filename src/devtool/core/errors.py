from __future__ import annotations

"""Exception hierarchy surfaced by the command layer.

The reformatting core never raises; these types are used by the utilities
and the dispatcher, and `devtool.cli.main` turns them into exit statuses.
"""


class DevToolError(Exception):
    """Base error carrying the process exit status it maps to."""

    exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(DevToolError):
    """Missing arguments or an unknown sub-command mode."""


class InputError(DevToolError):
    """Input could not be acquired (unreadable file, empty stdin)."""


class VersionBumpError(DevToolError):
    """The target file has no bumpable "version" field."""

    exit_code = 2
