"""Public surface for devtool.core: protocols, result models and errors."""
from devtool.core.errors import DevToolError, InputError, UsageError, VersionBumpError
from devtool.core.interfaces import (
    InputReaderProtocol,
    LoggerLikeProtocol,
    TextReformatterProtocol,
)
from devtool.core.models import EnvKeyReport, SemVer, VersionBump

__all__ = [
    "DevToolError",
    "InputError",
    "UsageError",
    "VersionBumpError",
    "InputReaderProtocol",
    "LoggerLikeProtocol",
    "TextReformatterProtocol",
    "EnvKeyReport",
    "SemVer",
    "VersionBump",
]
