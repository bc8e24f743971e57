from __future__ import annotations

from devtool.cli import DevTool, main
from devtool.core.errors import DevToolError, InputError, UsageError, VersionBumpError
from devtool.logging.helpers import get_logger
from devtool.processing.reformat import Reformatter, minify, pretty, render, strip

__version__ = '1.0.0'

__all__ = [
    'DevTool',
    'DevToolError',
    'InputError',
    'Reformatter',
    'UsageError',
    'VersionBumpError',
    'get_logger',
    'main',
    'minify',
    'pretty',
    'render',
    'strip',
]
