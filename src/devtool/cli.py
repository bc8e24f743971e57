from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Dict, NoReturn, Optional, Sequence

from devtool.core.errors import DevToolError
from devtool.core.interfaces import InputReaderProtocol, LoggerLikeProtocol, TextReformatterProtocol
from devtool.io.input_reader import InputReader
from devtool.io.output_writer import OutputWriter
from devtool.logging.factory import DefaultLoggerFactory
from devtool.logging.helpers import get_logger
from devtool.parsing.parser import COMMANDS, HELP_TEXT, parse_command, split_global_flags
from devtool.processing.reformat import Reformatter
from devtool.processing.case_ops import CASE_CONVERTERS, slugify
from devtool.processing.encoding_ops import b64_decode, b64_encode, url_decode, url_encode
from devtool.processing.envctx import EnvKeyChecker
from devtool.processing.identifiers import uuid_v4
from devtool.processing.version_bump import VersionBumper


class DevTool:
    """Command dispatcher: parse argv, run one utility, return the text to print."""

    def __init__(
        self,
        *,
        reader: Optional[InputReaderProtocol] = None,
        reformatter: Optional[TextReformatterProtocol] = None,
        env_checker: Optional[EnvKeyChecker] = None,
        bumper: Optional[VersionBumper] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('cli')
        self._reader = reader or InputReader()
        self._reformatter = reformatter or Reformatter()
        self._env = env_checker or EnvKeyChecker()
        self._bumper = bumper or VersionBumper()
        self._handlers: Dict[str, Callable[[argparse.Namespace], str]] = {
            'uuid': lambda ns: uuid_v4(),
            'slugify': lambda ns: slugify(ns.text),
            'case': lambda ns: CASE_CONVERTERS[ns.mode](ns.text),
            'url': lambda ns: url_encode(ns.text) if ns.mode == 'encode' else url_decode(ns.text),
            'b64': lambda ns: b64_encode(ns.text) if ns.mode == 'encode' else b64_decode(ns.text),
            'env': self._env_check,
            'version': self._version_bump,
            'json': self._json,
        }

    def _env_check(self, ns: argparse.Namespace) -> str:
        report = self._env.compare(Path(ns.example), Path(ns.actual))
        return self._env.format_report(report)

    def _version_bump(self, ns: argparse.Namespace) -> str:
        result = self._bumper.bump_file(Path(ns.path), ns.part)
        self._log.debug('bumped %s: %s -> %s', result.path, result.old, result.new)
        return f'bumped {result.part} in {result.path}'

    def _json(self, ns: argparse.Namespace) -> str:
        src = self._reader.read_text(ns.path)
        stripped = self._reformatter.strip(src)
        if ns.mode == 'pretty':
            return self._reformatter.render(stripped)
        return stripped

    def run(self, argv: Sequence[str]) -> str:
        """Run one command and return its output, newline-terminated.

        Raises:
            DevToolError: Usage, input or version-bump failures.
        """
        _, args = split_global_flags(argv)
        if not args or args[0] not in COMMANDS:
            return HELP_TEXT

        ns = parse_command(args)
        return self._handlers[ns.command](ns) + '\n'


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `devtool` console script."""
    argv = list(sys.argv[1:] if argv is None else argv)
    json_logs, _ = split_global_flags(argv)
    logger = DefaultLoggerFactory.from_env(json_logs=json_logs).get_logger('cli')
    try:
        OutputWriter().write(DevTool(logger=logger).run(argv))
        raise SystemExit(0)
    except DevToolError as exc:
        logger.error('%s', exc)
        raise SystemExit(exc.exit_code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
