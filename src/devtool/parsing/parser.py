# devtool/parsing/parser.py
from __future__ import annotations

import argparse
from typing import Dict, List, NoReturn, Sequence, Tuple

from devtool.constants import CASE_MODES
from devtool.core.errors import UsageError

HELP_TEXT = """devtool — handy CLI helpers for web dev

Usage:
  devtool uuid
  devtool slugify "Some Title…"
  devtool case kebab|snake|camel|pascal "Input Text"
  devtool url encode "A&B czech šílené" | devtool url decode "%C5%A1"
  devtool b64 encode "text" | devtool b64 decode "dGV4dA=="
  devtool env check .env.example .env
  devtool version bump [major|minor|patch] path/to/package.json
  devtool json pretty [file|-]
  devtool json minify [file|-]

Options:
  --json-logs   emit log records as JSON (also DEVTOOL_JSON_LOGS=1)
"""

COMMANDS = ('uuid', 'slugify', 'case', 'url', 'b64', 'env', 'version', 'json')

JSON_LOGS_FLAG = '--json-logs'

# Free-text commands: number of leading tokens (command and mode) before TEXT.
# TEXT itself is taken verbatim, so values such as "--my-flag" are accepted.
TEXT_COMMANDS: Dict[str, int] = {'slugify': 1, 'case': 2, 'url': 2, 'b64': 2}

USAGES: Dict[str, str] = {
    'uuid': 'devtool uuid',
    'slugify': 'devtool slugify TEXT',
    'case': 'devtool case [kebab|snake|camel|pascal] TEXT',
    'url': 'devtool url [encode|decode] TEXT',
    'b64': 'devtool b64 [encode|decode] TEXT',
    'env': 'devtool env check EXAMPLE ACTUAL',
    'version': 'devtool version bump [major|minor|patch] PATH',
    'json': 'devtool json [pretty|minify] [FILE|-]',
}


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f'{message}\n{self.format_usage().rstrip()}')


def split_global_flags(argv: Sequence[str]) -> Tuple[bool, List[str]]:
    """Consume --json-logs tokens found before the command name.

    Returns:
        (json_logs, remaining_args). Later occurrences belong to the command.
    """
    args = list(argv)
    json_logs = False
    while args and args[0] == JSON_LOGS_FLAG:
        json_logs = True
        args.pop(0)
    return json_logs, args


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Help is rendered from HELP_TEXT by the dispatcher, so argparse's own
          -h handling is disabled on every sub-parser.
        - Free-text commands only declare their mode here; `parse_command`
          attaches TEXT without option parsing.
        - Parse failures surface as UsageError (exit status 1).
    """
    p = _UsageParser(prog='devtool', add_help=False)
    sub = p.add_subparsers(dest='command', metavar='COMMAND', parser_class=_UsageParser)
    sub.required = True

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        return sub.add_parser(name, add_help=False, help=help_text, usage=USAGES[name])

    add('uuid', 'print a random v4 UUID')
    add('slugify', 'lowercase dash-separated slug')
    add('case', 'convert identifier case').add_argument('mode', choices=CASE_MODES)
    add('url', 'form-style percent-encoding').add_argument('mode', choices=('encode', 'decode'))
    add('b64', 'base64 coding').add_argument('mode', choices=('encode', 'decode'))

    env = add('env', 'compare dotenv key sets')
    env.add_argument('action', choices=('check',))
    env.add_argument('example', metavar='EXAMPLE')
    env.add_argument('actual', metavar='ACTUAL')

    ver = add('version', 'bump a package.json version')
    ver.add_argument('action', choices=('bump',))
    # Any unknown part falls back to 'patch'.
    ver.add_argument('part', metavar='major|minor|patch')
    ver.add_argument('path', metavar='PATH')

    js = add('json', 'minify or pretty-print JSON-like text')
    js.add_argument('mode', choices=('pretty', 'minify'))
    js.add_argument('path', nargs='?', default='-', metavar='FILE|-')

    return p


def parse_command(args: Sequence[str]) -> argparse.Namespace:
    """Parse one command line whose first token is a known command.

    Trailing arguments beyond what the command uses are ignored.

    Raises:
        UsageError: Missing arguments or an unknown mode.
    """
    args = list(args)
    lead = TEXT_COMMANDS.get(args[0])
    if lead is None:
        ns, _extra = _build_parser().parse_known_args(args)
        return ns

    ns, _extra = _build_parser().parse_known_args(args[:lead])
    if len(args) <= lead:
        raise UsageError(f'missing TEXT\nusage: {USAGES[args[0]]}')
    ns.text = args[lead]
    return ns
