from pathlib import Path
from typing import Optional, Set

from devtool.core.interfaces.logging import LoggerLikeProtocol
from devtool.core.models import EnvKeyReport
from devtool.logging.helpers import get_logger, trace_io

# Only these characters are trimmed; \v, \f and Unicode spaces stay part of the line.
TRIM_CHARS = ' \t\r\n'


class EnvKeyChecker:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None, export_prefix: str = 'export ') -> None:
        """Collect and compare the keys declared by dotenv-style files."""
        self._log = logger or get_logger('processing.env')
        self._export_prefix = export_prefix

    def parse_keys(self, text: str) -> Set[str]:
        keys: Set[str] = set()
        for line in text.split('\n'):
            line = line.strip(TRIM_CHARS)
            if not line or line.startswith('#'):
                continue
            if line.startswith(self._export_prefix):
                line = line[len(self._export_prefix):]
            if '=' not in line:
                continue
            key = line.split('=', 1)[0].strip(TRIM_CHARS)
            if key:
                keys.add(key)
        return keys

    def read_keys(self, path: Path) -> Set[str]:
        """Return the keys declared in *path*; an unreadable file declares none."""
        try:
            text = Path(path).read_text(encoding='utf-8', errors='replace')
        except OSError as exc:
            self._log.warning('⚠  cannot read env file %s: %s', path, exc)
            return set()
        keys = self.parse_keys(text)
        trace_io(self._log, 'env keys parsed', path=str(path), count=len(keys))
        return keys

    def compare(self, example: Path, actual: Path) -> EnvKeyReport:
        expected = self.read_keys(example)
        present = self.read_keys(actual)
        return EnvKeyReport(
            missing=tuple(sorted(expected - present)),
            extra=tuple(sorted(present - expected)),
        )

    @staticmethod
    def format_report(report: EnvKeyReport) -> str:
        if report.ok:
            return 'All keys present ✅'
        lines = [f'Missing keys ({len(report.missing)}):']
        lines.extend(f'- {key}' for key in report.missing)
        return '\n'.join(lines)
