import re
from pathlib import Path
from typing import Optional, Tuple

from devtool.constants import VERSION_PARTS
from devtool.core.errors import VersionBumpError
from devtool.core.interfaces.logging import LoggerLikeProtocol
from devtool.core.models import SemVer, VersionBump
from devtool.logging.helpers import get_logger, trace_io


class VersionBumper:
    """Bump the first "version": "X.Y.Z" field of a package manifest in place.

    The manifest is treated as text, so formatting, key order and comments
    elsewhere in the file are left untouched.
    """

    VERSION_RE = re.compile(r'"version"\s*:\s*"(\d+)\.(\d+)\.(\d+)"', re.ASCII)

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('processing.version')

    @staticmethod
    def normalize_part(part: str) -> str:
        """Return *part* when it is exactly major, minor or patch, else 'patch'."""
        return part if part in VERSION_PARTS else 'patch'

    def bump_text(self, content: str, part: str) -> Tuple[str, SemVer, SemVer]:
        """Return (new_content, old_version, new_version) for *content*.

        Raises:
            VersionBumpError: No version field was found.
        """
        m = self.VERSION_RE.search(content)
        if not m:
            raise VersionBumpError("failed to bump (couldn't find version)")
        old = SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        new = old.bump(self.normalize_part(part))
        replaced = f'{content[:m.start()]}"version": "{new}"{content[m.end():]}'
        return replaced, old, new

    def bump_file(self, path: Path, part: str) -> VersionBump:
        path = Path(path)
        part = self.normalize_part(part)
        try:
            content = path.read_bytes().decode('utf-8', errors='surrogateescape')
        except OSError as exc:
            self._log.debug('cannot read %s: %s', path, exc)
            raise VersionBumpError("failed to bump (couldn't find version)") from exc

        updated, old, new = self.bump_text(content, part)
        path.write_bytes(updated.encode('utf-8', errors='surrogateescape'))
        trace_io(self._log, 'version bumped', path=str(path), old=str(old), new=str(new))
        return VersionBump(path=str(path), part=part, old=old, new=new)
