from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class EnvKeyReport:
    """Result of comparing an example env file against a real one."""
    missing: Tuple[str, ...] = ()
    extra: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing


@dataclass(frozen=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def bump(self, part: str) -> 'SemVer':
        if part == 'major':
            return SemVer(self.major + 1, 0, 0)
        if part == 'minor':
            return SemVer(self.major, self.minor + 1, 0)
        return SemVer(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}.{self.patch}'


@dataclass(frozen=True)
class VersionBump:
    path: str
    part: str
    old: SemVer
    new: SemVer

