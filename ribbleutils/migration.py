"""Version bookkeeping and clean-up of state left by earlier releases."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path

_PACKAGE_VERSION = "0.1.2"
_OLD_STATE_FILE_NAME = "data.ron"
_USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


class VersionError(ValueError):
    """A version string could not be parsed."""


def _parse_usize(text: str) -> int:
    if not text:
        raise VersionError(
            "SemVer Number Parse Error: cannot parse integer from empty string."
        )
    if not _DIGITS.fullmatch(text):
        raise VersionError("SemVer Number Parse Error: invalid digit found in string.")
    value = int(text)
    if value > _USIZE_MAX:
        raise VersionError(
            "SemVer Number Parse Error: number too large to fit in target type."
        )
    return value


@dataclass(frozen=True)
class RibbleVersion:
    """A semantic version with a minimum compatible version attached."""

    major: int = 0
    minor: int = 0
    patch: int = 0
    min_compatible: tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def from_cfg(cls) -> RibbleVersion:
        """The version of the running application."""
        return cls.from_semver_string(_PACKAGE_VERSION)

    @classmethod
    def from_semver_string(cls, semver: str) -> RibbleVersion:
        parts = semver.split(".")
        if len(parts) != 3:
            raise VersionError("Invalid SemVer string")
        major, minor, patch = (_parse_usize(part) for part in parts)
        return cls(major=major, minor=minor, patch=patch)

    def _triple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def with_min_compatible(self, min_compatible: RibbleVersion) -> RibbleVersion:
        return replace(self, min_compatible=min_compatible._triple())

    def compatible(self, other: RibbleVersion) -> bool:
        """Whether ``other`` is at least this version's minimum compatible one."""
        return other._triple() >= self.min_compatible

    def increment_major(self) -> RibbleVersion:
        return replace(self, major=self.major + 1, minor=0, patch=0)

    def increment_minor(self) -> RibbleVersion:
        return replace(self, minor=self.minor + 1, patch=0)

    def increment_patch(self) -> RibbleVersion:
        return replace(self, patch=self.patch + 1)

    def semver_string(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.semver_string()


def clear_old_ribble_state(data_directory: str | Path) -> None:
    """Remove the state file of earlier releases, if it is present."""
    (Path(data_directory) / _OLD_STATE_FILE_NAME).unlink(missing_ok=True)