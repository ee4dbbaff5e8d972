"""Semantic version value type.

Versions are stored as ``"major.minor.patch"`` strings in the settings store.
Unity projects start out with ``bundleVersion: 0.1``, so a two-part version is
accepted on read and treated as patch 0. Everything is written back in the
three-part form.

Examples:
    >>> v = parse_version("1.2.3")
    >>> str(v.bump("minor"))
    '1.3.0'
    >>> parse_version("0.1") < parse_version("0.1.1")
    True
"""

import re
from typing import Literal, Self, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

Part: TypeAlias = Literal["major", "minor", "patch"]

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?$")


class VersionParseError(ValueError):
    """Raised when a stored version string is not ``X.Y.Z``."""


class Version(BaseModel):
    """An immutable ``major.minor.patch`` triple ordered lexicographically."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(default=0, ge=0)
    minor: int = Field(default=0, ge=0)
    patch: int = Field(default=0, ge=0)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def bump(self, part: Part) -> Self:
        """Return the next version for ``part``, zeroing the lower fields."""
        if part == "major":
            return self.model_copy(update={"major": self.major + 1, "minor": 0, "patch": 0})
        if part == "minor":
            return self.model_copy(update={"minor": self.minor + 1, "patch": 0})
        if part == "patch":
            return self.model_copy(update={"patch": self.patch + 1})
        raise ValueError(f"Unknown version part: {part!r}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()


def parse_version(text: str) -> Version:
    """Parse ``X.Y.Z`` (or ``X.Y``) into a :class:`Version`.

    Raises:
        VersionParseError: If the string is not a dotted non-negative version.
    """
    m = _VERSION_RE.match(text.strip())
    if not m:
        raise VersionParseError(f"Invalid version string: {text!r}")
    major, minor, patch = m.groups()
    return Version(major=int(major), minor=int(minor), patch=int(patch or 0))
