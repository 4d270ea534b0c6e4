"""Semantic versions and version requirements.

Versions follow the NuGet flavour of SemVer 2.0 used by the Visual Studio
installer: one to four numeric parts (missing parts are zero), an optional
pre-release label list and optional build metadata, e.g.
``17.0.0-pre.7.0+31825.309``.

Precedence: numeric parts, then pre-release labels. A release ranks above
any of its pre-releases. Numeric labels compare numerically and rank below
alphanumeric labels, which compare case-insensitively. Build metadata is
ignored for both equality and ordering.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from .errors import ParseError

__all__ = ["SemVersion", "VersionRequirement"]


_IDENT = r"[0-9A-Za-z-]+"
_VERSION_RE = re.compile(
    r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    rf"(?:\+({_IDENT}(?:\.{_IDENT})*))?$",
    re.ASCII,
)

type _LabelKey = tuple[int, int, str]


def _label_key(label: str) -> _LabelKey:
    if label.isdigit():
        return (0, int(label), "")
    return (1, 0, label.lower())


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class SemVersion:
    major: int
    minor: int = 0
    patch: int = 0
    revision: int = 0
    release_labels: tuple[str, ...] = ()
    metadata: str | None = None

    @classmethod
    def parse(cls, text: str) -> SemVersion:
        """Parse a version string.

        Raises:
            ParseError: If text is not a valid semantic version.
        """
        version = cls.try_parse(text)
        if version is None:
            raise ParseError(text)
        return version

    @classmethod
    def try_parse(cls, text: str) -> SemVersion | None:
        """Parse a version string, returning None when it is not valid."""
        m = _VERSION_RE.match(text.strip())
        if m is None:
            return None
        major, minor, patch, revision, labels, metadata = m.groups()
        return cls(
            major=int(major),
            minor=int(minor or 0),
            patch=int(patch or 0),
            revision=int(revision or 0),
            release_labels=tuple(labels.split(".")) if labels else (),
            metadata=metadata,
        )

    def _sort_key(self) -> tuple[int, int, int, int, tuple[int, tuple[_LabelKey, ...]]]:
        if self.release_labels:
            labels = (0, tuple(_label_key(label) for label in self.release_labels))
        else:
            labels = (1, ())
        return (self.major, self.minor, self.patch, self.revision, labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVersion):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.revision:
            text += f".{self.revision}"
        if self.release_labels:
            text += "-" + ".".join(self.release_labels)
        return text


@dataclass(frozen=True, slots=True)
class VersionRequirement:
    """Minimum version, optionally pinned to an exact version.

    When ``exact`` is set it is the only accepted version and ``minimum`` is
    ignored for matching. Otherwise ``minimum`` is an inclusive lower bound.
    """

    minimum: SemVersion
    exact: SemVersion | None = None

    @classmethod
    def parse(cls, minimum: str, exact: str | None = None) -> VersionRequirement:
        """Build a requirement from configuration strings.

        Raises:
            ParseError: If either string is not a valid semantic version.
        """
        return cls(
            minimum=SemVersion.parse(minimum),
            exact=SemVersion.parse(exact) if exact is not None else None,
        )

    def satisfied_by(self, candidate: SemVersion) -> bool:
        if self.exact is not None:
            return candidate == self.exact
        return candidate >= self.minimum

    def display_version(self) -> SemVersion:
        """Version shown in titles: the exact pin if any, else the minimum."""
        return self.exact if self.exact is not None else self.minimum
