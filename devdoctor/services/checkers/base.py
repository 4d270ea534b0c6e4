# SPDX-License-Identifier: MIT
"""Base types for checkups."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from devdoctor.platform.detection import Platform


class Status(Enum):
    """Status of a diagnosis or a reported line."""

    OK = auto()
    """Check passed."""

    WARNING = auto()
    """Check passed but something deserves attention."""

    ERROR = auto()
    """Check failed (required toolchain missing or incompatible)."""

    SKIPPED = auto()
    """Check was not run (not applicable to this platform)."""


type Reporter = Callable[[str, Status | None], None]
"""Sink for status lines. A None status marks an informational line."""


@dataclass(frozen=True, slots=True)
class StatusLine:
    """One line reported while a checkup runs."""

    message: str
    status: Status | None = None


@dataclass(frozen=True, slots=True)
class Diagnosis:
    """Verdict of one checkup run.

    Attributes:
        status: Aggregate status of the checkup
        checkup_id: Stable identifier of the checkup (e.g., "visualstudio")
        title: Human-readable title at the time of the run
        message: Optional short explanation
        hint: Optional fix command or URL
        cause: Text of the failure that aborted the checkup, if any
    """

    status: Status
    checkup_id: str
    title: str
    message: str = ""
    hint: str | None = None
    cause: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == Status.ERROR

    @classmethod
    def success(cls, checkup: Checkup, message: str = "") -> Diagnosis:
        return cls(status=Status.OK, checkup_id=checkup.id, title=checkup.title, message=message)

    @classmethod
    def error(
        cls,
        checkup: Checkup,
        message: str = "",
        *,
        hint: str | None = None,
        cause: str | None = None,
    ) -> Diagnosis:
        return cls(
            status=Status.ERROR,
            checkup_id=checkup.id,
            title=checkup.title,
            message=message,
            hint=hint,
            cause=cause,
        )

    @classmethod
    def skipped(cls, checkup: Checkup, message: str = "") -> Diagnosis:
        return cls(
            status=Status.SKIPPED, checkup_id=checkup.id, title=checkup.title, message=message
        )


class Checkup(Protocol):
    """Contract implemented by every checkup.

    The doctor only calls examine() on platforms for which
    is_platform_supported() returns True.
    """

    @property
    def id(self) -> str: ...

    @property
    def title(self) -> str: ...

    def is_platform_supported(self, platform: Platform) -> bool: ...

    def examine(self, report: Reporter) -> Diagnosis: ...
