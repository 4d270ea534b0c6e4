# SPDX-License-Identifier: MIT
"""Run checkups for the current platform and collect their diagnoses."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from devdoctor.core.config import Config
from devdoctor.core.errors import DevDoctorError
from devdoctor.output.console import ConsoleProtocol, Style
from devdoctor.platform.detection import Platform
from devdoctor.services.checkers import (
    Checkup,
    Diagnosis,
    Status,
    VisualStudioWindowsCheckup,
)


@dataclass(frozen=True, slots=True)
class DoctorReport:
    diagnoses: list[Diagnosis]

    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnoses)


def default_checkups(config: Config) -> list[Checkup]:
    """Checkups configured for this machine.

    Raises:
        ParseError: If a configured version requirement is invalid.
    """
    vs = config.visualstudio
    return [VisualStudioWindowsCheckup.from_versions(vs.minimum, vs.exact)]


def style_for_status(status: Status | None) -> Style:
    match status:
        case Status.OK:
            return Style.SUCCESS
        case Status.WARNING:
            return Style.WARNING
        case Status.ERROR:
            return Style.ERROR
        case _:
            return Style.DIM


class DoctorService:
    def __init__(
        self,
        *,
        checkups: Sequence[Checkup],
        platform: Platform,
        console: ConsoleProtocol,
    ) -> None:
        self._checkups = checkups
        self._platform = platform
        self._console = console

    def run(self) -> DoctorReport:
        return DoctorReport(diagnoses=[self._run_one(c) for c in self._checkups])

    def _run_one(self, checkup: Checkup) -> Diagnosis:
        if not checkup.is_platform_supported(self._platform):
            return Diagnosis.skipped(checkup, f"not applicable on {self._platform}")

        self._console.header(checkup.title)

        def report(message: str, status: Status | None) -> None:
            self._console.print(f"  {message}", style_for_status(status))

        try:
            return checkup.examine(report)
        except (DevDoctorError, OSError) as e:
            return Diagnosis.error(checkup, "checkup failed", cause=str(e))
