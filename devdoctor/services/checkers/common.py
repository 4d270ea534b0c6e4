# SPDX-License-Identifier: MIT
"""Common utilities for checkups.

- CommandRunner protocol for subprocess abstraction
- RecordingReporter for collecting status lines
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol

from .base import Reporter, Status, StatusLine


class CommandRunner(Protocol):
    """Protocol for running external commands.

    This abstraction allows mocking subprocess calls in tests.
    """

    def run(
        self, args: list[str], *, capture: bool = True, cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        """Run a command to completion and return the result.

        A non-zero exit code is not an error here; callers decide what to
        do with the captured output.
        """
        ...


class DefaultCommandRunner:
    """Default command runner using subprocess.run."""

    def run(
        self, args: list[str], *, capture: bool = True, cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        """Run a command using subprocess."""
        return subprocess.run(
            args,
            capture_output=capture,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            cwd=cwd,
        )


class RecordingReporter:
    """Reporter that keeps every status line in order."""

    def __init__(self) -> None:
        self.lines: list[StatusLine] = []

    def __call__(self, message: str, status: Status | None) -> None:
        self.lines.append(StatusLine(message, status))


__all__ = [
    "CommandRunner",
    "DefaultCommandRunner",
    "RecordingReporter",
    "Reporter",
]
