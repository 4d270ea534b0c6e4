# SPDX-License-Identifier: MIT
"""Checkups for environment validation.

Each checkup implements the Checkup protocol:
- VisualStudioWindowsCheckup: Visual Studio installation and version (Windows)
"""

from devdoctor.services.checkers.base import Checkup, Diagnosis, Reporter, Status, StatusLine
from devdoctor.services.checkers.common import (
    CommandRunner,
    DefaultCommandRunner,
    RecordingReporter,
)
from devdoctor.services.checkers.visualstudio import (
    InstallationLocator,
    VisualStudioInstance,
    VisualStudioWindowsCheckup,
    VsWhereLocator,
    WorkloadResolverSentinel,
    parse_instances,
)

__all__ = [
    # Contract and result types
    "Checkup",
    "Diagnosis",
    "Reporter",
    "Status",
    "StatusLine",
    # Process execution
    "CommandRunner",
    "DefaultCommandRunner",
    "RecordingReporter",
    # Checkups
    "InstallationLocator",
    "VisualStudioInstance",
    "VisualStudioWindowsCheckup",
    "VsWhereLocator",
    "WorkloadResolverSentinel",
    "parse_instances",
]
