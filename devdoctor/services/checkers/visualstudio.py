# SPDX-License-Identifier: MIT
"""Visual Studio (Windows) checkup.

Finds installed Visual Studio instances with vswhere, checks each one
against the configured version requirement, and makes sure compatible
instances have the MSBuild workload resolver sentinel in place.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from devdoctor.core.errors import MalformedOutput
from devdoctor.core.result import Err, Ok, Result
from devdoctor.core.semver import SemVersion, VersionRequirement
from devdoctor.core.structured import as_obj_list, as_str_dict, get_table
from devdoctor.platform.detection import Platform
from devdoctor.platform.paths import program_files_dirs

from .base import Diagnosis, Reporter, Status
from .common import CommandRunner, DefaultCommandRunner

__all__ = [
    "InstallationLocator",
    "VSWHERE_ARGS",
    "VSWHERE_RELATIVE_PATH",
    "SENTINEL_RELATIVE_PATH",
    "VisualStudioInstance",
    "VisualStudioWindowsCheckup",
    "VsWhereLocator",
    "WorkloadResolverSentinel",
    "parse_instances",
]

VSWHERE_RELATIVE_PATH = Path("Microsoft Visual Studio", "Installer", "vswhere.exe")

VSWHERE_ARGS: tuple[str, ...] = (
    "-all",
    "-requires",
    "Microsoft.Component.MSBuild",
    "-format",
    "json",
    "-prerelease",
)

SENTINEL_RELATIVE_PATH = Path(
    "MSBuild",
    "Current",
    "Bin",
    "SdkResolvers",
    "Microsoft.DotNet.MSBuildSdkResolver",
    "EnableWorkloadResolver.sentinel",
)

DOWNLOAD_URL = "https://visualstudio.microsoft.com/downloads/"


class InstallationLocator(Protocol):
    def locate(self) -> str | None:
        """Return raw discovery output, or None if the discovery tool is absent."""
        ...


@dataclass(frozen=True, slots=True)
class VisualStudioInstance:
    version: SemVersion
    path: Path


def _default_search_dirs() -> tuple[str, ...]:
    return program_files_dirs()


@dataclass(frozen=True, slots=True)
class VsWhereLocator:
    """Run vswhere.exe from the first Program Files directory that has it.

    Attributes:
        search_dirs: Base directories, in priority order
        runner: Command runner used to invoke vswhere
    """

    search_dirs: tuple[str, ...] = field(default_factory=_default_search_dirs)
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def find_executable(self) -> Path | None:
        for base in self.search_dirs:
            candidate = Path(base) / VSWHERE_RELATIVE_PATH
            if candidate.is_file():
                return candidate
        return None

    def locate(self) -> str | None:
        """Return vswhere's stdout, or None if vswhere is not installed.

        The exit code is not inspected: vswhere may exit non-zero and still
        print a usable document, and parse_instances() decides validity.
        """
        exe = self.find_executable()
        if exe is None:
            return None
        proc = self.runner.run([str(exe), *VSWHERE_ARGS])
        return proc.stdout or ""


def parse_instances(raw: str) -> list[VisualStudioInstance]:
    """Extract (version, path) pairs from vswhere JSON output.

    Entries without ``catalog.productSemanticVersion``, with a version that
    does not parse, or without ``installationPath`` are skipped. Order is
    preserved.

    Raises:
        MalformedOutput: If raw is not a JSON array.
    """
    try:
        document: object = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedOutput(f"vswhere output is not valid JSON: {e}", raw) from e

    entries = as_obj_list(document)
    if entries is None:
        raise MalformedOutput("vswhere output is not a JSON array", raw)

    instances: list[VisualStudioInstance] = []
    for item in entries:
        entry = as_str_dict(item)
        if entry is None:
            continue

        catalog = get_table(entry, "catalog")
        if catalog is None:
            continue
        raw_version = catalog.get("productSemanticVersion")
        if not isinstance(raw_version, str):
            continue
        version = SemVersion.try_parse(raw_version)
        if version is None:
            continue

        install_path = entry.get("installationPath")
        if not isinstance(install_path, str):
            continue

        instances.append(VisualStudioInstance(version=version, path=Path(install_path)))
    return instances


@dataclass(frozen=True, slots=True)
class WorkloadResolverSentinel:
    """Marker that enables the .NET workload resolver in Visual Studio's MSBuild."""

    relative_path: Path = SENTINEL_RELATIVE_PATH

    def path_for(self, install_path: Path) -> Path:
        return install_path / self.relative_path

    def apply_if_needed(self, install_path: Path) -> Result[bool, OSError]:
        """Create the sentinel if its directory exists and the file does not.

        Returns:
            Ok(True) if the file was created, Ok(False) if nothing needed to
            be done, Err(OSError) if the install tree could not be inspected
            or the file could not be created.
        """
        sentinel = self.path_for(install_path)
        try:
            if not sentinel.parent.is_dir() or sentinel.exists():
                return Ok(False)
            sentinel.touch()
        except OSError as e:
            return Err(e)
        return Ok(True)


@dataclass(frozen=True, slots=True)
class VisualStudioWindowsCheckup:
    """Check that a compatible Visual Studio is installed.

    Attributes:
        requirement: Minimum (or exact) Visual Studio version
        locator: Runs vswhere
        sentinel: Workload resolver fix-up applied to compatible instances
    """

    requirement: VersionRequirement
    locator: InstallationLocator = field(default_factory=VsWhereLocator)
    sentinel: WorkloadResolverSentinel = field(default_factory=WorkloadResolverSentinel)

    @classmethod
    def from_versions(
        cls,
        minimum_version: str,
        exact_version: str | None = None,
        *,
        locator: InstallationLocator | None = None,
    ) -> VisualStudioWindowsCheckup:
        """Build the checkup from version strings.

        Raises:
            ParseError: If either version string is invalid.
        """
        requirement = VersionRequirement.parse(minimum_version, exact_version)
        if locator is None:
            return cls(requirement=requirement)
        return cls(requirement=requirement, locator=locator)

    @property
    def id(self) -> str:
        return "visualstudio"

    @property
    def title(self) -> str:
        return f"Visual Studio {self.requirement.display_version()}"

    def is_platform_supported(self, platform: Platform) -> bool:
        return platform == Platform.WINDOWS

    def examine(self, report: Reporter) -> Diagnosis:
        raw = self.locator.locate()
        instances = parse_instances(raw) if raw is not None else []

        compatible = False
        for instance in instances:
            if self.requirement.satisfied_by(instance.version):
                compatible = True
                report(f"{instance.version} - {instance.path}", Status.OK)
                self._ensure_sentinel(instance.path, report)
            else:
                report(str(instance.version), None)

        if compatible:
            return Diagnosis.success(self)

        message = "no compatible installation found" if instances else "not installed"
        return Diagnosis.error(self, message, hint=self._install_hint())

    def _ensure_sentinel(self, install_path: Path, report: Reporter) -> None:
        result = self.sentinel.apply_if_needed(install_path)
        # A failed creation is ignored: it never affects the verdict.
        if isinstance(result, Ok) and result.value:
            report("Created EnableWorkloadResolver.sentinel for IDE support", Status.OK)

    def _install_hint(self) -> str:
        if self.requirement.exact is not None:
            return f"Install Visual Studio {self.requirement.exact}: {DOWNLOAD_URL}"
        return f"Install Visual Studio {self.requirement.minimum} or later: {DOWNLOAD_URL}"
