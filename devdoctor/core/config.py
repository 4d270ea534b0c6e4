"""Typed configuration loading and access.

devdoctor reads an optional ``doctor.toml``:

    [visualstudio]
    minimum = "16.9.0"
    exact = "17.0.0"   # optional pin

Version strings are validated at load time so a bad requirement is reported
before any checkup runs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ParseError
from .result import Err, Ok, Result
from .semver import VersionRequirement
from .structured import StrDict, as_str_dict, get_str

__all__ = [
    "Config",
    "ConfigError",
    "VisualStudioConfig",
    "load_config",
    "load_config_or_default",
    "CONFIG_FILENAME",
    "DEFAULT_VS_MINIMUM",
]

CONFIG_FILENAME = "doctor.toml"

DEFAULT_VS_MINIMUM = "16.9.0"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class VisualStudioConfig:
    """Version requirement for the Visual Studio checkup."""

    minimum: str = DEFAULT_VS_MINIMUM
    exact: str | None = None

    def requirement(self) -> VersionRequirement:
        """Build the requirement.

        Raises:
            ParseError: If either version string is invalid.
        """
        return VersionRequirement.parse(self.minimum, self.exact)


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    visualstudio: VisualStudioConfig = field(default_factory=VisualStudioConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Only absent keys fall back to defaults.

        Raises:
            ValueError: If [visualstudio] is not a table, or a version key is
                present but not a non-empty string.
        """
        if "visualstudio" not in data:
            return cls()
        vs = as_str_dict(data["visualstudio"])
        if vs is None:
            raise ValueError("[visualstudio] must be a table")
        return cls(
            visualstudio=VisualStudioConfig(
                minimum=_version_value(vs, "minimum") or DEFAULT_VS_MINIMUM,
                exact=_version_value(vs, "exact"),
            ),
        )


def _version_value(table: Mapping[str, object], key: str) -> str | None:
    if key not in table:
        return None
    value = get_str(table, key)
    if value is None:
        raise ValueError(f"[visualstudio] {key} must be a non-empty version string")
    return value


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and validate configuration from a TOML file.

    Args:
        path: Path to doctor.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure (including
        version strings that are not valid semantic versions).
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(result.value)
        config.visualstudio.requirement()
    except ParseError as e:
        return Err(ConfigError(f"[visualstudio] {e}", path=path))
    except ValueError as e:
        return Err(ConfigError(str(e), path=path))
    return Ok(config)


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config from file, or return the default config if it doesn't exist.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
