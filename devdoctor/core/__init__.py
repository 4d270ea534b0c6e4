"""Core domain types and logic."""

from .config import Config, ConfigError, VisualStudioConfig, load_config, load_config_or_default
from .errors import DevDoctorError, ErrorCode, MalformedOutput, ParseError
from .result import Err, Ok, Result
from .semver import SemVersion, VersionRequirement

__all__ = [
    # config
    "Config",
    "ConfigError",
    "VisualStudioConfig",
    "load_config",
    "load_config_or_default",
    # errors
    "DevDoctorError",
    "ErrorCode",
    "MalformedOutput",
    "ParseError",
    # result
    "Err",
    "Ok",
    "Result",
    # semver
    "SemVersion",
    "VersionRequirement",
]
