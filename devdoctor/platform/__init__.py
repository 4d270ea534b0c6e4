"""Platform abstraction layer."""

from .detection import Platform, detect_platform
from .paths import clear_caches, program_files_dirs

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    # paths
    "clear_caches",
    "program_files_dirs",
]
