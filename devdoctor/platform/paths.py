"""Platform-aware install locations.

Windows keeps 32-bit and 64-bit applications in separate Program Files
trees. Tools that ship a 32-bit installer (such as the Visual Studio
Installer) are looked up in the x86 tree first.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import PureWindowsPath

__all__ = [
    "clear_caches",
    "program_files_dirs",
]

_DEFAULT_PROGRAM_FILES_X86 = r"C:\Program Files (x86)"
_DEFAULT_PROGRAM_FILES = r"C:\Program Files"


@lru_cache(maxsize=1)
def program_files_dirs() -> tuple[str, ...]:
    """Program Files directories in lookup order, without duplicates.

    ``%ProgramFiles(x86)%`` comes first, then ``%ProgramFiles%``. Missing
    variables fall back to the stock ``C:\\`` locations. On 32-bit Windows
    both variables point to the same directory, which is returned once.
    """
    candidates = (
        os.environ.get("ProgramFiles(x86)") or _DEFAULT_PROGRAM_FILES_X86,
        os.environ.get("ProgramFiles") or _DEFAULT_PROGRAM_FILES,
    )
    seen: set[str] = set()
    ordered: list[str] = []
    for candidate in candidates:
        key = str(PureWindowsPath(candidate)).lower()
        if key in seen:
            continue
        seen.add(key)
        ordered.append(candidate)
    return tuple(ordered)


def clear_caches() -> None:
    """Clear cached locations.

    Useful for testing when environment variables change.
    """
    program_files_dirs.cache_clear()
