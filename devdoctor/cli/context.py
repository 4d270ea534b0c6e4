from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from devdoctor.core.config import CONFIG_FILENAME, Config, load_config_or_default
from devdoctor.core.errors import ErrorCode
from devdoctor.core.result import Err
from devdoctor.output.console import ConsoleProtocol, RichConsole
from devdoctor.platform.detection import Platform, detect_platform


@dataclass(frozen=True, slots=True)
class CLIContext:
    platform: Platform
    config: Config
    console: ConsoleProtocol


def build_context(
    config_path: Path | None = None, console: ConsoleProtocol | None = None
) -> CLIContext:
    console = console if console is not None else RichConsole()

    path = config_path if config_path is not None else Path.cwd() / CONFIG_FILENAME
    if config_path is not None and not path.exists():
        console.error(f"config file not found: {path}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    config_result = load_config_or_default(path)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        platform=detect_platform(),
        config=config_result.value,
        console=console,
    )
