from __future__ import annotations

from pathlib import Path

import typer

from devdoctor.cli.context import CLIContext, build_context
from devdoctor.core.errors import ErrorCode
from devdoctor.output.console import Style
from devdoctor.services.checkers import Diagnosis, Status
from devdoctor.services.doctor import (
    DoctorReport,
    DoctorService,
    default_checkups,
    style_for_status,
)


def check(
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Path to doctor.toml (default: ./doctor.toml if present)",
    ),
    strict: bool = typer.Option(
        True,
        "--strict/--no-strict",
        help="Exit non-zero when a checkup fails.",
    ),
) -> None:
    """Check the development environment."""
    ctx = build_context(config)

    service = DoctorService(
        checkups=default_checkups(ctx.config),
        platform=ctx.platform,
        console=ctx.console,
    )
    report = service.run()

    _print_summary(ctx, report)

    if strict and report.has_errors():
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))


def _print_summary(ctx: CLIContext, report: DoctorReport) -> None:
    console = ctx.console
    console.header("Summary")
    for d in report.diagnoses:
        console.print(_summary_line(d), style_for_status(d.status))
        if d.cause:
            console.print(f"  cause: {d.cause}", Style.DIM)
        if d.hint and d.status != Status.OK:
            console.print(f"  hint: {d.hint}", Style.DIM)


def _summary_line(d: Diagnosis) -> str:
    label = d.status.name.lower()
    if d.message:
        return f"{d.title}: {label} ({d.message})"
    return f"{d.title}: {label}"
