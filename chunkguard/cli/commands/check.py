"""``chunkguard check PATH...`` — verify PNG files and directories.

Walks every path given, inspects each discovered file, and prints a
summary table.  A file that cannot be opened is reported and skipped.
Exit codes: 0 all intact, 1 problems found or a file could not be opened,
2 nothing to inspect.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from chunkguard.config import settings
from chunkguard.report.renderer import ReportRenderer
from chunkguard.report.scanner import discover, inspect_file

console = Console()


def check_cmd(
    paths: list[Path] = typer.Argument(
        ...,
        help="PNG files or directories to inspect.",
    ),
    recursive: bool = typer.Option(
        True,
        "--recursive/--no-recursive",
        "-r/-R",
        help="Descend into subdirectories.",
    ),
    stop_at_iend: Optional[bool] = typer.Option(
        None,
        "--stop-at-iend/--verify-all",
        help="Stop verifying at the terminal IEND chunk (default from settings).",
        show_default=False,
    ),
    png_crc: bool = typer.Option(
        False,
        "--png-crc",
        help="Compute CRCs over type tag + data, as standard PNG encoders do.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show a per-chunk table for every file.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Print nothing; report through the exit code only.",
    ),
) -> None:
    """Check PNG signatures, chunk framing, and chunk CRCs."""
    files = discover(paths, recursive=recursive, suffixes=settings.suffixes)
    if not files:
        if not quiet:
            console.print("[bold yellow]No files to inspect.[/bold yellow]")
        raise typer.Exit(code=2)

    options = settings.decode_options()
    policy = settings.verify_policy()
    overrides: dict[str, bool] = {}
    if stop_at_iend is not None:
        overrides["stop_at_terminal"] = stop_at_iend
    if png_crc:
        overrides["crc_covers_type"] = True
    if overrides:
        policy = policy.model_copy(update=overrides)

    reports = []
    unreadable = 0
    for path in files:
        try:
            reports.append(inspect_file(path, options, policy))
        except OSError as exc:
            unreadable += 1
            if not quiet:
                console.print(f"[bold red]Cannot open {path}:[/bold red] {exc}")

    if not quiet:
        ReportRenderer(console=console).print_reports(reports, verbose=verbose)

    if unreadable or any(not r.ok for r in reports):
        raise typer.Exit(code=1)
