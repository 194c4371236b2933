"""``chunkguard chunks FILE`` — list every chunk in a single file."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from chunkguard.config import settings
from chunkguard.report.renderer import ReportRenderer
from chunkguard.report.scanner import inspect_file

console = Console()


def chunks_cmd(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="The PNG file to list.",
    ),
) -> None:
    """Show signature and every chunk, including those after IEND."""
    # Listing never stops at the terminal chunk.
    policy = settings.verify_policy().model_copy(update={"stop_at_terminal": False})
    report = inspect_file(path, settings.decode_options(), policy)
    console.print(ReportRenderer(console=console).render_file(report))
    if not report.ok:
        raise typer.Exit(code=1)
