"""Main Typer application — imports and registers all CLI commands.

Entry point: ``chunkguard`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import typer

from chunkguard import __version__
from chunkguard.cli.commands.check import check_cmd
from chunkguard.cli.commands.chunks import chunks_cmd
from chunkguard.config import settings
from chunkguard.logging_setup import configure_logging

app = typer.Typer(
    name="chunkguard",
    help="chunkguard: detect PNG signature mangling and chunk corruption.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Log level (default from CHUNKGUARD_LOG_LEVEL).",
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level or settings.effective_log_level)


# Register subcommands
app.command(name="check", help="Verify PNG files and directories.")(check_cmd)
app.command(name="chunks", help="List every chunk in a PNG file.")(chunks_cmd)


@app.command(name="version", help="Print the chunkguard version.")
def version_cmd() -> None:
    typer.echo(__version__)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
