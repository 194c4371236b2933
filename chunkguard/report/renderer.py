"""Rich terminal renderer for inspection reports.

Color scheme
------------
- green     : OK
- red       : corrupted chunk, signature, or framing
- yellow    : decode stopped early (truncated / unreadable)
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from chunkguard.core.errors import ErrorKind
from chunkguard.models.reports import ChunkReport, FileReport

_KIND_LABELS: dict[ErrorKind, str] = {
    ErrorKind.NOT_PNG: "not a PNG file",
    ErrorKind.INVALID_HEADER_LENGTH: "invalid header length",
    ErrorKind.DOS_TO_UNIX_CONVERSION: "DOS to Unix conversion",
    ErrorKind.UNIX_TO_DOS_CONVERSION: "Unix to DOS conversion",
    ErrorKind.TRUNCATED_RECORD: "truncated",
    ErrorKind.MISSING_BYTES: "missing bytes",
    ErrorKind.CRC_MISMATCH: "CRC mismatch",
    ErrorKind.IO_ERROR: "read error",
}


def describe(kind: ErrorKind | None) -> str:
    """Human label for an error kind (``"OK"`` for None)."""
    return "OK" if kind is None else _KIND_LABELS[kind]


def _status_markup(report: FileReport) -> str:
    if report.ok:
        return "[green]OK[/green]"
    if report.decode_error is not None and report.signature_error is None and not report.corrupted_chunks:
        return "[yellow]INCOMPLETE[/yellow]"
    return "[bold red]CORRUPTED[/bold red]"


class ReportRenderer:
    """Renders ``FileReport`` objects as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def render_summary(self, reports: Sequence[FileReport]) -> Table:
        """One row per file: signature, framing, and chunk counts."""
        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("File", min_width=20, overflow="fold")
        table.add_column("Status", width=12, justify="center")
        table.add_column("Signature")
        table.add_column("Framing")
        table.add_column("Chunks", justify="right")

        for report in reports:
            bad = len(report.corrupted_chunks)
            chunk_cell = f"{len(report.chunks) - bad}/{len(report.chunks)}"
            if bad:
                chunk_cell = f"[red]{chunk_cell}[/red]"
            table.add_row(
                escape(report.path),
                _status_markup(report),
                describe(report.signature_error),
                describe(report.decode_error),
                chunk_cell,
            )
        return table

    # ------------------------------------------------------------------
    # Per-file detail
    # ------------------------------------------------------------------

    def render_chunks(self, chunks: Sequence[ChunkReport]) -> Table:
        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("Type")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Length", justify="right")
        table.add_column("Stored CRC")
        table.add_column("Computed CRC")
        table.add_column("Status")

        for chunk in chunks:
            style = "green" if chunk.ok else "bold red"
            length = str(chunk.declared_length)
            if chunk.declared_length != chunk.actual_length:
                length = f"{chunk.declared_length} (has {chunk.actual_length})"
            table.add_row(
                escape(repr(chunk.type)[1:-1]),
                str(chunk.index),
                length,
                f"{chunk.stored_crc:08x}",
                f"{chunk.computed_crc:08x}",
                f"[{style}]{describe(chunk.error)}[/{style}]",
            )
        return table

    def render_file(self, report: FileReport) -> Panel:
        lines = [
            f"[bold]Size:[/bold] {report.size_bytes:,} bytes",
            f"[bold]Signature:[/bold] {report.signature_hex or '<none>'} "
            f"({describe(report.signature_error)})",
        ]
        if report.decode_error is not None:
            lines.append(
                f"[yellow][bold]Decode:[/bold] {describe(report.decode_error)}[/yellow] "
                f"[dim]{escape(report.decode_error_detail)}[/dim]"
            )
        return Panel(
            Group(Text.from_markup("\n".join(lines)), Text(""), self.render_chunks(report.chunks)),
            title=f"[bold]{escape(report.path)}[/bold]",
            subtitle=_status_markup(report),
            border_style="green" if report.ok else "red",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print_reports(self, reports: Sequence[FileReport], *, verbose: bool = False) -> None:
        if verbose:
            for report in reports:
                self.console.print(self.render_file(report))
        self.console.print(self.render_summary(reports))

        corrupted = sum(1 for r in reports if not r.ok)
        if corrupted:
            self.console.print(
                f"[bold red]{corrupted} of {len(reports)} files have problems.[/bold red]"
            )
        else:
            self.console.print(f"[bold green]All {len(reports)} files are intact.[/bold green]")
