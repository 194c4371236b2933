"""chunkguard CLI — Typer-based command-line interface.

Provides the ``chunkguard`` command with subcommands for checking files
and directories and for listing the chunks of a single file.

All output uses Rich for formatted terminal display.
"""
