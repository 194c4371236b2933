"""Reporting layer — file discovery, inspection, and Rich rendering."""

from chunkguard.report.renderer import ReportRenderer
from chunkguard.report.scanner import discover, inspect_file, inspect_paths

__all__ = ["ReportRenderer", "discover", "inspect_file", "inspect_paths"]
