"""File discovery and per-file inspection.

``inspect_file`` runs the full decode -> signature check -> chunk
verification sequence and folds every outcome into a ``FileReport``.
A decode fault does not discard the chunks framed before it; those are
still verified and reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from chunkguard.core.decoder import decode
from chunkguard.core.errors import DecodeError, NotPngError, TruncatedSignatureError
from chunkguard.core.signature import signature_error
from chunkguard.core.verifier import verify_container
from chunkguard.models.container import DecodedContainer
from chunkguard.models.options import DecodeOptions, VerifyPolicy
from chunkguard.models.reports import FileReport

logger = logging.getLogger(__name__)


def discover(
    paths: Iterable[Path | str],
    *,
    recursive: bool = True,
    suffixes: Sequence[str] = (".png",),
) -> list[Path]:
    """Expand files and directories into a sorted, de-duplicated file list.

    Files named explicitly are always included.  Directory contents are
    filtered by *suffixes* (case-insensitive).
    """
    wanted = {s.lower() for s in suffixes}
    found: set[Path] = set()

    for entry in paths:
        path = Path(entry)
        if path.is_dir():
            candidates = path.rglob("*") if recursive else path.glob("*")
            for candidate in candidates:
                if candidate.is_file() and candidate.suffix.lower() in wanted:
                    found.add(candidate)
        elif path.is_file():
            found.add(path)
        else:
            logger.warning("Skipping %s: no such file or directory", path)

    return sorted(found)


def inspect_file(
    path: Path | str,
    options: DecodeOptions | None = None,
    policy: VerifyPolicy | None = None,
) -> FileReport:
    """Decode and verify a single file.

    ``OSError`` raised while opening the file propagates to the caller;
    faults while reading the open stream are recorded in the report.
    """
    path = Path(path)
    decode_error: DecodeError | None = None

    with open(path, "rb") as fh:
        try:
            container = decode(fh, options)
        except DecodeError as exc:
            decode_error = exc
            container = exc.container
            logger.info("%s: decode aborted: %s", path, exc)

    return _build_report(path, container, decode_error, policy)


def _build_report(
    path: Path,
    container: DecodedContainer,
    decode_error: DecodeError | None,
    policy: VerifyPolicy | None,
) -> FileReport:
    sig_error = signature_error(container.signature)
    if isinstance(decode_error, TruncatedSignatureError) and not isinstance(
        sig_error, NotPngError
    ):
        # A cut-short signature is truncated, not transcoded.
        sig_error = None
    if sig_error is not None:
        logger.info("%s: %s", path, sig_error)

    return FileReport(
        path=str(path),
        size_bytes=path.stat().st_size,
        signature_hex=container.signature.hex(),
        signature_error=sig_error.kind if sig_error is not None else None,
        decode_error=decode_error.kind if decode_error is not None else None,
        decode_error_detail=str(decode_error) if decode_error is not None else "",
        chunks=verify_container(container, policy),
    )


def inspect_paths(
    paths: Iterable[Path | str],
    options: DecodeOptions | None = None,
    policy: VerifyPolicy | None = None,
    *,
    recursive: bool = True,
    suffixes: Sequence[str] = (".png",),
) -> list[FileReport]:
    """Discover files under *paths* and inspect each one in order."""
    return [
        inspect_file(p, options, policy)
        for p in discover(paths, recursive=recursive, suffixes=suffixes)
    ]
