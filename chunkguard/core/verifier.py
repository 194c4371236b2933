"""ChunkVerifier — length and CRC-32 checks for decoded chunks.

``verify_record`` is pure: the same chunk always yields the same result,
and no result depends on any other chunk.  The CRC covers the chunk data
only, not the type tag, unless the caller asks for PNG-style coverage.
"""

from __future__ import annotations

import logging
import zlib
from typing import NamedTuple

from chunkguard.core.errors import CrcMismatchError, MissingBytesError, VerifyError
from chunkguard.models.container import Chunk, DecodedContainer
from chunkguard.models.options import VerifyPolicy
from chunkguard.models.reports import ChunkReport

logger = logging.getLogger(__name__)


class ChunkCheck(NamedTuple):
    """``(computed_crc, error)`` for one chunk; ``error`` is None when clean."""

    computed_crc: int
    error: VerifyError | None

    @property
    def ok(self) -> bool:
        return self.error is None


def crc32(data: bytes) -> int:
    """Standard CRC-32 (IEEE) as an unsigned 32-bit integer."""
    return zlib.crc32(data) & 0xFFFFFFFF


def verify_record(chunk: Chunk, *, include_type: bool = False) -> ChunkCheck:
    """Verify a chunk's declared length, then its CRC.

    A length mismatch short-circuits with a computed CRC of 0, since the
    comparison means nothing once framing is inconsistent.  With
    *include_type* the CRC also covers the 4 tag bytes, as in files
    written by standard PNG encoders.
    """
    if chunk.length != len(chunk.data):
        return ChunkCheck(0, MissingBytesError(chunk.type, chunk.length, len(chunk.data)))

    covered = chunk.type.encode("latin-1") + chunk.data if include_type else chunk.data
    computed = crc32(covered)
    if computed != chunk.crc:
        return ChunkCheck(computed, CrcMismatchError(chunk.type, chunk.crc, computed))

    return ChunkCheck(computed, None)


def verify_container(
    container: DecodedContainer, policy: VerifyPolicy | None = None
) -> list[ChunkReport]:
    """Verify every chunk in group order, honouring the terminal-marker policy.

    With ``policy.stop_at_terminal`` the walk ends at the first chunk of
    type ``policy.terminal_type``; that chunk and all later ones are skipped.
    """
    policy = policy or VerifyPolicy()
    reports: list[ChunkReport] = []

    for chunk_type, index, chunk in container.iter_chunks():
        if policy.stop_at_terminal and chunk_type == policy.terminal_type:
            break

        check = verify_record(chunk, include_type=policy.crc_covers_type)
        if check.error is not None:
            logger.info("Chunk %r #%d failed: %s", chunk_type, index, check.error)
        reports.append(
            ChunkReport(
                type=chunk_type,
                index=index,
                declared_length=chunk.length,
                actual_length=len(chunk.data),
                stored_crc=chunk.crc,
                computed_crc=check.computed_crc,
                error=check.error.kind if check.error is not None else None,
            )
        )

    return reports
