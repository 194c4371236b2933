"""ChunkStreamDecoder — one linear pass from raw bytes to a DecodedContainer.

Wire format after the signature, big-endian throughout::

    +--------+--------+------------------+--------+
    | length | type   | data (length B)  | crc    |
    | 4 B    | 4 B    |                  | 4 B    |
    +--------+--------+------------------+--------+

End of stream at a chunk boundary is the normal end of the container.
End of stream anywhere else aborts with ``TruncatedRecordError``; a
failing stream aborts with ``StreamReadError``.  Both carry the chunks
framed before the fault.  The decoder only reads; it never closes the
stream it was handed.
"""

from __future__ import annotations

import io
import logging
import struct
from pathlib import Path
from typing import BinaryIO

from chunkguard.core.errors import StreamReadError, TruncatedRecordError
from chunkguard.core.signature import collect_signature
from chunkguard.models.container import Chunk, DecodedContainer, Signature
from chunkguard.models.options import DecodeOptions

logger = logging.getLogger(__name__)

_U32 = struct.Struct(">I")


class ChunkStreamDecoder:
    """Decodes a single stream.  Create one per decode pass.

    Parameters
    ----------
    stream:
        Readable binary file object positioned at the start of the container.
    options:
        Signature policy and read sizing.  Defaults to ``DecodeOptions()``.
    """

    def __init__(self, stream: BinaryIO, options: DecodeOptions | None = None) -> None:
        self._stream = stream
        self._options = options or DecodeOptions()
        self._signature = Signature()
        self._chunks: list[Chunk] = []
        self._offset = 0
        self._trailing = 0

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def decode(self) -> DecodedContainer:
        try:
            self._signature = collect_signature(self._stream, self._options.signature)
            self._offset = self._signature.length
            while self._read_chunk():
                pass
        except OSError as exc:
            raise StreamReadError(
                f"Stream read failed at offset {self._offset}: {exc}",
                self._partial(),
            ) from exc

        container = self._partial()
        logger.debug(
            "Decoded %d chunks in %d groups (%d bytes)",
            container.chunk_count,
            len(container.groups),
            self._offset,
        )
        return container

    # ------------------------------------------------------------------
    # Framing
    # ------------------------------------------------------------------

    def _read_chunk(self) -> bool:
        """Frame one chunk.  Returns False at a clean end of stream."""
        start = self._offset

        raw_length = self._read(4)
        if not raw_length:
            return False
        self._require(raw_length, 4, start, "length")
        (length,) = _U32.unpack(raw_length)

        raw_type = self._read(4)
        if not raw_type:
            # A dangling length word with nothing after it.
            self._trailing = len(raw_length)
            logger.warning(
                "Ignoring %d trailing bytes at offset %d", self._trailing, start
            )
            return False
        self._require(raw_type, 4, start, "type")
        chunk_type = raw_type.decode("latin-1")

        data = self._read(length)
        self._require(data, length, start, f"{chunk_type!r} data")

        raw_crc = self._read(4)
        self._require(raw_crc, 4, start, f"{chunk_type!r} crc")
        (crc,) = _U32.unpack(raw_crc)

        chunk = Chunk(length=length, type=chunk_type, data=data, crc=crc)
        self._chunks.append(chunk)
        logger.debug(
            "Chunk %r at offset %d: length=%d crc=%08x", chunk_type, start, length, crc
        )
        return True

    def _read(self, size: int) -> bytes:
        """Read up to *size* bytes, in pieces no larger than ``read_size``.

        Raw streams (pipes, sockets) may return short reads before the end,
        so this keeps reading until *size* bytes arrive or ``read`` returns
        nothing.  A corrupt length never allocates more than the stream holds.
        """
        parts: list[bytes] = []
        remaining = size
        while remaining:
            part = self._stream.read(min(remaining, self._options.read_size))
            if not part:
                break
            parts.append(part)
            remaining -= len(part)
        data = b"".join(parts)
        self._offset += len(data)
        return data

    def _require(self, data: bytes, needed: int, start: int, field: str) -> None:
        if len(data) < needed:
            raise TruncatedRecordError(
                f"Chunk at offset {start} truncated in {field}: "
                f"needed {needed} bytes, got {len(data)}",
                self._partial(),
                offset=start,
                needed=needed,
                got=len(data),
            )

    def _partial(self) -> DecodedContainer:
        return DecodedContainer.from_chunks(
            self._signature, self._chunks, trailing_bytes=self._trailing
        )


def decode(
    stream: BinaryIO | bytes | bytearray | memoryview,
    options: DecodeOptions | None = None,
) -> DecodedContainer:
    """Decode a container from a binary stream or an in-memory buffer."""
    if isinstance(stream, (bytes, bytearray, memoryview)):
        stream = io.BytesIO(bytes(stream))
    return ChunkStreamDecoder(stream, options).decode()


def decode_file(path: Path | str, options: DecodeOptions | None = None) -> DecodedContainer:
    """Open *path* in binary mode and decode it."""
    with open(path, "rb") as fh:
        return decode(fh, options)
