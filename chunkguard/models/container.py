"""Decoded container models — signature, chunks, and their grouping by type."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

PNG_MAGIC = 0x89
PNG_TAG = b"PNG"
SIGNATURE_LENGTH = 8
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class Signature(BaseModel):
    """The leading identification bytes of a container, as collected.

    Well-formed signatures are exactly ``PNG_SIGNATURE``; corrupted ones
    may be shorter or longer depending on how line endings were rewritten.
    """

    model_config = ConfigDict(frozen=True)

    raw: bytes = b""

    @property
    def length(self) -> int:
        return len(self.raw)

    def hex(self) -> str:
        """Space separated hex dump of the raw bytes."""
        return self.raw.hex(" ")


class Chunk(BaseModel):
    """One framed unit: declared length, 4-byte type tag, payload, CRC.

    ``type`` is decoded as latin-1 so arbitrary tag bytes survive intact.
    """

    model_config = ConfigDict(frozen=True)

    length: int
    type: str
    data: bytes = b""
    crc: int = 0


class ChunkGroup(BaseModel):
    """All chunks sharing a type tag, in file order."""

    model_config = ConfigDict(frozen=True)

    type: str
    chunks: tuple[Chunk, ...] = ()


class DecodedContainer(BaseModel):
    """Result of a single decode pass.

    ``groups`` is ordered by the first appearance of each tag in the
    stream; within a group chunks keep their file order.  Only fully
    framed chunks are ever present.
    """

    model_config = ConfigDict(frozen=True)

    signature: Signature = Signature()
    groups: tuple[ChunkGroup, ...] = ()
    trailing_bytes: int = 0

    def types(self) -> list[str]:
        """Chunk type tags in order of first appearance."""
        return [g.type for g in self.groups]

    def get(self, chunk_type: str) -> tuple[Chunk, ...]:
        """Return the chunks for *chunk_type*, or an empty tuple."""
        for group in self.groups:
            if group.type == chunk_type:
                return group.chunks
        return ()

    def __contains__(self, chunk_type: object) -> bool:
        return any(g.type == chunk_type for g in self.groups)

    def iter_chunks(self) -> Iterator[tuple[str, int, Chunk]]:
        """Yield ``(type, index_within_type, chunk)`` in group order."""
        for group in self.groups:
            for index, chunk in enumerate(group.chunks):
                yield group.type, index, chunk

    @property
    def chunk_count(self) -> int:
        return sum(len(g.chunks) for g in self.groups)

    @classmethod
    def from_chunks(
        cls,
        signature: Signature,
        chunks: list[Chunk],
        trailing_bytes: int = 0,
    ) -> DecodedContainer:
        """Group *chunks* (in file order) by type tag."""
        grouped: dict[str, list[Chunk]] = {}
        order: list[str] = []
        for chunk in chunks:
            if chunk.type not in grouped:
                grouped[chunk.type] = []
                order.append(chunk.type)
            grouped[chunk.type].append(chunk)
        return cls(
            signature=signature,
            groups=tuple(
                ChunkGroup(type=t, chunks=tuple(grouped[t])) for t in order
            ),
            trailing_bytes=trailing_bytes,
        )
