"""Report models — per-chunk and per-file verification outcomes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chunkguard.core.errors import ErrorKind


class ChunkReport(BaseModel):
    """Verification outcome for one chunk, keyed by ``(type, index)``."""

    model_config = ConfigDict(frozen=True)

    type: str
    index: int  # position within its type group
    declared_length: int
    actual_length: int
    stored_crc: int
    computed_crc: int = 0
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FileReport(BaseModel):
    """Everything found while inspecting one file."""

    model_config = ConfigDict(frozen=True)

    path: str
    size_bytes: int = 0
    signature_hex: str = ""
    signature_error: ErrorKind | None = None
    decode_error: ErrorKind | None = None
    decode_error_detail: str = ""
    chunks: list[ChunkReport] = Field(default_factory=list)

    @property
    def corrupted_chunks(self) -> list[ChunkReport]:
        return [c for c in self.chunks if not c.ok]

    @property
    def ok(self) -> bool:
        """True when the signature, framing, and every verified chunk are clean."""
        return (
            self.signature_error is None
            and self.decode_error is None
            and not self.corrupted_chunks
        )
