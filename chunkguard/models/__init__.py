"""chunkguard data models — all Pydantic v2, all frozen (immutable)."""

from chunkguard.models.container import (
    PNG_SIGNATURE,
    Chunk,
    ChunkGroup,
    DecodedContainer,
    Signature,
)
from chunkguard.models.options import DecodeOptions, SignaturePolicy, VerifyPolicy
from chunkguard.models.reports import ChunkReport, FileReport

__all__ = [
    # container
    "PNG_SIGNATURE",
    "Signature",
    "Chunk",
    "ChunkGroup",
    "DecodedContainer",
    # options
    "SignaturePolicy",
    "DecodeOptions",
    "VerifyPolicy",
    # reports
    "ChunkReport",
    "FileReport",
]
