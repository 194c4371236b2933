"""Shared test fixtures for chunkguard."""

from __future__ import annotations

import struct
import zlib
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from chunkguard.models.container import PNG_SIGNATURE

IHDR_DATA = struct.pack(">IIBBBBB", 1, 1, 8, 6, 0, 0, 0)


def chunk_bytes(
    chunk_type: bytes,
    data: bytes = b"",
    *,
    crc: int | None = None,
    length: int | None = None,
) -> bytes:
    """Frame one chunk; *crc* and *length* override the correct values."""
    if crc is None:
        crc = zlib.crc32(data) & 0xFFFFFFFF
    if length is None:
        length = len(data)
    return struct.pack(">I", length) + chunk_type + data + struct.pack(">I", crc)


@pytest.fixture
def make_chunk() -> Callable[..., bytes]:
    """Factory fixture: frame a single chunk."""
    return chunk_bytes


@pytest.fixture
def ihdr_data() -> bytes:
    """IHDR payload for a 1x1 RGBA image."""
    return IHDR_DATA


@pytest.fixture
def make_png() -> Callable[..., bytes]:
    """Factory fixture: signature followed by framed chunks."""

    def _factory(
        chunks: Sequence[bytes] | None = None,
        signature: bytes = PNG_SIGNATURE,
    ) -> bytes:
        if chunks is None:
            chunks = [
                chunk_bytes(b"IHDR", IHDR_DATA),
                chunk_bytes(b"IDAT", b"\x78\x9c\x63\x60"),
                chunk_bytes(b"IDAT", b"\x00\x00\x00\x02\x00\x01"),
                chunk_bytes(b"IEND"),
            ]
        return signature + b"".join(chunks)

    return _factory


@pytest.fixture
def png_bytes(make_png: Callable[..., bytes]) -> bytes:
    """Convenience: a well-formed container with IHDR, two IDATs, IEND."""
    return make_png()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Factory fixture: write bytes to a file under tmp_path."""

    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write
