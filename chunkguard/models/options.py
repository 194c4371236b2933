"""Explicit decode and verification policies.

The core never reads process-wide settings; callers pass these models in.
See ``chunkguard.config.Settings`` for the env-driven defaults used by the CLI.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

LINE_FEED = 0x0A
CARRIAGE_RETURN = 0x0D
SUBSTITUTE = 0x1A


class SignaturePolicy(BaseModel):
    """When to stop collecting signature bytes.

    Collection stops right after the byte that brings the count of
    ``line_feed_bytes`` seen up to ``line_feed_threshold``.  Adding
    ``SUBSTITUTE`` to the set cuts a well-formed signature to 7 bytes.
    """

    model_config = ConfigDict(frozen=True)

    line_feed_bytes: frozenset[int] = frozenset({LINE_FEED})
    line_feed_threshold: int = Field(default=2, ge=1)


class DecodeOptions(BaseModel):
    """Options for a single decode pass."""

    model_config = ConfigDict(frozen=True)

    signature: SignaturePolicy = SignaturePolicy()
    read_size: int = Field(default=64 * 1024, ge=1)  # max bytes per payload read


class VerifyPolicy(BaseModel):
    """Batch verification traversal policy."""

    model_config = ConfigDict(frozen=True)

    stop_at_terminal: bool = True
    terminal_type: str = "IEND"
    crc_covers_type: bool = False  # PNG proper: CRC over type tag + data
