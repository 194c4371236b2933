"""Runtime configuration — env-driven defaults for the CLI.

Reads from a .env file and CHUNKGUARD_* environment variables.  The core
never consults these settings directly; ``decode_options()`` and
``verify_policy()`` turn them into the explicit option models it accepts.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chunkguard.models.options import (
    LINE_FEED,
    SUBSTITUTE,
    DecodeOptions,
    SignaturePolicy,
    VerifyPolicy,
)


class Settings(BaseSettings):
    """CLI settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export CHUNKGUARD_LOG_LEVEL=DEBUG
        export CHUNKGUARD_STOP_AT_TERMINAL=false
        export CHUNKGUARD_SUFFIXES='[".png", ".apng"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CHUNKGUARD_",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"
    debug: bool = False

    # Signature collection
    line_feed_threshold: int = Field(default=2, ge=1)
    include_substitute_byte: bool = False  # also count 0x1A as a line feed

    # Decoding
    read_size: int = Field(default=64 * 1024, ge=1)

    # Verification
    stop_at_terminal: bool = True
    terminal_type: str = "IEND"
    crc_covers_type: bool = False

    # Discovery
    suffixes: list[str] = [".png"]

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    def decode_options(self) -> DecodeOptions:
        line_feeds = {LINE_FEED, SUBSTITUTE} if self.include_substitute_byte else {LINE_FEED}
        return DecodeOptions(
            signature=SignaturePolicy(
                line_feed_bytes=frozenset(line_feeds),
                line_feed_threshold=self.line_feed_threshold,
            ),
            read_size=self.read_size,
        )

    def verify_policy(self) -> VerifyPolicy:
        return VerifyPolicy(
            stop_at_terminal=self.stop_at_terminal,
            terminal_type=self.terminal_type,
            crc_covers_type=self.crc_covers_type,
        )


# Module-level singleton — import as `from chunkguard.config import settings`
settings = Settings()
