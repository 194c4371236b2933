"""Error taxonomy for signature, decode, and chunk verification failures.

Every exception carries a ``kind`` (``ErrorKind``) so reports can record
the failure as structured data instead of a formatted message.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chunkguard.models.container import DecodedContainer, Signature


class ErrorKind(str, Enum):
    """Failure kinds, independent of the exception type that carries them."""

    NOT_PNG = "not_png"
    INVALID_HEADER_LENGTH = "invalid_header_length"
    DOS_TO_UNIX_CONVERSION = "dos_to_unix_conversion"
    UNIX_TO_DOS_CONVERSION = "unix_to_dos_conversion"
    TRUNCATED_RECORD = "truncated_record"
    MISSING_BYTES = "missing_bytes"
    CRC_MISMATCH = "crc_mismatch"
    IO_ERROR = "io_error"


class ChunkGuardError(RuntimeError):
    """Base class for every failure raised or returned by chunkguard."""

    kind: ErrorKind


# ---------------------------------------------------------------------------
# Signature
# ---------------------------------------------------------------------------


class SignatureError(ChunkGuardError):
    """The leading signature bytes are not a clean PNG signature."""

    def __init__(self, message: str, signature: Signature) -> None:
        super().__init__(message)
        self.signature = signature


class NotPngError(SignatureError):
    """Magic byte and ``PNG`` tag are both absent."""

    kind = ErrorKind.NOT_PNG


class InvalidHeaderLengthError(SignatureError):
    """Signature is too short and the cause cannot be identified."""

    kind = ErrorKind.INVALID_HEADER_LENGTH


class DosToUnixConversionError(SignatureError):
    """Signature is too short: a CR byte was stripped by line-ending conversion."""

    kind = ErrorKind.DOS_TO_UNIX_CONVERSION


class UnixToDosConversionError(SignatureError):
    """Signature byte 7 is not LF: a CR byte was inserted before a LF."""

    kind = ErrorKind.UNIX_TO_DOS_CONVERSION


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------


class DecodeError(ChunkGuardError):
    """Decoding aborted.

    ``container`` holds every chunk framed before the fault, so callers
    can still report on the part of the file that was readable.
    """

    def __init__(self, message: str, container: DecodedContainer) -> None:
        super().__init__(message)
        self.container = container


class TruncatedRecordError(DecodeError):
    """The stream ended in the middle of a signature or chunk."""

    kind = ErrorKind.TRUNCATED_RECORD

    def __init__(
        self,
        message: str,
        container: DecodedContainer,
        *,
        offset: int,
        needed: int,
        got: int,
    ) -> None:
        super().__init__(message, container)
        self.offset = offset
        self.needed = needed
        self.got = got


class TruncatedSignatureError(TruncatedRecordError):
    """The stream ended before the signature was complete.

    The partial signature's length says nothing about line-ending damage.
    """


class StreamReadError(DecodeError):
    """The underlying stream failed; the ``OSError`` is the ``__cause__``."""

    kind = ErrorKind.IO_ERROR


# ---------------------------------------------------------------------------
# Chunk verification
# ---------------------------------------------------------------------------


class VerifyError(ChunkGuardError):
    """A chunk failed its length or CRC check."""

    def __init__(self, message: str, chunk_type: str) -> None:
        super().__init__(message)
        self.chunk_type = chunk_type


class MissingBytesError(VerifyError):
    kind = ErrorKind.MISSING_BYTES

    def __init__(self, chunk_type: str, declared: int, actual: int) -> None:
        super().__init__(
            f"Chunk {chunk_type!r} declares {declared} bytes but holds {actual}",
            chunk_type,
        )
        self.declared = declared
        self.actual = actual


class CrcMismatchError(VerifyError):
    kind = ErrorKind.CRC_MISMATCH

    def __init__(self, chunk_type: str, stored_crc: int, computed_crc: int) -> None:
        super().__init__(
            f"Chunk {chunk_type!r} CRC mismatch: "
            f"stored {stored_crc:08x}, computed {computed_crc:08x}",
            chunk_type,
        )
        self.stored_crc = stored_crc
        self.computed_crc = computed_crc
