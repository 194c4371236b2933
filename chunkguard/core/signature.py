"""Signature collection and validation.

A PNG signature is ``89 50 4E 47 0D 0A 1A 0A``.  Moving the file through a
text-mode transfer rewrites its CR/LF bytes, and the resulting damage has a
recognisable shape:

- DOS -> Unix strips the CR at offset 4, so the signature comes up short.
- Unix -> DOS inserts a CR before each LF, so offset 7 is no longer LF.

The failure kind therefore tells the caller *how* the file was corrupted,
not just that it was.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from chunkguard.core.errors import (
    DosToUnixConversionError,
    InvalidHeaderLengthError,
    NotPngError,
    SignatureError,
    TruncatedSignatureError,
    UnixToDosConversionError,
)
from chunkguard.models.container import (
    PNG_MAGIC,
    PNG_TAG,
    SIGNATURE_LENGTH,
    DecodedContainer,
    Signature,
)
from chunkguard.models.options import CARRIAGE_RETURN, LINE_FEED, SignaturePolicy

logger = logging.getLogger(__name__)

_LINE_ENDING_BYTES = frozenset({CARRIAGE_RETURN, LINE_FEED})


def collect_signature(
    stream: BinaryIO, policy: SignaturePolicy | None = None
) -> Signature:
    """Read signature bytes one at a time until the LF threshold is reached.

    Raises
    ------
    TruncatedSignatureError
        If the stream ends before the threshold is reached.  The partial
        signature is available on ``error.container.signature``.
    """
    policy = policy or SignaturePolicy()
    collected = bytearray()
    seen = 0

    while seen < policy.line_feed_threshold:
        byte = stream.read(1)
        if not byte:
            partial = Signature(raw=bytes(collected))
            raise TruncatedSignatureError(
                f"Stream ended after {len(collected)} signature bytes",
                DecodedContainer(signature=partial),
                offset=len(collected),
                needed=1,
                got=0,
            )
        collected += byte
        if byte[0] in policy.line_feed_bytes:
            seen += 1

    signature = Signature(raw=bytes(collected))
    logger.debug("Collected %d signature bytes: %s", signature.length, signature.hex())
    return signature


def _as_signature(signature: Signature | bytes) -> Signature:
    if isinstance(signature, Signature):
        return signature
    return Signature(raw=bytes(signature))


def validate_signature(signature: Signature | bytes) -> None:
    """Check a collected signature, raising the first failure found.

    Checks, in order:

    1. magic byte and ``PNG`` tag both wrong -> ``NotPngError``
    2. fewer than 8 bytes -> ``DosToUnixConversionError`` when CR/LF bytes
       survive past offset 4 (a line ending was shortened), otherwise
       ``InvalidHeaderLengthError``
    3. byte 7 is not LF -> ``UnixToDosConversionError``
    """
    sig = _as_signature(signature)
    raw = sig.raw

    if not raw or (raw[0] != PNG_MAGIC and raw[1:4] != PNG_TAG):
        raise NotPngError(f"Not a PNG signature: {sig.hex() or '<empty>'}", sig)

    if len(raw) < SIGNATURE_LENGTH:
        if any(b in _LINE_ENDING_BYTES for b in raw[4:]):
            raise DosToUnixConversionError(
                f"Signature is {len(raw)} bytes; a CR was stripped "
                f"(DOS to Unix line-ending conversion): {sig.hex()}",
                sig,
            )
        raise InvalidHeaderLengthError(
            f"Signature is {len(raw)} bytes, expected {SIGNATURE_LENGTH}: {sig.hex()}",
            sig,
        )

    if raw[7] != LINE_FEED:
        raise UnixToDosConversionError(
            f"Signature byte 7 is {raw[7]:#04x}, expected {LINE_FEED:#04x}; "
            f"a CR was inserted (Unix to DOS line-ending conversion): {sig.hex()}",
            sig,
        )


def signature_error(signature: Signature | bytes) -> SignatureError | None:
    """Non-raising form of ``validate_signature``."""
    try:
        validate_signature(signature)
    except SignatureError as exc:
        return exc
    return None
