"""Tests for signature collection and line-ending corruption detection."""

from __future__ import annotations

import io

import pytest

from chunkguard.core.errors import (
    DosToUnixConversionError,
    ErrorKind,
    InvalidHeaderLengthError,
    NotPngError,
    TruncatedRecordError,
    TruncatedSignatureError,
    UnixToDosConversionError,
)
from chunkguard.core.signature import (
    collect_signature,
    signature_error,
    validate_signature,
)
from chunkguard.models.container import PNG_SIGNATURE, Signature
from chunkguard.models.options import LINE_FEED, SUBSTITUTE, SignaturePolicy


class TestValidateSignature:
    def test_well_formed(self):
        validate_signature(bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A]))

    def test_accepts_signature_model(self):
        validate_signature(Signature(raw=PNG_SIGNATURE))

    def test_short_without_line_endings_is_invalid_length(self):
        with pytest.raises(InvalidHeaderLengthError) as exc_info:
            validate_signature(bytes([0x89, ord("P"), ord("N"), ord("G"), 0x00]))
        assert exc_info.value.kind == ErrorKind.INVALID_HEADER_LENGTH

    def test_short_with_cr_at_offset_5_is_dos_to_unix(self):
        with pytest.raises(DosToUnixConversionError) as exc_info:
            validate_signature(bytes([0x89, ord("P"), ord("N"), ord("G"), 0x00, 0x0D]))
        assert exc_info.value.kind == ErrorKind.DOS_TO_UNIX_CONVERSION

    def test_stripped_cr_is_dos_to_unix(self):
        """89 PNG 0A 1A 0A: the CR before the first LF has been removed."""
        with pytest.raises(DosToUnixConversionError):
            validate_signature(b"\x89PNG\n\x1a\n")

    def test_byte_7_not_lf_is_unix_to_dos(self):
        raw = bytearray(PNG_SIGNATURE)
        raw[7] = 0x00
        with pytest.raises(UnixToDosConversionError) as exc_info:
            validate_signature(bytes(raw))
        assert exc_info.value.kind == ErrorKind.UNIX_TO_DOS_CONVERSION

    def test_inserted_cr_is_unix_to_dos(self):
        """Each LF gained a CR: 89 PNG 0D 0D 0A 1A 0D 0A."""
        with pytest.raises(UnixToDosConversionError):
            validate_signature(b"\x89PNG\r\r\n\x1a\r\n")

    def test_foreign_file_is_not_png(self):
        with pytest.raises(NotPngError) as exc_info:
            validate_signature(b"GIF89a\r\n")
        assert exc_info.value.kind == ErrorKind.NOT_PNG

    def test_empty_is_not_png(self):
        with pytest.raises(NotPngError):
            validate_signature(b"")

    def test_magic_alone_is_enough_to_pass_first_check(self):
        """Only both magic and tag missing means "not a PNG"."""
        validate_signature(b"\x89XYZ\r\n\x1a\n")
        validate_signature(b"\x00PNG\r\n\x1a\n")

    def test_error_carries_signature(self):
        with pytest.raises(InvalidHeaderLengthError) as exc_info:
            validate_signature(b"\x89PNG")
        assert exc_info.value.signature.raw == b"\x89PNG"


class TestSignatureError:
    def test_none_when_clean(self):
        assert signature_error(PNG_SIGNATURE) is None

    def test_returns_error_instance(self):
        err = signature_error(b"\x89PNG\n\x1a\n")
        assert isinstance(err, DosToUnixConversionError)


class TestCollectSignature:
    def test_stops_after_second_line_feed(self):
        stream = io.BytesIO(PNG_SIGNATURE + b"\x00\x00\x00\x00")
        sig = collect_signature(stream)
        assert sig.raw == PNG_SIGNATURE
        assert stream.tell() == 8

    def test_dos_to_unix_collects_seven_bytes(self):
        sig = collect_signature(io.BytesIO(b"\x89PNG\n\x1a\nrest"))
        assert sig.raw == b"\x89PNG\n\x1a\n"

    def test_unix_to_dos_collects_ten_bytes(self):
        sig = collect_signature(io.BytesIO(b"\x89PNG\r\r\n\x1a\r\nrest"))
        assert sig.length == 10

    def test_substitute_byte_policy_stops_early(self):
        policy = SignaturePolicy(line_feed_bytes=frozenset({LINE_FEED, SUBSTITUTE}))
        sig = collect_signature(io.BytesIO(PNG_SIGNATURE), policy)
        assert sig.raw == PNG_SIGNATURE[:7]

    def test_threshold_policy(self):
        policy = SignaturePolicy(line_feed_threshold=1)
        sig = collect_signature(io.BytesIO(PNG_SIGNATURE), policy)
        assert sig.raw == PNG_SIGNATURE[:6]

    def test_end_of_stream_raises_truncated(self):
        with pytest.raises(TruncatedRecordError) as exc_info:
            collect_signature(io.BytesIO(b"\x89PNG\r\n"))
        assert exc_info.value.container.signature.raw == b"\x89PNG\r\n"
        assert exc_info.value.container.chunk_count == 0
        assert isinstance(exc_info.value, TruncatedSignatureError)
        assert exc_info.value.kind == ErrorKind.TRUNCATED_RECORD
