"""Unit tests for WAV chunk classification and fmt parsing."""

import struct

import pytest

from wavcodec.format.chunks import (
    build_fmt_chunk,
    classify_chunk,
    classify_chunks,
    parse_fmt_chunk,
    select_fmt_and_data,
)
from wavcodec.format.errors import FieldTruncated, FormatUnsupported, StructuralMismatch
from wavcodec.format.types import Bits, Data, Fmt, FmtChunk, FormatCode, Unrecognized


def fmt_payload(
    format_code: int = 1,
    channels: int = 2,
    sample_rate: int = 48000,
    bytes_per_second: int = 192000,
    block_align: int = 4,
    bits: int = 16,
) -> bytes:
    return struct.pack(
        "<HHIIHH", format_code, channels, sample_rate, bytes_per_second, block_align, bits
    )


class TestParseFmtChunk:
    """Tests for fmt chunk field extraction."""

    def test_parse_fields(self) -> None:
        """Test that all six fields are read from their offsets."""
        fmt = parse_fmt_chunk(fmt_payload())

        assert fmt == FmtChunk(
            format_code=FormatCode.PCM,
            channels=2,
            sample_rate=48000,
            bytes_per_second=192000,
            block_align=4,
            bits=Bits.I16,
        )

    def test_stored_derived_fields_not_validated(self) -> None:
        """Test that inconsistent block align and byte rate are accepted as stored."""
        fmt = parse_fmt_chunk(fmt_payload(bytes_per_second=7, block_align=99))

        assert fmt.bytes_per_second == 7
        assert fmt.block_align == 99

    def test_extension_bytes_ignored(self) -> None:
        """Test that a cbSize extension after the 16 standard bytes is ignored."""
        fmt = parse_fmt_chunk(fmt_payload(bits=24) + struct.pack("<H", 0))

        assert fmt.bits == Bits.I24

    @pytest.mark.parametrize(
        "length,field",
        [
            (0, "format_code"),
            (1, "format_code"),
            (2, "channels"),
            (3, "channels"),
            (4, "sample_rate"),
            (7, "sample_rate"),
            (8, "bytes_per_second"),
            (12, "block_align"),
            (14, "bits"),
            (15, "bits"),
        ],
    )
    def test_truncated_field(self, length: int, field: str) -> None:
        """Test that the first missing field in file order is reported."""
        with pytest.raises(FieldTruncated) as e:
            parse_fmt_chunk(fmt_payload()[:length])

        assert e.value.field == field

    def test_unknown_format_code(self) -> None:
        """Test that an unknown format code is unsupported."""
        with pytest.raises(FormatUnsupported) as e:
            parse_fmt_chunk(fmt_payload(format_code=2))

        assert e.value.field == "format_code"

    @pytest.mark.parametrize("code", [3, 6, 7, 65534])
    def test_known_non_pcm_format_code(self, code: int) -> None:
        """Test that known but non-PCM format codes are unsupported."""
        with pytest.raises(FormatUnsupported, match="Only PCM") as e:
            parse_fmt_chunk(fmt_payload(format_code=code))

        assert e.value.field == "format_code"

    def test_unknown_format_code_short_circuits(self) -> None:
        """Test that the format code is rejected before later fields are checked."""
        with pytest.raises(FormatUnsupported):
            parse_fmt_chunk(struct.pack("<H", 85))

    @pytest.mark.parametrize("bits", [0, 4, 12, 20, 64])
    def test_unsupported_bits(self, bits: int) -> None:
        """Test that bit depths other than 8/16/24/32 are unsupported."""
        with pytest.raises(FormatUnsupported) as e:
            parse_fmt_chunk(fmt_payload(bits=bits))

        assert e.value.field == "bits"


class TestBuildFmtChunk:
    """Tests for fmt chunk serialization."""

    def test_build_layout(self) -> None:
        """Test that fields are written in the standard 16-byte layout."""
        fmt = FmtChunk(
            format_code=FormatCode.EXTENSIBLE,
            channels=6,
            sample_rate=96000,
            bytes_per_second=1728000,
            block_align=18,
            bits=Bits.I24,
        )

        assert build_fmt_chunk(fmt) == struct.pack("<HHIIHH", 65534, 6, 96000, 1728000, 18, 24)

    def test_build_then_parse(self) -> None:
        """Test that a PCM fmt chunk parses back to the same fields."""
        fmt = parse_fmt_chunk(fmt_payload(bits=8, channels=1, block_align=1))

        assert parse_fmt_chunk(build_fmt_chunk(fmt)) == fmt


class TestClassify:
    """Tests for chunk classification and leading-chunk selection."""

    def test_classify_roles(self) -> None:
        """Test classification of fmt, data and other chunks."""
        assert isinstance(classify_chunk(b"fmt ", fmt_payload()), Fmt)
        assert classify_chunk(b"data", b"\x01\x02") == Data(b"\x01\x02")
        assert classify_chunk(b"LIST", b"INFO") == Unrecognized(b"LIST")

    def test_classify_propagates_fmt_errors(self) -> None:
        """Test that a malformed fmt chunk anywhere in the list fails."""
        chunks = [(b"fmt ", fmt_payload()), (b"data", b""), (b"fmt ", b"\x01")]
        with pytest.raises(FieldTruncated):
            classify_chunks(chunks)

    def test_select_leading_pair(self) -> None:
        """Test that fmt then data in leading position is accepted."""
        roles = classify_chunks(
            [(b"fmt ", fmt_payload()), (b"data", b"abcd"), (b"LIST", b"x")]
        )
        fmt, payload = select_fmt_and_data(roles)

        assert fmt.channels == 2
        assert payload == b"abcd"

    @pytest.mark.parametrize(
        "tags",
        [
            [],
            [b"fmt "],
            [b"data"],
            [b"data", b"fmt "],
            [b"LIST", b"fmt ", b"data"],
            [b"fmt ", b"LIST", b"data"],
            [b"fmt ", b"fmt ", b"data"],
        ],
    )
    def test_select_rejects_other_arrangements(self, tags: list[bytes]) -> None:
        """Test that fmt and data must be exactly the first two chunks."""
        payloads = {b"fmt ": fmt_payload(), b"data": b"\x00\x00", b"LIST": b""}
        roles = classify_chunks([(tag, payloads[tag]) for tag in tags])

        with pytest.raises(StructuralMismatch):
            select_fmt_and_data(roles)
