"""WAV chunk interpretation.

This module classifies the chunks produced by the RIFF walker, extracts the
fields of the fmt chunk, and serializes fmt fields back to bytes.
"""

import logging
import struct

from wavcodec.format.errors import FieldTruncated, FormatUnsupported, StructuralMismatch
from wavcodec.format.riff import DATA_ID, FMT_ID
from wavcodec.format.types import (
    Bits,
    ChunkRole,
    Data,
    Fmt,
    FmtChunk,
    FormatCode,
    Unrecognized,
)

logger = logging.getLogger(__name__)

# (field name, offset, struct format) in slice order
FMT_FIELDS: tuple[tuple[str, int, str], ...] = (
    ("format_code", 0, "<H"),
    ("channels", 2, "<H"),
    ("sample_rate", 4, "<I"),
    ("bytes_per_second", 8, "<I"),
    ("block_align", 12, "<H"),
    ("bits", 14, "<H"),
)


def _read_field(payload: bytes, name: str, offset: int, fmt: str) -> int:
    """Read one little-endian field, failing if it runs past the payload."""
    size = struct.calcsize(fmt)
    if offset + size > len(payload):
        raise FieldTruncated(
            f"fmt chunk too small for {name}: needs {offset + size} bytes, "
            f"has {len(payload)}",
            field=name,
        )
    return struct.unpack_from(fmt, payload, offset)[0]


def parse_fmt_chunk(payload: bytes) -> FmtChunk:
    """Parse the fields of a fmt chunk payload.

    Fields are read in file order and the first missing or unsupported one
    stops parsing. Bytes past offset 16 (extension fields) are ignored.

    Args:
        payload: The fmt chunk payload, without its 8-byte header.

    Returns:
        FmtChunk holding the stored field values.

    Raises:
        FieldTruncated: If a field extends past the end of the payload.
        FormatUnsupported: If the format code is unknown or not PCM, or the
            bits per sample is not 8, 16, 24 or 32.
    """
    values: dict[str, int] = {}
    for name, offset, fmt in FMT_FIELDS:
        values[name] = _read_field(payload, name, offset, fmt)

        if name == "format_code":
            code = FormatCode.from_code(values[name])
            if code is None:
                raise FormatUnsupported(
                    f"Unknown format code: {values[name]}", field="format_code"
                )
            if code != FormatCode.PCM:
                raise FormatUnsupported(
                    f"Only PCM data can be decoded, got {code.display_name}",
                    field="format_code",
                )

    bits = Bits.from_bits(values["bits"])
    if bits is None:
        raise FormatUnsupported(f"Unsupported bits per sample: {values['bits']}", field="bits")

    return FmtChunk(
        format_code=FormatCode(values["format_code"]),
        channels=values["channels"],
        sample_rate=values["sample_rate"],
        bytes_per_second=values["bytes_per_second"],
        block_align=values["block_align"],
        bits=bits,
    )


def build_fmt_chunk(fmt: FmtChunk) -> bytes:
    """Serialize fmt fields to a 16-byte fmt chunk payload."""
    return struct.pack(
        "<HHIIHH",
        fmt.format_code,
        fmt.channels,
        fmt.sample_rate,
        fmt.bytes_per_second,
        fmt.block_align,
        fmt.bits,
    )


def classify_chunk(tag: bytes, payload: bytes) -> ChunkRole:
    """Classify a single RIFF chunk by its tag.

    Raises:
        FieldTruncated: If a fmt chunk is too short.
        FormatUnsupported: If a fmt chunk describes an unsupported encoding.
    """
    if tag == FMT_ID:
        return Fmt(parse_fmt_chunk(payload))
    if tag == DATA_ID:
        return Data(payload)
    logger.debug("Ignoring unrecognized chunk %r (%d bytes)", tag, len(payload))
    return Unrecognized(tag)


def classify_chunks(chunks: list[tuple[bytes, bytes]]) -> list[ChunkRole]:
    """Classify every chunk in file order, stopping at the first error."""
    return [classify_chunk(tag, payload) for tag, payload in chunks]


def select_fmt_and_data(roles: list[ChunkRole]) -> tuple[FmtChunk, bytes]:
    """Pick the fmt fields and sample payload from classified chunks.

    The fmt chunk must be the first chunk and the data chunk the second.
    Chunks after those two are ignored.

    Raises:
        StructuralMismatch: If the first two chunks are not fmt then data.
    """
    if len(roles) >= 2 and isinstance(roles[0], Fmt) and isinstance(roles[1], Data):
        return roles[0].fields, roles[1].payload

    found = [_role_name(role) for role in roles[:2]]
    raise StructuralMismatch(
        f"Expected leading chunks ['fmt ', 'data'], found {found}"
    )


def _role_name(role: ChunkRole) -> str:
    if isinstance(role, Fmt):
        return "fmt "
    if isinstance(role, Data):
        return "data"
    return role.tag.decode("latin-1")
