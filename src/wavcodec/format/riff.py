"""RIFF container utilities.

This module splits a RIFF byte buffer into its ordered sequence of tagged
chunks and assembles chunks back into a RIFF buffer. It knows nothing about
the meaning of individual chunks; WAV-specific interpretation lives in
:mod:`wavcodec.format.chunks`.
"""

import struct
from dataclasses import dataclass, field

# FourCC identifiers
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
DATA_ID = b"data"

RIFF_HEADER_SIZE = 12
CHUNK_HEADER_SIZE = 8


class RiffError(Exception):
    """Error reading or writing RIFF data."""


@dataclass
class RiffChunk:
    """A parsed RIFF container: its form type and its chunks in file order."""

    form_type: bytes
    """The four-byte form type following the RIFF size (e.g. b"WAVE")."""

    chunks: list[tuple[bytes, bytes]] = field(default_factory=list)
    """Ordered (tag, payload) pairs, padding bytes excluded."""


def read_chunk_header(data: bytes, offset: int) -> tuple[bytes, int]:
    """Read a RIFF chunk header (FourCC + size).

    Args:
        data: The RIFF buffer.
        offset: Position of the chunk header within the buffer.

    Returns:
        Tuple of (chunk_id, chunk_size).

    Raises:
        RiffError: If the header runs past the end of the buffer.
    """
    header = data[offset : offset + CHUNK_HEADER_SIZE]
    if len(header) < CHUNK_HEADER_SIZE:
        raise RiffError(f"Unexpected end of data reading chunk header at offset {offset}")

    chunk_id = header[:4]
    chunk_size = struct.unpack("<I", header[4:8])[0]
    return chunk_id, chunk_size


def parse(data: bytes) -> RiffChunk:
    """Split a RIFF buffer into its chunks.

    Args:
        data: The complete RIFF buffer.

    Returns:
        RiffChunk with the form type and the chunks in file order.

    Raises:
        RiffError: If the header is invalid or a chunk runs past the end
            of the buffer.
    """
    data = bytes(data)

    if len(data) < RIFF_HEADER_SIZE:
        raise RiffError("File too small to be a valid RIFF file")

    if data[:4] != RIFF_ID:
        raise RiffError("Not a RIFF file")

    riff_size = struct.unpack("<I", data[4:8])[0]
    end = riff_size + 8
    if end > len(data):
        raise RiffError(
            f"RIFF header declares {riff_size} bytes but only "
            f"{len(data) - 8} are present"
        )
    if riff_size < 4:
        raise RiffError(f"RIFF size {riff_size} is too small to hold a form type")

    result = RiffChunk(form_type=data[8:12])

    pos = RIFF_HEADER_SIZE
    while pos < end:
        if pos + CHUNK_HEADER_SIZE > end:
            raise RiffError(f"Unexpected end of data reading chunk header at offset {pos}")
        chunk_id, chunk_size = read_chunk_header(data, pos)
        payload_start = pos + CHUNK_HEADER_SIZE
        payload_end = payload_start + chunk_size
        if payload_end > end:
            raise RiffError(
                f"Chunk {chunk_id!r} at offset {pos} declares {chunk_size} bytes "
                f"but only {end - payload_start} remain"
            )

        result.chunks.append((chunk_id, data[payload_start:payload_end]))

        # Skip to next chunk (with word alignment padding)
        pos = payload_end + (chunk_size % 2)

    return result


def build(form_type: bytes, chunks: list[tuple[bytes, bytes]]) -> bytes:
    """Build a RIFF buffer from a form type and a list of chunks.

    Odd-length payloads are followed by a zero pad byte, which counts towards
    the RIFF size but not towards the chunk's own size field.

    Args:
        form_type: Four-byte form type (e.g. b"WAVE").
        chunks: Ordered (tag, payload) pairs.

    Returns:
        The complete RIFF buffer.

    Raises:
        RiffError: If a tag or the form type is not exactly four bytes.
    """
    if len(form_type) != 4:
        raise RiffError(f"Form type must be 4 bytes, got {form_type!r}")

    body = bytearray(form_type)
    for chunk_id, payload in chunks:
        if len(chunk_id) != 4:
            raise RiffError(f"Chunk id must be 4 bytes, got {chunk_id!r}")
        body.extend(chunk_id)
        body.extend(struct.pack("<I", len(payload)))
        body.extend(payload)
        if len(payload) % 2:
            body.extend(b"\x00")

    # RIFF size = everything after the 8-byte RIFF header
    return RIFF_ID + struct.pack("<I", len(body)) + bytes(body)
