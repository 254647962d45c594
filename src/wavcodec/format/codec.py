"""WAV decode and encode.

Decoding walks the RIFF container, requires the fmt and data chunks to be the
first two chunks, and converts the sample payload to normalized floats.
Encoding always writes a canonical 44-byte header followed by the samples;
``block_align`` and ``bytes_per_second`` are recomputed from the wave's
channels, bit depth and sample rate.
"""

import logging

from wavcodec.format import riff
from wavcodec.format.chunks import (
    build_fmt_chunk,
    classify_chunks,
    select_fmt_and_data,
)
from wavcodec.format.errors import ContainerError, FormatUnsupported
from wavcodec.format.riff import DATA_ID, FMT_ID, WAVE_ID, RiffError
from wavcodec.format.samples import decode_samples, encode_samples
from wavcodec.format.types import FmtChunk, Wave

logger = logging.getLogger(__name__)


def decode(data: bytes) -> Wave:
    """Decode a complete WAV file held in memory.

    Args:
        data: The WAV file bytes, starting with the RIFF header.

    Returns:
        Wave with the stored format parameters and normalized samples.

    Raises:
        ContainerError: If the RIFF wrapper is malformed or not a WAVE form.
        FieldTruncated: If the fmt chunk is too short.
        FormatUnsupported: If the format is not PCM or the bit depth is not
            8, 16, 24 or 32, if it declares zero channels or a zero
            sample rate, or if the derived block align or byte rate
            overflows its fmt field.
        StructuralMismatch: If fmt and data are not the first two chunks.
    """
    try:
        container = riff.parse(data)
    except RiffError as e:
        raise ContainerError(str(e)) from e

    if container.form_type != WAVE_ID:
        raise ContainerError(f"Not a WAVE file (form type {container.form_type!r})")

    roles = classify_chunks(container.chunks)
    fmt, payload = select_fmt_and_data(roles)

    logger.debug(
        "fmt: %s, %d ch, %d Hz, %d-bit (stored block_align=%d, bytes_per_second=%d)",
        fmt.format_code.display_name,
        fmt.channels,
        fmt.sample_rate,
        fmt.bits.value,
        fmt.block_align,
        fmt.bytes_per_second,
    )

    # Wave requires a positive rate and channel count
    if fmt.channels == 0:
        raise FormatUnsupported("fmt chunk declares 0 channels", field="channels")
    if fmt.sample_rate == 0:
        raise FormatUnsupported("fmt chunk declares a 0 Hz sample rate", field="sample_rate")

    samples = decode_samples(payload, fmt.bits)

    leftover = len(payload) % fmt.bits.width
    if leftover:
        logger.debug("Discarded %d trailing byte(s) of partial sample data", leftover)

    try:
        return Wave(
            format_code=fmt.format_code,
            sample_rate=fmt.sample_rate,
            channels=fmt.channels,
            bits=fmt.bits,
            samples=samples,
        )
    except ValueError as e:
        # Derived block align or byte rate would not fit the fmt chunk
        raise FormatUnsupported(str(e)) from e


def encode(wave: Wave) -> bytes:
    """Encode a wave as a complete WAV file.

    Encoding never fails: integer encodings saturate out-of-range samples.

    Args:
        wave: The wave to encode.

    Returns:
        The WAV file bytes: RIFF header, fmt chunk, then data chunk.
    """
    fmt = FmtChunk(
        format_code=wave.format_code,
        channels=wave.channels,
        sample_rate=wave.sample_rate,
        bytes_per_second=wave.bytes_per_second,
        block_align=wave.block_align,
        bits=wave.bits,
    )
    payload = encode_samples(wave.samples, wave.bits)

    logger.debug(
        "Encoding %d samples as %d-bit (%d bytes)", len(wave.samples), wave.bits, len(payload)
    )

    return riff.build(WAVE_ID, [(FMT_ID, build_fmt_chunk(fmt)), (DATA_ID, payload)])
