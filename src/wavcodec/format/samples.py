"""Sample codec for PCM and float WAV data.

Converts raw sample bytes to normalized float32 amplitudes and back.

Supported encodings: 8-bit unsigned, 16-bit and 24-bit signed little-endian
integers, and 32-bit little-endian IEEE floats.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from wavcodec.format.types import Bits, as_samples

# Scale factors mapping full-scale integers to [-1.0, 1.0)
U8_OFFSET = 128.0
U8_SCALE = 128.0
I16_SCALE = 32768.0
I24_SCALE = 8388608.0  # 2^23

# Clamp bounds applied to scaled values before rounding
U8_RANGE = (0.0, 255.0)
I16_RANGE = (-32768.0, 32767.0)
I24_RANGE = (-8388608.0, 8388607.0)


def decode_samples(data: bytes, bits: Bits) -> NDArray[np.float32]:
    """Decode raw sample bytes to normalized float samples.

    Bytes that do not fill a whole sample at the end of ``data`` are ignored.

    Args:
        data: Raw data chunk payload.
        bits: Sample encoding of the payload.

    Returns:
        One-dimensional float32 array, one entry per complete sample.
    """
    usable = len(data) - len(data) % bits.width
    data = bytes(data[:usable])

    if bits == Bits.U8:
        return _decode_u8(data)
    elif bits == Bits.I16:
        return _decode_i16(data)
    elif bits == Bits.I24:
        return _decode_i24(data)
    elif bits == Bits.F32:
        return _decode_f32(data)
    raise ValueError(f"Unsupported bit depth: {bits}")


def _decode_u8(data: bytes) -> NDArray[np.float32]:
    """Decode 8-bit unsigned PCM samples."""
    samples = np.frombuffer(data, dtype=np.uint8)
    return (samples.astype(np.float32) - U8_OFFSET) / U8_SCALE


def _decode_i16(data: bytes) -> NDArray[np.float32]:
    """Decode 16-bit signed little-endian PCM samples."""
    samples = np.frombuffer(data, dtype="<i2")
    return samples.astype(np.float32) / I16_SCALE


def _decode_i24(data: bytes) -> NDArray[np.float32]:
    """Decode 24-bit signed little-endian PCM samples."""
    raw = np.frombuffer(data, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
    values = raw[:, 0] | (raw[:, 1] << 8) | (raw[:, 2] << 16)
    # Sign extend
    values = np.where(values >= 0x800000, values - 0x1000000, values)
    return values.astype(np.float32) / I24_SCALE


def _decode_f32(data: bytes) -> NDArray[np.float32]:
    """Decode 32-bit little-endian float samples."""
    return np.frombuffer(data, dtype="<f4").astype(np.float32)


def encode_samples(samples: ArrayLike, bits: Bits) -> bytes:
    """Encode normalized float samples to raw sample bytes.

    Integer encodings clamp the scaled value to the representable range and
    then round half away from zero. NaN encodes as silence. Float samples are
    written unchanged, including values outside [-1.0, 1.0].

    Args:
        samples: Normalized amplitudes in playback order.
        bits: Target sample encoding.

    Returns:
        Raw data chunk payload.
    """
    if bits == Bits.F32:
        # Stay in float32 so NaN payloads keep their exact bits
        return as_samples(samples).astype("<f4").tobytes()

    values = as_samples(samples).astype(np.float64)

    if bits == Bits.U8:
        return _encode_u8(values)
    elif bits == Bits.I16:
        return _encode_i16(values)
    elif bits == Bits.I24:
        return _encode_i24(values)
    raise ValueError(f"Unsupported bit depth: {bits}")


def _quantize(scaled: NDArray[np.float64], bounds: tuple[float, float]) -> NDArray[np.int64]:
    """Clamp scaled values to bounds, then round half away from zero."""
    clamped = np.clip(scaled, bounds[0], bounds[1])
    rounded = np.sign(clamped) * np.floor(np.abs(clamped) + 0.5)
    return rounded.astype(np.int64)


def _encode_u8(values: NDArray[np.float64]) -> bytes:
    """Encode 8-bit unsigned PCM samples."""
    values = np.nan_to_num(values, nan=0.0, posinf=np.inf, neginf=-np.inf)
    quantized = _quantize(values * U8_SCALE + U8_OFFSET, U8_RANGE)
    return quantized.astype(np.uint8).tobytes()


def _encode_i16(values: NDArray[np.float64]) -> bytes:
    """Encode 16-bit signed little-endian PCM samples."""
    values = np.nan_to_num(values, nan=0.0, posinf=np.inf, neginf=-np.inf)
    quantized = _quantize(values * I16_SCALE, I16_RANGE)
    return quantized.astype("<i2").tobytes()


def _encode_i24(values: NDArray[np.float64]) -> bytes:
    """Encode 24-bit signed little-endian PCM samples (3 bytes each)."""
    values = np.nan_to_num(values, nan=0.0, posinf=np.inf, neginf=-np.inf)
    quantized = _quantize(values * I24_SCALE, I24_RANGE)
    # Two's complement in the low 24 bits, then keep the three low bytes
    as_bytes = (quantized & 0xFFFFFF).astype("<u4").view(np.uint8).reshape(-1, 4)
    return as_bytes[:, :3].tobytes()
