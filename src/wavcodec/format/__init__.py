"""WAV container codec.

This module decodes WAV files into normalized float samples and encodes
them back into canonical WAV files.

Format Overview
---------------
Files written by the encoder always have this layout:

    +----------------------------------------+
    | RIFF Header ("WAVE")         12 bytes  |
    +----------------------------------------+
    | fmt  chunk (audio format)    24 bytes  |
    |   - format code, channels              |
    |   - sample rate, bytes/sec             |
    |   - block align, bits/sample           |
    +----------------------------------------+
    | data chunk (samples)                   |
    |   - 8-bit unsigned                     |
    |   - 16/24-bit signed little-endian     |
    |   - 32-bit float little-endian         |
    +----------------------------------------+

The decoder requires the fmt and data chunks to be the first two chunks.

Example Usage
-------------
>>> from wavcodec.format import Bits, Wave, decode, encode
>>> wave = Wave(sample_rate=44100, channels=1, bits=Bits.I16, samples=[0.0, 0.5, -0.5])
>>> data = encode(wave)
>>> decode(data).samples.tolist()
[0.0, 0.5, -0.5]
"""

from wavcodec.format.codec import decode, encode
from wavcodec.format.errors import (
    ContainerError,
    DecodeError,
    FieldTruncated,
    FormatUnsupported,
    StructuralMismatch,
)
from wavcodec.format.io import load_wav, save_wav
from wavcodec.format.riff import RiffChunk, RiffError
from wavcodec.format.types import Bits, FmtChunk, FormatCode, Wave

__all__ = [
    # Types
    "Wave",
    "Bits",
    "FormatCode",
    "FmtChunk",
    "RiffChunk",
    # Codec
    "decode",
    "encode",
    # Files
    "load_wav",
    "save_wav",
    # Errors
    "DecodeError",
    "ContainerError",
    "FormatUnsupported",
    "FieldTruncated",
    "StructuralMismatch",
    "RiffError",
]
