"""wavcodec - WAV audio codec.

This package reads and writes uncompressed WAV files, converting between
the on-disk PCM/float sample encodings and normalized float32 amplitudes.

Example Usage
-------------
>>> from wavcodec import Bits, Wave, load_wav, save_wav
>>> import numpy as np
>>>
>>> # Write one second of a 440 Hz tone
>>> t = np.arange(44100) / 44100
>>> wave = Wave(sample_rate=44100, channels=1, bits=Bits.I16, samples=0.5 * np.sin(2 * np.pi * 440 * t))
>>> save_wav("tone.wav", wave)
>>>
>>> # Read it back
>>> loaded = load_wav("tone.wav")
>>> print(f"Loaded: {loaded.num_frames} frames at {loaded.sample_rate} Hz")
"""

# Re-export format module for convenience
from wavcodec.format import (
    Bits,
    ContainerError,
    DecodeError,
    FieldTruncated,
    FormatCode,
    FormatUnsupported,
    StructuralMismatch,
    Wave,
    decode,
    encode,
    load_wav,
    save_wav,
)

__all__ = [
    # Types
    "Wave",
    "Bits",
    "FormatCode",
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
]
