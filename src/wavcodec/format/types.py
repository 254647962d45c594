"""Python types for decoded WAV audio.

These types describe the in-memory form of a WAV file: the format tag, the
sample bit depth, and the immutable ``Wave`` value produced by the decoder
and consumed by the encoder.
"""

from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np
from numpy.typing import ArrayLike, NDArray

U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF


class FormatCode(IntEnum):
    """WAVE format tag stored in the first field of the fmt chunk.

    Only PCM is accepted when decoding; every tag can be written so values
    built by callers round-trip through the encoder unchanged.
    """

    PCM = 1
    """Uncompressed linear PCM."""

    IEEE_FLOAT = 3
    """IEEE-754 floating point samples."""

    ALAW = 6
    """ITU G.711 A-law."""

    MULAW = 7
    """ITU G.711 mu-law."""

    EXTENSIBLE = 65534
    """WAVE_FORMAT_EXTENSIBLE (sub-format in the fmt extension)."""

    @classmethod
    def from_code(cls, code: int) -> "FormatCode | None":
        """Convert a raw 16-bit format tag, returning None if unknown."""
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        """Human-readable name for this format."""
        names = {
            self.PCM: "PCM",
            self.IEEE_FLOAT: "IEEE Float",
            self.ALAW: "A-law",
            self.MULAW: "mu-law",
            self.EXTENSIBLE: "Extensible",
        }
        return names[self]


class Bits(IntEnum):
    """Supported sample encodings, keyed by bits per sample."""

    U8 = 8
    """Unsigned 8-bit integer, 128 is silence."""

    I16 = 16
    """Signed 16-bit little-endian integer."""

    I24 = 24
    """Signed 24-bit little-endian integer packed in 3 bytes."""

    F32 = 32
    """IEEE-754 32-bit little-endian float."""

    @classmethod
    def from_bits(cls, bits_per_sample: int) -> "Bits | None":
        """Convert a raw bits-per-sample value, returning None if unsupported."""
        try:
            return cls(bits_per_sample)
        except ValueError:
            return None

    @property
    def width(self) -> int:
        """Number of bytes occupied by one sample."""
        return self.value // 8


@dataclass(frozen=True)
class FmtChunk:
    """The six fields of a fmt chunk exactly as stored in the file."""

    format_code: FormatCode
    channels: int
    sample_rate: int
    bytes_per_second: int
    block_align: int
    bits: Bits


@dataclass(frozen=True, eq=False)
class Wave:
    """A decoded WAV file.

    ``samples`` is the flat interleaved stream of normalized amplitudes in
    playback order. No de-interleaving is performed, so its length need not
    be a multiple of ``channels``.
    """

    sample_rate: int
    """Sample rate in Hz."""

    channels: int
    """Number of interleaved channels."""

    bits: Bits
    """Sample encoding used in the data chunk."""

    samples: NDArray[np.float32] = field(default_factory=lambda: np.zeros(0, dtype=np.float32))
    """Normalized samples, read-only float32 array."""

    format_code: FormatCode = FormatCode.PCM
    """Format tag written to the fmt chunk."""

    def __post_init__(self) -> None:
        for name in ("sample_rate", "channels"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            object.__setattr__(self, name, int(value))

        if not 0 < self.sample_rate <= U32_MAX:
            raise ValueError(f"sample_rate must be in 1..{U32_MAX}, got {self.sample_rate}")
        if not 0 < self.channels <= U16_MAX:
            raise ValueError(f"channels must be in 1..{U16_MAX}, got {self.channels}")

        object.__setattr__(self, "bits", Bits(self.bits))
        object.__setattr__(self, "format_code", FormatCode(self.format_code))

        # Derived fmt fields must fit their u16/u32 slots
        if self.block_align > U16_MAX:
            raise ValueError(f"block_align {self.block_align} exceeds {U16_MAX}")
        if self.bytes_per_second > U32_MAX:
            raise ValueError(f"bytes_per_second {self.bytes_per_second} exceeds {U32_MAX}")

        samples = np.array(self.samples, dtype=np.float32).reshape(-1)
        samples.flags.writeable = False
        object.__setattr__(self, "samples", samples)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wave):
            return NotImplemented
        return (
            self.format_code == other.format_code
            and self.sample_rate == other.sample_rate
            and self.channels == other.channels
            and self.bits == other.bits
            and np.array_equal(self.samples, other.samples)
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def block_align(self) -> int:
        """Bytes per multi-channel frame, derived from channels and bits."""
        return self.channels * self.bits.width

    @property
    def bytes_per_second(self) -> int:
        """Average data rate, derived from sample rate and block align."""
        return self.sample_rate * self.block_align

    @property
    def num_frames(self) -> int:
        """Number of complete multi-channel frames in the sample stream."""
        return len(self.samples) // self.channels

    @property
    def duration(self) -> float:
        """Duration in seconds of the complete frames."""
        return self.num_frames / self.sample_rate

    def with_bits(self, bits: Bits | int) -> "Wave":
        """Return a copy of this wave that will be encoded at a different depth."""
        return Wave(
            sample_rate=self.sample_rate,
            channels=self.channels,
            bits=Bits(bits),
            samples=self.samples,
            format_code=self.format_code,
        )


@dataclass(frozen=True)
class Fmt:
    """Chunk classified as a parsed fmt chunk."""

    fields: FmtChunk


@dataclass(frozen=True)
class Data:
    """Chunk classified as raw sample payload."""

    payload: bytes


@dataclass(frozen=True)
class Unrecognized:
    """Chunk with a tag the codec does not interpret."""

    tag: bytes


# Type alias for the classification of a single RIFF chunk
ChunkRole = Fmt | Data | Unrecognized


def as_samples(values: ArrayLike) -> NDArray[np.float32]:
    """Coerce an array-like of amplitudes to a flat float32 array."""
    return np.asarray(values, dtype=np.float32).reshape(-1)
