"""Errors raised while decoding WAV data."""


class DecodeError(Exception):
    """Error decoding a WAV buffer."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class ContainerError(DecodeError):
    """The RIFF wrapper is malformed or is not a WAVE form."""


class FormatUnsupported(DecodeError):
    """The fmt chunk describes an encoding the codec cannot decode."""


class FieldTruncated(DecodeError):
    """A fmt chunk field extends past the end of the chunk payload."""


class StructuralMismatch(DecodeError):
    """The fmt and data chunks are not the first two chunks, in that order."""
