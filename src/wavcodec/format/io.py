"""Path-based helpers around the in-memory codec."""

import logging
from pathlib import Path

from wavcodec.format.codec import decode, encode
from wavcodec.format.types import Wave

logger = logging.getLogger(__name__)


def load_wav(path: Path | str) -> Wave:
    """Load and decode a WAV file.

    Args:
        path: Path to the WAV file.

    Returns:
        The decoded Wave.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        DecodeError: If the file is not a supported WAV file.
    """
    path = Path(path)
    data = path.read_bytes()
    logger.debug("Read %d bytes from %s", len(data), path)
    return decode(data)


def save_wav(path: Path | str, wave: Wave) -> None:
    """Encode a wave and write it to a file, replacing any existing file.

    Args:
        path: Destination path.
        wave: The wave to write.
    """
    path = Path(path)
    data = encode(wave)
    path.write_bytes(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
