"""
Audio metadata utilities.

This module reads the duration of an audio recording from its container
metadata.  Probing is performed locally using the `pydub` library which in
turn relies on ``ffprobe`` (shipped with ``ffmpeg``).  The audio itself is
never decoded.
"""

from __future__ import annotations

import hashlib
import logging
import math
from pathlib import Path
from typing import Union

from pydub.utils import mediainfo

from .exceptions import AudioMetadataError
from .models import AudioSource

logger = logging.getLogger(__name__)


def read_audio_source(audio_path: Union[str, Path]) -> AudioSource:
    """Probe an audio file and return it with its duration.

    Args:
        audio_path: Path to the audio file.  Any container ``ffprobe``
            understands is accepted (m4a, mp3, wav, ...).

    Returns:
        An :class:`AudioSource` carrying the duration in seconds.

    Raises:
        AudioMetadataError: If the file is missing, the prober cannot be run,
            or the metadata has no usable ``duration``.
    """
    path = Path(audio_path)
    if not path.is_file():
        raise AudioMetadataError(str(path), FileNotFoundError(str(path)))
    try:
        info = mediainfo(str(path))
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error parsing audio file metadata: %s", exc)
        raise AudioMetadataError(str(path), exc) from exc

    raw_duration = info.get("duration")
    try:
        duration = float(raw_duration)
    except (TypeError, ValueError) as exc:
        logger.error("Error parsing audio file metadata: no duration for %s", path)
        raise AudioMetadataError(str(path), exc) from exc
    if not math.isfinite(duration) or duration < 0:
        logger.error("Error parsing audio file metadata: invalid duration %r", raw_duration)
        raise AudioMetadataError(str(path), ValueError(f"Invalid duration: {raw_duration}"))

    logger.info("Audio %s is %.1f seconds long", path, duration)
    return AudioSource(path=path, duration_seconds=duration)


def audio_digest(audio_path: Union[str, Path], *, chunk_size: int = 1 << 20) -> str:
    """Return the SHA-256 hex digest of the audio file's bytes."""
    digest = hashlib.sha256()
    with open(audio_path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()
