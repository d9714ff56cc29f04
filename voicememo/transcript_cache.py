"""
Transcript cache policies.

The transcript file doubles as a cache.  By default its mere existence is a
cache hit, whatever audio it was produced from.  With ``verify_source``
enabled a sidecar file next to the transcript records the SHA-256 of the
audio bytes, and the cached transcript is only reused when the current audio
hashes to the same value.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .audio_metadata import audio_digest

logger = logging.getLogger(__name__)

DIGEST_SUFFIX = ".sha256"


def digest_path(transcript_path: Path) -> Path:
    return transcript_path.with_name(transcript_path.name + DIGEST_SUFFIX)


def load_cached(transcript_path: Path, audio_path: Path, *, verify_source: bool = False) -> Optional[str]:
    """Return the cached transcript, or ``None`` on a cache miss."""
    if not transcript_path.exists():
        return None
    if verify_source:
        sidecar = digest_path(transcript_path)
        if not sidecar.exists():
            logger.info("No audio digest next to %s; transcribing again", transcript_path)
            return None
        if sidecar.read_text(encoding="utf-8").strip() != audio_digest(audio_path):
            logger.info("Audio changed since %s was written; transcribing again", transcript_path)
            return None
    logger.info("Transcription file already exists. Using the existing file.")
    with open(transcript_path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def store(transcript_path: Path, audio_path: Path, transcript: str, *, verify_source: bool = False) -> None:
    """Write ``transcript`` verbatim, plus the audio digest when verifying.

    Without verification any digest left by an earlier run is removed, since
    it no longer describes the transcript on disk.
    """
    transcript_path.write_text(transcript, encoding="utf-8", newline="")
    sidecar = digest_path(transcript_path)
    if verify_source:
        sidecar.write_text(audio_digest(audio_path), encoding="utf-8")
    else:
        sidecar.unlink(missing_ok=True)
