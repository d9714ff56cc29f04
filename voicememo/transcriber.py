"""
Speech-to-text stage.

This module encapsulates the transcription of the input recording.  The
``transcribe`` function probes the audio for its duration, returns a cached
transcript when one is on disk, and otherwise uploads the audio to the
transcription endpoint and writes the returned text to the transcript file.

Usage::

    from voicememo.config import load_config
    from voicememo.transcriber import transcribe

    config = load_config()
    text, minutes = transcribe(config.paths.audio_path, config)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple, Union

import requests

from . import openai_client, transcript_cache
from .audio_metadata import read_audio_source
from .config import AppConfig
from .exceptions import TranscriptionError
from .models import TranscriptionResponse

logger = logging.getLogger(__name__)


def transcribe(audio_path: Union[str, Path], config: AppConfig) -> Tuple[str, float]:
    """Transcribe an audio file, reusing a cached transcript when allowed.

    Args:
        audio_path: Path to the recording.
        config: Application configuration.  ``config.paths`` decides where
            the transcript is cached and ``config.verify_transcript_source``
            selects the cache policy.

    Returns:
        A ``(transcript, duration_minutes)`` tuple.  The duration is always
        read from the audio, even on a cache hit.

    Raises:
        AudioMetadataError: If the audio duration cannot be read.  Nothing is
            sent over the network in that case.
        TranscriptionError: If the upload fails or the API answers with an
            error status.
        ResponseDecodingError: If the API answer has no ``text`` field.
    """
    audio_path = Path(audio_path)
    transcript_path = config.paths.transcript_path
    transcript_path.parent.mkdir(parents=True, exist_ok=True)

    source = read_audio_source(audio_path)

    cached = transcript_cache.load_cached(
        transcript_path, audio_path, verify_source=config.verify_transcript_source
    )
    if cached is not None:
        return cached, source.duration_minutes

    try:
        response = openai_client.post_audio(config.openai, audio_path)
    except requests.RequestException as exc:
        logger.error("Error transcribing audio %s", audio_path)
        raise TranscriptionError(str(audio_path), exc) from exc

    body = openai_client.decode(response, TranscriptionResponse, config.openai.transcriptions_url)
    transcript_cache.store(
        transcript_path, audio_path, body.text, verify_source=config.verify_transcript_source
    )
    logger.info("Transcription saved to %s", transcript_path)
    return body.text, source.duration_minutes
