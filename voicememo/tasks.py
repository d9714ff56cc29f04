"""
Orchestration layer for the voice memo pipeline.

``process_memo`` runs the two stages in order: transcribe the configured
recording, then summarise the transcript.  Failures are not caught here;
whatever the stages raise reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Tuple

from . import summarizer, transcriber
from .config import AppConfig

logger = logging.getLogger(__name__)


def process_memo(config: AppConfig) -> Tuple[str, str]:
    """Transcribe and summarise the configured recording.

    Returns:
        The ``(transcript, summary)`` pair.
    """
    logger.info("Processing %s", config.paths.audio_path)
    transcript, duration_minutes = transcriber.transcribe(config.paths.audio_path, config)
    summary = summarizer.summarise(transcript, config.target_pages, duration_minutes, config)
    return transcript, summary
