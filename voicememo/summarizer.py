"""
Transcript summarisation utilities.

This module turns a transcript into a structured Markdown document with a
chat completion model.  The prompt asks for a summary sized to a number of
A4 pages, calibrated against the length of the recording.
"""

from __future__ import annotations

import logging

import requests

from . import openai_client
from .config import AppConfig
from .exceptions import SummarisationError
from .models import ChatCompletionResponse, SummaryRequest

logger = logging.getLogger(__name__)


def summarise(text: str, target_pages: int, duration_minutes: float, config: AppConfig) -> str:
    """Generate a Markdown summary for the given transcript.

    Args:
        text: The transcript.  It is embedded in the prompt unchanged.
        target_pages: Rough number of A4 pages the summary should fill.
        duration_minutes: Length of the recording in minutes.
        config: Application configuration.

    Returns:
        The summary with surrounding whitespace removed.  The same text is
        written to ``config.paths.summary_path``.

    Raises:
        SummarisationError: If the request fails or the API answers with an
            error status.
        ResponseDecodingError: If the answer has no completion choice.
    """
    request = SummaryRequest(
        transcript=text, target_pages=target_pages, duration_minutes=duration_minutes
    )
    payload = {
        "model": config.openai.summary_model,
        "messages": request.messages(),
        "max_tokens": config.openai.max_tokens,
        "temperature": config.openai.temperature,
    }
    try:
        response = openai_client.post_chat(config.openai, payload)
    except requests.RequestException as exc:
        logger.error("Error summarizing transcription")
        raise SummarisationError(exc) from exc

    completion = openai_client.decode(
        response, ChatCompletionResponse, config.openai.chat_completions_url
    )
    summary = completion.content.strip()

    summary_path = config.paths.summary_path
    summary_path.parent.mkdir(parents=True, exist_ok=True)
    summary_path.write_text(summary, encoding="utf-8", newline="")
    logger.info("Summary saved to %s", summary_path)
    return summary
