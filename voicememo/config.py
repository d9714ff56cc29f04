"""
Application configuration loaded from environment variables.

The only required variable is ``OPENAI_API_KEY``.  Everything else has a
default that reproduces the fixed layout of the pipeline:

* ``OPENAI_BASE_URL`` – API root (default ``https://api.openai.com/v1``).
* ``OPENAI_MAX_ATTEMPTS`` – Attempts per API call.  ``1`` disables retries.
* ``OPENAI_TIMEOUT`` – Per-request timeout in seconds (unset: no timeout).
* ``MEMO_AUDIO_PATH`` – Audio file to transcribe (default ``input/memo.m4a``).
* ``MEMO_OUTPUT_DIR`` – Directory for the transcript and summary.
* ``MEMO_TARGET_PAGES`` – Length of the summary in A4 pages (default ``2``).
* ``MEMO_VERIFY_TRANSCRIPT`` – Set to ``true`` to only reuse a cached
  transcript when it was produced from the same audio bytes.

The configuration is read once by :func:`load_config` and passed explicitly
to the pipeline stages.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError

TRANSCRIPT_FILE_NAME = "transcription.txt"
SUMMARY_FILE_NAME = "thoughts.md"


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI API configuration."""

    api_key: str
    base_url: str = "https://api.openai.com/v1"
    transcription_model: str = "whisper-1"
    summary_model: str = "gpt-4o"
    max_tokens: int = 1500
    temperature: float = 0.5
    max_attempts: int = Field(default=1, ge=1)
    retry_wait_seconds: float = 1.0
    timeout: Optional[float] = None

    @property
    def transcriptions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/audio/transcriptions"

    @property
    def chat_completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"


class PathsConfig(BaseModel, frozen=True):
    """Input and output locations."""

    audio_path: Path = Path("input/memo.m4a")
    output_dir: Path = Path("output")

    @property
    def transcript_path(self) -> Path:
        return self.output_dir / TRANSCRIPT_FILE_NAME

    @property
    def summary_path(self) -> Path:
        return self.output_dir / SUMMARY_FILE_NAME


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    openai: OpenAIConfig
    paths: PathsConfig = PathsConfig()
    target_pages: int = Field(default=2, ge=1)
    verify_transcript_source: bool = False


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Loads configuration from environment variables.

    Args:
        environ: Mapping to read from.  Defaults to :data:`os.environ`.

    Raises:
        ConfigurationError: If ``OPENAI_API_KEY`` is missing or a variable
            cannot be converted to its expected type.
    """
    env = os.environ if environ is None else environ
    api_key = env.get("OPENAI_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY is not set")
    try:
        return AppConfig(
            openai=OpenAIConfig(
                api_key=api_key,
                base_url=env.get("OPENAI_BASE_URL", "https://api.openai.com/v1"),
                max_attempts=env.get("OPENAI_MAX_ATTEMPTS", "1"),
                timeout=env.get("OPENAI_TIMEOUT") or None,
            ),
            paths=PathsConfig(
                audio_path=env.get("MEMO_AUDIO_PATH", "input/memo.m4a"),
                output_dir=env.get("MEMO_OUTPUT_DIR", "output"),
            ),
            target_pages=env.get("MEMO_TARGET_PAGES", "2"),
            verify_transcript_source=env.get("MEMO_VERIFY_TRANSCRIPT", "false").lower() == "true",
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
