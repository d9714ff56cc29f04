"""Domain models and API schemas for the voice memo pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, Field

SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes transcriptions into "
    "structured thoughts in Markdown format."
)

USER_PROMPT = (
    "Summarize the following transcription into formatted and structured "
    "thoughts in Markdown. The summary should be succinct but expansive, and "
    "cover roughly {pages} pages of A4 for this {minutes} mins recording."
    "\n\nTranscription:\n{transcript}"
)


class AudioSource(BaseModel, frozen=True):
    """A single audio recording and the duration read from its container."""

    path: Path
    duration_seconds: float

    @property
    def duration_minutes(self) -> float:
        return self.duration_seconds / 60


class SummaryRequest(BaseModel, frozen=True):
    """Everything the summariser needs to build its prompt."""

    transcript: str
    target_pages: int
    duration_minutes: float

    def messages(self) -> List[Dict[str, str]]:
        """Return the system and user chat messages for this request."""
        user_prompt = USER_PROMPT.format(
            pages=self.target_pages,
            minutes=format_minutes(self.duration_minutes),
            transcript=self.transcript,
        )
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt},
        ]


class TranscriptionResponse(BaseModel):
    """Body returned by the transcription endpoint."""

    text: str


class ChatMessage(BaseModel):
    role: str = "assistant"
    content: str


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    """Body returned by the chat completion endpoint."""

    choices: List[ChatChoice] = Field(min_length=1)

    @property
    def content(self) -> str:
        return self.choices[0].message.content


def format_minutes(minutes: float) -> str:
    """Render a minute count the way it reads in a sentence.

    Whole numbers lose their fractional part (``10.0`` becomes ``10``);
    anything else keeps every digit of its shortest round-trip form.
    """
    if float(minutes).is_integer():
        return str(int(minutes))
    return repr(float(minutes))
