from pathlib import Path

import pytest

from voicememo.config import load_config
from voicememo.exceptions import ConfigurationError


def test_defaults():
    config = load_config({"OPENAI_API_KEY": "sk-abc"})
    assert config.openai.api_key == "sk-abc"
    assert config.openai.transcription_model == "whisper-1"
    assert config.openai.summary_model == "gpt-4o"
    assert config.openai.max_tokens == 1500
    assert config.openai.temperature == 0.5
    assert config.openai.max_attempts == 1
    assert config.openai.timeout is None
    assert config.paths.audio_path == Path("input/memo.m4a")
    assert config.paths.transcript_path == Path("output/transcription.txt")
    assert config.paths.summary_path == Path("output/thoughts.md")
    assert config.target_pages == 2
    assert config.verify_transcript_source is False


def test_overrides():
    config = load_config(
        {
            "OPENAI_API_KEY": "sk-abc",
            "OPENAI_BASE_URL": "http://localhost:8080/v1/",
            "OPENAI_MAX_ATTEMPTS": "3",
            "OPENAI_TIMEOUT": "30",
            "MEMO_AUDIO_PATH": "/data/note.mp3",
            "MEMO_OUTPUT_DIR": "/data/out",
            "MEMO_TARGET_PAGES": "4",
            "MEMO_VERIFY_TRANSCRIPT": "TRUE",
        }
    )
    assert config.openai.chat_completions_url == "http://localhost:8080/v1/chat/completions"
    assert config.openai.transcriptions_url == "http://localhost:8080/v1/audio/transcriptions"
    assert config.openai.max_attempts == 3
    assert config.openai.timeout == 30.0
    assert config.paths.audio_path == Path("/data/note.mp3")
    assert config.paths.summary_path == Path("/data/out/thoughts.md")
    assert config.target_pages == 4
    assert config.verify_transcript_source is True


@pytest.mark.parametrize("env", [{}, {"OPENAI_API_KEY": "  "}])
def test_missing_key(env):
    with pytest.raises(ConfigurationError):
        load_config(env)


def test_invalid_value():
    with pytest.raises(ConfigurationError):
        load_config({"OPENAI_API_KEY": "sk-abc", "MEMO_TARGET_PAGES": "two"})
