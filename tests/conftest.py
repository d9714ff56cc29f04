"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest
import requests

import voicememo.audio_metadata as audio_metadata
from voicememo.config import AppConfig, OpenAIConfig, PathsConfig


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeOpenAI:
    """Stands in for ``requests.post`` and records every request."""

    def __init__(self) -> None:
        self.responses: List[Any] = []
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        if "files" in kwargs:
            name, handle = kwargs["files"]["file"]
            kwargs = {**kwargs, "uploaded": (name, handle.read())}
        self.calls.append((url, kwargs))
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]


@pytest.fixture
def fake_api(monkeypatch) -> FakeOpenAI:
    api = FakeOpenAI()
    monkeypatch.setattr(requests, "post", api.post)
    return api


@pytest.fixture
def audio_duration(monkeypatch):
    """Make ``mediainfo`` report the given duration (in seconds) for any file."""
    probe: Dict[str, Optional[str]] = {"duration": "600.0"}

    def fake_mediainfo(path: str) -> Dict[str, str]:
        return {} if probe["duration"] is None else {"duration": probe["duration"]}

    monkeypatch.setattr(audio_metadata, "mediainfo", fake_mediainfo)
    return probe


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    path = tmp_path / "input" / "memo.m4a"
    path.parent.mkdir()
    path.write_bytes(b"\x00\x00\x00\x20ftypM4A ")
    return path


@pytest.fixture
def config(tmp_path: Path, audio_file: Path) -> AppConfig:
    return AppConfig(
        openai=OpenAIConfig(api_key="sk-test", retry_wait_seconds=0),
        paths=PathsConfig(audio_path=audio_file, output_dir=tmp_path / "output"),
    )
