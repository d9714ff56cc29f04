"""
Thin wrapper around the two OpenAI HTTP endpoints used by the pipeline.

Both calls are plain ``requests.post`` requests authenticated with a bearer
token.  Non-2xx responses are turned into :class:`requests.HTTPError` so that
transport and API failures travel the same path: they are logged together
with whatever error body the API returned and re-raised.

Retries are handled by ``tenacity`` and are off unless
``OpenAIConfig.max_attempts`` is greater than one.  Only transient failures
(connection errors, timeouts, 429 and 5xx answers) are retried.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from .config import OpenAIConfig
from .exceptions import ResponseDecodingError

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


def _auth_headers(config: OpenAIConfig) -> Dict[str, str]:
    return {"Authorization": f"Bearer {config.api_key}"}


def error_body(exc: requests.RequestException) -> Any:
    """Return the API's error payload, falling back to the exception message."""
    response = getattr(exc, "response", None)
    if response is None:
        return str(exc)
    try:
        return response.json()
    except ValueError:
        return response.text or str(exc)


def is_transient(exc: BaseException) -> bool:
    """Connection failures, timeouts, 429 and 5xx answers are worth retrying."""
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, requests.HTTPError):
        status = getattr(exc.response, "status_code", None)
        return status is not None and (status == 429 or status >= 500)
    return False


def _send(config: OpenAIConfig, url: str, send: Callable[[], requests.Response]) -> requests.Response:
    retrying = Retrying(
        stop=stop_after_attempt(config.max_attempts),
        wait=wait_exponential(multiplier=config.retry_wait_seconds),
        retry=retry_if_exception(is_transient),
        reraise=True,
    )
    try:
        for attempt in retrying:
            with attempt:
                response = send()
                response.raise_for_status()
    except requests.RequestException as exc:
        response = getattr(exc, "response", None)
        logger.error(
            json.dumps(
                {
                    "event": "api_error",
                    "url": url,
                    "status": getattr(response, "status_code", None),
                    "error": error_body(exc),
                },
                default=str,
            )
        )
        raise
    return response


def post_audio(config: OpenAIConfig, audio_path: Path) -> requests.Response:
    """Upload ``audio_path`` as multipart form data to the transcription endpoint.

    The file is streamed from disk and reopened on each attempt.  No size
    limit is applied locally.
    """
    url = config.transcriptions_url

    def send() -> requests.Response:
        with open(audio_path, "rb") as audio_file:
            return requests.post(
                url,
                headers=_auth_headers(config),
                files={"file": (Path(audio_path).name, audio_file)},
                data={"model": config.transcription_model},
                timeout=config.timeout,
            )

    logger.info("Uploading %s to %s", audio_path, url)
    return _send(config, url, send)


def post_chat(config: OpenAIConfig, payload: Dict[str, Any]) -> requests.Response:
    """POST a JSON chat completion request."""
    url = config.chat_completions_url

    def send() -> requests.Response:
        return requests.post(
            url,
            headers={**_auth_headers(config), "Content-Type": "application/json"},
            json=payload,
            timeout=config.timeout,
        )

    logger.info("Calling %s with model %s", url, payload.get("model"))
    return _send(config, url, send)


def decode(response: requests.Response, model: Type[ResponseModel], endpoint: str) -> ResponseModel:
    """Validate a response body against ``model``.

    Raises:
        ResponseDecodingError: If the body is not JSON or does not match.
    """
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        logger.error(json.dumps({"event": "decode_error", "url": endpoint, "error": str(exc)}))
        raise ResponseDecodingError(endpoint, exc) from exc
