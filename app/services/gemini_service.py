"""Adapter for the Google Generative Language ``generateContent`` API."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from app.config import Settings
from app.exceptions import ProviderUnavailableError

logger = logging.getLogger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.3,
    "topK": 32,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}

_LOGGED_BODY_LIMIT = 500


class ReplyProvider(Protocol):
    """Anything that turns a prompt into reply text."""

    async def send(self, prompt: str) -> str:
        """Return reply text or raise :class:`ProviderUnavailableError`."""


class GeminiService:
    """Wrapper around Gemini's generateContent endpoint."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    @property
    def endpoint(self) -> str:
        base_url = self._settings.gemini_base_url.rstrip("/")
        return f"{base_url}/models/{self._settings.gemini_model}:generateContent"

    async def send(self, prompt: str) -> str:
        """Generate a reply for ``prompt`` with a single request."""

        api_key = self._settings.google_api_key
        if not api_key:
            raise ProviderUnavailableError(
                "GOOGLE_API_KEY is not configured", reason="missing_credential"
            )

        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": GENERATION_CONFIG,
        }

        try:
            response = await self._client.post(
                self.endpoint,
                params={"key": api_key},
                json=payload,
                timeout=self._settings.chat_timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Gemini request timed out", exc_info=exc)
            raise ProviderUnavailableError(
                "Reply provider timed out", reason="timeout"
            ) from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Gemini request failed",
                extra={
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text[:_LOGGED_BODY_LIMIT],
                },
            )
            raise ProviderUnavailableError(
                "Reply provider returned an error",
                status_code=exc.response.status_code,
                reason="http_status",
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Gemini request failed in transport", exc_info=exc)
            raise ProviderUnavailableError(
                "Reply provider request failed", reason="transport"
            ) from exc

        try:
            data = response.json()
        except ValueError as exc:
            logger.error(
                "Malformed Gemini response",
                extra={"response_text": response.text[:_LOGGED_BODY_LIMIT]},
            )
            raise ProviderUnavailableError(
                "Invalid reply provider payload", reason="malformed_payload"
            ) from exc

        text = extract_reply_text(data)
        if not text:
            logger.warning("Gemini response contained no text")
            raise ProviderUnavailableError(
                "Reply provider returned empty content", reason="empty_text"
            )

        return text


def extract_reply_text(data: Any) -> str:
    """Pull the reply out of a generateContent response body.

    Non-empty text parts of the first candidate are joined with newlines. When
    there are none the legacy ``output`` field of that candidate is used. Any
    other shape yields an empty string.
    """

    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    if not isinstance(first, dict):
        return ""

    content = first.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if isinstance(parts, list):
        texts = [
            part["text"]
            for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str) and part["text"]
        ]
        if texts:
            return "\n".join(texts)

    output = first.get("output")
    if isinstance(output, str):
        return output
    return ""
