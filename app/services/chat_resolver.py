"""Choose between the reply provider and the offline answers."""

from __future__ import annotations

import logging

from app.exceptions import ProviderUnavailableError
from app.models import ChatRequest
from app.services.gemini_service import ReplyProvider
from app.services.greeting import ensure_greeting
from app.services.offline_answers import answer_offline, match_rule
from app.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)


def offline_reply(message: str) -> str:
    """Greeted canned answer for ``message``."""

    return ensure_greeting(answer_offline(message))


class ChatResolver:
    """Produce the reply for one validated chat request.

    ``provider`` is ``None`` when no credential is configured, in which case
    every request is answered offline.
    """

    def __init__(self, provider: ReplyProvider | None) -> None:
        self._provider = provider

    async def resolve(self, request: ChatRequest) -> str:
        if self._provider is None:
            return self._fallback(request.message, reason="missing_credential")

        prompt = build_prompt(request.message, request.history)
        try:
            text = await self._provider.send(prompt)
        except ProviderUnavailableError as exc:
            return self._fallback(request.message, reason=exc.reason)

        if not text or not text.strip():
            return self._fallback(request.message, reason="empty_text")

        return ensure_greeting(text)

    @staticmethod
    def _fallback(message: str, reason: str) -> str:
        logger.info(
            "Answering offline",
            extra={"reason": reason, "category": match_rule(message).name},
        )
        return offline_reply(message)
