"""Dependency providers for the FastAPI application."""

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from app.config import Settings, get_settings
from app.services.chat_resolver import ChatResolver
from app.services.gemini_service import GeminiService, ReplyProvider


async def get_http_client(connection: HTTPConnection) -> httpx.AsyncClient:
    """Retrieve the shared AsyncClient from application state."""

    return connection.app.state.http_client  # type: ignore[return-value]


async def get_reply_provider(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ReplyProvider | None:
    """Gemini adapter, or ``None`` when no API key is configured."""

    if not settings.provider_configured:
        return None
    return GeminiService(client=client, settings=settings)


async def get_chat_resolver(
    provider: ReplyProvider | None = Depends(get_reply_provider),
) -> ChatResolver:
    """Dependency provider for ChatResolver."""

    return ChatResolver(provider=provider)
