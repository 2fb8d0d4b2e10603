"""HTTP handlers for the support chat."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.dependencies import get_chat_resolver
from app.models import ChatReply, ChatRequest, ErrorResponse, WidgetConfig
from app.services.chat_resolver import ChatResolver, offline_reply

logger = logging.getLogger(__name__)

HINT_STORAGE_KEY = "ayursutra_chat_hint_dismissed"
HINT_TEXT = (
    "👋 Want to chat about AyurSutra? I can answer questions on Panchakarma "
    "and the product."
)

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post(
    "",
    response_model=ChatReply,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def chat_endpoint(
    request: Request,
    resolver: Annotated[ChatResolver, Depends(get_chat_resolver)],
) -> ChatReply | JSONResponse:
    """Validate the message, then answer it from the provider or offline."""

    try:
        body = await request.json()
    except ValueError:
        return _bad_request(ErrorResponse(error="Invalid request", details="Invalid JSON payload."))

    try:
        payload = ChatRequest.model_validate(body)
    except ValidationError as exc:
        return _bad_request(
            ErrorResponse(
                error="Invalid request",
                details=exc.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            )
        )

    try:
        reply = await resolver.resolve(payload)
    except Exception:
        logger.exception(
            "Unexpected error while resolving chat reply",
            extra={"client": _client_repr(request)},
        )
        reply = offline_reply(payload.message)

    return ChatReply(reply=reply)


@router.get("/widget", response_model=WidgetConfig)
async def widget_config(
    settings: Annotated[Settings, Depends(get_settings)],
) -> WidgetConfig:
    """Settings for the floating chat launcher."""

    return WidgetConfig(
        chat_path=settings.chat_page_path,
        hint_storage_key=HINT_STORAGE_KEY,
        hint=HINT_TEXT,
        mode="provider" if settings.provider_configured else "offline",
    )


def _bad_request(error: ErrorResponse) -> JSONResponse:
    logger.info("Rejected chat request", extra={"error_detail": error.details})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error.model_dump(mode="json", exclude_none=True),
    )


def _client_repr(request: Request) -> str:
    """Render the remote client for logging purposes."""

    client = request.client
    if client is None:
        return "unknown"
    return f"{client.host}:{client.port}"
