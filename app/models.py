"""Pydantic models shared across application layers."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class HistoryEntry(BaseModel):
    """One prior turn of the conversation."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Incoming chat payload.

    ``message`` is only checked for being non-empty; whitespace is kept as sent.
    """

    message: str = Field(min_length=1, description="User supplied question.")
    history: list[HistoryEntry] = Field(default_factory=list)


class ChatReply(BaseModel):
    """Successful chat response body."""

    reply: str


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""

    error: str
    details: list[dict[str, Any]] | str | None = None


class WidgetConfig(BaseModel):
    """Settings the floating chat launcher needs on the client."""

    chat_path: str
    hint_storage_key: str
    hint: str
    mode: Literal["provider", "offline"]
