"""Assemble the single text prompt sent to the reply provider."""

from __future__ import annotations

from typing import Sequence

from app.models import HistoryEntry

SYSTEM_PROMPT = (
    "You are a friendly, expert assistant for AyurSutra - Panchakarma patient "
    "management and automated therapy scheduling software.\n"
    "Answer questions ONLY about AyurSutra, Ayurveda, Panchakarma modules, "
    "features, benefits, onboarding, registration, pricing and related usage.\n"
    "Start every answer with a short friendly greeting. Be accurate, concise, and "
    "respond in clear bullet points where appropriate. If the user asks something "
    "outside this scope, politely state that you can only answer questions related "
    "to AyurSutra."
)

_ROLE_LABELS = {"user": "User", "assistant": "Assistant"}


def build_prompt(message: str, history: Sequence[HistoryEntry] = ()) -> str:
    """Return the preamble, the serialized history and the new user message."""

    history_text = "\n".join(
        f"{_ROLE_LABELS[entry.role]}: {entry.content}" for entry in history
    )
    sections = [SYSTEM_PROMPT]
    if history_text:
        sections.append(history_text)
    sections.append(f"User: {message}")
    return "\n\n".join(sections)
