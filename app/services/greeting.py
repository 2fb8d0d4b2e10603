"""Make sure every reply opens with a friendly greeting."""

from __future__ import annotations

import re

GREETING = "Hi there! 👋 "

GREETING_WORDS = ("hi", "hello", "hey", "namaste", "greetings")

_GREETING_RE = re.compile(
    r"(?:%s)\b" % "|".join(GREETING_WORDS), re.IGNORECASE
)


def has_greeting(text: str) -> bool:
    return _GREETING_RE.match(text.strip()) is not None


def ensure_greeting(text: str) -> str:
    """Prefix ``text`` with :data:`GREETING` unless it already greets."""

    if has_greeting(text):
        return text
    return f"{GREETING}{text}"
