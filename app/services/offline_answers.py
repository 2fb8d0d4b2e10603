"""Canned answers used when the reply provider is unavailable.

Rules are checked in order and the first matching category wins, so a question
about the price of registering is answered with registration guidance. Keywords
only match at the start of a word, so "clinically" is not a call for support.
"""

from __future__ import annotations

import re
from typing import NamedTuple

BULLET = "• "


class AnswerRule(NamedTuple):
    """A keyword pattern and the statements returned when it matches."""

    name: str
    pattern: re.Pattern[str] | None
    statements: tuple[str, ...]


REGISTRATION = AnswerRule(
    name="registration",
    pattern=re.compile(
        r"\b(?:regist|sign[\s-]?up|onboard|enrol"
        r"|create (?:an |my )?account|get started)"
    ),
    statements=(
        "Click \"Get Started\" or \"Register\" on the AyurSutra home page.",
        "Enter your clinic or practitioner details and verify your email.",
        "Add your therapists, therapy rooms and working hours.",
        "Import or add patients, then start scheduling Panchakarma sessions.",
    ),
)

PRICING = AnswerRule(
    name="pricing",
    pattern=re.compile(r"\b(?:pric|cost|trial|subscri|fees?\b|plans\b|how much)"),
    statements=(
        "AyurSutra offers plans for individual practitioners, clinics and hospitals.",
        "A free trial lets you explore scheduling and patient management first.",
        "Pricing scales with the number of practitioners and centres you manage.",
        "Contact our team for a tailored quote or enterprise pricing.",
    ),
)

THERAPY = AnswerRule(
    name="therapy",
    pattern=re.compile(
        r"\b(?:therap|panchakarma|procedure|detox|vamana|virechana|basti|nasya"
        r"|raktamokshana|abhyanga|treatment)"
    ),
    statements=(
        "Plan the full Panchakarma course: purvakarma, pradhanakarma and paschatkarma.",
        "Schedule procedures such as Vamana, Virechana, Basti and Nasya automatically.",
        "Track detox progress, vitals and practitioner notes for every session.",
        "Send patients pre- and post-procedure care instructions and reminders.",
    ),
)

FEATURES = AnswerRule(
    name="features",
    pattern=re.compile(
        r"\b(?:feature|module|capabilit|what can|(?:re)?schedul"
        r"|dashboard|report|notif|remind)"
    ),
    statements=(
        "Automated therapy scheduling with room and therapist availability.",
        "Patient records, consent forms and progress tracking in one place.",
        "Appointment reminders and notifications for patients and staff.",
        "Dashboards and reports on sessions, outcomes and centre utilisation.",
    ),
)

SUPPORT = AnswerRule(
    name="support",
    pattern=re.compile(
        r"\b(?:support|help(?:desk|ing|s)?\b|contact|issue|problem|e-?mail|phone"
        r"|call(?:s|ing|ed)?\b)"
    ),
    statements=(
        "Use the in-app Help section for guides and frequently asked questions.",
        "Reach our support team through the Contact page or by email.",
        "Describe the issue with screenshots so we can resolve it quickly.",
    ),
)

GENERIC = AnswerRule(
    name="generic",
    pattern=None,
    statements=(
        "I can answer questions about AyurSutra, Ayurveda and Panchakarma.",
        "Ask me about registration, pricing, therapies or product features.",
        "For anything else, please reach out to our support team.",
    ),
)

RULES: tuple[AnswerRule, ...] = (REGISTRATION, PRICING, THERAPY, FEATURES, SUPPORT)


def match_rule(message: str) -> AnswerRule:
    """Return the first rule whose pattern occurs in ``message``."""

    text = message.lower()
    for rule in RULES:
        if rule.pattern is not None and rule.pattern.search(text):
            return rule
    return GENERIC


def render_bullets(statements: tuple[str, ...]) -> str:
    return "\n".join(f"{BULLET}{statement}" for statement in statements)


def answer_offline(message: str) -> str:
    """Return the bullet list answer for ``message``; never empty."""

    return render_bullets(match_rule(message).statements)
