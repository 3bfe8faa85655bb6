"""
Shortcut router - answers a fixed set of prompts locally.

Classification is an ordered list of (category, phrase set) rules; the first
rule whose phrase occurs in the normalized prompt wins. Matched prompts never
reach the language model.
"""

from datetime import datetime
from enum import Enum
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from jai_backend.prompts.shortcuts import ShortcutPrompts


class ShortcutCategory(str, Enum):
    IDENTITY = "identity"
    DATE_QUERY = "date_query"
    NONE = "none"


_STRIP_TABLE = str.maketrans("", "", ShortcutPrompts.STRIPPED_CHARACTERS)

SHORTCUT_RULES: tuple[tuple[ShortcutCategory, tuple[str, ...]], ...] = (
    (ShortcutCategory.IDENTITY, ShortcutPrompts.IDENTITY_PHRASES),
    (ShortcutCategory.DATE_QUERY, ShortcutPrompts.DATE_PHRASES),
)


def normalize_prompt(prompt: str) -> str:
    return prompt.lower().translate(_STRIP_TABLE)


def format_long_date(moment: datetime) -> str:
    """e.g. "Sunday, October 18, 2026" (day without zero padding)."""
    return f"{moment:%A, %B} {moment.day}, {moment.year}"


class ShortcutRouter:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._tz = ZoneInfo(ShortcutPrompts.DATE_TIMEZONE)
        self._clock = clock or (lambda: datetime.now(self._tz))

    def classify(self, prompt: str) -> ShortcutCategory:
        normalized = normalize_prompt(prompt)
        for category, phrases in SHORTCUT_RULES:
            if any(phrase in normalized for phrase in phrases):
                return category
        return ShortcutCategory.NONE

    def reply(self, category: ShortcutCategory) -> str:
        if category is ShortcutCategory.IDENTITY:
            return ShortcutPrompts.IDENTITY_RESPONSE
        if category is ShortcutCategory.DATE_QUERY:
            today = self._clock().astimezone(self._tz)
            return ShortcutPrompts.DATE_RESPONSE_TEMPLATE.format(
                date=format_long_date(today)
            )
        raise ValueError(f"No shortcut reply for category {category.value!r}")
