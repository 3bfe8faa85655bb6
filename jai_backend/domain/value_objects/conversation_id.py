"""
ConversationId Value Object - opaque identifier for a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class ConversationId:
    value: str  # opaque; ids supplied by clients are never parsed

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("Conversation ID cannot be empty")

    @classmethod
    def generate(cls) -> ConversationId:
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
