"""
Conversation Entity - A titled, owned, append-only chat thread.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from jai_backend.domain.entities.message import Message, Sender
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.domain.value_objects.user_id import UserId

TITLE_MAX_CHARS = 30
TITLE_ELLIPSIS = "..."


def derive_title(prompt: str) -> str:
    """First 30 characters of the opening prompt, with "..." when it was longer."""
    if len(prompt) > TITLE_MAX_CHARS:
        return prompt[:TITLE_MAX_CHARS] + TITLE_ELLIPSIS
    return prompt


@dataclass
class Conversation:
    id: ConversationId
    owner_id: UserId
    title: str
    created_at: datetime
    updated_at: datetime
    messages: list[Message] = field(default_factory=list)

    @classmethod
    def start(cls, owner_id: UserId, first_prompt: str) -> Conversation:
        """Create a new, not yet persisted conversation titled from its first prompt."""
        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId.generate(),
            owner_id=owner_id,
            title=derive_title(first_prompt),
            created_at=now,
            updated_at=now,
        )

    def append(self, sender: Sender, content: str) -> Message:
        message = Message.create(sender=sender, content=content)
        self.messages.append(message)
        self.updated_at = message.created_at
        return message

    def append_exchange(self, prompt: str, reply: str) -> Message:
        """Append a user prompt and its AI reply; returns the AI message."""
        self.append(Sender.USER, prompt)
        return self.append(Sender.AI, reply)

    @property
    def last_message(self) -> Optional[Message]:
        return self.messages[-1] if self.messages else None


@dataclass(frozen=True)
class ConversationSummary:
    """Listing row: no messages loaded."""

    id: ConversationId
    title: str
    created_at: datetime
