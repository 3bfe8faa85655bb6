"""
Message Entity - A single message in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from jai_backend.domain.value_objects.message_id import MessageId


class Sender(str, Enum):
    USER = "user"
    AI = "ai"


@dataclass(frozen=True)
class Message:
    id: MessageId
    sender: Sender
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.sender, Sender):
            # raises ValueError for anything other than "user" / "ai"
            object.__setattr__(self, "sender", Sender(self.sender))

    @classmethod
    def create(cls, sender: Sender, content: str) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId.generate(),
            sender=sender,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
