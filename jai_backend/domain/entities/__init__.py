"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from jai_backend.domain.entities.conversation import Conversation, ConversationSummary
from jai_backend.domain.entities.message import Message, Sender

__all__ = [
    "Conversation",
    "ConversationSummary",
    "Message",
    "Sender",
]
