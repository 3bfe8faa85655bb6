"""Chat DTOs for API request/response."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from jai_backend.domain.entities.message import Message


class CamelModel(BaseModel):
    """Serializes to camelCase (createdAt, newConversationId, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageDTO(CamelModel):
    """DTO for message data returned to frontend."""

    id: str
    sender: str
    content: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            sender=message.sender.value,
            content=message.content,
            created_at=message.created_at,
        )


class AiMessageDTO(CamelModel):
    """The assistant reply as returned by POST /chat."""

    sender: str = "ai"
    content: str
