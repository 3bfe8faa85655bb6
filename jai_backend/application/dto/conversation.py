"""Conversation DTOs for API request/response."""

from datetime import datetime

from jai_backend.application.dto.chat import CamelModel, MessageDTO
from jai_backend.domain.entities.conversation import Conversation, ConversationSummary


class ConversationSummaryDTO(CamelModel):
    id: str
    title: str
    created_at: datetime

    @classmethod
    def from_entity(cls, summary: ConversationSummary) -> "ConversationSummaryDTO":
        return cls(
            id=summary.id.value,
            title=summary.title,
            created_at=summary.created_at,
        )


class ConversationDTO(CamelModel):
    id: str
    user_id: str
    title: str
    messages: list[MessageDTO]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=conversation.id.value,
            user_id=conversation.owner_id.value,
            title=conversation.title,
            messages=[MessageDTO.from_entity(m) for m in conversation.messages],
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )
