"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- chat.py         → MessageDTO, AiMessageDTO
- conversation.py → ConversationDTO, ConversationSummaryDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from jai_backend.application.dto.chat import AiMessageDTO, CamelModel, MessageDTO
from jai_backend.application.dto.conversation import (
    ConversationDTO,
    ConversationSummaryDTO,
)

__all__ = [
    "AiMessageDTO",
    "CamelModel",
    "MessageDTO",
    "ConversationDTO",
    "ConversationSummaryDTO",
]
