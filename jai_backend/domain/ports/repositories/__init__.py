from jai_backend.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)

__all__ = ["ConversationRepository"]
