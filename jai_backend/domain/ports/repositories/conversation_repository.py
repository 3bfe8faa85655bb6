"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: jai_backend/infrastructure/persistence/prisma_conversation_repository.py

Every method is scoped by owner: a conversation owned by someone else
behaves exactly like one that does not exist.
"""

from abc import ABC, abstractmethod
from typing import Optional
from jai_backend.domain.entities.conversation import Conversation, ConversationSummary
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def list_summaries(self, owner_id: UserId) -> list[ConversationSummary]:
        """Newest first by creation time."""

    @abstractmethod
    async def get_by_id(
        self, owner_id: UserId, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def recent_excluding(
        self,
        owner_id: UserId,
        exclude_id: Optional[ConversationId],
        limit: int,
    ) -> list[Conversation]:
        """
        Most recently updated first, at most `limit`.

        Only the last message of each conversation is loaded (digest use).
        """

    @abstractmethod
    async def save(self, conversation: Conversation) -> None:
        """
        Create or update the conversation and store any messages not yet stored.

        Raises StorageError when a message could not take its position in the
        conversation (another request appended there first).
        """

    @abstractmethod
    async def delete(
        self, owner_id: UserId, conversation_id: ConversationId
    ) -> bool: ...
