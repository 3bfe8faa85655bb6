"""
GetConversation Query - Get a conversation with all of its messages.

Used by the frontend chat window to load a thread when the user clicks on
a conversation title.
"""

from dataclasses import dataclass

from jai_backend.application.common.interfaces import Query, QueryHandler
from jai_backend.domain.entities.conversation import Conversation
from jai_backend.domain.exceptions import EntityNotFoundError
from jai_backend.domain.ports.repositories import ConversationRepository
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetConversationQuery(Query[Conversation]):
    conversation_id: ConversationId
    user_id: UserId


class GetConversationHandler(QueryHandler[Conversation]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: GetConversationQuery) -> Conversation:
        """
        Raises:
            EntityNotFoundError: If the conversation doesn't exist or belongs
                to another user
        """
        conversation = await self._conversation_repository.get_by_id(
            query.user_id, query.conversation_id
        )
        if not conversation:
            raise EntityNotFoundError("Conversation not found or access denied.")
        return conversation
