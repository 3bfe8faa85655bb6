"""List Conversations Query."""

from dataclasses import dataclass
from jai_backend.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from jai_backend.application.common.interfaces import Query, QueryHandler
from jai_backend.domain.entities.conversation import ConversationSummary
from jai_backend.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[ConversationSummary]]):
    user_id: UserId


class ListConversationsHandler(QueryHandler[list[ConversationSummary]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: ListConversationsQuery) -> list[ConversationSummary]:
        return await self._conversation_repository.list_summaries(query.user_id)
