"""Delete Conversation Command."""

import logging
from dataclasses import dataclass
from jai_backend.domain.exceptions.entity_not_found import EntityNotFoundError
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.domain.value_objects.user_id import UserId
from jai_backend.domain.ports.repositories import ConversationRepository
from jai_backend.application.common.interfaces import Command, CommandHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteConversationCommand(Command[bool]):
    conversation_id: ConversationId
    user_id: UserId


class DeleteConversationHandler(CommandHandler[bool]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: DeleteConversationCommand) -> bool:
        # owner-scoped: someone else's conversation is indistinguishable from a missing one
        deleted = await self._conversation_repository.delete(
            command.user_id, command.conversation_id
        )
        if not deleted:
            logger.info(
                f"Conversation {command.conversation_id} not found or access denied "
                f"for user {command.user_id}"
            )
            raise EntityNotFoundError("Conversation not found or access denied.")

        logger.info(
            f"Conversation {command.conversation_id} deleted by user {command.user_id}"
        )
        return True
