"""
Memory synthesizer - bounded digest of a user's other conversations.

The digest is recomputed for every model-path request and injected verbatim
into the persona instruction. Storage failures never abort the chat: the
digest degrades to a fixed "unavailable" sentinel.
"""

import logging
from typing import Optional

from jai_backend.config.settings import Config
from jai_backend.domain.entities.conversation import Conversation
from jai_backend.domain.exceptions import StorageError
from jai_backend.domain.ports.repositories import ConversationRepository
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.domain.value_objects.user_id import UserId
from jai_backend.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)

NO_HISTORY = "No previous conversation history is available for this user."
HISTORY_UNAVAILABLE = "Previous conversation history is currently unavailable."
DIGEST_HEADER = "Summary of the user's recent conversations (most recent first):"


class MemorySynthesizer:
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        limit: int = Config.MEMORY_CONVERSATION_LIMIT,
        snippet_chars: int = Config.MEMORY_SNIPPET_CHARS,
    ):
        self._conversation_repository = conversation_repository
        self._limit = limit
        self._snippet_chars = snippet_chars

    async def synthesize(
        self, owner_id: UserId, active_conversation_id: Optional[ConversationId]
    ) -> str:
        try:
            conversations = await self._conversation_repository.recent_excluding(
                owner_id, active_conversation_id, self._limit
            )
        except StorageError as e:
            logger.warning(f"Memory digest unavailable for user {owner_id}: {e}")
            increment_error(MetricsErrorType.MEMORY_UNAVAILABLE)
            return HISTORY_UNAVAILABLE

        # never the active thread, never more than the limit
        conversations = [
            c
            for c in conversations
            if active_conversation_id is None or c.id != active_conversation_id
        ][: self._limit]
        if not conversations:
            return NO_HISTORY

        lines = [DIGEST_HEADER]
        lines.extend(self._summarize(c) for c in conversations)
        return "\n".join(lines)

    def _summarize(self, conversation: Conversation) -> str:
        last = conversation.last_message
        if last is None:
            return f'Topic: "{conversation.title}". Last Exchange: none.'
        snippet = last.content[: self._snippet_chars]
        return (
            f'Topic: "{conversation.title}". '
            f'Last Exchange: {last.sender.value}: "{snippet}..."'
        )
