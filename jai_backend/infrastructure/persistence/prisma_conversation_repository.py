"""
Prisma Conversation Repository Implementation.

- Implements ConversationRepository port from domain layer
- Uses Prisma client for database operations (schema: prisma/schema.prisma)
- Maps between Prisma models and domain entities
- All methods are async and owner-scoped

Mapping:
- Prisma Conversation: id, user_id, title, created_at, updated_at, messages
- Prisma Message: id, conversation_id, seq, sender, content, created_at
- seq is the message's position in the conversation and defines its order

save() is an upsert-append: the conversation row is created or its
updated_at refreshed, and messages are inserted with skip_duplicates, all in
one transaction. Saving the same aggregate twice stores nothing new. A
message skipped because another request already holds its seq position
aborts the transaction with StorageError, so a user/ai pair is never split.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from prisma.errors import PrismaError

from jai_backend.domain.entities.conversation import Conversation, ConversationSummary
from jai_backend.domain.entities.message import Message, Sender
from jai_backend.domain.exceptions import StorageError
from jai_backend.domain.ports.repositories import ConversationRepository
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.domain.value_objects.message_id import MessageId
from jai_backend.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Conversation as PrismaConversation
    from prisma.models import Message as PrismaMessage

logger = logging.getLogger(__name__)

_WITH_MESSAGES = {"messages": {"order_by": {"seq": "asc"}}}
_WITH_LAST_MESSAGE = {"messages": {"order_by": {"seq": "desc"}, "take": 1}}


class PrismaConversationRepository(ConversationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_message(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            sender=Sender(record.sender),
            content=record.content,
            created_at=record.created_at,
        )

    def _to_entity(self, record: PrismaConversation) -> Conversation:
        """Map Prisma record to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            owner_id=UserId(record.user_id),
            title=record.title,
            created_at=record.created_at,
            updated_at=record.updated_at,
            messages=[self._to_message(m) for m in (record.messages or [])],
        )

    async def list_summaries(self, owner_id: UserId) -> list[ConversationSummary]:
        """Get conversation headers for user, ordered by created_at desc."""
        try:
            records = await self._prisma.conversation.find_many(
                where={"user_id": owner_id.value},
                order={"created_at": "desc"},
            )
        except PrismaError as e:
            raise StorageError(f"Failed to list conversations: {e}") from e
        return [
            ConversationSummary(
                id=ConversationId(r.id), title=r.title, created_at=r.created_at
            )
            for r in records
        ]

    async def get_by_id(
        self, owner_id: UserId, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        try:
            record = await self._prisma.conversation.find_first(
                where={"id": conversation_id.value, "user_id": owner_id.value},
                include=_WITH_MESSAGES,
            )
        except PrismaError as e:
            raise StorageError(f"Failed to load conversation: {e}") from e
        return self._to_entity(record) if record else None

    async def recent_excluding(
        self,
        owner_id: UserId,
        exclude_id: Optional[ConversationId],
        limit: int,
    ) -> list[Conversation]:
        """Get the user's most recently updated conversations, skipping exclude_id.

        Each comes with its last message only.
        """
        where: dict[str, Any] = {"user_id": owner_id.value}
        if exclude_id:
            where["NOT"] = [{"id": exclude_id.value}]
        try:
            records = await self._prisma.conversation.find_many(
                where=where,
                order={"updated_at": "desc"},
                take=limit,
                include=_WITH_LAST_MESSAGE,
            )
        except PrismaError as e:
            raise StorageError(f"Failed to load recent conversations: {e}") from e
        return [self._to_entity(record) for record in records]

    async def save(self, conversation: Conversation) -> None:
        """Save (create or update) conversation and append unsaved messages."""
        try:
            async with self._prisma.tx() as tx:
                await tx.conversation.upsert(
                    where={"id": conversation.id.value},
                    data={
                        "create": {
                            "id": conversation.id.value,
                            "user_id": conversation.owner_id.value,
                            "title": conversation.title,
                            "created_at": conversation.created_at,
                            "updated_at": conversation.updated_at,
                        },
                        "update": {
                            "updated_at": conversation.updated_at,
                        },
                    },
                )
                if conversation.messages:
                    await tx.message.create_many(
                        data=[
                            {
                                "id": message.id.value,
                                "conversation_id": conversation.id.value,
                                "seq": seq,
                                "sender": message.sender.value,
                                "content": message.content,
                                "created_at": message.created_at,
                            }
                            for seq, message in enumerate(conversation.messages)
                        ],
                        skip_duplicates=True,
                    )
                    stored = await tx.message.count(
                        where={"id": {"in": [m.id.value for m in conversation.messages]}}
                    )
                    if stored != len(conversation.messages):
                        # a concurrent append took one of these seq positions
                        raise StorageError(
                            f"Conversation {conversation.id} was modified concurrently"
                        )
        except PrismaError as e:
            raise StorageError(f"Failed to save conversation: {e}") from e
        logger.debug(
            f"Saved conversation {conversation.id} "
            f"({len(conversation.messages)} messages)"
        )

    async def delete(self, owner_id: UserId, conversation_id: ConversationId) -> bool:
        """Delete conversation (messages cascade). Returns True if deleted."""
        try:
            count = await self._prisma.conversation.delete_many(
                where={"id": conversation_id.value, "user_id": owner_id.value}
            )
        except PrismaError as e:
            raise StorageError(f"Failed to delete conversation: {e}") from e
        return count > 0
