"""Conversation-related queries."""

from jai_backend.application.queries.conversations.get_conversation import (
    GetConversationQuery,
    GetConversationHandler,
)
from jai_backend.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)

__all__ = [
    "GetConversationQuery",
    "GetConversationHandler",
    "ListConversationsQuery",
    "ListConversationsHandler",
]
