"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from jai_backend.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)

__all__ = [
    "PrismaConversationRepository",
]
