"""
Infrastructure providers - database, model provider and credential verifier.

Process-wide clients are Scope.APP and written as generators so the
container finalizes them on close (prisma.disconnect(), provider.aclose()).
"""

import logging
from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from jai_backend.config.settings import Config
from jai_backend.domain.ports.credential_verifier import CredentialVerifier
from jai_backend.domain.ports.model_provider import ModelProvider
from jai_backend.domain.ports.repositories import ConversationRepository
from jai_backend.infrastructure.auth import JwtCredentialVerifier
from jai_backend.infrastructure.llm import build_model_provider
from jai_backend.infrastructure.persistence import PrismaConversationRepository

logger = logging.getLogger(__name__)


class InfrastructureProvider(Provider):
    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - connected on first use, disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("Database connected.")
        yield prisma
        await prisma.disconnect()
        logger.info("Database disconnected.")

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        """
        Provide ConversationRepository implementation.

        - Return type is ABSTRACT (ConversationRepository)
        - Implementation is CONCRETE (PrismaConversationRepository)
        """
        return PrismaConversationRepository(prisma)

    # ==================== MODEL PROVIDER ====================

    @provide(scope=Scope.APP)
    async def get_model_provider(self) -> AsyncIterable[ModelProvider]:
        provider = build_model_provider(Config)
        logger.info(f"Model provider: {provider.name}")
        yield provider
        await provider.aclose()

    # ==================== AUTH ====================

    @provide(scope=Scope.APP)
    def get_credential_verifier(self) -> CredentialVerifier:
        return JwtCredentialVerifier.from_config(Config)
