"""
Dishka DI Container Setup.

- InfrastructureProvider: Prisma, repository, model provider, verifier
- ApplicationProvider: services and command/query handlers

Scope.APP = created once and shared; Scope.REQUEST = new instance per request.

Flow:
  Container → PrismaConversationRepository → SendMessageHandler → POST /chat
"""

from dishka import AsyncContainer, make_async_container

from jai_backend.setup.ioc.application import ApplicationProvider
from jai_backend.setup.ioc.infrastructure import InfrastructureProvider


def create_container() -> AsyncContainer:
    """Create the DI container. Call once per application instance."""
    return make_async_container(InfrastructureProvider(), ApplicationProvider())
