"""In-memory stand-ins for the infrastructure ports."""

import copy
from typing import Optional

from dishka import Provider, Scope, provide

from jai_backend.domain.entities.conversation import Conversation, ConversationSummary
from jai_backend.domain.exceptions import ProviderError, StorageError
from jai_backend.domain.ports.credential_verifier import CredentialVerifier
from jai_backend.domain.ports.model_provider import ChatTurn, ModelProvider
from jai_backend.domain.ports.repositories import ConversationRepository
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.domain.value_objects.user_id import UserId


class InMemoryConversationRepository(ConversationRepository):
    """Stores copies, so unsaved changes to a loaded aggregate are not visible."""

    def __init__(self):
        self.conversations: dict[str, Conversation] = {}
        self.save_calls = 0
        self.fail_reads = False
        self.fail_writes = False

    def add(self, conversation: Conversation) -> Conversation:
        self.conversations[conversation.id.value] = copy.deepcopy(conversation)
        return conversation

    def _check_reads(self):
        if self.fail_reads:
            raise StorageError("database unreachable")

    def _check_writes(self):
        if self.fail_writes:
            raise StorageError("database is read-only")

    def _owned(self, owner_id: UserId) -> list[Conversation]:
        return [c for c in self.conversations.values() if c.owner_id == owner_id]

    async def list_summaries(self, owner_id: UserId) -> list[ConversationSummary]:
        self._check_reads()
        owned = sorted(self._owned(owner_id), key=lambda c: c.created_at, reverse=True)
        return [ConversationSummary(id=c.id, title=c.title, created_at=c.created_at) for c in owned]

    async def get_by_id(
        self, owner_id: UserId, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        self._check_reads()
        conversation = self.conversations.get(conversation_id.value)
        if conversation is None or conversation.owner_id != owner_id:
            return None
        return copy.deepcopy(conversation)

    async def recent_excluding(
        self, owner_id: UserId, exclude_id: Optional[ConversationId], limit: int
    ) -> list[Conversation]:
        self._check_reads()
        owned = [c for c in self._owned(owner_id) if c.id != exclude_id]
        owned.sort(key=lambda c: c.updated_at, reverse=True)
        recent = [copy.deepcopy(c) for c in owned[:limit]]
        for conversation in recent:
            conversation.messages = conversation.messages[-1:]
        return recent

    async def save(self, conversation: Conversation) -> None:
        self._check_writes()
        self.save_calls += 1
        self.conversations[conversation.id.value] = copy.deepcopy(conversation)

    async def delete(self, owner_id: UserId, conversation_id: ConversationId) -> bool:
        self._check_writes()
        conversation = self.conversations.get(conversation_id.value)
        if conversation is None or conversation.owner_id != owner_id:
            return False
        del self.conversations[conversation_id.value]
        return True


class FakeModelProvider(ModelProvider):
    name = "fake"

    def __init__(self, reply: str = "Here is your answer.", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: list[list[ChatTurn]] = []
        self.closed = False

    async def complete(self, messages: list[ChatTurn]) -> str:
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply

    async def aclose(self) -> None:
        self.closed = True


def failing_provider() -> FakeModelProvider:
    return FakeModelProvider(error=ProviderError("upstream returned HTTP 503", status_code=503))


class FakeInfrastructureProvider(Provider):
    """Replaces InfrastructureProvider: no database, no network."""

    def __init__(
        self,
        repository: ConversationRepository,
        model_provider: ModelProvider,
        verifier: CredentialVerifier,
    ):
        super().__init__()
        self._repository = repository
        self._model_provider = model_provider
        self._verifier = verifier

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        return self._repository

    @provide(scope=Scope.APP)
    def get_model_provider(self) -> ModelProvider:
        return self._model_provider

    @provide(scope=Scope.APP)
    def get_credential_verifier(self) -> CredentialVerifier:
        return self._verifier
