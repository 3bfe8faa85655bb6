"""
Application-layer providers.

Everything here depends only on domain ports (ConversationRepository,
ModelProvider), so it can be combined with the real InfrastructureProvider
or with a test provider that supplies in-memory fakes.
"""

from dishka import Provider, Scope, provide

from jai_backend.application.commands.chat.send_message import SendMessageHandler
from jai_backend.application.commands.conversations import DeleteConversationHandler
from jai_backend.application.queries.conversations import (
    GetConversationHandler,
    ListConversationsHandler,
)
from jai_backend.config.settings import Config
from jai_backend.domain.ports.model_provider import ModelProvider
from jai_backend.domain.ports.repositories import ConversationRepository
from jai_backend.services.memory_synthesizer import MemorySynthesizer
from jai_backend.services.model_gateway import ModelGateway
from jai_backend.services.persona_prompt_builder import PersonaPromptBuilder
from jai_backend.services.shortcut_router import ShortcutRouter


class ApplicationProvider(Provider):
    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_shortcut_router(self) -> ShortcutRouter:
        return ShortcutRouter()

    @provide(scope=Scope.APP)
    def get_persona_builder(self) -> PersonaPromptBuilder:
        return PersonaPromptBuilder()

    @provide(scope=Scope.APP)
    def get_model_gateway(self, provider: ModelProvider) -> ModelGateway:
        return ModelGateway(provider)

    @provide(scope=Scope.REQUEST)
    def get_memory_synthesizer(
        self, conversation_repository: ConversationRepository
    ) -> MemorySynthesizer:
        return MemorySynthesizer(
            conversation_repository,
            limit=Config.MEMORY_CONVERSATION_LIMIT,
            snippet_chars=Config.MEMORY_SNIPPET_CHARS,
        )

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        conversation_repository: ConversationRepository,
        shortcut_router: ShortcutRouter,
        memory_synthesizer: MemorySynthesizer,
        persona_builder: PersonaPromptBuilder,
        model_gateway: ModelGateway,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            conv_repo=conversation_repository,
            shortcut_router=shortcut_router,
            memory_synthesizer=memory_synthesizer,
            persona_builder=persona_builder,
            model_gateway=model_gateway,
            reasoning_mode=Config.REASONING_MODE,
            persist_user_turn_eagerly=Config.PERSIST_USER_TURN_EAGERLY,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> GetConversationHandler:
        return GetConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> DeleteConversationHandler:
        return DeleteConversationHandler(conversation_repository)
