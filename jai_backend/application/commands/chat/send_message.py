"""
SendMessage Command - answer a prompt and persist the exchange.

Handler flow:
1. Validate the prompt (MissingPromptError when empty)
2. Resume the caller's conversation, or start a new one when no id is given
   or the id is unknown / owned by someone else
3. Shortcut prompts (identity, date) are answered locally
4. Everything else goes through memory digest → persona → model gateway
5. Persist both new messages with a single save
6. Return the AI message and the conversation id

ProviderError and StorageError propagate to the caller; nothing is retried.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from jai_backend.application.common.interfaces import Command, CommandHandler
from jai_backend.domain.entities.conversation import Conversation
from jai_backend.domain.entities.message import Message, Sender
from jai_backend.domain.exceptions import MissingPromptError
from jai_backend.domain.ports.repositories import ConversationRepository
from jai_backend.domain.value_objects.conversation_id import ConversationId
from jai_backend.domain.value_objects.user_id import UserId
from jai_backend.observability.metrics import (
    decrement_active_chats,
    increment_active_chats,
    increment_chat_route,
)
from jai_backend.services.memory_synthesizer import MemorySynthesizer
from jai_backend.services.model_gateway import ModelGateway
from jai_backend.services.persona_prompt_builder import PersonaPromptBuilder
from jai_backend.services.shortcut_router import ShortcutCategory, ShortcutRouter

logger = logging.getLogger(__name__)

MODEL_ROUTE = "model"


@dataclass
class SendMessageResult:
    ai_message: Message
    conversation_id: ConversationId
    category: ShortcutCategory


@dataclass(frozen=True)
class SendMessageCommand(Command[SendMessageResult]):
    user_id: UserId
    prompt: Optional[str]
    conversation_id: Optional[ConversationId] = None


class SendMessageHandler(CommandHandler[SendMessageResult]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        shortcut_router: ShortcutRouter,
        memory_synthesizer: MemorySynthesizer,
        persona_builder: PersonaPromptBuilder,
        model_gateway: ModelGateway,
        reasoning_mode: bool = False,
        persist_user_turn_eagerly: bool = False,
    ):
        self.conv_repo = conv_repo
        self.shortcut_router = shortcut_router
        self.memory_synthesizer = memory_synthesizer
        self.persona_builder = persona_builder
        self.model_gateway = model_gateway
        self.reasoning_mode = reasoning_mode
        self.persist_user_turn_eagerly = persist_user_turn_eagerly

    async def execute(self, command: SendMessageCommand) -> SendMessageResult:
        prompt = command.prompt or ""
        if not prompt.strip():
            logger.info(f"Invalid request: Prompt missing for user {command.user_id}")
            raise MissingPromptError()

        increment_active_chats()
        try:
            conversation = await self._resolve_conversation(
                command.user_id, command.conversation_id, prompt
            )
            category = self.shortcut_router.classify(prompt)
            if category is ShortcutCategory.NONE:
                ai_message = await self._model_reply(conversation, prompt)
                increment_chat_route(MODEL_ROUTE)
                logger.info(f"AI response served for user {command.user_id}")
            else:
                ai_message = conversation.append_exchange(
                    prompt, self.shortcut_router.reply(category)
                )
                await self.conv_repo.save(conversation)
                increment_chat_route(category.value)
                logger.info(
                    f"{category.value} shortcut response served for user {command.user_id}"
                )
        finally:
            decrement_active_chats()

        return SendMessageResult(
            ai_message=ai_message,
            conversation_id=conversation.id,
            category=category,
        )

    async def _resolve_conversation(
        self,
        user_id: UserId,
        conversation_id: Optional[ConversationId],
        prompt: str,
    ) -> Conversation:
        if conversation_id:
            conversation = await self.conv_repo.get_by_id(user_id, conversation_id)
            if conversation:
                return conversation
            logger.info(
                f"Conversation {conversation_id} not found for user {user_id}, "
                f"starting a new one"
            )
        return Conversation.start(owner_id=user_id, first_prompt=prompt)

    async def _model_reply(self, conversation: Conversation, prompt: str) -> Message:
        conversation.append(Sender.USER, prompt)
        if self.persist_user_turn_eagerly:
            await self.conv_repo.save(conversation)

        memory_digest = await self.memory_synthesizer.synthesize(
            conversation.owner_id, conversation.id
        )
        system_instruction = self.persona_builder.build(
            memory_digest, reasoning_mode=self.reasoning_mode
        )
        reply = await self.model_gateway.complete(
            system_instruction, conversation.messages
        )

        # forwarded verbatim, including any <thought> section
        ai_message = conversation.append(Sender.AI, reply)
        await self.conv_repo.save(conversation)
        return ai_message
