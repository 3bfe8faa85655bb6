"""
Model gateway - uniform "send transcript, get reply" contract.

Translates stored sender labels into provider role labels, prepends the
system instruction and invokes exactly one configured provider. There is no
fallback chain and no retry: any failure surfaces as ProviderError.

Usage:
    gateway = ModelGateway(provider)
    reply = await gateway.complete(system_instruction, conversation.messages)
"""

import logging
import time
from typing import Sequence

from langsmith import traceable

from jai_backend.domain.entities.message import Message, Sender
from jai_backend.domain.exceptions import ProviderError
from jai_backend.domain.ports.model_provider import ChatTurn, ModelProvider
from jai_backend.observability.metrics import (
    MetricsErrorType,
    increment_error,
    observe_llm_latency,
)

logger = logging.getLogger(__name__)

SENDER_TO_ROLE = {
    Sender.USER: "user",
    Sender.AI: "assistant",
}


def to_chat_turns(system_instruction: str, transcript: Sequence[Message]) -> list[ChatTurn]:
    turns = [ChatTurn(role="system", content=system_instruction)]
    turns.extend(
        ChatTurn(role=SENDER_TO_ROLE[message.sender], content=message.content)
        for message in transcript
    )
    return turns


class ModelGateway:
    def __init__(self, provider: ModelProvider):
        self._provider = provider

    @property
    def provider_name(self) -> str:
        return self._provider.name

    @traceable(run_type="llm", name="model_gateway_complete")
    async def complete(
        self, system_instruction: str, transcript: Sequence[Message]
    ) -> str:
        turns = to_chat_turns(system_instruction, transcript)
        start = time.perf_counter()
        try:
            reply = await self._provider.complete(turns)
        except ProviderError as e:
            increment_error(MetricsErrorType.LLM_FAILED)
            logger.error(f"[LLM] {self._provider.name} failed: {e}")
            raise
        except Exception as e:
            increment_error(MetricsErrorType.LLM_FAILED)
            logger.exception(f"[LLM] {self._provider.name} raised unexpectedly")
            raise ProviderError(f"{self._provider.name} call failed: {e}") from e
        finally:
            observe_llm_latency(self._provider.name, time.perf_counter() - start)

        logger.debug(
            f"[LLM] {self._provider.name} replied with {len(reply)} chars "
            f"for {len(turns)} turns"
        )
        return reply
