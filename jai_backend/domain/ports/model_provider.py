"""
Model Provider Port - a language-model completion service.

Implementations: jai_backend/infrastructure/llm/
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ChatTurn:
    role: str  # "system" | "user" | "assistant"
    content: str


class ModelProvider(ABC):
    name: str = "provider"

    @abstractmethod
    async def complete(self, messages: list[ChatTurn]) -> str:
        """Return the generated text or raise ProviderError."""

    async def aclose(self) -> None:
        """Release network resources on shutdown."""
