"""Model provider adapters."""

from jai_backend.infrastructure.llm.http_provider import HttpCompletionsProvider
from jai_backend.infrastructure.llm.openai_provider import OpenAIChatProvider
from jai_backend.infrastructure.llm.registry import build_model_provider

__all__ = [
    "HttpCompletionsProvider",
    "OpenAIChatProvider",
    "build_model_provider",
]
