"""
Model provider registry - maps Config.LLM_PROVIDER to a provider factory.

This is the only place that knows which provider implementations exist.
"""

from typing import Callable

from jai_backend.config.settings import Config
from jai_backend.domain.ports.model_provider import ModelProvider
from jai_backend.infrastructure.llm.http_provider import HttpCompletionsProvider
from jai_backend.infrastructure.llm.openai_provider import OpenAIChatProvider

MODEL_PROVIDER_FACTORIES: dict[str, Callable[[type[Config]], ModelProvider]] = {
    OpenAIChatProvider.name: OpenAIChatProvider.from_config,
    HttpCompletionsProvider.name: HttpCompletionsProvider.from_config,
}


def build_model_provider(config: type[Config] = Config) -> ModelProvider:
    name = config.LLM_PROVIDER.strip().lower()
    factory = MODEL_PROVIDER_FACTORIES.get(name)
    if factory is None:
        raise ValueError(
            f"Unknown LLM_PROVIDER {config.LLM_PROVIDER!r}; "
            f"expected one of {sorted(MODEL_PROVIDER_FACTORIES)}"
        )
    return factory(config)
