"""
OpenAI SDK provider - direct model-vendor client.

Works with any OpenAI-compatible vendor API; the default base URL points at
Groq. The SDK is built with max_retries=0 so every call is a single attempt.
"""

import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from jai_backend.config.settings import Config
from jai_backend.domain.exceptions import ProviderError
from jai_backend.domain.ports.model_provider import ChatTurn, ModelProvider
from jai_backend.observability.metrics import observe_llm_tokens

logger = logging.getLogger(__name__)


class OpenAIChatProvider(ModelProvider):
    name = "openai"

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ):
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    @classmethod
    def from_config(cls, config: type[Config] = Config) -> "OpenAIChatProvider":
        client = AsyncOpenAI(
            api_key=config.LLM_API_KEY,
            base_url=config.LLM_BASE_URL or None,
            max_retries=0,
            timeout=config.LLM_TIMEOUT,
        )
        logger.info(f"[LLM] OpenAI-compatible client ready → {config.LLM_MODEL}")
        return cls(
            client=client,
            model=config.LLM_MODEL,
            max_tokens=config.LLM_MAX_TOKENS,
            temperature=config.LLM_TEMPERATURE,
        )

    async def complete(self, messages: list[ChatTurn]) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except OpenAIError as e:
            status_code: Optional[int] = getattr(e, "status_code", None)
            raise ProviderError(
                f"{self._model} request failed: {type(e).__name__}",
                status_code=status_code,
            ) from e

        if response.usage:
            observe_llm_tokens("input", self._model, response.usage.prompt_tokens)
            observe_llm_tokens("output", self._model, response.usage.completion_tokens)

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ProviderError(f"{self._model} returned an empty completion")
        return content

    async def aclose(self) -> None:
        await self._client.close()
