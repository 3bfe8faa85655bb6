"""
Generic HTTP chat-completions provider.

POSTs an OpenAI-style payload to a configurable endpoint (OpenRouter,
a local llama.cpp server, ...) and selects the model by name. Single attempt,
no retry; any non-2xx status becomes ProviderError.
"""

import logging
from typing import Any, Optional

import httpx

from jai_backend.config.settings import Config
from jai_backend.domain.exceptions import ProviderError
from jai_backend.domain.ports.model_provider import ChatTurn, ModelProvider
from jai_backend.observability.metrics import observe_llm_tokens

logger = logging.getLogger(__name__)


class HttpCompletionsProvider(ModelProvider):
    name = "http"

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        model: str,
        api_key: Optional[str] = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ):
        self._client = client
        self._url = url
        self._model = model
        self._api_key = api_key
        self._max_tokens = max_tokens
        self._temperature = temperature

    @classmethod
    def from_config(cls, config: type[Config] = Config) -> "HttpCompletionsProvider":
        logger.info(f"[LLM] HTTP completions client ready → {config.LLM_HTTP_MODEL}")
        return cls(
            client=httpx.AsyncClient(timeout=config.LLM_TIMEOUT),
            url=config.LLM_HTTP_URL,
            model=config.LLM_HTTP_MODEL,
            api_key=config.LLM_HTTP_API_KEY or None,
            max_tokens=config.LLM_MAX_TOKENS,
            temperature=config.LLM_TEMPERATURE,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def complete(self, messages: list[ChatTurn]) -> str:
        payload: dict[str, Any] = {
            "model": self._model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }
        try:
            response = await self._client.post(
                self._url, json=payload, headers=self._headers()
            )
        except httpx.HTTPError as e:
            raise ProviderError(f"{self._model} request failed: {type(e).__name__}") from e

        if not response.is_success:
            raise ProviderError(
                f"{self._model} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
            content = body["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"{self._model} returned a malformed completion") from e

        usage = body.get("usage") or {}
        if "prompt_tokens" in usage:
            observe_llm_tokens("input", self._model, usage["prompt_tokens"])
        if "completion_tokens" in usage:
            observe_llm_tokens("output", self._model, usage["completion_tokens"])

        if not content:
            raise ProviderError(f"{self._model} returned an empty completion")
        return content

    async def aclose(self) -> None:
        await self._client.aclose()
