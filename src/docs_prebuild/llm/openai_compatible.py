"""
OpenAI-compatible chat-completion provider.

Works against any endpoint implementing ``POST {base_url}/chat/completions``
(OpenAI itself, Gemini's OpenAI endpoint, one-api/new-api gateways, ...).
"""

from __future__ import annotations

import time
from typing import Any

from openai import AsyncOpenAI

from docs_prebuild.llm.base import LLMProvider, LLMResponse, Message


class MalformedResponseError(RuntimeError):
    """The endpoint answered successfully but without usable content."""


class OpenAICompatibleProvider(LLMProvider):
    """Chat-completion provider backed by the ``openai`` SDK."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 300.0,
    ):
        """
        Initialize the provider.

        Args:
            api_key: Bearer token for the endpoint.
            model: Model identifier sent with every request.
            base_url: API base URL.
            timeout: Request timeout in seconds.
        """
        self._model_name = model
        self._base_url = base_url

        # Retries are driven by the translator's RetryPolicy, not the SDK
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    @property
    def name(self) -> str:
        return "openai-compatible"

    @property
    def model(self) -> str:
        return self._model_name

    @property
    def base_url(self) -> str:
        return self._base_url

    async def complete(
        self,
        messages: list[Message],
        *,
        temperature: float = 0.3,
        **kwargs: Any,
    ) -> LLMResponse:
        """
        Issue a single chat-completion request.

        Raises:
            openai.APIError: On HTTP or transport failures.
            MalformedResponseError: If the response carries no message content.
        """
        start_time = time.perf_counter()

        response = await self._client.chat.completions.create(
            model=self._model_name,
            messages=messages,  # type: ignore[arg-type]
            temperature=temperature,
            **kwargs,
        )

        if not response.choices:
            raise MalformedResponseError("Response contained no choices")

        content = response.choices[0].message.content
        if not content or not content.strip():
            raise MalformedResponseError("Response message content is empty")

        usage = response.usage
        return LLMResponse(
            content=content.strip(),
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            model=self._model_name,
            latency_ms=(time.perf_counter() - start_time) * 1000,
            metadata={"finish_reason": response.choices[0].finish_reason},
        )
