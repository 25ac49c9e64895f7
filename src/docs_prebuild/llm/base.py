"""
Chat-completion provider interface used by the document translator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

# One chat message: {"role": "system" | "user" | "assistant", "content": ...}
Message = dict[str, str]


@dataclass
class LLMResponse:
    """Text returned for one request, with usage bookkeeping for debug logs."""

    content: str
    input_tokens: int = 0
    output_tokens: int = 0
    model: str = ""
    latency_ms: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)


class LLMProvider(ABC):
    """
    A remote chat-completion endpoint.

    ``complete`` issues exactly one request. Retrying belongs to the caller's
    RetryPolicy, and an unusable answer must raise rather than return empty
    content.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def model(self) -> str:
        """Model identifier sent with each request."""
        ...

    @abstractmethod
    async def complete(
        self,
        messages: list[Message],
        *,
        temperature: float = 0.3,
        **kwargs: Any,
    ) -> LLMResponse:
        """
        Send ``messages`` and return the first choice's text.

        Raises:
            Exception: Transport, HTTP or malformed-response errors.
        """
        ...
