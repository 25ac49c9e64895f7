"""
Chat-completion provider abstraction layer.
"""

from docs_prebuild.llm.base import LLMProvider, LLMResponse
from docs_prebuild.llm.openai_compatible import MalformedResponseError, OpenAICompatibleProvider

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "MalformedResponseError",
    "OpenAICompatibleProvider",
]
