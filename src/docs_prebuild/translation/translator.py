"""
Document translator.

Sends whole documents to a chat-completion provider and retries failed
requests according to a RetryPolicy.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape

from docs_prebuild.config import LanguageConfig
from docs_prebuild.llm.base import LLMProvider
from docs_prebuild.retry import RetryPolicy, SleepFunc, retry_async
from docs_prebuild.translation.prompts import SYSTEM_PROMPT, build_translation_prompt

logger = logging.getLogger(__name__)


class DocumentTranslator:
    """Translates complete Markdown/MDX documents into a target language."""

    def __init__(
        self,
        provider: LLMProvider,
        languages: Iterable[LanguageConfig],
        *,
        retry_policy: RetryPolicy,
        source_dir: str = "zh",
        temperature: float = 0.3,
        console: Console | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        """
        Initialize the translator.

        Args:
            provider: Chat-completion provider.
            languages: Target languages this translator accepts.
            retry_policy: Retry policy for failed requests.
            source_dir: Path segment of the source language.
            temperature: Sampling temperature.
            console: Rich console for retry notices.
            sleep: Awaitable sleep used between retries.
        """
        self._provider = provider
        self._languages = {lang.code: lang for lang in languages}
        self._retry_policy = retry_policy
        self._source_dir = source_dir
        self._temperature = temperature
        self.console = console or Console()
        self._sleep = sleep

    @property
    def model(self) -> str:
        return self._provider.model

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    async def translate(self, content: str, language_code: str) -> str:
        """
        Translate ``content`` into the language identified by ``language_code``.

        Raises:
            KeyError: If the language is not configured.
            Exception: The last request error once retries are exhausted.
        """
        language = self._languages[language_code]
        prompt = build_translation_prompt(content, language, self._source_dir)
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

        async def attempt() -> str:
            response = await self._provider.complete(messages, temperature=self._temperature)
            logger.debug(
                "Translated %d chars to %s (%d/%d tokens, %.0fms)",
                len(content),
                language.code,
                response.input_tokens,
                response.output_tokens,
                response.latency_ms,
            )
            return response.content

        def on_retry(retry: int, delay: float, error: Exception) -> None:
            self.console.print(
                f"   [yellow]⚠ Translation to {language.native_name} failed: "
                f"{escape(str(error))}, "
                f"retry {retry}/{self._retry_policy.max_retries} in {delay:.1f}s...[/yellow]"
            )

        try:
            return await retry_async(
                attempt, self._retry_policy, sleep=self._sleep, on_retry=on_retry
            )
        except Exception as e:
            self.console.print(
                f"   [red]✗ Translation failed after {self._retry_policy.max_retries} "
                f"retries: {escape(str(e))}[/red]"
            )
            raise
