"""Tests for prompt building, DocumentTranslator and the OpenAI-compatible provider."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from docs_prebuild.config import DEFAULT_TARGET_LANGUAGES
from docs_prebuild.llm import MalformedResponseError, OpenAICompatibleProvider
from docs_prebuild.retry import RetryPolicy
from docs_prebuild.translation.prompts import (
    GLOSSARY,
    PROTECTED_TERMS,
    SYSTEM_PROMPT,
    build_translation_prompt,
)
from docs_prebuild.translation.translator import DocumentTranslator

from tests.helpers import FakeProvider

EN, JA = DEFAULT_TARGET_LANGUAGES


class TestPrompt:
    def test_names_target_language_and_path_rewrite(self) -> None:
        prompt = build_translation_prompt("# 介绍", EN)

        assert "从中文翻译为英文" in prompt
        assert "将 /zh/ 替换为 /en/" in prompt
        assert 'href="/en/docs/guide"' in prompt

    def test_carries_glossary_and_protected_terms(self) -> None:
        prompt = build_translation_prompt("# 介绍", JA)

        assert GLOSSARY in prompt
        for term in PROTECTED_TERMS:
            assert term in prompt

    def test_document_is_embedded_whole(self) -> None:
        document = "---\ntitle: 介绍\n---\n\n```bash\necho 倍率\n```\n"

        assert build_translation_prompt(document, EN).rstrip().endswith(document.rstrip())

    def test_prompt_is_deterministic(self) -> None:
        assert build_translation_prompt("x", EN) == build_translation_prompt("x", EN)


def _translator(provider: FakeProvider, console: Console, **policy) -> tuple:
    sleeps: list[float] = []

    async def fake_sleep(delay: float) -> None:
        sleeps.append(delay)

    translator = DocumentTranslator(
        provider,
        DEFAULT_TARGET_LANGUAGES,
        retry_policy=RetryPolicy(**policy),
        console=console,
        sleep=fake_sleep,
    )
    return translator, sleeps


@pytest.mark.asyncio
async def test_translate_sends_system_and_user_prompt(console: Console) -> None:
    provider = FakeProvider()
    translator, _ = _translator(provider, console)

    assert await translator.translate("# 介绍", "en") == "EN translation"

    (messages,) = provider.calls
    assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert messages[1]["content"] == build_translation_prompt("# 介绍", EN)


@pytest.mark.asyncio
async def test_translate_retries_with_backoff(console: Console) -> None:
    provider = FakeProvider(failures=2)
    translator, sleeps = _translator(provider, console, max_retries=3, base_delay=2.0, backoff=2.0)

    assert await translator.translate("# 介绍", "ja") == "JA translation"

    assert len(provider.calls) == 3
    assert sleeps == [2.0, 4.0]
    assert "retry 1/3 in 2.0s" in console.file.getvalue()


@pytest.mark.asyncio
async def test_translate_gives_up_after_max_retries(console: Console) -> None:
    provider = FakeProvider(failures=10)
    translator, sleeps = _translator(provider, console, max_retries=2, base_delay=1.0)

    with pytest.raises(ConnectionError):
        await translator.translate("# 介绍", "en")

    assert len(provider.calls) == 3
    assert sleeps == [1.0, 2.0]
    assert "Translation failed after 2 retries" in console.file.getvalue()


@pytest.mark.asyncio
async def test_unknown_language(console: Console) -> None:
    translator, _ = _translator(FakeProvider(), console)

    with pytest.raises(KeyError):
        await translator.translate("# 介绍", "fr")


_MESSAGES = [{"role": "system", "content": "system"}, {"role": "user", "content": "user"}]


def _completion(choices: list) -> SimpleNamespace:
    return SimpleNamespace(choices=choices, usage=None)


def _choice(content: str | None) -> SimpleNamespace:
    return SimpleNamespace(message=SimpleNamespace(content=content), finish_reason="stop")


class TestOpenAICompatibleProvider:
    @pytest.fixture
    def provider(self) -> OpenAICompatibleProvider:
        return OpenAICompatibleProvider(
            api_key="sk-test", model="gemini-2.5-flash", base_url="http://llm.invalid/v1"
        )

    @pytest.mark.asyncio
    async def test_returns_stripped_content(self, provider: OpenAICompatibleProvider) -> None:
        create = AsyncMock(return_value=_completion([_choice("  Hello\n")]))
        provider._client.chat.completions.create = create

        response = await provider.complete(_MESSAGES, temperature=0.3)

        assert response.content == "Hello"
        assert create.await_args.kwargs["model"] == "gemini-2.5-flash"
        assert create.await_args.kwargs["temperature"] == 0.3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("choices", [[], [_choice(None)], [_choice("   ")]])
    async def test_malformed_response(
        self, provider: OpenAICompatibleProvider, choices: list
    ) -> None:
        provider._client.chat.completions.create = AsyncMock(return_value=_completion(choices))

        with pytest.raises(MalformedResponseError):
            await provider.complete(_MESSAGES)

    def test_sdk_retries_are_disabled(self, provider: OpenAICompatibleProvider) -> None:
        assert provider._client.max_retries == 0
        assert provider.base_url == "http://llm.invalid/v1"
