"""Fakes and builders shared across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from rich.console import Console

from docs_prebuild.config import DocsConfig, Settings, TranslationConfig
from docs_prebuild.llm.base import LLMProvider, LLMResponse
from docs_prebuild.retry import RetryPolicy
from docs_prebuild.translation.pipeline import TranslationPipeline
from docs_prebuild.translation.translator import DocumentTranslator
from docs_prebuild.translation.writer import TranslationWriter
from docs_prebuild.vcs import ChangeDetector, VersionControlError


def default_responder(messages: list[dict[str, str]]) -> str:
    prompt = messages[-1]["content"]
    if "翻译为英文" in prompt:
        return "EN translation"
    if "翻译为日文" in prompt:
        return "JA translation"
    return "?? translation"


class FakeProvider(LLMProvider):
    """Answers every prompt with a canned translation and records the calls."""

    def __init__(
        self,
        responder: Callable[[list[dict[str, str]]], str] | None = None,
        failures: int = 0,
    ) -> None:
        self.calls: list[list[dict[str, str]]] = []
        self._responder = responder or default_responder
        self._failures = failures

    @property
    def name(self) -> str:
        return "fake"

    @property
    def model(self) -> str:
        return "fake-model"

    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        temperature: float = 0.3,
        **kwargs: Any,
    ) -> LLMResponse:
        self.calls.append(messages)
        if self._failures > 0:
            self._failures -= 1
            raise ConnectionError("endpoint unavailable")
        return LLMResponse(content=self._responder(messages), model=self.model)


class FakeVersionControl:
    """In-memory history: a changed-path set and committed contents."""

    def __init__(
        self,
        changed: Iterable[Path] = (),
        committed: dict[Path, str] | None = None,
        available: bool = True,
    ) -> None:
        self.changed = set(changed)
        self.committed = dict(committed or {})
        self.available = available

    def changed_paths(self, range_spec: str) -> set[Path]:
        if not self.available:
            raise VersionControlError("not a git repository")
        return set(self.changed)

    def content_at(self, path: Path, revision: str) -> str | None:
        if not self.available:
            raise VersionControlError("not a git repository")
        return self.committed.get(path)


class RecordingWriter(TranslationWriter):
    """Writer that remembers every path it was asked to write."""

    def __init__(self, protected_paths: Iterable[Path] = ()) -> None:
        super().__init__(protected_paths)
        self.written: list[Path] = []

    def write(self, target_path: Path, content: str) -> None:
        self.written.append(target_path)
        super().write(target_path, content)


async def no_sleep(delay: float) -> None:
    return None


def write_doc(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def make_settings(docs_dir: Path, **translation: Any) -> Settings:
    translation.setdefault("openai_api_key", "sk-test")
    return Settings(
        docs=DocsConfig(docs_dir=docs_dir),
        translation=TranslationConfig(**translation),
    )


def make_pipeline(
    settings: Settings,
    provider: LLMProvider,
    vcs: FakeVersionControl,
    console: Console,
    *,
    retry_policy: RetryPolicy | None = None,
    writer_factory: Callable[[Iterable[Path]], TranslationWriter] = TranslationWriter,
) -> TranslationPipeline:
    translator = DocumentTranslator(
        provider,
        settings.docs.target_languages,
        retry_policy=retry_policy or RetryPolicy(max_retries=0, base_delay=0.0),
        source_dir=settings.docs.source_language,
        console=console,
        sleep=no_sleep,
    )
    detector = ChangeDetector(vcs, settings.docs, console)
    return TranslationPipeline(
        settings, translator, detector, console=console, writer_factory=writer_factory
    )
