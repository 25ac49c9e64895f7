"""
Incremental documentation translation pipeline.

Walks the source-language tree, decides per document and target language
whether a translation has to be (re)generated, and writes the results into
the mirrored language trees. Files edited by hand in a target tree during the
last commit are never overwritten.
"""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from docs_prebuild.config import LanguageConfig, Settings
from docs_prebuild.llm import OpenAICompatibleProvider
from docs_prebuild.retry import RetryPolicy
from docs_prebuild.scanner import DocumentScanner
from docs_prebuild.translation.decision import Decision, TranslationTask, decide
from docs_prebuild.translation.scheduler import BatchScheduler
from docs_prebuild.translation.translator import DocumentTranslator
from docs_prebuild.translation.writer import TranslationWriter
from docs_prebuild.vcs import ChangeDetector, GitRepository

logger = logging.getLogger(__name__)

WriterFactory = Callable[[Iterable[Path]], TranslationWriter]


@dataclass
class FileResult:
    """Outcome of translating one source document into every target language."""

    translated: int = 0
    skipped: int = 0
    failed: int = 0
    decisions: dict[str, Decision] = field(default_factory=dict)


@dataclass
class RunStatistics:
    """Aggregate counters for a pipeline run."""

    total: int = 0
    translated: int = 0
    skipped: int = 0
    failed: int = 0
    duration_s: float = 0.0

    def add(self, result: FileResult) -> None:
        self.translated += result.translated
        self.skipped += result.skipped
        self.failed += result.failed


class TranslationPipeline:
    """Translates the documentation tree into every configured target language."""

    def __init__(
        self,
        settings: Settings,
        translator: DocumentTranslator,
        detector: ChangeDetector,
        *,
        scanner: DocumentScanner | None = None,
        console: Console | None = None,
        writer_factory: WriterFactory = TranslationWriter,
    ):
        """
        Initialize translation pipeline.

        Args:
            settings: Immutable run configuration.
            translator: Document translator.
            detector: Change detector over version history.
            scanner: Source document scanner.
            console: Rich console for progress output.
            writer_factory: Builds the writer from the manual-override set.
        """
        self.settings = settings
        self.translator = translator
        self.detector = detector
        self.console = console or Console()
        self.scanner = scanner or DocumentScanner(settings.docs, self.console)
        self._writer_factory = writer_factory

    @classmethod
    def from_settings(cls, settings: Settings, console: Console | None = None) -> TranslationPipeline:
        """Wire the pipeline against the real chat-completion API and git."""
        settings.require_translation_credentials()
        console = console or Console()
        cfg = settings.translation

        provider = OpenAICompatibleProvider(
            api_key=cfg.openai_api_key,
            model=cfg.openai_model,
            base_url=cfg.openai_base_url,
            timeout=cfg.request_timeout,
        )
        translator = DocumentTranslator(
            provider,
            settings.docs.target_languages,
            retry_policy=RetryPolicy(
                max_retries=cfg.max_retries,
                base_delay=cfg.retry_delay,
                backoff=cfg.retry_backoff,
            ),
            source_dir=settings.docs.source_language,
            temperature=cfg.temperature,
            console=console,
        )
        detector = ChangeDetector(GitRepository(), settings.docs, console)
        return cls(settings, translator, detector, console=console)

    @property
    def languages(self) -> tuple[LanguageConfig, ...]:
        return self.settings.docs.target_languages

    async def run(self, files: Sequence[str | Path] | None = None) -> RunStatistics:
        """
        Translate ``files``, or the whole source tree when none are given.

        Returns:
            Run statistics. Per-task failures are counted, never raised.
        """
        self.console.rule("[bold blue]🌐 Starting document translation[/bold blue]")
        start_time = time.perf_counter()

        overrides = self.detector.detect_manual_overrides(self.languages)
        writer = self._writer_factory(overrides)

        if files:
            sources = self.scanner.resolve_requested(files)
        else:
            sources = self.scanner.collect()

        if not sources:
            self.console.print("[dim]ℹ No files to translate[/dim]")
            return RunStatistics()

        self._display_config(len(sources), len(overrides))

        stats = RunStatistics(total=len(sources))
        scheduler: BatchScheduler[FileResult] = BatchScheduler(
            self.settings.translation.max_workers
        )
        if scheduler.sequential:
            self.console.print("\n[cyan]🔄 Using sequential mode[/cyan]\n")
        else:
            self.console.print(
                f"\n[cyan]🚀 Using concurrent mode ({scheduler.max_workers} workers)[/cyan]\n"
            )

        jobs = [
            functools.partial(self.translate_file, path, index, len(sources), overrides, writer)
            for index, path in enumerate(sources, start=1)
        ]

        def merge(outcomes: list[FileResult | BaseException]) -> None:
            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    logger.error("Unexpected error while translating a file: %r", outcome)
                    stats.failed += len(self.languages)
                else:
                    stats.add(outcome)

        await scheduler.run(jobs, on_chunk_done=merge)

        stats.duration_s = time.perf_counter() - start_time
        self._display_statistics(stats)
        return stats

    async def translate_file(
        self,
        source_file: Path,
        index: int,
        total: int,
        overrides: set[Path],
        writer: TranslationWriter,
    ) -> FileResult:
        """Translate one source document into every target language."""
        prefix = f"[{index}/{total}]"
        result = FileResult()
        cfg = self.settings.translation

        self.console.print(f"\n{prefix} 📄 Processing: {_display_path(source_file)}")

        try:
            content = source_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.console.print(f"{prefix} [red]✗ Failed to read file: {escape(str(e))}[/red]")
            result.failed = len(self.languages)
            return result

        try:
            relative_path = source_file.relative_to(self.settings.docs.source_root)
        except ValueError:
            self.console.print(
                f"{prefix} [red]✗ File is not in {self.settings.docs.source_language} directory[/red]"
            )
            result.failed = len(self.languages)
            return result

        source_changed = True
        if cfg.incremental_translate and not cfg.force_translate:
            source_changed = self.detector.has_changes(source_file, content)

        tasks = [
            self._build_task(source_file, relative_path, language, overrides, source_changed)
            for language in self.languages
        ]
        missing = [task.language.native_name for task in tasks if not task.target_exists]

        if (
            cfg.incremental_translate
            and not source_changed
            and not missing
            and not cfg.force_translate
        ):
            self.console.print(
                f"{prefix} [dim]⏭  No changes and all translations exist, skipping...[/dim]"
            )
        elif missing and not source_changed:
            self.console.print(
                f"{prefix} 📝 Filling missing translations: {', '.join(missing)}"
            )

        for task in tasks:
            decision = decide(
                task, force=cfg.force_translate, incremental=cfg.incremental_translate
            )
            result.decisions[task.language.code] = decision

            if decision is Decision.SKIP_MANUAL:
                self.console.print(
                    f"{prefix} [dim]⏭  Skipping {task.language.native_name} "
                    "(manual translation detected)[/dim]"
                )
            elif decision is Decision.SKIP_EXISTING:
                self.console.print(
                    f"{prefix} [dim]⏭  Skipping {task.language.native_name} (already exists)[/dim]"
                )

            if not decision.writes:
                result.skipped += 1
                continue

            if await self._translate_task(content, task, decision, writer, prefix):
                result.translated += 1
            else:
                result.failed += 1

        return result

    def _build_task(
        self,
        source_file: Path,
        relative_path: Path,
        language: LanguageConfig,
        overrides: set[Path],
        source_changed: bool,
    ) -> TranslationTask:
        target_path = self.settings.docs.language_root(language) / relative_path
        return TranslationTask(
            source_path=source_file,
            relative_path=relative_path,
            language=language,
            target_path=target_path,
            target_exists=target_path.exists(),
            manual_override=target_path in overrides,
            source_changed=source_changed,
        )

    async def _translate_task(
        self,
        content: str,
        task: TranslationTask,
        decision: Decision,
        writer: TranslationWriter,
        prefix: str,
    ) -> bool:
        name = task.language.native_name
        if decision is Decision.RETRANSLATE:
            self.console.print(f"{prefix} 🔄 Incremental translation to {name}...")
        elif decision is Decision.FORCE:
            self.console.print(f"{prefix} 🔄 Force re-translating {name}...")
        else:
            self.console.print(f"{prefix} 🌐 Full translation to {name}...")

        try:
            translated = await self.translator.translate(content, task.language.code)
            writer.write(task.target_path, translated)
        except Exception as e:
            logger.debug("Task %s -> %s failed", task.source_path, task.language.code, exc_info=True)
            self.console.print(
                f"{prefix} [red]✗ Failed to translate {name}: {escape(str(e))}[/red]"
            )
            return False

        status = "Updated" if decision is Decision.RETRANSLATE else "Saved"
        self.console.print(f"{prefix} [green]✓ {status} {name} translation[/green]")
        return True

    def _display_config(self, file_count: int, override_count: int) -> None:
        cfg = self.settings.translation
        policy = self.translator.retry_policy

        config_table = Table(show_header=False, box=None, padding=(0, 2))
        config_table.add_column("Key", style="cyan")
        config_table.add_column("Value", style="green")

        config_table.add_row("Files", str(file_count))
        config_table.add_row("Model", self.translator.model)
        config_table.add_row("API", cfg.openai_base_url)
        config_table.add_row("Languages", ", ".join(lang.native_name for lang in self.languages))
        config_table.add_row(
            "Retry",
            f"Max {policy.max_retries} times, delay {policy.base_delay}s, "
            f"backoff {policy.backoff}x",
        )
        config_table.add_row("Concurrency", f"{cfg.max_workers} worker(s)")
        config_table.add_row("Incremental translate", "Yes" if cfg.incremental_translate else "No")
        config_table.add_row("Force translate", "Yes" if cfg.force_translate else "No")
        config_table.add_row("Manual translations", str(override_count))

        self.console.print(
            Panel(config_table, title="[bold blue]📋 Configuration[/bold blue]", border_style="blue")
        )

    def _display_statistics(self, stats: RunStatistics) -> None:
        lines = [
            f"Total files: {stats.total}",
            f"Translations: {stats.translated}",
            f"Skipped: {stats.skipped}",
        ]
        if stats.failed:
            lines.append(f"[red]Failed: {stats.failed}[/red]")
        lines.append(f"Duration: {stats.duration_s:.2f}s")

        self.console.print(
            Panel(
                "\n".join(lines),
                title="[bold blue]📊 Translation Statistics[/bold blue]",
                border_style="green" if not stats.failed else "yellow",
            )
        )
        self.console.print("[bold green]✅ Translation completed![/bold green]\n")


def _display_path(path: Path) -> str:
    try:
        return escape(str(path.relative_to(Path.cwd())))
    except ValueError:
        return escape(str(path))
