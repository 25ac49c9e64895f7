"""
Document scanner for docs-prebuild.

Finds the source-language Markdown/MDX documents to translate.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from rich.console import Console

from docs_prebuild.config import DocsConfig

logger = logging.getLogger(__name__)

# Supported file extensions (compared case-insensitively)
SUPPORTED_EXTENSIONS = frozenset({".md", ".mdx"})


def is_markdown_file(file_path: Path) -> bool:
    """Check if a file is a Markdown/MDX document."""
    return file_path.suffix.lower() in SUPPORTED_EXTENSIONS


class DocumentScanner:
    """Collects source documents from the content tree."""

    def __init__(self, docs: DocsConfig, console: Console | None = None):
        """
        Initialize scanner.

        Args:
            docs: Content tree layout.
            console: Rich console for output. If None, creates a new one.
        """
        self.docs = docs
        self.console = console or Console()

    def collect(self, root: Path | None = None) -> list[Path]:
        """
        Recursively collect Markdown/MDX files under ``root``.

        Args:
            root: Directory to scan. Defaults to the source-language root.

        Returns:
            Absolute paths in depth-first, name-sorted order. Empty if the
            directory is missing or holds no documents.
        """
        root = Path(root or self.docs.source_root).resolve()
        if not root.is_dir():
            logger.debug("Source root %s does not exist", root)
            return []
        return list(self._walk(root))

    def _walk(self, directory: Path) -> Iterator[Path]:
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                yield from self._walk(entry)
            elif entry.is_file() and is_markdown_file(entry):
                yield entry

    def resolve_requested(self, requested: Iterable[str | Path]) -> list[Path]:
        """
        Filter explicitly requested files down to translatable source documents.

        Files inside a target-language directory, missing files and
        non-Markdown files are skipped with a notice.
        """
        language_roots = [self.docs.language_root(lang) for lang in self.docs.target_languages]
        files: list[Path] = []

        for item in requested:
            file_path = Path(item).expanduser().resolve()

            if any(file_path.is_relative_to(root) for root in language_roots):
                self.console.print(f"[dim]⏭  Skipping translated file: {file_path}[/dim]")
                continue

            if not file_path.exists():
                self.console.print(f"[yellow]⚠ File not found: {file_path}[/yellow]")
                continue

            if not is_markdown_file(file_path):
                self.console.print(f"[yellow]⚠ Not a markdown file: {file_path}[/yellow]")
                continue

            files.append(file_path)

        return files
