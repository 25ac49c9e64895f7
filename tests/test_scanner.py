"""Tests for DocumentScanner."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from docs_prebuild.config import DocsConfig
from docs_prebuild.scanner import DocumentScanner, is_markdown_file

from tests.helpers import write_doc


def test_is_markdown_file_ignores_case() -> None:
    assert is_markdown_file(Path("intro.md"))
    assert is_markdown_file(Path("guide.MDX"))
    assert not is_markdown_file(Path("logo.png"))
    assert not is_markdown_file(Path("meta.json"))


def test_collect_walks_depth_first_sorted(docs_dir: Path, console: Console) -> None:
    source = docs_dir / "zh"
    write_doc(source / "b.md", "b")
    write_doc(source / "a" / "z.mdx", "z")
    write_doc(source / "a" / "y.md", "y")
    write_doc(source / "a" / "image.png", "png")
    write_doc(source / "c.txt", "text")

    scanner = DocumentScanner(DocsConfig(docs_dir=docs_dir), console)
    relative = [p.relative_to(source).as_posix() for p in scanner.collect()]

    assert relative == ["a/y.md", "a/z.mdx", "b.md"]


def test_collect_missing_root_is_empty(tmp_path: Path, console: Console) -> None:
    scanner = DocumentScanner(DocsConfig(docs_dir=tmp_path / "nowhere"), console)

    assert scanner.collect() == []


def test_resolve_requested_filters_files(docs_dir: Path, console: Console) -> None:
    docs = DocsConfig(docs_dir=docs_dir)
    source = write_doc(docs_dir / "zh" / "guide" / "intro.md", "# 介绍")
    translated = write_doc(docs_dir / "en" / "guide" / "intro.md", "# Intro")
    image = write_doc(docs_dir / "zh" / "logo.png", "png")
    missing = docs_dir / "zh" / "missing.md"

    scanner = DocumentScanner(docs, console)
    files = scanner.resolve_requested([source, translated, image, str(missing)])

    assert files == [source.resolve()]
    output = console.file.getvalue()
    assert "Skipping translated file" in output
    assert "File not found" in output
    assert "Not a markdown file" in output
