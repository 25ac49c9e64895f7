"""Tests for TranslationWriter."""

from __future__ import annotations

from pathlib import Path

import pytest

from docs_prebuild.translation.writer import ManualOverrideError, TranslationWriter


def test_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "en" / "guide" / "deep" / "intro.md"

    TranslationWriter().write(target, "# Intro")

    assert target.read_text(encoding="utf-8") == "# Intro"


def test_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "intro.md"
    target.write_text("old", encoding="utf-8")

    TranslationWriter().write(target, "new")

    assert target.read_text(encoding="utf-8") == "new"


def test_refuses_protected_path(tmp_path: Path) -> None:
    target = tmp_path / "en" / "intro.md"
    target.parent.mkdir()
    target.write_text("hand written", encoding="utf-8")
    writer = TranslationWriter([target])

    with pytest.raises(ManualOverrideError):
        writer.write(target, "machine translated")

    assert target.read_text(encoding="utf-8") == "hand written"
    assert writer.protected_paths == frozenset({target})


def test_writes_utf8(tmp_path: Path) -> None:
    target = tmp_path / "ja" / "intro.md"

    TranslationWriter().write(target, "# はじめに")

    assert target.read_bytes() == "# はじめに".encode()
