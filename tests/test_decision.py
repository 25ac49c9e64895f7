"""Tests for the per-language translation decision."""

from __future__ import annotations

from pathlib import Path

import pytest

from docs_prebuild.config import DEFAULT_TARGET_LANGUAGES
from docs_prebuild.translation.decision import Decision, TranslationTask, decide

EN = DEFAULT_TARGET_LANGUAGES[0]


def _task(*, exists: bool, manual: bool = False, changed: bool = False) -> TranslationTask:
    return TranslationTask(
        source_path=Path("/docs/zh/guide/intro.md"),
        relative_path=Path("guide/intro.md"),
        language=EN,
        target_path=Path("/docs/en/guide/intro.md"),
        target_exists=exists,
        manual_override=manual,
        source_changed=changed,
    )


@pytest.mark.parametrize(
    ("task_kwargs", "force", "incremental", "expected"),
    [
        # manual override beats everything, force included
        ({"exists": True, "manual": True, "changed": True}, True, True, Decision.SKIP_MANUAL),
        ({"exists": False, "manual": True}, False, True, Decision.SKIP_MANUAL),
        # force beats existence and change state
        ({"exists": True, "changed": False}, True, True, Decision.FORCE),
        ({"exists": False}, True, False, Decision.FORCE),
        # missing output is always filled
        ({"exists": False, "changed": False}, False, True, Decision.TRANSLATE),
        ({"exists": False, "changed": False}, False, False, Decision.TRANSLATE),
        # incremental mode keeps existing outputs in sync
        ({"exists": True, "changed": True}, False, True, Decision.RETRANSLATE),
        ({"exists": True, "changed": False}, False, True, Decision.SKIP_UNCHANGED),
        # without incremental mode an existing output is left alone
        ({"exists": True, "changed": True}, False, False, Decision.SKIP_EXISTING),
    ],
)
def test_precedence(task_kwargs: dict, force: bool, incremental: bool, expected: Decision) -> None:
    assert decide(_task(**task_kwargs), force=force, incremental=incremental) is expected


def test_only_translating_decisions_write() -> None:
    writing = {d for d in Decision if d.writes}

    assert writing == {Decision.TRANSLATE, Decision.RETRANSLATE, Decision.FORCE}
