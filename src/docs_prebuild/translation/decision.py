"""
Per-language translation decisions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from docs_prebuild.config import LanguageConfig


class Decision(str, Enum):
    """What to do with one (document, language) pair."""

    SKIP_MANUAL = "skip-manual"
    SKIP_UNCHANGED = "skip-unchanged"
    SKIP_EXISTING = "skip-existing"
    TRANSLATE = "translate"
    RETRANSLATE = "retranslate"
    FORCE = "force"

    @property
    def writes(self) -> bool:
        """Whether this decision produces a new output file."""
        return self in (Decision.TRANSLATE, Decision.RETRANSLATE, Decision.FORCE)


@dataclass(frozen=True)
class TranslationTask:
    """A source document paired with one target language."""

    source_path: Path
    relative_path: Path
    language: LanguageConfig
    target_path: Path
    target_exists: bool
    manual_override: bool
    source_changed: bool


def decide(task: TranslationTask, *, force: bool, incremental: bool) -> Decision:
    """
    Decide whether ``task`` is skipped, translated or re-translated.

    Precedence: manual override, then force, then a missing output, then a
    changed source in incremental mode. Anything else is skipped.
    """
    if task.manual_override:
        return Decision.SKIP_MANUAL
    if force:
        return Decision.FORCE
    if not task.target_exists:
        return Decision.TRANSLATE
    if incremental and task.source_changed:
        return Decision.RETRANSLATE
    if incremental:
        return Decision.SKIP_UNCHANGED
    return Decision.SKIP_EXISTING
