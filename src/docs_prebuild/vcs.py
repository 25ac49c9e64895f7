"""
Version-control access and change detection.

The pipeline only talks to the ``VersionControl`` protocol; ``GitRepository``
implements it by shelling out to git.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from rich.console import Console

from docs_prebuild.config import DocsConfig, LanguageConfig

logger = logging.getLogger(__name__)

PREVIOUS_REVISION = "HEAD~1"
CURRENT_REVISION = "HEAD"


class VersionControlError(RuntimeError):
    """History is unavailable (no git, not a repository, no prior commit)."""


class VersionControl(Protocol):
    """The two history queries the pipeline needs."""

    def changed_paths(self, range_spec: str) -> set[Path]:
        """Absolute paths of files changed in ``range_spec`` (e.g. ``HEAD~1..HEAD``)."""
        ...

    def content_at(self, path: Path, revision: str) -> str | None:
        """Content of ``path`` at ``revision``, or None if it did not exist there."""
        ...


class GitRepository:
    """``VersionControl`` backed by the git command line."""

    def __init__(self, cwd: Path | str = "."):
        self.cwd = Path(cwd).resolve()
        self._toplevel: Path | None = None

    def _git(self, *args: str) -> subprocess.CompletedProcess[str]:
        try:
            return subprocess.run(
                ["git", *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as e:
            raise VersionControlError(f"git is not available: {e}") from e

    @property
    def toplevel(self) -> Path:
        """Root of the working tree; git reports diff paths relative to it."""
        if self._toplevel is None:
            result = self._git("rev-parse", "--show-toplevel")
            if result.returncode != 0:
                raise VersionControlError(result.stderr.strip() or "not a git repository")
            self._toplevel = Path(result.stdout.strip()).resolve()
        return self._toplevel

    def changed_paths(self, range_spec: str) -> set[Path]:
        root = self.toplevel
        # Unquoted, NUL-separated names so non-ASCII paths come back verbatim
        result = self._git("-c", "core.quotePath=false", "diff", "--name-only", "-z", range_spec)
        if result.returncode != 0:
            raise VersionControlError(result.stderr.strip() or f"git diff {range_spec} failed")
        return {root / name for name in result.stdout.split("\0") if name}

    def content_at(self, path: Path, revision: str) -> str | None:
        try:
            relative = Path(path).resolve().relative_to(self.toplevel)
        except ValueError:
            return None

        result = self._git("show", f"{revision}:{relative.as_posix()}")
        if result.returncode != 0:
            logger.debug("git show %s:%s failed: %s", revision, relative, result.stderr.strip())
            return None
        return result.stdout


class ChangeDetector:
    """Classifies manual overrides and changed sources from version history."""

    def __init__(
        self,
        vcs: VersionControl,
        docs: DocsConfig,
        console: Console | None = None,
    ):
        self.vcs = vcs
        self.docs = docs
        self.console = console or Console()

    def detect_manual_overrides(self, languages: Iterable[LanguageConfig] | None = None) -> set[Path]:
        """
        Files edited directly in a target-language tree by the last commit.

        Returns an empty set when history is unavailable.
        """
        languages = tuple(languages if languages is not None else self.docs.target_languages)
        roots = [self.docs.language_root(lang) for lang in languages]

        try:
            changed = self.vcs.changed_paths(f"{PREVIOUS_REVISION}..{CURRENT_REVISION}")
        except VersionControlError as e:
            logger.debug("Manual translation detection unavailable: %s", e)
            self.console.print(
                "[dim]ℹ Could not detect manual translations (not in git repo?)[/dim]"
            )
            return set()

        overrides = {
            path for path in changed if any(path.is_relative_to(root) for root in roots)
        }
        if overrides:
            self.console.print(
                f"\n[cyan]📝 Detected {len(overrides)} manually translated file(s)[/cyan]"
            )
        return overrides

    def has_changes(self, path: Path, current_content: str) -> bool:
        """
        Whether ``path`` differs from its last committed version.

        New, untracked or unreadable-history files count as changed.
        """
        try:
            previous = self.vcs.content_at(path, CURRENT_REVISION)
        except VersionControlError as e:
            logger.debug("History unavailable for %s: %s", path, e)
            return True

        if previous is None:
            return True
        return previous != current_content
