"""
Writes translated documents into the target-language trees.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class ManualOverrideError(RuntimeError):
    """Refusal to overwrite a file a human edited in the target tree."""


class TranslationWriter:
    """Persists translations, never touching manually overridden files."""

    def __init__(self, protected_paths: Iterable[Path] = ()):
        self._protected = frozenset(Path(p) for p in protected_paths)

    @property
    def protected_paths(self) -> frozenset[Path]:
        return self._protected

    def write(self, target_path: Path, content: str) -> None:
        """
        Write ``content`` to ``target_path``, creating parent directories.

        Raises:
            ManualOverrideError: If the path is a manual override.
            OSError: If the file cannot be written.
        """
        if target_path in self._protected:
            raise ManualOverrideError(f"Refusing to overwrite manual translation: {target_path}")

        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d chars to %s", len(content), target_path)
