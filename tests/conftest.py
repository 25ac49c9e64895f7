"""Shared fixtures for docs-prebuild tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "MAX_RETRIES",
    "RETRY_DELAY",
    "RETRY_BACKOFF",
    "MAX_WORKERS",
    "FORCE_TRANSLATE",
    "INCREMENTAL_TRANSLATE",
    "REQUEST_TIMEOUT",
    "DOCS_DIR",
    "SOURCE_REPO",
    "GITHUB_TOKEN",
    "AFDIAN_USER_ID",
    "AFDIAN_TOKEN",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell and .env out of the settings under test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, force_terminal=False)


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    root = tmp_path / "content" / "docs"
    (root / "zh").mkdir(parents=True)
    return root
