"""
Shared helpers for generated MDX pages.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

# China Standard Time; no daylight saving
CHINA_TZ = timezone(timedelta(hours=8), name="UTC+8")

CALLOUT_IMPORT = "import { Callout } from 'fumadocs-ui/components/callout';\n\n"


def frontmatter(title: str) -> str:
    return f"---\ntitle: {title}\n---\n\n"


def page_timestamp(now: datetime | None = None) -> str:
    """Render ``now`` in UTC+8 as ``YYYY-M-D HH:MM:SS``."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(CHINA_TZ)
    return f"{local.year}-{local.month}-{local.day} {local:%H:%M:%S}"


def wiki_page_path(docs_dir: Path, lang: str, filename: str) -> Path:
    """Location of a generated page inside a language tree."""
    return docs_dir / lang / "guide" / "wiki" / filename


def write_page(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
