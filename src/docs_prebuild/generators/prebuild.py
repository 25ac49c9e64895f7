"""
Pre-build step: regenerate the changelog and special-thanks pages.

Both generators run concurrently on a shared HTTP client. Failures are
reported but never raised, so the site build always goes ahead.
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

import httpx
from rich.console import Console
from rich.markup import escape

from docs_prebuild.config import Settings
from docs_prebuild.generators.changelog import generate_changelog
from docs_prebuild.generators.special_thanks import generate_special_thanks

logger = logging.getLogger(__name__)

HTTP_TIMEOUT_SECONDS = 30.0


async def run_prebuild(
    settings: Settings,
    console: Console | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Path]:
    """
    Run every page generator.

    Args:
        settings: Run configuration.
        console: Rich console for output.
        client: HTTP client to use. A new one is created and closed if None.

    Returns:
        Paths of all pages written.
    """
    console = console or Console()
    console.rule("[bold blue]🚀 Starting pre-build[/bold blue]")
    start_time = time.perf_counter()

    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS, follow_redirects=True)

    written: list[Path] = []
    try:
        results = await asyncio.gather(
            generate_changelog(settings, client, console),
            generate_special_thanks(settings, client, console),
            return_exceptions=True,
        )
    finally:
        if owns_client:
            await client.aclose()

    for result in results:
        if isinstance(result, BaseException):
            logger.error("Page generator failed: %r", result)
            console.print(f"[red]❌ Pre-build step failed: {escape(str(result))}[/red]")
            console.print("[yellow]⚠ The build will continue with old or missing data[/yellow]")
        else:
            written.extend(result)

    duration = time.perf_counter() - start_time
    console.rule(f"[bold green]✅ Pre-build finished in {duration:.2f}s[/bold green]")
    return written
