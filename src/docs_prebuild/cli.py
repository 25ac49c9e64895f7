"""
CLI for docs-prebuild.

Provides commands for translating the documentation tree and regenerating
the changelog and special-thanks pages.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from docs_prebuild.config import ConfigurationError, Settings, load_config
from docs_prebuild.generators.changelog import generate_changelog
from docs_prebuild.generators.prebuild import HTTP_TIMEOUT_SECONDS, run_prebuild
from docs_prebuild.generators.special_thanks import generate_special_thanks
from docs_prebuild.log import setup_logging
from docs_prebuild.translation.pipeline import TranslationPipeline

app = typer.Typer(
    name="docs-prebuild",
    help="Build-time helpers for the documentation site: translation, changelog, special thanks.",
    add_completion=False,
)

console = Console()


def get_settings(config_path: Path | None = None) -> Settings:
    """Load settings from config file or the environment, exiting on invalid values."""
    try:
        settings = load_config(config_path)
    except ConfigurationError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    setup_logging(settings.logging)
    return settings


@app.command()
def translate(
    files: list[Path] | None = typer.Argument(
        None, help="Source documents to translate (default: the whole source tree)"
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
    force: bool = typer.Option(
        False, "--force", help="Re-translate everything except manual translations"
    ),
) -> None:
    """Translate source-language documents into every target language."""
    settings = get_settings(config)
    if force:
        settings = settings.model_copy(
            update={"translation": settings.translation.model_copy(update={"force_translate": True})}
        )

    try:
        pipeline = TranslationPipeline.from_settings(settings, console)
    except ConfigurationError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    try:
        asyncio.run(pipeline.run(files or None))
    except Exception as e:
        console.print(f"\n[red]❌ Translation failed: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


async def _with_client(coro_factory):
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS, follow_redirects=True) as client:
        return await coro_factory(client)


@app.command()
def changelog(
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
) -> None:
    """Regenerate the changelog pages from GitHub Releases."""
    settings = get_settings(config)
    asyncio.run(_with_client(lambda client: generate_changelog(settings, client, console)))


@app.command()
def thanks(
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
) -> None:
    """Regenerate the special-thanks pages from GitHub and Afdian."""
    settings = get_settings(config)
    asyncio.run(_with_client(lambda client: generate_special_thanks(settings, client, console)))


@app.command()
def prebuild(
    config: Path | None = typer.Option(None, "--config", "-c", help="Config file"),
) -> None:
    """Regenerate changelog and special-thanks pages concurrently."""
    settings = get_settings(config)
    asyncio.run(run_prebuild(settings, console))


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
