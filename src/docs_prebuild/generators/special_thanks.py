"""
Special-thanks page generator.

Combines the top GitHub contributors and the Afdian sponsors into
``guide/wiki/special-thanks.mdx`` for every page language.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import httpx
from rich.console import Console
from rich.markup import escape

from docs_prebuild.config import PAGE_LANGUAGES, Settings
from docs_prebuild.generators.afdian import AfdianClient, SponsorTiers
from docs_prebuild.generators.github import Contributor, GitHubClient
from docs_prebuild.generators.locales import THANKS_STRINGS, ThanksStrings
from docs_prebuild.generators.pages import (
    CALLOUT_IMPORT,
    frontmatter,
    page_timestamp,
    wiki_page_path,
    write_page,
)
from docs_prebuild.retry import SleepFunc

logger = logging.getLogger(__name__)

SPECIAL_THANKS_FILENAME = "special-thanks.mdx"

GOLD_BORDER = "border-4 border-yellow-400 shadow-lg shadow-yellow-400/50"
SILVER_BORDER = "border-4 border-gray-400 shadow-lg shadow-gray-400/50"
BRONZE_BORDER = "border-4 border-orange-600 shadow-lg shadow-orange-600/50"

# (medal, avatar border) for the top three contributors
PODIUM = (("🥇", GOLD_BORDER), ("🥈", SILVER_BORDER), ("🥉", BRONZE_BORDER))


def render_contributors(contributors: Sequence[Contributor], strings: ThanksStrings) -> str:
    parts = []
    for index, contributor in enumerate(contributors):
        username = contributor.login or strings.unknown_user
        medal, border = PODIUM[index] if index < len(PODIUM) else ("", "")
        heading = f"{medal} {username}" if medal else username

        parts.append(f"### {heading}\n\n")
        parts.append('<div className="flex items-center mb-5">\n')
        parts.append('  <div className="mr-4">\n')
        parts.append(
            f'    <img src="{contributor.avatar_url}" alt="{username}" '
            f'className="w-16 h-16 rounded-full {border}" />\n'
        )
        parts.append("  </div>\n")
        parts.append('  <div className="flex flex-col">\n')
        parts.append(
            f'    <a href="{contributor.html_url}" target="_blank" rel="noopener noreferrer" '
            f'className="font-medium no-underline mb-1">{username}</a>\n'
        )
        parts.append(
            f'    <span className="text-sm text-muted-foreground">'
            f"{strings.contributions}: {contributor.contributions}</span>\n"
        )
        parts.append("  </div>\n")
        parts.append("</div>\n\n")
        parts.append("---\n\n")
    return "".join(parts)


def render_sponsors(sponsors: SponsorTiers, strings: ThanksStrings) -> str:
    levels = (
        (sponsors.gold, "🥇", strings.gold_sponsor, strings.gold_sponsor_desc, GOLD_BORDER),
        (sponsors.silver, "🥈", strings.silver_sponsor, strings.silver_sponsor_desc, SILVER_BORDER),
        (sponsors.bronze, "🥉", strings.bronze_sponsor, strings.bronze_sponsor_desc, BRONZE_BORDER),
    )

    parts = []
    for sponsor_list, emoji, title, desc, border in levels:
        if not sponsor_list:
            continue

        parts.append(f"### {emoji} {title}\n\n")
        parts.append(f"{desc}\n\n")
        for sponsor in sponsor_list:
            name = sponsor.name or strings.anonymous_sponsor
            parts.append('<div className="flex items-center mb-5 p-4 rounded-lg bg-fd-muted/30">\n')
            parts.append('  <div className="mr-5">\n')
            parts.append(
                f'    <img src="{sponsor.avatar}" alt="{name}" '
                f'className="w-20 h-20 rounded-full {border}" />\n'
            )
            parts.append("  </div>\n")
            parts.append('  <div className="flex flex-col">\n')
            parts.append(f'    <span className="text-lg font-semibold mb-1">{name}</span>\n')
            parts.append(
                f'    <span className="text-sm text-muted-foreground">'
                f"{strings.total_sponsored}: ¥{sponsor.amount:.2f}</span>\n"
            )
            parts.append("  </div>\n")
            parts.append("</div>\n\n")
        parts.append("---\n\n")
    return "".join(parts)


def render_special_thanks(
    contributors: Sequence[Contributor],
    sponsors: SponsorTiers | None,
    lang: str,
    repo: str,
    now: datetime | None = None,
) -> str:
    """
    Render the special-thanks page for one language.

    The sponsor section is omitted when there are no sponsors, the contributor
    section when there are no contributors.
    """
    strings = THANKS_STRINGS[lang]
    timestamp = page_timestamp(now)

    parts = [frontmatter(strings.page_title), CALLOUT_IMPORT, f"{strings.intro}\n\n"]

    if sponsors is not None and not sponsors.is_empty:
        parts.append(f"{strings.sponsors_title}\n\n")
        parts.append(f"{strings.sponsors_intro}\n\n")
        parts.append(f'<Callout title="{strings.sponsors_info_title} {timestamp} (UTC+8)">\n')
        parts.append(f"{strings.sponsors_info_desc}\n")
        parts.append("</Callout>\n\n")
        parts.append(render_sponsors(sponsors, strings))

    if contributors:
        parts.append(f"{strings.contributors_title}\n\n")
        parts.append(f"{strings.contributors_intro}\n\n")
        parts.append(f'<Callout title="{strings.contributors_info_title} {timestamp} (UTC+8)">\n')
        parts.append(f"{strings.contributors_info_desc.format(repo=repo)}\n")
        parts.append("</Callout>\n\n")
        parts.append(render_contributors(contributors, strings))

    return "".join(parts)


async def _fetch_contributors(github: GitHubClient, console: Console) -> list[Contributor]:
    try:
        return await github.fetch_contributors()
    except Exception as e:
        logger.debug("Contributor fetch failed", exc_info=True)
        console.print(f"[red]✗ Failed to fetch GitHub Contributors: {escape(str(e))}[/red]")
        return []


async def _fetch_sponsors(afdian: AfdianClient, console: Console) -> SponsorTiers | None:
    if not afdian.config.configured:
        console.print(
            "[yellow]⚠ Afdian API credentials not configured, skipping sponsor data fetch[/yellow]"
        )
        return None

    console.print("Fetching Afdian sponsor data...")
    try:
        return await afdian.fetch_sponsors()
    except Exception as e:
        logger.debug("Sponsor fetch failed", exc_info=True)
        console.print(f"[red]✗ Failed to fetch Afdian sponsors: {escape(str(e))}[/red]")
        console.print("[yellow]⚠ Will skip sponsor data[/yellow]")
        return None


async def generate_special_thanks(
    settings: Settings,
    client: httpx.AsyncClient,
    console: Console | None = None,
    *,
    now: datetime | None = None,
    sleep: SleepFunc = asyncio.sleep,
) -> list[Path]:
    """
    Fetch contributors and sponsors, then write the page for every page language.

    Nothing is written when neither source returned data.

    Returns:
        Paths of the written pages.
    """
    console = console or Console()
    console.print("\n[bold blue]🚀 Starting to generate Special Thanks...[/bold blue]\n")

    github = GitHubClient(settings.github, client, console)
    afdian = AfdianClient(settings.afdian, client, console, sleep=sleep)

    contributors, sponsors = await asyncio.gather(
        _fetch_contributors(github, console),
        _fetch_sponsors(afdian, console),
    )

    if not contributors and sponsors is None:
        console.print("[yellow]⚠ No data was fetched[/yellow]")
        return []

    written = []
    for lang in PAGE_LANGUAGES:
        console.print(f"\n📝 Generating {lang.upper()} version...")
        content = render_special_thanks(contributors, sponsors, lang, github.repo, now)
        path = write_page(
            wiki_page_path(settings.docs.docs_dir, lang, SPECIAL_THANKS_FILENAME), content
        )
        console.print(f"[green]✓ Generated: {path}[/green]")
        written.append(path)

    console.print("\n[bold green]✅ Special Thanks generation completed![/bold green]\n")
    return written
