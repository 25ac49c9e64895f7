"""
Changelog page generator.

Renders the latest GitHub releases into ``guide/wiki/changelog.mdx`` for every
page language.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

import httpx
from rich.console import Console
from rich.markup import escape

from docs_prebuild.config import PAGE_LANGUAGES, Settings
from docs_prebuild.generators.github import GitHubClient, Release, ReleaseAsset
from docs_prebuild.generators.locales import CHANGELOG_STRINGS, ChangelogStrings
from docs_prebuild.generators.pages import (
    CALLOUT_IMPORT,
    CHINA_TZ,
    frontmatter,
    page_timestamp,
    wiki_page_path,
    write_page,
)

logger = logging.getLogger(__name__)

CHANGELOG_FILENAME = "changelog.mdx"

_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+", re.MULTILINE)

# Release notes sit under a "## <version>" heading, so their own headings
# start at level 3.
_DEMOTED_LEVEL = {1: 3, 2: 3, 3: 4, 4: 5, 5: 6, 6: 6}


def demote_headings(body: str) -> str:
    """Push release-note headings below the version heading."""
    if not body:
        return ""
    return _HEADING_RE.sub(lambda m: "#" * _DEMOTED_LEVEL[len(m.group(1))] + " ", body)


def format_china_time(published_at: str | None, strings: ChangelogStrings) -> str:
    """Render an ISO-8601 timestamp in UTC+8 with the localised suffix."""
    if not published_at:
        return strings.unknown_version

    try:
        parsed = datetime.fromisoformat(published_at.replace("Z", "+00:00"))
    except ValueError:
        return published_at

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    local = parsed.astimezone(CHINA_TZ)
    return f"{local:%Y-%m-%d %H:%M:%S} {strings.time_suffix}"


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def format_download_links(
    tag_name: str | None,
    assets: Sequence[ReleaseAsset],
    strings: ChangelogStrings,
    repo: str,
) -> str:
    """HTML list of release assets followed by the source archives."""
    if not assets and not tag_name:
        return ""

    lines = [f"**{strings.download_resources}**", "", "<ul>"]
    for asset in assets:
        lines.append(
            f'<li><a href="{asset.browser_download_url}">{asset.name}</a> '
            f"({format_file_size(asset.size)})</li>"
        )

    if tag_name:
        for ext in ("zip", "tar.gz"):
            url = f"https://github.com/{repo}/archive/refs/tags/{tag_name}.{ext}"
            lines.append(f'<li><a href="{url}">Source code ({ext})</a></li>')

    lines.append("</ul>")
    return "\n".join(lines)


def version_label(index: int, prerelease: bool, strings: ChangelogStrings) -> str:
    if index == 0:
        return strings.latest_pre if prerelease else strings.latest
    return strings.pre if prerelease else strings.normal


def render_changelog(
    releases: Sequence[Release],
    lang: str,
    repo: str,
    now: datetime | None = None,
) -> str:
    """
    Render the changelog page for one language.

    Args:
        releases: Releases, newest first.
        lang: Page language code.
        repo: GitHub repository slug.
        now: Time shown as "data updated at".

    Returns:
        MDX page content.
    """
    strings = CHANGELOG_STRINGS[lang]
    if not releases:
        return strings.no_data

    parts = [frontmatter(strings.page_title), CALLOUT_IMPORT]
    parts.append(f'<Callout type="warn" title="{strings.warning_title} {page_timestamp(now)}">\n')
    parts.append(f"{strings.warning_desc.format(repo=repo)}\n")
    parts.append("</Callout>\n\n")

    for index, release in enumerate(releases):
        tag_name = release.tag_name or strings.unknown_version
        name = release.name or tag_name
        body = demote_headings(release.body or strings.no_release_notes)
        callout_type = "info" if index == 0 else "note"
        title = (
            f"{version_label(index, release.prerelease, strings)} · "
            f"{strings.published_at} {format_china_time(release.published_at, strings)}"
        )

        parts.append(f"## {name}\n\n")
        parts.append(f'<Callout type="{callout_type}" title="{title}">\n\n')
        parts.append(f"{body}\n\n")

        links = format_download_links(release.tag_name, release.assets, strings, repo)
        if links:
            parts.append(f"{links}\n\n")

        parts.append("</Callout>\n\n")
        parts.append("---\n\n")

    return "".join(parts)


async def generate_changelog(
    settings: Settings,
    client: httpx.AsyncClient,
    console: Console | None = None,
    now: datetime | None = None,
) -> list[Path]:
    """
    Fetch releases and write the changelog page for every page language.

    A failed fetch leaves any existing pages untouched.

    Returns:
        Paths of the written pages.
    """
    console = console or Console()
    console.print("\n[bold blue]🚀 Starting to generate Changelog...[/bold blue]\n")

    github = GitHubClient(settings.github, client, console)
    try:
        releases = await github.fetch_releases()
    except Exception as e:
        logger.debug("Release fetch failed", exc_info=True)
        console.print(f"[red]✗ Failed to fetch GitHub Releases: {escape(str(e))}[/red]")
        console.print("[yellow]⚠ Will use existing changelog files if available[/yellow]\n")
        return []

    written = []
    for lang in PAGE_LANGUAGES:
        console.print(f"\n📝 Generating {lang.upper()} version...")
        content = render_changelog(releases, lang, github.repo, now)
        path = write_page(
            wiki_page_path(settings.docs.docs_dir, lang, CHANGELOG_FILENAME), content
        )
        console.print(f"[green]✓ Generated: {path}[/green]")
        written.append(path)

    console.print("\n[bold green]✅ Changelog generation completed![/bold green]\n")
    return written
