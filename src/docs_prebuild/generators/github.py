"""
GitHub REST API client for releases and contributors.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter
from rich.console import Console

from docs_prebuild.config import GitHubConfig

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
USER_AGENT = "New-API-Docs-Builder/1.0"


class ReleaseAsset(BaseModel):
    """A downloadable file attached to a release."""

    model_config = ConfigDict(extra="ignore")

    name: str
    browser_download_url: str
    size: int = 0


class Release(BaseModel):
    """A GitHub release, reduced to the fields the changelog renders."""

    model_config = ConfigDict(extra="ignore")

    tag_name: str | None = None
    name: str | None = None
    published_at: str | None = None
    body: str | None = None
    prerelease: bool = False
    assets: list[ReleaseAsset] = []


class Contributor(BaseModel):
    """A repository contributor."""

    model_config = ConfigDict(extra="ignore")

    login: str | None = None
    avatar_url: str = ""
    html_url: str = ""
    contributions: int = 0


_releases_adapter = TypeAdapter(list[Release])
_contributors_adapter = TypeAdapter(list[Contributor])


class GitHubClient:
    """Fetches release and contributor data for one repository."""

    def __init__(
        self,
        config: GitHubConfig,
        client: httpx.AsyncClient,
        console: Console | None = None,
        base_url: str = GITHUB_API_URL,
    ):
        """
        Initialize GitHub client.

        Args:
            config: Repository slug, optional token and page sizes.
            client: Shared HTTP client.
            console: Rich console for output.
            base_url: REST API root.
        """
        self.config = config
        self._client = client
        self.console = console or Console()
        self._base_url = base_url.rstrip("/")
        self._auth_notice_shown = False

    @property
    def repo(self) -> str:
        return self.config.source_repo

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": USER_AGENT}
        if self.config.github_token:
            headers["Authorization"] = f"token {self.config.github_token}"

        if not self._auth_notice_shown:
            self._auth_notice_shown = True
            if self.config.github_token:
                self.console.print("[green]✓ Using GitHub Token for authentication[/green]")
            else:
                self.console.print(
                    "[yellow]⚠ GitHub Token not configured, API rate limit: "
                    "60 requests/hour[/yellow]"
                )
        return headers

    async def _get_json(self, path: str, per_page: int) -> object:
        url = f"{self._base_url}/repos/{self.repo}/{path}"
        self.console.print(f"Fetching {path}: {url}?per_page={per_page}")

        response = await self._client.get(
            url, params={"per_page": per_page}, headers=self._headers()
        )
        response.raise_for_status()
        return response.json()

    async def fetch_releases(self) -> list[Release]:
        """
        Fetch the most recent releases, newest first.

        Raises:
            httpx.HTTPError: On transport errors or non-success responses.
            pydantic.ValidationError: On an unexpected payload.
        """
        data = await self._get_json("releases", self.config.max_releases)
        releases = _releases_adapter.validate_python(data)
        self.console.print(f"[green]✓ Successfully fetched {len(releases)} releases[/green]")
        return releases

    async def fetch_contributors(self) -> list[Contributor]:
        """
        Fetch the top contributors, most contributions first.

        Raises:
            httpx.HTTPError: On transport errors or non-success responses.
            pydantic.ValidationError: On an unexpected payload.
        """
        data = await self._get_json("contributors", self.config.max_contributors)
        contributors = _contributors_adapter.validate_python(data)
        self.console.print(
            f"[green]✓ Successfully fetched {len(contributors)} contributors[/green]"
        )
        return contributors
