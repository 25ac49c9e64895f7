"""
Afdian (爱发电) sponsor API client.

Requests are signed with ``md5(token + "params" + params + "ts" + ts + "user_id" + user_id)``
and paginated; sponsors are grouped into tiers by cumulative amount.
"""

from __future__ import annotations

import asyncio
import hashlib
import json
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

import httpx
from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from docs_prebuild.config import AfdianConfig
from docs_prebuild.retry import SleepFunc

logger = logging.getLogger(__name__)

AFDIAN_API_URL = "https://afdian.com/api/open/query-sponsor"
DEFAULT_AVATAR = "https://pic1.afdiancdn.com/default/avatar/default-avatar.png"

GOLD_THRESHOLD = 10001.0
SILVER_THRESHOLD = 1001.0

# Pause between page requests to stay under the rate limit
PAGE_DELAY_SECONDS = 1.0


class AfdianError(RuntimeError):
    """The Afdian API rejected a request."""


class AfdianUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    avatar: str = ""


class AfdianSponsorItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user: AfdianUser = Field(default_factory=AfdianUser)
    all_sum_amount: str | float = "0"


class AfdianPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[AfdianSponsorItem] = Field(default_factory=list, alias="list")
    total_page: int = 1
    total_count: int = 0


class AfdianResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ec: int
    em: str = ""
    data: AfdianPage | None = None


@dataclass
class Sponsor:
    name: str
    avatar: str
    amount: float


@dataclass
class SponsorTiers:
    """Sponsors grouped by cumulative amount, each tier sorted descending."""

    gold: list[Sponsor] = field(default_factory=list)
    silver: list[Sponsor] = field(default_factory=list)
    bronze: list[Sponsor] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.gold or self.silver or self.bronze)


def sign_request(token: str, user_id: str, params: str, ts: int) -> str:
    """Compute the request signature Afdian expects."""
    return hashlib.md5(f"{token}params{params}ts{ts}user_id{user_id}".encode()).hexdigest()


def _parse_amount(raw: str | float) -> float:
    try:
        return float(raw or 0)
    except ValueError:
        return 0.0


def categorize_sponsors(items: Iterable[AfdianSponsorItem]) -> tuple[SponsorTiers, int]:
    """
    Group sponsors into gold, silver and bronze tiers.

    Sponsors with a zero or negative total (refunds, redemption codes) are
    dropped. Anonymous sponsors keep an empty name.

    Returns:
        The tiers and the number of dropped sponsors.
    """
    tiers = SponsorTiers()
    skipped = 0

    for item in items:
        amount = _parse_amount(item.all_sum_amount)
        if amount <= 0:
            skipped += 1
            continue

        sponsor = Sponsor(
            name=item.user.name,
            avatar=item.user.avatar or DEFAULT_AVATAR,
            amount=amount,
        )
        if amount >= GOLD_THRESHOLD:
            tiers.gold.append(sponsor)
        elif amount >= SILVER_THRESHOLD:
            tiers.silver.append(sponsor)
        else:
            tiers.bronze.append(sponsor)

    for tier in (tiers.gold, tiers.silver, tiers.bronze):
        tier.sort(key=lambda s: s.amount, reverse=True)

    return tiers, skipped


class AfdianClient:
    """Fetches every sponsor page from the Afdian open API."""

    def __init__(
        self,
        config: AfdianConfig,
        client: httpx.AsyncClient,
        console: Console | None = None,
        *,
        url: str = AFDIAN_API_URL,
        sleep: SleepFunc = asyncio.sleep,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config
        self._client = client
        self.console = console or Console()
        self._url = url
        self._sleep = sleep
        self._clock = clock

    async def _fetch_page(self, page: int) -> AfdianPage:
        ts = int(self._clock())
        params = json.dumps({"page": page}, separators=(",", ":"))
        payload = {
            "user_id": self.config.afdian_user_id,
            "params": params,
            "ts": ts,
            "sign": sign_request(
                self.config.afdian_token, self.config.afdian_user_id, params, ts
            ),
        }

        response = await self._client.post(self._url, json=payload)
        response.raise_for_status()

        body = AfdianResponse.model_validate(response.json())
        if body.ec != 200:
            raise AfdianError(f"Afdian API returned error: {body.em}")
        return body.data or AfdianPage()

    async def fetch_items(self) -> list[AfdianSponsorItem]:
        """
        Fetch all raw sponsor records across pages.

        Raises:
            AfdianError: If the API answers with a non-200 ``ec``.
            httpx.HTTPError: On transport errors or non-success responses.
        """
        items: list[AfdianSponsorItem] = []
        current_page = 1
        total_page = 1

        while current_page <= total_page:
            self.console.print(f"Fetching page {current_page}/{total_page}...")
            page = await self._fetch_page(current_page)
            items.extend(page.items)

            if current_page == 1:
                total_page = page.total_page or 1
                self.console.print(
                    f"[green]✓ Total sponsors: {page.total_count}, Total pages: {total_page}[/green]"
                )

            current_page += 1
            if current_page <= total_page:
                await self._sleep(PAGE_DELAY_SECONDS)

        self.console.print(
            f"[green]✓ Successfully fetched {len(items)} sponsors from all pages[/green]"
        )
        return items

    async def fetch_sponsors(self) -> SponsorTiers:
        """Fetch and tier all sponsors."""
        items = await self.fetch_items()
        tiers, skipped = categorize_sponsors(items)
        if skipped:
            self.console.print(
                f"[dim]ℹ Skipped {skipped} sponsors with zero amount "
                "(refunds/redemption codes)[/dim]"
            )
        return tiers
