from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup, Tag

from .utils import PageFetchError, absolute_url, origin_of

logger = logging.getLogger(__name__)


class PageDocument:
    """Read-only view over one loaded page: its markup, location and origin."""

    def __init__(self, html: str, url: str):
        self.location = url
        self.origin = origin_of(url)
        self.soup = BeautifulSoup(html or "", "html.parser")

    def select(self, css: str) -> list[Tag]:
        return self.soup.select(css)

    def resolve(self, href: str | None) -> str | None:
        if not href:
            return None
        return absolute_url(href, self.location)

    @staticmethod
    def text_of(el: Tag) -> str:
        return el.get_text().strip()

    @staticmethod
    def closest(el: Tag, name: str) -> Tag | None:
        return el.find_parent(name)


async def fetch_page(client: httpx.AsyncClient, url: str, timeout: float = 10.0) -> PageDocument:
    try:
        resp = await client.get(url, timeout=timeout)
    except httpx.HTTPError as e:
        raise PageFetchError(f"Could not fetch {url}: {e}") from e
    if not resp.is_success:
        raise PageFetchError(f"Could not fetch {url}: HTTP {resp.status_code}")
    logger.info(f"Fetched page {resp.url} ({len(resp.text)} chars)")
    # Relative references resolve against where redirects landed
    return PageDocument(resp.text, str(resp.url))
