from __future__ import annotations

import logging
import re

import httpx

from .catalogs import PROBE_TIMEOUT
from .utils import RobotsTxtNotFound

logger = logging.getLogger(__name__)

SITEMAP_LINE = re.compile(r"^Sitemap:\s*(.+)$", re.IGNORECASE)


def parse_robots_sitemaps(text: str) -> list[str]:
    # File order, duplicates kept
    sitemaps: list[str] = []
    for line in (text or "").split("\n"):
        m = SITEMAP_LINE.match(line)
        if m:
            sitemaps.append(m.group(1).strip())
    return sitemaps


class RobotsTxtReader:
    def __init__(self, client: httpx.AsyncClient, timeout: float = PROBE_TIMEOUT):
        self.client = client
        self.timeout = timeout

    async def read(self, origin: str) -> dict:
        """Fetch ``origin/robots.txt`` and return its declared sitemaps.

        Returns ``{"robotsUrl": ..., "sitemaps": [...]}``. Raises
        RobotsTxtNotFound when the file is missing or unreachable.
        """
        robots_url = f"{origin}/robots.txt"
        try:
            resp = await self.client.get(robots_url, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise RobotsTxtNotFound(f"robots.txt not reachable: {e}") from e
        if not resp.is_success:
            raise RobotsTxtNotFound("robots.txt not found")
        sitemaps = parse_robots_sitemaps(resp.text)
        logger.info(f"{robots_url} declares {len(sitemaps)} sitemap(s)")
        return {"robotsUrl": robots_url, "sitemaps": sitemaps}
