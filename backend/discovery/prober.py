from __future__ import annotations

import asyncio
import logging
from typing import Sequence

import httpx

from .catalogs import BATCH_SIZE, PROBE_TIMEOUT

logger = logging.getLogger(__name__)


class UrlProber:
    """HEAD-based existence checks, issued in fixed-size batches."""

    def __init__(self, client: httpx.AsyncClient, batch_size: int = BATCH_SIZE, timeout: float = PROBE_TIMEOUT):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.client = client
        self.batch_size = batch_size
        self.timeout = timeout

    async def probe(self, url: str) -> str | None:
        try:
            resp = await self.client.head(url, timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Probe failed for {url}: {e}")
            return None
        if resp.is_success:
            return url
        return None

    async def probe_paths(self, base_url: str, paths: Sequence[str]) -> list[str]:
        """Probe ``base_url + path`` for every path and return the URLs that exist.

        A batch is only issued once every probe of the previous one has
        settled, so at most ``batch_size`` requests are ever in flight.
        """
        found: list[str] = []
        for i in range(0, len(paths), self.batch_size):
            batch = paths[i:i + self.batch_size]
            results = await asyncio.gather(*(self.probe(f"{base_url}{p}") for p in batch))
            found.extend(u for u in results if u is not None)
        if found:
            logger.info(f"{len(found)}/{len(paths)} candidate paths exist under {base_url}")
        return found
