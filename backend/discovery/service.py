from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

import httpx

from .catalogs import DiscoveryConfig
from .feeds import FeedSitemapDiscoverer
from .login import LoginPageDiscoverer
from .page import PageDocument, fetch_page

logger = logging.getLogger(__name__)

DISCOVER_FEEDS = "discoverFeeds"
DISCOVER_LOGIN = "discoverLogin"

# (kind, page_url, result dict) -> run id
ResultSink = Callable[[str, str, dict], Awaitable[Any]]


class DiscoveryService:
    """Request/response front for the two discovery entry points.

    ``handle`` always answers with ``{"success": True, "data": ...}`` or
    ``{"success": False, "error": ...}``; it never raises.
    """

    def __init__(self, client: httpx.AsyncClient, config: DiscoveryConfig | None = None, sink: ResultSink | None = None):
        self.client = client
        self.config = config or DiscoveryConfig()
        self.sink = sink
        self.feeds = FeedSitemapDiscoverer(client, self.config)
        self.login = LoginPageDiscoverer(client, self.config)

    async def load_page(self, url: str, html: str | None = None) -> PageDocument:
        if html is not None:
            return PageDocument(html, url)
        return await fetch_page(self.client, url, timeout=self.config.probe_timeout)

    async def discover_feeds(self, url: str, html: str | None = None) -> dict:
        doc = await self.load_page(url, html)
        return (await self.feeds.discover(doc)).to_dict()

    async def discover_login(self, url: str, html: str | None = None) -> dict:
        doc = await self.load_page(url, html)
        return (await self.login.discover(doc)).to_dict()

    async def handle(self, message: dict) -> dict:
        kind = (message or {}).get("type")
        url = (message or {}).get("url")
        html = (message or {}).get("html")
        logger.info(f"Discovery request {kind} for {url}")
        try:
            if not url:
                raise ValueError("A page url is required.")
            if kind == DISCOVER_FEEDS:
                data = await self.discover_feeds(url, html)
            elif kind == DISCOVER_LOGIN:
                data = await self.discover_login(url, html)
            else:
                raise ValueError(f"Unknown message type: {kind}")
            if self.sink is not None:
                await self.sink(kind, url, data)
            return {"success": True, "data": data}
        except Exception as e:
            logger.error(f"Discovery request {kind} for {url} failed: {e}", exc_info=True)
            return {"success": False, "error": str(e)}
