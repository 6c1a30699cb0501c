from __future__ import annotations

import logging

import httpx

from .catalogs import DiscoveryConfig
from .models import FeedDiscoveryResult, SitemapNode
from .page import PageDocument
from .prober import UrlProber
from .robots import RobotsTxtReader
from .rss_provider import HtmlResourceScanner
from .sitemap_provider import SitemapIndexParser
from .utils import RobotsTxtNotFound, absolute_url, unique

logger = logging.getLogger(__name__)


class FeedSitemapDiscoverer:
    """Sitemaps and syndication feeds for the site behind one page.

    Sources are, in order: ``<link>`` declarations in the page, Sitemap
    lines in robots.txt, then the conventional sitemap and feed paths.
    Every sitemap found is fetched once to see whether it is an index;
    children of an index are reported but not expanded further.
    """

    def __init__(self, client: httpx.AsyncClient, config: DiscoveryConfig | None = None):
        self.config = config or DiscoveryConfig()
        self.prober = UrlProber(client, self.config.batch_size, self.config.probe_timeout)
        self.robots = RobotsTxtReader(client, self.config.probe_timeout)
        self.index_parser = SitemapIndexParser(client, self.config.probe_timeout)
        self.scanner = HtmlResourceScanner()

    async def discover(self, doc: PageDocument) -> FeedDiscoveryResult:
        base_url = doc.origin
        result = FeedDiscoveryResult()
        sitemap_urls: list[str] = []

        result.rss_feeds.extend(self.scanner.scan(doc))

        try:
            robots = await self.robots.read(base_url)
            result.robots_txt = robots["robotsUrl"]
            # Declarations may be relative; unusable ones are dropped
            for declared in robots["sitemaps"]:
                url = absolute_url(declared, base_url)
                if url:
                    sitemap_urls.append(url)
        except RobotsTxtNotFound as e:
            logger.info(f"Could not fetch robots.txt for {base_url}: {e}")

        sitemap_urls.extend(await self.prober.probe_paths(base_url, self.config.sitemap_paths))
        result.rss_feeds.extend(await self.prober.probe_paths(base_url, self.config.feed_paths))

        sitemap_urls = unique(sitemap_urls)
        result.rss_feeds = unique(result.rss_feeds)

        # One sitemap at a time, one level deep
        for sitemap_url in sitemap_urls:
            children = await self.index_parser.parse(sitemap_url)
            result.sitemaps.append(SitemapNode(sitemap_url, children))

        logger.info(f"Found {len(result.sitemaps)} sitemaps and {len(result.rss_feeds)} feeds for {base_url}")
        return result
