from __future__ import annotations

from .page import PageDocument

FEED_TYPES = ("application/rss+xml", "application/atom+xml")


def find_feeds_in_html(doc: PageDocument) -> list[str]:
    """Feeds and sitemaps the page declares through ``<link>`` elements."""
    feeds: list[str] = []
    for link in doc.select('link[rel="alternate"]'):
        if link.get("type") not in FEED_TYPES:
            continue
        url = doc.resolve(link.get("href"))
        if url:
            feeds.append(url)
    for link in doc.select('link[rel="sitemap"]'):
        url = doc.resolve(link.get("href"))
        if url:
            feeds.append(url)
    return feeds


class HtmlResourceScanner:
    def scan(self, doc: PageDocument) -> list[str]:
        return find_feeds_in_html(doc)
