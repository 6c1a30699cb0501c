import pytest

from conftest import PAGE_URL, FakeSite, client_for
from discovery import DISCOVER_FEEDS, DISCOVER_LOGIN, DiscoveryConfig, DiscoveryService

CONFIG = DiscoveryConfig(sitemap_paths=["/sitemap.xml"], feed_paths=["/feed"], login_paths=["/login"])


@pytest.mark.asyncio
async def test_feeds_message_with_inline_html():
    site = FakeSite({"https://example.com/sitemap.xml": (200, "<urlset/>")})
    async with client_for(site) as client:
        service = DiscoveryService(client, CONFIG)
        response = await service.handle({
            "type": DISCOVER_FEEDS,
            "url": PAGE_URL,
            "html": '<link rel="sitemap" href="/sitemap.xml">',
        })

    assert response == {
        "success": True,
        "data": {
            "sitemaps": [{"url": "https://example.com/sitemap.xml", "children": [], "isIndex": False}],
            "rssFeeds": ["https://example.com/sitemap.xml"],
            "robotsTxt": None,
        },
    }
    assert PAGE_URL not in site.urls("GET")


@pytest.mark.asyncio
async def test_login_message_fetches_page_and_stores_result():
    site = FakeSite({
        PAGE_URL: (200, '<a href="/account/signin">Sign In</a>'),
        "https://example.com/login": (200, ""),
    })
    stored = []

    async def sink(kind, url, data):
        stored.append((kind, url, data))
        return "run-1"

    async with client_for(site) as client:
        service = DiscoveryService(client, CONFIG, sink=sink)
        response = await service.handle({"type": DISCOVER_LOGIN, "url": PAGE_URL})

    assert response["success"] is True
    assert [p["url"] for p in response["data"]["loginPages"]] == [
        "https://example.com/account/signin",
        "https://example.com/login",
    ]
    assert stored == [(DISCOVER_LOGIN, PAGE_URL, response["data"])]


@pytest.mark.asyncio
async def test_failures_become_error_responses():
    stored = []

    async def sink(kind, url, data):
        stored.append(kind)

    async with client_for(FakeSite()) as client:
        service = DiscoveryService(client, CONFIG, sink=sink)
        unreachable = await service.handle({"type": DISCOVER_FEEDS, "url": PAGE_URL})
        unknown = await service.handle({"type": "scrape", "url": PAGE_URL, "html": ""})
        no_url = await service.handle({"type": DISCOVER_LOGIN})
        relative = await service.handle({"type": DISCOVER_LOGIN, "url": "/login", "html": ""})

    assert unreachable["success"] is False and "404" in unreachable["error"]
    assert unknown == {"success": False, "error": "Unknown message type: scrape"}
    assert no_url["success"] is False
    assert relative["success"] is False
    assert stored == []
