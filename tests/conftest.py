import httpx
import pytest

from discovery import DiscoveryConfig, PageDocument

PAGE_URL = "https://example.com/blog/post.html"


class FakeSite:
    """Routes requests to canned responses and records every call.

    ``pages`` maps absolute URLs to ``(status, body)``; everything else
    is a 404. HEAD requests get the status with an empty body.
    """

    def __init__(self, pages=None, fail=()):
        self.pages = dict(pages or {})
        self.fail = set(fail)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append((request.method, url))
        if url in self.fail:
            raise httpx.ConnectError("connection refused", request=request)
        status, body = self.pages.get(url, (404, ""))
        if request.method == "HEAD":
            return httpx.Response(status)
        return httpx.Response(status, content=body.encode("utf-8") if isinstance(body, str) else body)

    def urls(self, method):
        return [u for m, u in self.requests if m == method]


def client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)


def page(html: str, url: str = PAGE_URL) -> PageDocument:
    return PageDocument(html, url)


@pytest.fixture
def small_config():
    return DiscoveryConfig(
        sitemap_paths=["/sitemap.xml", "/s1.xml"],
        feed_paths=["/feed", "/rss.xml"],
        login_paths=["/login", "/connexion"],
    )
