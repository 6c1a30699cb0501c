from __future__ import annotations

from typing import Iterable
from urllib.parse import urljoin, urlparse

import httpx


USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) PageScout/1.0"


class DiscoveryError(Exception):
    """Base class for failures raised out of the discovery engine."""


class RobotsTxtNotFound(DiscoveryError):
    pass


class PageFetchError(DiscoveryError):
    pass


def origin_of(url: str) -> str:
    pu = urlparse(url)
    if not pu.scheme or not pu.netloc:
        raise ValueError(f"not an absolute URL: {url!r}")
    return f"{pu.scheme}://{pu.netloc}"


def absolute_url(href: str, base_url: str) -> str | None:
    # None for references that cannot be turned into an http(s) URL
    try:
        resolved = urljoin(base_url, (href or "").strip())
        pu = urlparse(resolved)
    except ValueError:
        return None
    if pu.scheme not in ("http", "https") or not pu.netloc:
        return None
    return resolved


def unique(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for it in items:
        if it in seen:
            continue
        seen.add(it)
        out.append(it)
    return out


def make_client(user_agent: str = USER_AGENT) -> httpx.AsyncClient:
    return httpx.AsyncClient(follow_redirects=True, headers={"User-Agent": user_agent})
