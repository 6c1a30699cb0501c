from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SitemapNode:
    url: str
    children: list[str] = field(default_factory=list)

    @property
    def is_index(self) -> bool:
        return len(self.children) > 0

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "children": list(self.children), "isIndex": self.is_index}


@dataclass
class FeedDiscoveryResult:
    sitemaps: list[SitemapNode] = field(default_factory=list)
    rss_feeds: list[str] = field(default_factory=list)
    robots_txt: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sitemaps": [s.to_dict() for s in self.sitemaps],
            "rssFeeds": list(self.rss_feeds),
            "robotsTxt": self.robots_txt,
        }


@dataclass
class LoginCandidate:
    url: str
    source: str

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "source": self.source}


@dataclass
class LoginDiscoveryResult:
    login_pages: list[LoginCandidate] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"loginPages": [c.to_dict() for c in self.login_pages]}
