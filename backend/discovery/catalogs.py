from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .utils import USER_AGENT


BATCH_SIZE = 5
PROBE_TIMEOUT = 10.0

SITEMAP_PATHS = [
    "/sitemap.xml",
    "/sitemap_index.xml",
    "/sitemap-index.xml",
    "/sitemap1.xml",
    "/sitemap",
    "/sitemaps.xml",
    "/sitemap-news.xml",
    "/post-sitemap.xml",
    "/news-sitemap.xml",
    "/sitemap_news.xml",
    "/googlenews.xml",
    "/google-news.xml",
    "/sitemap_google.xml",
    "/google-sitemap.xml",
    "/sitemap-actu.xml",
    "/sitemap-actualites.xml",
    "/sitemap-articles.xml",
    "/plan-du-site.xml",
    "/plan-site.xml",
]

FEED_PATHS = [
    "/feed",
    "/rss",
    "/feed.xml",
    "/rss.xml",
    "/atom.xml",
    "/feed/",
    "/rss/",
    "/blog/feed",
    "/blog/rss",
    "/news/feed",
    "/news/rss",
    "/index.xml",
]

LOGIN_PATHS = [
    "/login",
    "/signin",
    "/sign-in",
    "/log-in",
    "/auth",
    "/authenticate",
    "/account/login",
    "/user/login",
    "/member/login",
    "/members/login",
    "/wp-login.php",
    "/wp-admin",
    "/admin/login",
    "/admin",
    # French
    "/connexion",
    "/se-connecter",
    "/compte/connexion",
    "/utilisateur/connexion",
    "/membre/connexion",
]

LOGIN_KEYWORDS = [
    # English
    "login", "log in", "signin", "sign in", "log-in", "sign-in",
    # French
    "connexion", "se connecter", "connecter", "se-connecter",
    "mon compte", "espace membre",
]


@dataclass
class DiscoveryConfig:
    sitemap_paths: list[str] = field(default_factory=lambda: list(SITEMAP_PATHS))
    feed_paths: list[str] = field(default_factory=lambda: list(FEED_PATHS))
    login_paths: list[str] = field(default_factory=lambda: list(LOGIN_PATHS))
    login_keywords: list[str] = field(default_factory=lambda: list(LOGIN_KEYWORDS))
    batch_size: int = BATCH_SIZE
    probe_timeout: float = PROBE_TIMEOUT
    user_agent: str = USER_AGENT

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "DiscoveryConfig":
        """Build a config from the ``discovery`` section of config.json.

        Unknown keys are ignored; anything missing keeps its default.
        """
        cfg = cls()
        for key, value in (data or {}).items():
            if value is None or not hasattr(cfg, key):
                continue
            if key.endswith("_paths"):
                value = [str(v) for v in value]
            elif key == "login_keywords":
                # A blank keyword would match every link
                value = [str(v).strip() for v in value if str(v).strip()]
            elif key == "batch_size":
                value = int(value)
                if value < 1:
                    raise ValueError("batch_size must be at least 1")
            elif key == "probe_timeout":
                value = float(value)
            setattr(cfg, key, value)
        return cfg
