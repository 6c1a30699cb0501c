"""
Discovery engine for a single loaded page.

Modules:
- page: document accessor over the page markup
- prober: batched HEAD existence checks
- robots: Sitemap declarations from robots.txt
- sitemap_provider: one-level sitemap index expansion
- rss_provider: feed/sitemap <link> declarations in the page
- feeds: sitemap and feed discovery
- login: login page heuristics
- service: request/response front used by the API
"""

from .catalogs import DiscoveryConfig
from .feeds import FeedSitemapDiscoverer
from .login import LoginLinkScanner, LoginPageDiscoverer
from .models import FeedDiscoveryResult, LoginCandidate, LoginDiscoveryResult, SitemapNode
from .page import PageDocument, fetch_page
from .prober import UrlProber
from .robots import RobotsTxtReader
from .rss_provider import HtmlResourceScanner
from .service import DISCOVER_FEEDS, DISCOVER_LOGIN, DiscoveryService
from .sitemap_provider import SitemapIndexParser
from .utils import DiscoveryError, PageFetchError, RobotsTxtNotFound
