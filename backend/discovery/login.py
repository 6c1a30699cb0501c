from __future__ import annotations

import logging
import re
from typing import Sequence

import httpx

from .catalogs import LOGIN_KEYWORDS, DiscoveryConfig
from .models import LoginCandidate, LoginDiscoveryResult
from .page import PageDocument
from .prober import UrlProber

logger = logging.getLogger(__name__)

COMMON_PATH_SOURCE = "Common path"
BUTTON_SELECTOR = 'button, input[type="button"], input[type="submit"]'


class LoginLinkScanner:
    """Finds login entry points in page markup.

    Anchors match on their text, ``aria-label`` or ``title``, or on an
    href containing a keyword (spaces written as ``-`` or dropped).
    Login buttons only count through the action of their enclosing form.
    """

    def __init__(self, keywords: Sequence[str] = LOGIN_KEYWORDS):
        self.keywords = [k.strip().lower() for k in keywords if k and k.strip()]
        self.href_keywords: list[str] = []
        for k in self.keywords:
            for variant in (re.sub(r"\s+", "-", k), re.sub(r"\s+", "", k)):
                if variant not in self.href_keywords:
                    self.href_keywords.append(variant)

    def _matches(self, text: str) -> bool:
        return any(k in text for k in self.keywords)

    def scan(self, doc: PageDocument) -> list[LoginCandidate]:
        logins: list[LoginCandidate] = []

        for link in doc.select("a[href]"):
            href = link.get("href") or ""
            if not href:
                continue
            text = doc.text_of(link)
            aria_label = (link.get("aria-label") or "").strip()
            title = (link.get("title") or "").strip()
            combined = f"{text} {aria_label} {title}".lower()
            href_lower = href.lower()
            if not (self._matches(combined) or any(k in href_lower for k in self.href_keywords)):
                continue
            url = doc.resolve(href)
            if not url:
                continue
            label = text or aria_label or title or "Login link"
            logins.append(LoginCandidate(url, f'Found in link: "{label[:50]}"'))

        for button in doc.select(BUTTON_SELECTOR):
            text = doc.text_of(button) or (button.get("value") or "").strip()
            aria_label = button.get("aria-label") or ""
            if not self._matches(f"{text} {aria_label}".lower()):
                continue
            form = doc.closest(button, "form")
            if form is None or not (form.get("action") or "").strip():
                continue
            url = doc.resolve(form.get("action"))
            if not url:
                continue
            logins.append(LoginCandidate(url, f'Found in form with button: "{text[:50]}"'))

        return logins


class LoginPageDiscoverer:
    def __init__(self, client: httpx.AsyncClient, config: DiscoveryConfig | None = None):
        self.config = config or DiscoveryConfig()
        self.prober = UrlProber(client, self.config.batch_size, self.config.probe_timeout)
        self.scanner = LoginLinkScanner(self.config.login_keywords)

    async def discover(self, doc: PageDocument) -> LoginDiscoveryResult:
        """Login candidates from page markup first, then from probed paths.

        Candidates are unique by URL; the first source seen for a URL is
        the one reported, so markup signals win over path probes.
        """
        candidates = self.scanner.scan(doc)
        for url in await self.prober.probe_paths(doc.origin, self.config.login_paths):
            candidates.append(LoginCandidate(url, COMMON_PATH_SOURCE))

        result = LoginDiscoveryResult()
        seen: set[str] = set()
        for c in candidates:
            if c.url in seen:
                continue
            seen.add(c.url)
            result.login_pages.append(c)
        logger.info(f"Found {len(result.login_pages)} login pages for {doc.origin}")
        return result
