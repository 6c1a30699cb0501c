from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import httpx

from .catalogs import PROBE_TIMEOUT
from .utils import absolute_url

logger = logging.getLogger(__name__)


def _local(tag) -> str:
    # Comments and processing instructions have non-string tags
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _parse_sitemap_index(xml_bytes: bytes) -> list[str]:
    """Child sitemap URLs of a sitemap index, or [] for anything else.

    Element names are matched on their local part so both namespaced and
    bare documents are recognised.
    """
    try:
        root = ET.fromstring(xml_bytes)
    except (ET.ParseError, ValueError, LookupError):
        return []
    if not any(_local(el.tag) == "sitemapindex" for el in root.iter()):
        return []
    children: list[str] = []
    for sm_entry in root.iter():
        if _local(sm_entry.tag) != "sitemap":
            continue
        for loc_el in sm_entry:
            if _local(loc_el.tag) != "loc":
                continue
            link = "".join(loc_el.itertext()).strip()
            if link:
                children.append(link)
    return children


class SitemapIndexParser:
    def __init__(self, client: httpx.AsyncClient, timeout: float = PROBE_TIMEOUT):
        self.client = client
        self.timeout = timeout

    async def parse(self, sitemap_url: str) -> list[str]:
        try:
            resp = await self.client.get(sitemap_url, timeout=self.timeout)
            if not resp.is_success:
                return []
            children = _parse_sitemap_index(resp.content)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Error parsing sitemap index {sitemap_url}: {e}")
            return []
        # Relative <loc> values resolve against the index itself
        children = [u for u in (absolute_url(c, sitemap_url) for c in children) if u]
        if children:
            logger.info(f"{sitemap_url} is a sitemap index with {len(children)} children")
        return children
