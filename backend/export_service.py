import os
import json
import time
import logging
from datetime import datetime
import pytz

from discovery.utils import DiscoveryError


class NothingToExport(DiscoveryError):
    pass


def build_export(feeds: dict | None, logins: dict | None, url: str | None = None) -> dict:
    if not feeds and not logins:
        raise NothingToExport("No data to export")
    return {
        "feeds": feeds,
        "logins": logins,
        "exportedAt": datetime.now(pytz.utc).isoformat(),
        "url": url,
    }


def write_export(payload: dict, directory: str) -> str:
    """Writes the payload as feeds-<epoch ms>.json and returns the file path."""
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, f"feeds-{int(time.time() * 1000)}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    logging.info(f"Exported discovery results to {path}")
    return path


def summarize_feeds(data: dict) -> str:
    return f"Found {len(data.get('sitemaps', []))} sitemaps and {len(data.get('rssFeeds', []))} feeds"


def summarize_logins(data: dict) -> str:
    return f"Found {len(data.get('loginPages', []))} login pages"
