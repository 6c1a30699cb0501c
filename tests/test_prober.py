"""Tests for batched existence probing."""

import asyncio

import httpx
import pytest

from conftest import FakeSite, client_for
from discovery import UrlProber


@pytest.mark.asyncio
async def test_probe_returns_url_on_success():
    site = FakeSite({"https://example.com/feed": (200, "")})
    async with client_for(site) as client:
        prober = UrlProber(client)
        assert await prober.probe("https://example.com/feed") == "https://example.com/feed"
    assert site.requests == [("HEAD", "https://example.com/feed")]


@pytest.mark.asyncio
async def test_probe_swallows_missing_and_network_errors():
    site = FakeSite(
        {"https://example.com/gone": (410, "")},
        fail={"https://example.com/down"},
    )
    async with client_for(site) as client:
        prober = UrlProber(client)
        assert await prober.probe("https://example.com/gone") is None
        assert await prober.probe("https://example.com/nothing") is None
        assert await prober.probe("https://example.com/down") is None


@pytest.mark.asyncio
async def test_probe_paths_keeps_catalog_order():
    site = FakeSite({
        "https://example.com/c": (200, ""),
        "https://example.com/a": (204, ""),
    }, fail={"https://example.com/b"})
    async with client_for(site) as client:
        found = await UrlProber(client).probe_paths("https://example.com", ["/a", "/b", "/c", "/d"])
    assert found == ["https://example.com/a", "https://example.com/c"]


@pytest.mark.asyncio
async def test_batches_settle_before_next_batch_starts():
    events = []

    async def handler(request):
        events.append(("start", request.url.path))
        await asyncio.sleep(0.01)
        events.append(("end", request.url.path))
        return httpx.Response(200)

    paths = [f"/p{i}" for i in range(12)]
    async with client_for(handler) as client:
        found = await UrlProber(client, batch_size=5).probe_paths("https://example.com", paths)

    assert len(found) == 12
    kinds = [k for k, _ in events]
    assert kinds == ["start"] * 5 + ["end"] * 5 + ["start"] * 5 + ["end"] * 5 + ["start"] * 2 + ["end"] * 2
    started = [p for k, p in events if k == "start"]
    assert set(started[:5]) == set(paths[:5])
    assert set(started[5:10]) == set(paths[5:10])
    assert set(started[10:]) == set(paths[10:])


def test_batch_size_must_be_positive():
    with pytest.raises(ValueError):
        UrlProber(None, batch_size=0)


@pytest.mark.asyncio
async def test_probe_invalid_url_is_absent():
    async with client_for(FakeSite()) as client:
        assert await UrlProber(client).probe("http://[::1") is None
