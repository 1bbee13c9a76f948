from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from tenacity import wait_none

from amfi_nav.domain.errors import FetchError
from amfi_nav.infrastructure import fetcher as fetcher_module
from amfi_nav.infrastructure.fetcher import fetch_feed, remove_feed

FETCH_ATTEMPTS = 3


def test_fetch_feed_writes_body_and_creates_parents(
    tmp_path: Path, feed_client, feed_url: str, sample_feed_text: str
):
    destination = tmp_path / "raw" / "nested" / "feed.txt"
    result = fetch_feed(feed_url, destination, client=feed_client())
    assert result == destination
    assert destination.read_text(encoding="utf-8") == sample_feed_text


def test_fetch_feed_http_error_raises_fetch_error(tmp_path: Path, feed_client, feed_url: str):
    destination = tmp_path / "feed.txt"
    with pytest.raises(FetchError) as excinfo:
        fetch_feed(feed_url, destination, client=feed_client(body="gone", status_code=404))
    assert excinfo.value.url == feed_url
    assert "404" in str(excinfo.value)
    assert not destination.exists()


def test_fetch_feed_retries_transport_errors_then_raises(
    tmp_path: Path, feed_url: str, monkeypatch: pytest.MonkeyPatch
):
    attempts: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        attempts.append(str(request.url))
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(fetcher_module, "_get", fetcher_module._get.retry_with(wait=wait_none()))

    with httpx.Client(transport=httpx.MockTransport(_handler)) as client:
        with pytest.raises(FetchError):
            fetch_feed(feed_url, tmp_path / "feed.txt", client=client)

    assert len(attempts) == FETCH_ATTEMPTS


def test_fetch_feed_recovers_from_transient_error(
    tmp_path: Path, feed_url: str, sample_feed_text: str, monkeypatch: pytest.MonkeyPatch
):
    calls = {"count": 0}

    def _handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] == 1:
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, text=sample_feed_text, request=request)

    monkeypatch.setattr(fetcher_module, "_get", fetcher_module._get.retry_with(wait=wait_none()))

    with httpx.Client(transport=httpx.MockTransport(_handler)) as client:
        fetch_feed(feed_url, tmp_path / "feed.txt", client=client)

    assert calls["count"] == 2
    assert (tmp_path / "feed.txt").read_text(encoding="utf-8") == sample_feed_text


def test_fetch_feed_does_not_retry_http_errors(tmp_path: Path, feed_url: str):
    calls = {"count": 0}

    def _handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(500, text="oops", request=request)

    with httpx.Client(transport=httpx.MockTransport(_handler)) as client:
        with pytest.raises(FetchError):
            fetch_feed(feed_url, tmp_path / "feed.txt", client=client)

    assert calls["count"] == 1


def test_fetch_feed_leaves_caller_client_open(tmp_path: Path, feed_client, feed_url: str):
    client = feed_client()
    fetch_feed(feed_url, tmp_path / "feed.txt", client=client)
    assert not client.is_closed


def test_remove_feed_is_idempotent(tmp_path: Path):
    path = tmp_path / "feed.txt"
    path.write_text("x", encoding="utf-8")
    remove_feed(path)
    assert not path.exists()
    remove_feed(path)


def test_fetch_feed_unwritable_destination_raises_fetch_error(
    tmp_path: Path, feed_client, feed_url: str
):
    destination = tmp_path / "feed.txt"
    destination.mkdir()

    with pytest.raises(FetchError, match="cannot save to"):
        fetch_feed(feed_url, destination, client=feed_client())

    assert destination.is_dir()
