"""
Pytest configuration for the AMFI NAV extractor.

Provides fixtures for:
- Settings pointed at a per-test temporary directory
- Small hand-written feeds and larger synthetic feeds
- An httpx client whose transport serves a feed without network access
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import httpx
import pytest

from amfi_nav.config import Settings, get_settings
from scripts.generate_feed import _generate_feed

FEED_URL = "https://feeds.example.test/spages/NAVAll.txt"

SAMPLE_FEED = "\n".join(
    [
        "Scheme Code;ISIN Div Payout/ ISIN Growth;ISIN Div Reinvestment;Scheme Name;Net Asset Value;Date",
        "",
        "Open Ended Schemes(Equity Scheme - Large Cap Fund)",
        "",
        "Aditya Birla Sun Life Mutual Fund",
        "",
        "119551;INF209K01157;INF209K01165;Aditya Birla Sun Life Equity Fund - Growth;150.2345;15-Jan-2024",
        "119552;INF209K01173;-;Aditya Birla Sun Life Frontline Equity - IDCW;65;15-Jan-2024",
        "119553;INF209K01181;-;Aditya Birla Sun Life Focused Fund - Growth;12.;15-Jan-2024",
        "119554;INF209K01199;-;Aditya Birla Sun Life Pure Value - Growth;N.A.;15-Jan-2024",
        "119555;INF209K01207;Broken row with too few fields",
        "",
        "Close Ended Schemes(Income)",
        "",
    ]
) + "\n"


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def feed_url() -> str:
    return FEED_URL


@pytest.fixture
def sample_feed_text() -> str:
    return SAMPLE_FEED


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings with every artifact under the test's temporary directory.
    """
    return Settings(
        amfi_url=FEED_URL,
        raw_feed_path=tmp_path / "raw" / "amfi_nav_raw.txt",
        output_tsv=tmp_path / "out" / "amfi_nav_data.tsv",
        output_json=tmp_path / "out" / "amfi_nav_data.json",
        fetch_timeout_seconds=5.0,
        log_level="DEBUG",
    )


@pytest.fixture
def sample_feed_path(tmp_path: Path) -> Path:
    """
    The hand-written sample feed: 3 numeric NAVs, 1 N.A. and 1 short line.
    """
    path = tmp_path / "NAVAll.txt"
    path.write_text(SAMPLE_FEED, encoding="utf-8")
    return path


@pytest.fixture
def synthetic_feed(tmp_path: Path) -> tuple[Path, dict[str, int]]:
    """
    A generated feed (CRLF terminated, like the published file) and its counts.
    """
    path = tmp_path / "synthetic" / "NAVAll.txt"
    counts = _generate_feed(path, schemes_per_house=6, seed=7, na_ratio=0.2, line_ending="\r\n")
    return path, counts


@pytest.fixture
def feed_client() -> Generator[Callable[..., httpx.Client], None, None]:
    """
    Build an httpx client that answers every request with the given body/status.
    """
    clients: list[httpx.Client] = []

    def _build(body: str = SAMPLE_FEED, status_code: int = 200) -> httpx.Client:
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text=body, request=request)

        client = httpx.Client(transport=httpx.MockTransport(_handler))
        clients.append(client)
        return client

    yield _build
    for client in clients:
        client.close()
