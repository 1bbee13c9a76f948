"""
Feed retrieval for the AMFI NAV extractor.

Downloads the raw NAVAll.txt feed to a local file with a blocking httpx
client, retrying transient connection failures with tenacity. The parser
only ever reads local files, so everything network related stays in this
module.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from amfi_nav.domain.errors import FetchError
from amfi_nav.utils.logging import get_logger

log = get_logger(__name__)


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type(httpx.TransportError),
    reraise=True,
)
def _get(http: httpx.Client, url: str) -> httpx.Response:
    """GET with retries on connection-level failures; HTTP error statuses are not retried."""
    response = http.get(url)
    response.raise_for_status()
    return response


def fetch_feed(
    url: str,
    destination: Path,
    timeout: float = 60.0,
    client: Optional[httpx.Client] = None,
) -> Path:
    """
    Download `url` to `destination` and return the destination path.

    Parameters
    ----------
    url : str
        Feed URL; redirects are followed.
    destination : Path
        Local file to write. Parent directories are created.
    timeout : float
        Request timeout in seconds.
    client : httpx.Client, optional
        Client to reuse (e.g. one built on a mock transport). A new client is
        created and closed when omitted.

    Raises
    ------
    FetchError
        On a 4xx/5xx response, a transport error that persists over
        three attempts, or a destination that cannot be written.
    """
    log.info(f"[FETCH] Downloading AMFI NAV data from: {url}", extra={"url": url})

    owns_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = _get(http, url)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(response.content)
    except httpx.HTTPError as exc:
        remove_feed(destination)
        raise FetchError(url, str(exc)) from exc
    except OSError as exc:
        remove_feed(destination)
        raise FetchError(url, f"cannot save to {destination}: {exc.strerror or exc}") from exc
    finally:
        if owns_client:
            http.close()

    line_count = response.content.count(b"\n")
    log.info(
        f"[FETCH] Downloaded {line_count} lines of data",
        extra={"lines": line_count, "bytes": len(response.content), "path": str(destination)},
    )
    return destination


def remove_feed(path: Path) -> None:
    """Delete a downloaded feed; missing files are ignored."""
    if path.is_file():
        path.unlink()
        log.debug("Removed temporary feed", extra={"path": str(path)})


__all__ = ["fetch_feed", "remove_feed"]
