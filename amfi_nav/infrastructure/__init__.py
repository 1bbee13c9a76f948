"""
Infrastructure package for the AMFI NAV extractor.

Centralizes network retrieval of the raw feed. Keep this layer focused on
I/O, decoupled from parsing and emitter logic.
"""

from amfi_nav.infrastructure.fetcher import fetch_feed, remove_feed

__all__ = [
    "fetch_feed",
    "remove_feed",
]
