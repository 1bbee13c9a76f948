"""
Utilities package for the AMFI NAV extractor.

Exports shared helpers for logging and stage profiling.
Keep this package lightweight and free of feed-specific logic.
"""

from amfi_nav.utils.logging import configure_logging, get_logger
from amfi_nav.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
