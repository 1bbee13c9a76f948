"""
Domain package for the AMFI NAV extractor.

Exports the records, summary counts, and error types shared by the parser,
emitters, and pipeline. Keep this package focused on data definitions.
"""

from amfi_nav.domain.errors import (
    ArtifactWriteError,
    ExtractorError,
    FeedReadError,
    FetchError,
    SerializationError,
)
from amfi_nav.domain.models import NOT_AVAILABLE, NavStatus, Record, SummaryStats

__all__ = [
    "ArtifactWriteError",
    "ExtractorError",
    "FeedReadError",
    "FetchError",
    "NOT_AVAILABLE",
    "NavStatus",
    "Record",
    "SerializationError",
    "SummaryStats",
]
