"""
AMFI NAV Extractor - scheme names and net asset values from the AMFI NAVAll feed.

The package downloads the semicolon-delimited NAVAll.txt published by AMFI and
turns it into clean (scheme name, NAV) records:

- Line classification that drops headers, section titles and malformed lines
- Field normalization of scheme names (quotes and control characters)
- NAV validity classification (numeric, N.A., invalid)
- TSV and validated JSON output
- Summary statistics and a console report
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from amfi_nav.config import Settings, get_settings
from amfi_nav.domain import (
    ExtractorError,
    FeedReadError,
    FetchError,
    NavStatus,
    Record,
    SerializationError,
    SummaryStats,
)
from amfi_nav.emitters import JsonEmitter, TsvEmitter, read_tsv
from amfi_nav.parsing import classify_line, classify_value, normalize_fields, parse_feed
from amfi_nav.pipeline import PipelineResult, available_formats, run_pipeline
from amfi_nav.summary import summarize
from amfi_nav.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "NavStatus",
    "Record",
    "SummaryStats",
    # Errors
    "ExtractorError",
    "FeedReadError",
    "FetchError",
    "SerializationError",
    # Parsing
    "classify_line",
    "classify_value",
    "normalize_fields",
    "parse_feed",
    # Output
    "JsonEmitter",
    "TsvEmitter",
    "read_tsv",
    "summarize",
    # Orchestration
    "PipelineResult",
    "available_formats",
    "run_pipeline",
    # Logging
    "configure_logging",
    "get_logger",
]
