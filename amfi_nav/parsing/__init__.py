"""
Parsing package for the AMFI NAV extractor.

Re-exports the line classifier, field normalizer and NAV validity check so
callers can import from `amfi_nav.parsing` directly.
"""

from amfi_nav.parsing.classifier import RawFields, classify_line
from amfi_nav.parsing.normalizer import normalize_fields, parse_feed, parse_feed_file
from amfi_nav.parsing.validity import classify_value

__all__ = [
    "RawFields",
    "classify_line",
    "classify_value",
    "normalize_fields",
    "parse_feed",
    "parse_feed_file",
]
