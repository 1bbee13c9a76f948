"""
Error types surfaced by the extractor.

Noise in the feed (short lines, empty fields) is never an error; only
failures that leave the caller without input or without a valid artifact
are raised.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ExtractorError(Exception):
    """Base class for all extractor failures."""


class FetchError(ExtractorError):
    """The remote feed could not be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to download data from {url}: {reason}")
        self.url = url
        self.reason = reason


class FeedReadError(ExtractorError):
    """The local raw feed is missing or unreadable."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read feed {path}: {reason}")
        self.path = path


class SerializationError(ExtractorError):
    """A rendered document failed validation and was not kept."""

    def __init__(self, fmt: str, reason: str, path: Optional[Path] = None) -> None:
        super().__init__(f"Generated {fmt.upper()} is invalid: {reason}")
        self.format = fmt
        self.reason = reason
        self.path = path


class ArtifactWriteError(ExtractorError):
    """An output artifact could not be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "ArtifactWriteError",
    "ExtractorError",
    "FeedReadError",
    "FetchError",
    "SerializationError",
]
