"""
Domain models for the AMFI NAV extractor.

`Record` is one normalized (scheme name, NAV) pair taken from the feed,
`SummaryStats` the counts derived from an ordered run of records. Both are
frozen so a record set can be shared by every emitter without copying.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

NOT_AVAILABLE = "N.A."

_FORBIDDEN_NAME_CHARS = ('"', "\t", "\n", "\r")


class NavStatus(str, Enum):
    """Validity of a NAV value string."""

    NUMERIC = "numeric"
    NOT_AVAILABLE = "not_available"
    INVALID = "invalid"


class Record(BaseModel):
    """
    A normalized scheme name and its NAV exactly as published.
    """

    name: str = Field(..., description="Scheme name, cleaned of quotes and control characters.")
    value: str = Field(..., description="NAV literal or the N.A. sentinel, trimmed.")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("name")
    @classmethod
    def _check_name(cls, name: str) -> str:
        if not name or name != name.strip():
            raise ValueError("scheme name must be non-empty and trimmed")
        if any(ch in name for ch in _FORBIDDEN_NAME_CHARS):
            raise ValueError("scheme name must not contain quotes, tabs or line breaks")
        return name

    @field_validator("value")
    @classmethod
    def _check_value(cls, value: str) -> str:
        if not value or value != value.strip():
            raise ValueError("NAV value must be non-empty and trimmed")
        return value


class SummaryStats(BaseModel):
    """
    Counts over a record set. Invalid values are in `total` only.
    """

    total: int = 0
    valid_numeric: int = 0
    not_available: int = 0

    model_config = {"frozen": True}


__all__ = ["NOT_AVAILABLE", "NavStatus", "Record", "SummaryStats"]
