"""
Line classification for the AMFI NAV feed.

The feed mixes data rows of the form

    Scheme Code;ISIN Div Payout/ISIN Growth;ISIN Div Reinvestment;Scheme Name;Net Asset Value;Date

with column headers, section titles ("Open Ended Schemes(Debt Scheme - Banking and PSU Fund)"),
fund-house names and blank lines. `classify_line` keeps the data rows and
returns None for everything else.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

FIELD_SEPARATOR = ";"
MIN_FIELDS = 5
NAME_FIELD = 3
VALUE_FIELD = 4

HEADER_PREFIX = "Scheme Code"
SECTION_PREFIXES = (
    "Open Ended Schemes",
    "Close Ended Schemes",
    "Interval Fund Schemes",
)


class RawFields(NamedTuple):
    """Name and value columns of a data line, untouched."""

    name: str
    value: str


def classify_line(line: str) -> Optional[RawFields]:
    """
    Return the raw name/value fields of a data line, or None to skip it.

    Rules are checked in order and the first match wins: blank line, column
    header, section title, then fewer than five `;`-separated fields.
    """
    if line == "":
        return None
    if line.startswith(HEADER_PREFIX):
        return None
    if line.startswith(SECTION_PREFIXES):
        return None

    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < MIN_FIELDS:
        return None
    return RawFields(name=fields[NAME_FIELD], value=fields[VALUE_FIELD])


__all__ = ["RawFields", "classify_line"]
