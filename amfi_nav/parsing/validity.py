"""
NAV validity classification.
"""

from __future__ import annotations

import re

from amfi_nav.domain.models import NOT_AVAILABLE, NavStatus

# Digits with an optional decimal point; no sign, exponent or separators.
# A trailing point ("12.") is accepted, as the feed tooling always has.
_NUMERIC_NAV = re.compile(r"[0-9]+\.?[0-9]*")


def classify_value(value: str) -> NavStatus:
    if _NUMERIC_NAV.fullmatch(value):
        return NavStatus.NUMERIC
    if value == NOT_AVAILABLE:
        return NavStatus.NOT_AVAILABLE
    return NavStatus.INVALID


__all__ = ["classify_value"]
