"""
Summary statistics over a record set.

`summarize` folds the records into a fresh `SummaryStats`; nothing is
accumulated in shared state, so the same record set always yields the same
counts.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable

from amfi_nav.domain.models import NavStatus, Record, SummaryStats
from amfi_nav.parsing.validity import classify_value


def _tally(stats: SummaryStats, record: Record) -> SummaryStats:
    status = classify_value(record.value)
    return SummaryStats(
        total=stats.total + 1,
        valid_numeric=stats.valid_numeric + (status is NavStatus.NUMERIC),
        not_available=stats.not_available + (status is NavStatus.NOT_AVAILABLE),
    )


def summarize(records: Iterable[Record]) -> SummaryStats:
    """Count total, numeric and N.A. records."""
    return reduce(_tally, records, SummaryStats())


__all__ = ["summarize"]
