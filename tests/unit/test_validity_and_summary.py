import pytest
from pydantic import ValidationError

from amfi_nav.domain.models import NavStatus, Record, SummaryStats
from amfi_nav.parsing.normalizer import parse_feed
from amfi_nav.parsing.validity import classify_value
from amfi_nav.summary import summarize


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("150.2345", NavStatus.NUMERIC),
        ("65", NavStatus.NUMERIC),
        ("12.", NavStatus.NUMERIC),
        ("0.0001", NavStatus.NUMERIC),
        ("N.A.", NavStatus.NOT_AVAILABLE),
        ("", NavStatus.INVALID),
        ("-5", NavStatus.INVALID),
        ("+5", NavStatus.INVALID),
        (".5", NavStatus.INVALID),
        ("1e5", NavStatus.INVALID),
        ("1,234.50", NavStatus.INVALID),
        ("1.2.3", NavStatus.INVALID),
        ("n.a.", NavStatus.INVALID),
        ("N.A", NavStatus.INVALID),
        ("١٢٣", NavStatus.INVALID),
    ],
)
def test_classify_value(value: str, expected: NavStatus):
    assert classify_value(value) is expected


def test_summarize_counts_numeric_and_not_available():
    lines = [
        "1;a;b;Fund One;10.5;d",
        "2;a;b;Fund Two;20;d",
        "3;a;b;Fund Three;30.;d",
        "4;a;b;Fund Four;N.A.;d",
        "5;a;b;too few fields",
    ]
    stats = summarize(parse_feed(lines))
    assert stats == SummaryStats(total=4, valid_numeric=3, not_available=1)


def test_summarize_keeps_invalid_values_in_total_only():
    records = [
        Record(name="Fund A", value="-5"),
        Record(name="Fund B", value="pending"),
        Record(name="Fund C", value="N.A."),
    ]
    stats = summarize(records)
    assert stats.total == 3
    assert stats.valid_numeric == 0
    assert stats.not_available == 1


def test_summarize_empty_record_set():
    assert summarize([]) == SummaryStats(total=0, valid_numeric=0, not_available=0)


def test_summarize_is_repeatable_and_accepts_iterators():
    records = [Record(name="Fund", value="1.0")] * 3
    assert summarize(records) == summarize(iter(records))


def test_summary_stats_are_frozen():
    stats = SummaryStats(total=1)
    with pytest.raises(ValidationError):
        stats.total = 2  # type: ignore[misc]
