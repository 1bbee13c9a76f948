"""
Field normalization and feed parsing.

Scheme names come out of upstream CSV generation with stray quotes and the
occasional control character; this module cleans them into `Record`s and
drives the classifier over whole feeds.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional

from amfi_nav.domain.errors import FeedReadError
from amfi_nav.domain.models import Record
from amfi_nav.parsing.classifier import classify_line
from amfi_nav.utils.logging import get_logger

log = get_logger(__name__)

_CONTROL_CHARS = re.compile(r"[\t\n\r]")


def normalize_fields(raw_name: str, raw_value: str) -> Optional[Record]:
    """
    Clean a raw name/value pair into a Record.

    Returns None when either field is empty after cleaning.
    """
    name = raw_name.strip().replace('"', "")
    # Quote removal can expose whitespace that sat inside the quotes.
    name = _CONTROL_CHARS.sub(" ", name).strip()
    value = raw_value.strip()

    if not name or not value:
        return None
    return Record(name=name, value=value)


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_feed(lines: Iterable[str]) -> List[Record]:
    """
    Parse feed lines into records, in source order.

    Lines may keep their terminators; blank, header, section and malformed
    lines are skipped without error.
    """
    records: List[Record] = []
    skipped = 0
    rejected = 0
    for raw_line in lines:
        fields = classify_line(_strip_terminator(raw_line))
        if fields is None:
            skipped += 1
            continue
        record = normalize_fields(fields.name, fields.value)
        if record is None:
            rejected += 1
            continue
        records.append(record)

    log.debug(
        "Feed parsed",
        extra={"records": len(records), "skipped_lines": skipped, "empty_fields": rejected},
    )
    return records


def parse_feed_file(path: Path | str) -> List[Record]:
    """
    Parse a feed file from disk.

    Raises
    ------
    FeedReadError
        If the file is missing or cannot be read.
    """
    feed_path = Path(path)
    try:
        with feed_path.open("r", encoding="utf-8", errors="replace", newline="\n") as f:
            return parse_feed(f)
    except OSError as exc:
        raise FeedReadError(feed_path, exc.strerror or str(exc)) from exc


__all__ = ["normalize_fields", "parse_feed", "parse_feed_file"]
