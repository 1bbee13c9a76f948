"""
Tab-separated output: a fixed header followed by one `name<TAB>value` line per record.

Scheme names never contain tabs (the normalizer replaces them), so the
first tab on a line always separates name from value.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from amfi_nav.config import Settings
from amfi_nav.domain.models import Record
from amfi_nav.emitters.abstract import AbstractEmitter
from amfi_nav.parsing.normalizer import normalize_fields

TSV_HEADER = "Scheme_Name\tNet_Asset_Value"


class TsvEmitter(AbstractEmitter):
    name: str = "tsv"
    description: str = "Tab-separated values with a Scheme_Name/Net_Asset_Value header."

    def default_path(self, settings: Settings) -> Path:
        return settings.output_tsv

    def render(self, records: Sequence[Record]) -> str:
        lines = [TSV_HEADER]
        lines.extend(f"{record.name}\t{record.value}" for record in records)
        return "\n".join(lines) + "\n"


def read_tsv(text: str) -> List[Record]:
    """
    Parse TSV produced by `TsvEmitter.render` back into records.

    The header line is skipped; lines without a tab or with an empty field
    are ignored.
    """
    records: List[Record] = []
    for index, line in enumerate(text.split("\n")):
        if index == 0 or not line:
            continue
        name, sep, value = line.partition("\t")
        if not sep:
            continue
        record = normalize_fields(name, value)
        if record is not None:
            records.append(record)
    return records


def read_tsv_file(path: Path) -> List[Record]:
    # newline="" keeps a stray "\r" inside a value from becoming a line break.
    with path.open("r", encoding="utf-8", newline="") as f:
        return read_tsv(f.read())


__all__ = ["TSV_HEADER", "TsvEmitter", "read_tsv", "read_tsv_file"]
