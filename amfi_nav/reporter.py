from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from amfi_nav.emitters.tsv import TSV_HEADER
from amfi_nav.pipeline import PipelineResult

_SIZE_UNITS = ("K", "M", "G", "T")


def human_size(num_bytes: int) -> str:
    """
    Format a byte count like `du -h` (1024-based, one decimal below 10).
    """
    if num_bytes < 1024:
        return f"{num_bytes}B"
    size = float(num_bytes)
    for unit in _SIZE_UNITS:
        size /= 1024
        if size < 1024 or unit == _SIZE_UNITS[-1]:
            break
    return f"{size:.1f}{unit}" if size < 10 else f"{size:.0f}{unit}"


def _summary_table(result: PipelineResult) -> Table:
    table = Table(title="Extraction Summary", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="bold green")

    table.add_row("Total schemes extracted", f"{result.stats.total:,}")
    table.add_row("Schemes with valid NAV", f"{result.stats.valid_numeric:,}")
    table.add_row("Schemes with N.A. NAV", f"{result.stats.not_available:,}")

    for artifact in result.artifacts:
        label = f"{artifact['format'].upper()} file"
        table.add_row(label, Text(f"{artifact['path']} ({human_size(artifact['bytes'])})"))
    return table


def _sample_table(result: PipelineResult, sample_size: int) -> Table:
    name_header, value_header = TSV_HEADER.split("\t")
    table = Table(
        title="Sample Data",
        box=box.ROUNDED,
        caption=f"First {min(sample_size, len(result.records))} of {len(result.records):,} records",
    )
    table.add_column(name_header, style="cyan")
    table.add_column(value_header, justify="right", style="magenta")
    for record in result.records[:sample_size]:
        table.add_row(Text(record.name), Text(record.value))
    return table


def print_summary(
    result: PipelineResult,
    sample_size: int = 5,
    console: Optional[Console] = None,
) -> None:
    """
    Render the summary counts, written artifacts and a sample of records.

    Errors recorded by the pipeline (e.g. a JSON document that failed
    validation) are listed after the tables.
    """
    console = console or Console()

    if not result.records:
        console.print("[yellow]No records extracted.[/yellow]")

    console.print(_summary_table(result))
    if result.records and sample_size > 0:
        console.print(_sample_table(result, sample_size))
    for error in result.errors:
        console.print(f"[red]\\[ERROR][/red] {escape(error)}")


__all__ = ["human_size", "print_summary"]
