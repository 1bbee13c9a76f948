from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional

import typer

from amfi_nav.config import get_settings
from amfi_nav.domain.errors import ExtractorError
from amfi_nav.pipeline import available_formats, run_pipeline
from amfi_nav.reporter import print_summary
from amfi_nav.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(
    help=(
        "AMFI NAV Data Extractor: downloads the AMFI NAV feed and extracts scheme "
        "names and net asset values to TSV and JSON."
    )
)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"source={settings.amfi_url} | tsv={settings.output_tsv} json={settings.output_json} | "
        f"raw={settings.raw_feed_path} timeout={settings.fetch_timeout_seconds}s "
        f"sample={settings.sample_size} | formats={', '.join(available_formats())}"
    )


@app.command()
def run(
    tsv_only: bool = typer.Option(False, "--tsv-only", help="Generate only TSV output."),
    json_only: bool = typer.Option(False, "--json-only", help="Generate only JSON output."),
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Parse a local NAVAll.txt instead of downloading it.",
    ),
    tsv_output: Optional[Path] = typer.Option(
        None, "--tsv-output", help="TSV output path (default from settings)."
    ),
    json_output: Optional[Path] = typer.Option(
        None, "--json-output", help="JSON output path (default from settings)."
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Override the feed URL."),
) -> None:
    """
    Download the feed, extract scheme names and NAVs, and write TSV and/or JSON.

    Output files default to amfi_nav_data.tsv and amfi_nav_data.json; the data
    source defaults to https://www.amfiindia.com/spages/NAVAll.txt.
    """
    if tsv_only and json_only:
        raise typer.BadParameter("--tsv-only and --json-only are mutually exclusive.")

    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    formats: List[str] = ["all"]
    if tsv_only:
        log.info("TSV-only mode selected")
        formats = ["tsv"]
    elif json_only:
        log.info("JSON-only mode selected")
        formats = ["json"]

    output_paths: Dict[str, Path] = {}
    if tsv_output:
        output_paths["tsv"] = tsv_output
    if json_output:
        output_paths["json"] = json_output

    try:
        result = run_pipeline(
            formats=formats,
            input_path=input_path,
            url=url,
            output_paths=output_paths,
            settings=settings,
        )
    except ExtractorError as exc:
        log.error(str(exc))
        raise typer.Exit(code=1) from exc

    print_summary(result, sample_size=settings.sample_size)

    if json_only and result.artifact("json") is None:
        log.error("JSON-only mode produced no valid JSON output")
        raise typer.Exit(code=1)
    if result.errors:
        log.warning(f"Data extraction completed with {len(result.errors)} error(s)")
    else:
        log.info("Data extraction completed successfully!")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
