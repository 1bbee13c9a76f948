"""
Pipeline for fetching the AMFI feed, extracting records, writing artifacts and summarizing.

Usage (example from CLI):
    from amfi_nav.pipeline import run_pipeline

    result = run_pipeline(formats=["tsv", "json"])
    print(result.stats)

Outputs are written to the paths configured in settings unless overridden:
- `amfi_nav_data.tsv` (tab-separated)
- `amfi_nav_data.json` (JSON array, only when it validates)
"""

from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional

import httpx

from amfi_nav.config import Settings, get_settings
from amfi_nav.domain.errors import SerializationError
from amfi_nav.domain.models import Record, SummaryStats
from amfi_nav.emitters.abstract import ArtifactResult, Emitter
from amfi_nav.emitters.json_array import JsonEmitter
from amfi_nav.emitters.tsv import TsvEmitter, read_tsv_file
from amfi_nav.infrastructure.fetcher import fetch_feed, remove_feed
from amfi_nav.parsing.normalizer import parse_feed_file
from amfi_nav.summary import summarize
from amfi_nav.utils.logging import get_logger
from amfi_nav.utils.profiler import profile_block

log = get_logger(__name__)


@dataclass
class PipelineResult:
    """
    Everything a run produced, for the reporter and CLI.
    """

    source: str
    records: List[Record] = field(default_factory=list)
    stats: SummaryStats = field(default_factory=SummaryStats)
    artifacts: List[ArtifactResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    stage_seconds: Dict[str, float] = field(default_factory=dict)

    def artifact(self, fmt: str) -> Optional[ArtifactResult]:
        for item in self.artifacts:
            if item["format"] == fmt:
                return item
        return None


def _emitter_factories() -> Dict[str, Callable[[], Emitter]]:
    """Registry of available output formats."""
    return {
        "tsv": lambda: TsvEmitter(),
        "json": lambda: JsonEmitter(),
    }


def available_formats() -> List[str]:
    """List available output format names."""
    return sorted(_emitter_factories().keys())


def _resolve_emitter(name: str) -> Emitter:
    factories = _emitter_factories()
    if name not in factories:
        raise ValueError(f"Unknown format '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


def _resolve_formats(formats: Optional[Iterable[str]]) -> List[str]:
    requested = list(formats) if formats is not None else ["all"]
    names: List[str] = []
    for name in requested:
        expanded = available_formats() if name == "all" else [name]
        for item in expanded:
            _resolve_emitter(item)
            if item not in names:
                names.append(item)
    # TSV first so the summary can read the finished file.
    return sorted(names, key=lambda n: n != "tsv")


@contextlib.contextmanager
def _stage(result: PipelineResult, label: str) -> Iterator[None]:
    with profile_block(label) as stats:
        yield
    result.stage_seconds[label] = round(stats.duration_seconds, 3)
    log.debug(
        f"[{label.upper()}] stage finished",
        extra={
            "stage": label,
            "duration": stats.duration_seconds,
            "peak_rss_bytes": stats.peak_rss_bytes,
        },
    )


def _write_artifacts(
    result: PipelineResult,
    names: List[str],
    output_paths: Mapping[str, Path],
    settings: Settings,
) -> None:
    for name in names:
        emitter = _resolve_emitter(name)
        path = Path(output_paths.get(name) or emitter.default_path(settings))
        tag = name.upper()
        log.info(f"[{tag}] Writing {tag} output: {path}", extra={"format": name, "path": str(path)})
        with _stage(result, name):
            try:
                artifact = emitter.write(result.records, path)
            except SerializationError as exc:
                log.error(
                    f"[{tag}] {exc}; continuing without {tag} output",
                    extra={"format": name, "path": str(path)},
                )
                result.errors.append(str(exc))
                continue
        result.artifacts.append(artifact)
        log.info(
            f"[{tag}] Wrote {artifact['records']} records to {path}",
            extra={"format": name, "records": artifact["records"], "bytes": artifact["bytes"]},
        )


def run_pipeline(
    formats: Optional[Iterable[str]] = None,
    input_path: Optional[Path | str] = None,
    url: Optional[str] = None,
    output_paths: Optional[Mapping[str, Path]] = None,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> PipelineResult:
    """
    Run fetch → extract → write → summarize.

    Parameters
    ----------
    formats : iterable[str] | None
        Output formats to write ("tsv", "json"). None or ["all"] writes both.
    input_path : Path | str | None
        Local feed to parse. When None, the feed is downloaded to
        `settings.raw_feed_path` and removed afterwards.
    url : str | None
        Feed URL override. Defaults to settings.amfi_url.
    output_paths : mapping[str, Path] | None
        Per-format artifact path overrides.
    settings : Settings | None
        Settings to use instead of the cached environment settings.
    client : httpx.Client | None
        HTTP client for the download (tests pass one with a mock transport).

    Returns
    -------
    PipelineResult
        Records, summary counts, written artifacts, non-fatal errors and
        per-stage durations.

    Raises
    ------
    ExtractorError
        FetchError or FeedReadError when no feed can be obtained.
    ValueError
        If a format name is unknown.
    """
    settings = settings or get_settings()
    names = _resolve_formats(formats)
    overrides = dict(output_paths or {})

    downloaded = input_path is None
    source_path = settings.raw_feed_path if downloaded else Path(input_path)
    source = (url or settings.amfi_url) if downloaded else str(source_path)
    result = PipelineResult(source=source)
    log.info("Starting AMFI NAV data extraction", extra={"source": source, "formats": names})

    try:
        if downloaded:
            with _stage(result, "fetch"):
                fetch_feed(
                    source, source_path, timeout=settings.fetch_timeout_seconds, client=client
                )

        with _stage(result, "extract"):
            result.records = parse_feed_file(source_path)
        count = len(result.records)
        log.info(f"[EXTRACT] Processed {count} schemes", extra={"records": count})

        _write_artifacts(result, names, overrides, settings)

        with _stage(result, "summary"):
            tsv_artifact = result.artifact("tsv")
            if tsv_artifact is not None:
                result.stats = summarize(read_tsv_file(Path(tsv_artifact["path"])))
            else:
                result.stats = summarize(result.records)
        log.info(
            "[SUMMARY] Extraction summary",
            extra={
                "total": result.stats.total,
                "valid_numeric": result.stats.valid_numeric,
                "not_available": result.stats.not_available,
            },
        )
    finally:
        if downloaded:
            remove_feed(source_path)

    return result


__all__ = [
    "PipelineResult",
    "available_formats",
    "run_pipeline",
]
