"""
Emitter interfaces and result contracts for the AMFI NAV extractor.

Concrete emitters (TSV, JSON) implement the Emitter protocol: `render` turns a
record set into text, `write` puts that text on disk and reports what was
written as an ArtifactResult for the pipeline and console reporter.
"""

from __future__ import annotations

import abc
import os
import tempfile
from pathlib import Path
from typing import Protocol, Sequence, TypedDict, runtime_checkable

from amfi_nav.config import Settings
from amfi_nav.domain.errors import ArtifactWriteError
from amfi_nav.domain.models import Record


class ArtifactResult(TypedDict):
    """
    What an emitter wrote.
    """

    format: str
    path: str
    records: int
    bytes: int


@runtime_checkable
class Emitter(Protocol):
    """
    Common interface all output formats implement.

    Attributes
    ----------
    name : str
        Short format identifier used on the command line ("tsv", "json").
    description : str
        Human-friendly summary of the format.
    """

    name: str
    description: str

    def default_path(self, settings: Settings) -> Path:
        """Artifact location configured for this format."""
        ...

    def render(self, records: Sequence[Record]) -> str:
        """Serialize records, in order, to text."""
        ...

    def write(self, records: Sequence[Record], path: Path) -> ArtifactResult:
        """Render and persist records at `path`."""
        ...


class AbstractEmitter(abc.ABC):
    """
    Base class providing the render-then-replace write.

    Subclasses set `name` and `description` and implement `render` and
    `default_path`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def default_path(self, settings: Settings) -> Path:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def render(self, records: Sequence[Record]) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    def write(self, records: Sequence[Record], path: Path) -> ArtifactResult:
        """
        Render records and move the text into place at `path`.

        Raises
        ------
        ArtifactWriteError
            If the directory or file cannot be created.
        """
        text = self.render(records)
        try:
            _replace_file(path, text)
            size = path.stat().st_size
        except OSError as exc:
            raise ArtifactWriteError(path, exc.strerror or str(exc)) from exc
        return ArtifactResult(
            format=self.name,
            path=str(path),
            records=len(records),
            bytes=size,
        )


def _replace_file(path: Path, text: str) -> None:
    """Write `text` next to `path`, then move it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


__all__ = ["AbstractEmitter", "ArtifactResult", "Emitter"]
