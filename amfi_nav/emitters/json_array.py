"""
JSON output: an array of {"scheme_name": ..., "nav": ...} objects, one per line.

Each string field goes through `json.dumps`, which escapes backslashes,
quotes and control characters in a single pass, so an escape inserted for
one character is never re-escaped for another. The finished document is
parsed back before it is accepted; a document that does not parse is never
left on disk.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from amfi_nav.config import Settings
from amfi_nav.domain.errors import SerializationError
from amfi_nav.domain.models import Record
from amfi_nav.emitters.abstract import AbstractEmitter, ArtifactResult


def encode_string(text: str) -> str:
    """Quote and escape a string as a JSON literal."""
    return json.dumps(text, ensure_ascii=False)


def _render_object(record: Record) -> str:
    return (
        f'  {{"scheme_name": {encode_string(record.name)}, '
        f'"nav": {encode_string(record.value)}}}'
    )


def validate_json(text: str) -> int:
    """
    Check that `text` is a JSON array and return its length.

    Raises
    ------
    SerializationError
        If the text does not parse or is not an array.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        reason = f"{exc.msg} at line {exc.lineno} column {exc.colno}"
        raise SerializationError("json", reason) from exc
    if not isinstance(document, list):
        raise SerializationError("json", f"expected an array, got {type(document).__name__}")
    return len(document)


class JsonEmitter(AbstractEmitter):
    name: str = "json"
    description: str = "JSON array of scheme_name/nav objects, validated before it is kept."

    def default_path(self, settings: Settings) -> Path:
        return settings.output_json

    def render(self, records: Sequence[Record]) -> str:
        """
        Render and validate the JSON document.

        Raises
        ------
        SerializationError
            If the rendered text is not a valid JSON array.
        """
        if records:
            body = ",\n".join(_render_object(record) for record in records)
            text = f"[\n{body}\n]\n"
        else:
            text = "[\n]\n"
        validate_json(text)
        return text

    def write(self, records: Sequence[Record], path: Path) -> ArtifactResult:
        try:
            return super().write(records, path)
        except SerializationError as exc:
            # No JSON artifact survives a failed render, not even an older one.
            path.unlink(missing_ok=True)
            raise SerializationError(exc.format, exc.reason, path=path) from exc


__all__ = ["JsonEmitter", "encode_string", "validate_json"]
