"""
Emitters package for the AMFI NAV extractor.

Re-exports the emitter interfaces and the concrete TSV/JSON emitters so
downstream code can import from `amfi_nav.emitters` directly.
"""

from amfi_nav.emitters.abstract import AbstractEmitter, ArtifactResult, Emitter
from amfi_nav.emitters.json_array import JsonEmitter, encode_string, validate_json
from amfi_nav.emitters.tsv import TSV_HEADER, TsvEmitter, read_tsv, read_tsv_file

__all__ = [
    # Abstracts
    "AbstractEmitter",
    "ArtifactResult",
    "Emitter",
    # Concrete emitters
    "JsonEmitter",
    "TsvEmitter",
    # Helpers
    "TSV_HEADER",
    "encode_string",
    "read_tsv",
    "read_tsv_file",
    "validate_json",
]
