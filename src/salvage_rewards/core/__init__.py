"""Core utilities for salvage reward extraction.

This package contains the record type, YAML document loading, field
coercion helpers and the error hierarchy shared by the scanner,
extractor and pipeline.
"""

from .document import UnityLoader, load_documents, load_first_document
from .errors import (
    AssetReadError,
    DocumentParseError,
    EmptyDocumentError,
    FieldTypeError,
    MissingFieldError,
    PatternError,
    RequiredFieldError,
    SalvageDataError,
)
from .fields import coerce_float, get_field, require_int, require_str
from .types import SalvageRewardData, format_number

__all__ = [
    "SalvageRewardData",
    "format_number",
    "UnityLoader",
    "load_documents",
    "load_first_document",
    "coerce_float",
    "get_field",
    "require_int",
    "require_str",
    "SalvageDataError",
    "PatternError",
    "AssetReadError",
    "DocumentParseError",
    "EmptyDocumentError",
    "RequiredFieldError",
    "MissingFieldError",
    "FieldTypeError",
]
