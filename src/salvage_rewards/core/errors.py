"""Exceptions raised while discovering and reading salvage assets.

Every error that should abort a run derives from SalvageDataError so the
CLI can report it with a single handler.
"""

from pathlib import Path


class SalvageDataError(Exception):
    """Base class for fatal salvage data errors.

    Attributes:
        path: File the error relates to, if any
    """

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} ({self.path})"
        super().__init__(message)


class PatternError(SalvageDataError, ValueError):
    """The asset filename pattern is not usable."""


class AssetReadError(SalvageDataError):
    """An asset file could not be read as UTF-8 text."""


class DocumentParseError(SalvageDataError):
    """An asset file is not a parseable YAML stream."""


class EmptyDocumentError(SalvageDataError):
    """An asset file contains no YAML documents."""


class RequiredFieldError(SalvageDataError):
    """A required field is missing or has the wrong type.

    Attributes:
        field: Dotted path of the field, e.g. "MonoBehaviour.m_Name"
    """

    def __init__(self, message: str, field: str, path: Path | str | None = None):
        self.field = field
        super().__init__(message, path)


class MissingFieldError(RequiredFieldError):
    """A required field is absent or null."""


class FieldTypeError(RequiredFieldError):
    """A required field holds a value of the wrong type."""
