"""Field lookup and coercion over parsed YAML documents.

Documents are plain trees of dicts, lists and scalars. The helpers here
never raise on a missing path; only the ``require_*`` functions turn an
absent or mistyped value into an error.
"""

from pathlib import Path
from typing import Any

from .errors import FieldTypeError, MissingFieldError


def get_field(node: Any, *keys: str) -> Any:
    """Walk nested mapping keys.

    Args:
        node: Document node to start from
        *keys: Mapping keys to follow in order

    Returns:
        The value at the end of the path, or None if any step is missing
        or lands on something that is not a mapping
    """
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _is_int(value: Any) -> bool:
    # bool is an int subclass but YAML booleans are not integers here
    return isinstance(value, int) and not isinstance(value, bool)


def _field_name(keys: tuple[str, ...], context: str | None) -> str:
    return ".".join((context, *keys) if context else keys)


def require_str(
    node: Any, *keys: str, source: Path | str | None = None, context: str | None = None
) -> str:
    """Return a required string field.

    Args:
        node: Document node to start from
        *keys: Mapping keys leading to the field
        source: Path used in error messages
        context: Dotted path of node, prefixed to the field name in errors

    Raises:
        MissingFieldError: If the field is absent or null
        FieldTypeError: If the field is not a string
    """
    field = _field_name(keys, context)
    value = get_field(node, *keys)
    if value is None:
        raise MissingFieldError(f"Missing required field {field}", field, source)
    if not isinstance(value, str):
        raise FieldTypeError(
            f"Field {field} must be a string, got {type(value).__name__}", field, source
        )
    return value


def require_int(
    node: Any, *keys: str, source: Path | str | None = None, context: str | None = None
) -> int:
    """Return a required integer field.

    Raises:
        MissingFieldError: If the field is absent or null
        FieldTypeError: If the field is not an integer
    """
    field = _field_name(keys, context)
    value = get_field(node, *keys)
    if value is None:
        raise MissingFieldError(f"Missing required field {field}", field, source)
    if not _is_int(value):
        raise FieldTypeError(
            f"Field {field} must be an integer, got {type(value).__name__}", field, source
        )
    return value


def coerce_float(value: Any) -> float:
    """Coerce a scalar to float.

    Floats pass through and integers are converted. Anything else,
    including strings, booleans, None and integers too large for a float,
    becomes 0.0.
    """
    if isinstance(value, float):
        return value
    if _is_int(value):
        try:
            return float(value)
        except OverflowError:
            return 0.0
    return 0.0

