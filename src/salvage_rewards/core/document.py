"""YAML loading for Unity serialized asset files.

Unity writes ScriptableObject assets as YAML 1.1 streams whose documents
carry class-id tags such as ``--- !u!114 &11400000``. The plain PyYAML
SafeLoader rejects those tags, so this module registers a constructor that
ignores them and builds ordinary dicts, lists and scalars instead.
"""

import logging
import math
import re
from pathlib import Path
from typing import Any

import yaml

from .errors import DocumentParseError, EmptyDocumentError

logger = logging.getLogger(__name__)

# Expansion of the "!u!" handle declared in Unity asset headers
UNITY_TAG_PREFIX = "tag:unity3d.com,2011:"

# Document header such as "--- !u!114 &11400000 stripped"
_UNITY_HEADER = re.compile(
    r"^---[ \t]+!u!(?P<class_id>\d+)(?P<rest>[^\n]*?)(?:[ \t]+stripped)?[ \t]*(?=\r?$)", re.MULTILINE
)


class UnityLoader(yaml.SafeLoader):
    """SafeLoader that accepts Unity class-id tags.

    Plain scalars are typed with the narrower rules Unity tooling expects
    rather than full YAML 1.1: only "~", "null" and empty are null, only
    lowercase "true"/"false" are booleans, integers are decimal or
    0x/0o prefixed, and floats follow the usual decimal notation (exponent
    sign and fraction optional). Everything else, such as "yes", "1:30",
    "1_000" or dates, stays a string.
    """

    yaml_implicit_resolvers: dict[Any, list[Any]] = {}


# Range of a signed 64-bit integer; larger decimals load as floats
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_SPECIAL_FLOATS = {
    ".inf": math.inf,
    "+.inf": math.inf,
    "-.inf": -math.inf,
    ".nan": math.nan,
}

UnityLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null", re.compile(r"^(?:~|null|)$"), ["~", "n", ""]
)
UnityLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool", re.compile(r"^(?:true|false)$"), list("tf")
)
UnityLoader.add_implicit_resolver(
    "tag:yaml.org,2002:int",
    re.compile(r"^(?:[-+]?[0-9]+|0x[-+]?[0-9a-fA-F]+|0o[-+]?[0-7]+)$"),
    list("-+0123456789"),
)
UnityLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(
        r"^(?:[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?(?i:inf|infinity|nan)"
        r"|[-+]?\.(?:inf|Inf|INF)"
        r"|\.(?:nan|NaN|NAN))$"
    ),
    list("-+.0123456789iInN"),
)


def _construct_int(loader: UnityLoader, node: yaml.ScalarNode) -> int | float | str:
    value = loader.construct_scalar(node)
    for prefix, base in (("0x", 16), ("0o", 8)):
        if value.startswith(prefix):
            number = int(value[2:], base)
            # Out-of-range hex and octal are not numbers at all
            return number if _INT_MIN <= number <= _INT_MAX else value
    number = int(value)
    if _INT_MIN <= number <= _INT_MAX:
        return number
    return float(value)


def _construct_float(loader: UnityLoader, node: yaml.ScalarNode) -> float:
    value = loader.construct_scalar(node)
    if value.lower() in _SPECIAL_FLOATS:
        return _SPECIAL_FLOATS[value.lower()]
    return float(value)


UnityLoader.add_constructor("tag:yaml.org,2002:int", _construct_int)
UnityLoader.add_constructor("tag:yaml.org,2002:float", _construct_float)


def _construct_unity_object(loader: UnityLoader, tag_suffix: str, node: yaml.Node) -> Any:
    if isinstance(node, yaml.MappingNode):
        return loader.construct_mapping(node, deep=True)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    return loader.construct_scalar(node)


UnityLoader.add_multi_constructor(UNITY_TAG_PREFIX, _construct_unity_object)


def _normalize_headers(text: str) -> str:
    # %TAG directives only cover the document that follows them, but Unity
    # declares "!u!" once per file. Verbatim tags need no declaration.
    return _UNITY_HEADER.sub(
        lambda m: f"--- !<{UNITY_TAG_PREFIX}{m['class_id']}>{m['rest']}", text
    )


def load_documents(text: str, source: Path | str | None = None) -> list[Any]:
    """Parse every document in a YAML stream.

    The whole stream must parse, even though callers usually only look at
    the first document.

    Args:
        text: YAML text
        source: Path used in error messages

    Returns:
        List of parsed documents (possibly empty)

    Raises:
        DocumentParseError: If the stream is not valid YAML
    """
    text = _normalize_headers(text)
    try:
        return list(yaml.load_all(text, Loader=UnityLoader))
    except yaml.YAMLError as e:
        raise DocumentParseError(f"Failed to parse YAML: {e}", source) from e


def load_first_document(text: str, source: Path | str | None = None) -> Any:
    """Parse a YAML stream and return its first document.

    Args:
        text: YAML text
        source: Path used in error messages

    Returns:
        The first document; later documents are ignored

    Raises:
        DocumentParseError: If the stream is not valid YAML
        EmptyDocumentError: If the stream holds no documents
    """
    documents = load_documents(text, source)
    if not documents:
        raise EmptyDocumentError("No YAML documents found", source)
    if len(documents) > 1:
        logger.debug("Ignoring %d extra document(s) in %s", len(documents) - 1, source)
    return documents[0]
