"""Discovery of salvage asset files.

This module lists the SALV_*.asset files sitting directly inside a data
folder. Discovery is forgiving: entries that cannot be inspected are
logged and skipped rather than aborting the scan.
"""

import fnmatch
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .core.errors import PatternError

logger = logging.getLogger(__name__)

# Filename pattern of salvage data assets
DEFAULT_PATTERN = "SALV_*.asset"


def _has_unclosed_class(pattern: str) -> bool:
    i = 0
    while i < len(pattern):
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < len(pattern) and pattern[j] == "!":
            j += 1
        # A "]" right after "[" or "[!" is a literal member of the class
        if j < len(pattern) and pattern[j] == "]":
            j += 1
        close = pattern.find("]", j)
        if close == -1:
            return True
        i = close + 1
    return False


def validate_pattern(pattern: str) -> None:
    """Validate a filename pattern.

    Patterns match bare file names, so they may not contain path
    separators.

    Args:
        pattern: Shell-style pattern, e.g. "SALV_*.asset"

    Raises:
        PatternError: If the pattern is empty, contains a path separator,
            or has an unterminated character class
    """
    if not pattern:
        raise PatternError("Filename pattern is empty")

    if "/" in pattern or os.sep in pattern:
        raise PatternError(f"Filename pattern may not contain a path separator: {pattern!r}")

    if _has_unclosed_class(pattern):
        raise PatternError(f"Unterminated character class in pattern: {pattern!r}")


def iter_salvage_assets(root: Path | str, pattern: str = DEFAULT_PATTERN) -> Iterator[Path]:
    """Lazily list asset files directly inside a folder.

    Files are yielded in filesystem enumeration order, which is not
    sorted. Subfolders are not searched.

    Args:
        root: Folder that holds the salvage data assets
        pattern: Case-sensitive filename pattern

    Returns:
        Single-pass iterator of matching file paths

    Raises:
        PatternError: If the pattern is invalid (raised immediately,
            before any filesystem access)
    """
    validate_pattern(pattern)
    return _scan(Path(root), pattern)


def _scan(root: Path, pattern: str) -> Iterator[Path]:
    try:
        entries = os.scandir(root)
    except OSError as e:
        logger.warning("Cannot read directory %s: %s", root, e)
        return

    with entries:
        for entry in entries:
            if not fnmatch.fnmatchcase(entry.name, pattern):
                continue

            try:
                if entry.is_dir():
                    logger.debug("Skipping directory %s", entry.path)
                    continue
            except OSError as e:
                # Log and continue with the remaining entries
                logger.warning("Skipping %s: %s", entry.path, e)
                continue

            yield Path(entry.path)
