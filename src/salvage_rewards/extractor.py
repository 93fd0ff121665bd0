"""Extraction of salvage reward values from asset files.

Each SALV_*.asset file is a Unity ScriptableObject. The values live under
MonoBehaviour.m_Data.m_AwardedCurrencies, of which only the first entry is
used. Any failure here is fatal for the whole run.
"""

import logging
from pathlib import Path
from typing import Any

from .core.document import load_first_document
from .core.errors import AssetReadError
from .core.fields import coerce_float, get_field, require_int, require_str
from .core.types import SalvageRewardData
from .log import TRACE

logger = logging.getLogger(__name__)

CURRENCIES_PATH = ("MonoBehaviour", "m_Data", "m_AwardedCurrencies")


def read_asset(path: Path) -> str:
    """Read an asset file as UTF-8 text.

    Raises:
        AssetReadError: If the file cannot be read or decoded
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise AssetReadError(f"Failed to read file: {e}", path) from e


def extract_reward_data(document: Any, source: Path | str | None = None) -> SalvageRewardData:
    """Build a reward record from a parsed asset document.

    Missing, non-list or empty m_AwardedCurrencies gives zero values and
    an "ea" unit. Min and max values of any non-numeric type silently
    become 0.0, while m_Name and m_MassBasedValue are required.

    Args:
        document: First YAML document of the asset file
        source: Path used in log and error messages

    Returns:
        Fully populated SalvageRewardData

    Raises:
        MissingFieldError: If m_Name or m_MassBasedValue is absent
        FieldTypeError: If m_Name is not a string or m_MassBasedValue is
            not an integer
    """
    logger.log(TRACE, "Document for %s: %r", source, document)

    name = require_str(document, "MonoBehaviour", "m_Name", source=source)

    currencies = get_field(document, *CURRENCIES_PATH)
    if not isinstance(currencies, list) or not currencies:
        logger.debug("No awarded currencies for %s", name)
        return SalvageRewardData(name=name)

    logger.debug("Awarded currencies for %s: %r", name, currencies)

    # Only the first reward slot is used
    currency = currencies[0]
    mass_based = require_int(
        currency,
        "m_MassBasedValue",
        source=source,
        context=".".join(CURRENCIES_PATH) + "[0]",
    )

    return SalvageRewardData(
        name=name,
        min_initial_value=coerce_float(get_field(currency, "m_MinInitialValue")),
        max_initial_value=coerce_float(get_field(currency, "m_MaxInitialValue")),
        mass_based_value=mass_based == 1,
    )


def load_salvage_reward(path: Path) -> SalvageRewardData:
    """Read, parse and extract one asset file.

    Args:
        path: Path to a SALV_*.asset file

    Returns:
        The reward record for the file

    Raises:
        SalvageDataError: On any read, parse or field error
    """
    logger.debug("Parsing %s", path)
    document = load_first_document(read_asset(path), path)
    return extract_reward_data(document, path)
