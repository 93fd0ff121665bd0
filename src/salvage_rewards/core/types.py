"""Type definitions for salvage reward records.

A record holds the handful of values read from one SALV_*.asset file and
knows how to render itself as a single summary line.
"""

import math
from dataclasses import dataclass
from decimal import Decimal


def format_number(value: float) -> str:
    """Render a float as its shortest round-trip decimal string.

    Exponent notation is expanded and a trailing ".0" is dropped, so whole
    values print as integers.

    Example:
        10.0 -> "10", 5.5 -> "5.5", 1e20 -> "100000000000000000000"

    Args:
        value: Number to render

    Returns:
        Decimal string without exponent
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class SalvageRewardData:
    """Reward values for one salvage item.

    Attributes:
        name: Asset name (MonoBehaviour.m_Name)
        min_initial_value: Lower bound of the awarded amount
        max_initial_value: Upper bound of the awarded amount
        mass_based_value: True when the amount is a mass in kilograms
    """

    name: str
    min_initial_value: float = 0.0
    max_initial_value: float = 0.0
    mass_based_value: bool = False

    @property
    def unit(self) -> str:
        return "kg" if self.mass_based_value else "ea"

    def value_range(self) -> str:
        # Exact comparison; min > max is rendered as-is.
        if self.min_initial_value != self.max_initial_value:
            return (
                f"{format_number(self.min_initial_value)} - "
                f"{format_number(self.max_initial_value)}"
            )
        return format_number(self.min_initial_value)

    def summary(self) -> str:
        """Render the record as "NAME: XX / ea" or "NAME: XX - YY / kg"."""
        return f"{self.name}: {self.value_range()} / {self.unit}"

    def __str__(self) -> str:
        return self.summary()
