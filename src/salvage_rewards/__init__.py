"""Salvage Reward Report.

This package reads Unity SALV_*.asset files from a folder and prints the
salvage reward each one grants as a one-line summary.
"""

# Core library interface
from .extractor import extract_reward_data, load_salvage_reward
from .pipeline import SalvageReportPipeline
from .scanner import DEFAULT_PATTERN, iter_salvage_assets, validate_pattern

# Core utilities
from .core import SalvageDataError, SalvageRewardData, format_number

# CLI interface
from .cli import main
from .log import configure_logging

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "SalvageReportPipeline",
    "SalvageRewardData",
    "load_salvage_reward",
    "extract_reward_data",
    "iter_salvage_assets",
    "validate_pattern",
    "DEFAULT_PATTERN",
    # Core utilities
    "SalvageDataError",
    "format_number",
    "configure_logging",
    # CLI
    "main",
]
