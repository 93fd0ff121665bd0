"""Report pipeline for salvage reward data.

This module ties discovery, extraction and formatting together. All files
are extracted before anything is written, so a single bad file produces no
output at all.
"""

import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .core.types import SalvageRewardData
from .extractor import load_salvage_reward
from .scanner import DEFAULT_PATTERN, iter_salvage_assets

logger = logging.getLogger(__name__)


class SalvageReportPipeline:
    """Main interface for building salvage reward reports.

    Example:
        >>> pipeline = SalvageReportPipeline(Path('/game/Data/Salvage'))
        >>> for line in pipeline.render():
        ...     print(line)
        SALV_CopperWire: 5 - 8 / kg
    """

    def __init__(self, root: Path | str, pattern: str = DEFAULT_PATTERN):
        """Initialize the pipeline.

        Args:
            root: Folder which contains salvage data assets. It is not
                checked here; an unreadable folder yields no records.
            pattern: Filename pattern of asset files, validated when
                discovery starts
        """
        self.root = Path(root)
        self.pattern = pattern

    def discover(self) -> Iterator[Path]:
        """Lazily list the asset files in the root folder.

        Raises:
            PatternError: If the pattern is invalid
        """
        return iter_salvage_assets(self.root, self.pattern)

    def collect(self) -> list[SalvageRewardData]:
        """Extract a record from every discovered file.

        Returns:
            Records in discovery order

        Raises:
            SalvageDataError: From the first file that fails; no records
                are returned in that case
        """
        logger.info("Scanning directory: %s", self.root)
        records = [load_salvage_reward(path) for path in self.discover()]
        logger.info("Found %d salvage asset(s)", len(records))
        return records

    def render(self) -> list[str]:
        """Collect all records and render one summary line per record."""
        return [record.summary() for record in self.collect()]

    def run(self, out: TextIO | None = None) -> int:
        """Write the report.

        Args:
            out: Stream to write to (defaults to sys.stdout)

        Returns:
            Number of lines written
        """
        lines = self.render()
        out = out or sys.stdout
        for line in lines:
            print(line, file=out)
        return len(lines)
