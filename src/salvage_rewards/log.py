"""Process-wide logging setup.

Verbosity flags map onto stdlib logging levels, with an extra TRACE level
below DEBUG for full document dumps.
"""

import logging
import sys
from typing import TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"

# Logger that every module in the package logs under
PACKAGE_LOGGER = "salvage_rewards"

_configured = False


def verbosity_to_level(verbosity: int) -> int:
    """Map a -v occurrence count to a logging level.

    0 shows errors only, 1 info, 2 debug and 3 or more trace.
    """
    if verbosity <= 0:
        return logging.ERROR
    if verbosity == 1:
        return logging.INFO
    if verbosity == 2:
        return logging.DEBUG
    return TRACE


def configure_logging(verbosity: int = 0, stream: TextIO | None = None) -> bool:
    """Attach a stderr handler to the package logger.

    Only the first call has any effect; the level is fixed for the rest of
    the process.

    Args:
        verbosity: Number of -v flags given
        stream: Stream to log to (defaults to sys.stderr)

    Returns:
        True if logging was configured, False if it already had been
    """
    global _configured
    if _configured:
        return False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(verbosity_to_level(verbosity))

    _configured = True
    return True
