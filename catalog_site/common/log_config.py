"""
Logging Configuration

Routes catalog log records to stderr (stdout stays free for reports and
generated output) and, optionally, to a log file next to a built site.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "catalog_site"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str | Path] = None,
) -> logging.Logger:
    """
    Configure the catalog_site logger.

    Args:
        verbose: If True, set level to DEBUG (also shows urllib3 connection logs)
        quiet: If True, set level to WARNING
        log_file: Optional path that receives a copy of every record

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running setup must not stack handlers
    logger.handlers.clear()
    logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Image probing issues one HEAD per candidate; keep urllib3 quiet
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger
