"""
Logging Configuration for the PRD wizard.

Log output goes to stderr (and optionally a file) so it never interleaves
with the interactive prompts on stdout.
"""

import logging
import sys
from typing import Optional


# Log format strings
VERBOSE_FORMAT = '%(asctime)s.%(msecs)03d [%(levelname)-8s] %(name)s: %(message)s'
STANDARD_FORMAT = '%(asctime)s [%(levelname)-8s] %(message)s'

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(
    level: int = logging.WARNING,
    verbose: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging for the PRD wizard.

    Args:
        level: Base logging level
        verbose: Enable verbose output with timestamps and module names
        log_file: Optional file path for log output
    """
    formatter = logging.Formatter(
        VERBOSE_FORMAT if verbose else STANDARD_FORMAT,
        datefmt=DATE_FORMAT,
    )

    root_logger = logging.getLogger('prd_wizard')
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except IOError as e:
            print(f"Warning: Could not open log file {log_file}: {e}", file=sys.stderr)


def get_log_level(name: str) -> int:
    """
    Convert a log level name to a logging constant.

    Args:
        name: One of debug, info, warn, error

    Returns:
        Logging level constant (WARNING for unknown names)
    """
    return LOG_LEVELS.get(name.lower(), logging.WARNING)
