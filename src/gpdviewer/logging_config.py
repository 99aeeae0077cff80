"""
Logging Configuration
Sets up the 'gpdviewer' namespace logger used by every module of the viewer.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_level(level: Union[int, str]) -> int:
    """
    Accept either a numeric level or one of LEVEL_NAMES (any case), as given
    on the command line by ``--log-level``.
    """
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level '{level}'. Choose one of {', '.join(LEVEL_NAMES)}.")
    return getattr(logging, name)


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'gpdviewer' namespace.

    Args:
        level: Numeric level or level name, e.g. "DEBUG".
        log_file: Optional path; the log of the session is written there too.
    """
    numeric_level = resolve_level(level)

    logger = logging.getLogger("gpdviewer")
    logger.setLevel(numeric_level)
    # Avoid duplicate handlers when main() runs twice in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
