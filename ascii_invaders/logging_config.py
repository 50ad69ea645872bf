"""
Logging Configuration
Sets up the package logger. Curses owns the terminal while the game runs,
so records only go to a file when one is configured.
"""
import logging
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'ascii_invaders' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to. Without it logs are discarded.
    """
    logger = logging.getLogger("ascii_invaders")
    logger.setLevel(level)
    logger.propagate = False

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    if not log_file:
        logger.addHandler(logging.NullHandler())
        return

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logger.info("Logging initialized.")
