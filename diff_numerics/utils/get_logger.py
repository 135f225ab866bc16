import logging

from .configure_logging import configure_logging, is_configured


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not is_configured():
        configure_logging()

    return logging.getLogger(f"diff_numerics.{name}")
