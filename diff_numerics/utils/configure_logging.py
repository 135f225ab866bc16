import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home_dir: Path | None = None) -> None:
    """Configure unified diff-numerics logging.

    Args:
        home_dir: Directory for the log file. If None, derived from environment.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home_dir is None:
        home_dir = get_home_dir()

    # Ensure directory exists
    home_dir.mkdir(parents=True, exist_ok=True)
    log_file = home_dir / "diff-numerics.log"

    root_logger = logging.getLogger("diff_numerics")
    root_logger.setLevel(logging.INFO)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers installed by configure_logging so it can run again."""
    global _CONFIGURED
    root_logger = logging.getLogger("diff_numerics")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False


def is_configured() -> bool:
    return _CONFIGURED
