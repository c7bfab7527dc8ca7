"""
Logging setup for Scout entry points.

Library modules only call logging.getLogger(__name__) and emit DEBUG
records. An entry point calls configure_logging once to attach
handlers to the "scout" package logger.
"""
import logging
import sys
from datetime import date
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "scout"
DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent.parent / "logs"


def resolve_level(level: str, debug: bool = False) -> int:
    """Numeric level for a level name; debug mode always wins."""
    if debug:
        return logging.DEBUG
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(
    level: str = "INFO",
    debug: bool = False,
    log_to_file: bool = False,
    log_dir: Path = None,
) -> logging.Logger:
    """
    Attach console (and optionally daily file) handlers to the package logger.

    Calling it again only updates the level; handlers are added once.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolve_level(level, debug))

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_to_file:
        target_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
        target_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            target_dir / f"{date.today():%Y%m%d}_scout.log",
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
