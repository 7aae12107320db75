import logging
import os
from typing import Optional

from rich.logging import RichHandler
from rich.markup import escape

from .config import DEFAULT_LOG_LEVEL, LOGGER_NAME, LOG_LEVEL_ENV

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def resolve_log_level(name: Optional[str] = None) -> int:
    """Рівень з ETH_TEST_UTILS_LOG_LEVEL; невідома назва дає INFO."""
    if name is None:
        name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(str(name).strip().upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def _rich_handler(level: int) -> RichHandler:
    # час і рівень друкує Formatter, не RichHandler
    handler = RichHandler(show_time=False, show_level=False, show_path=False, markup=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        level = resolve_log_level()
        logger.setLevel(level)
        logger.addHandler(_rich_handler(level))
    return logger


def contract_tag(name: str) -> str:
    return f"[bold cyan]{escape('[' + name + ']')}[/bold cyan] "
