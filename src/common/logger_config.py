"""Application-wide logging configuration."""

import logging

from rich.logging import RichHandler

from src.common.config.settings import settings


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level_name: str | None = None) -> None:
    """Routes every log record through one Rich console handler.

    Handlers installed before the call are replaced, so repeated calls do not duplicate output.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level_name or settings.LOG_LEVEL))

    console_handler = RichHandler(
        show_path=False,
        markup=True,
        rich_tracebacks=True,
        tracebacks_suppress=[logging],
    )
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
