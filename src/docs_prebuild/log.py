"""
Logging setup for docs-prebuild.

Diagnostics go through the standard ``logging`` module and are rendered with
rich on stderr; an optional rotating log file mirrors them on disk.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from docs_prebuild.config import LoggingConfig


def setup_logging(config: LoggingConfig, console: Console | None = None) -> None:
    """
    Configure the ``docs_prebuild`` logger hierarchy.

    Args:
        config: Logging configuration.
        console: Console for the rich handler. Defaults to a stderr console.
    """
    logger = logging.getLogger("docs_prebuild")
    logger.setLevel(config.level.upper())
    logger.handlers.clear()
    logger.propagate = False

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(rich_handler)

    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(file_handler)
