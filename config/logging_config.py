"""
Centralized logging configuration.

Console output always; when LOG_FILE is set, a daily-rotating file as well.
Library modules only create module loggers; applications call
setup_logging() once at startup.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

from config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(service_name: str = "chatapi", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger for a service.

    Args:
        service_name: Name shown in the startup log line
        log_file: Path of the rotating log file. Defaults to LOG_FILE from
                  settings; empty means console only.

    Returns:
        Configured root logger
    """
    settings = get_settings()
    log_level = getattr(logging, settings.general.LOG_LEVEL.upper(), logging.INFO)
    if log_file is None:
        log_file = settings.logging.LOG_FILE

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Avoid duplicated handlers on repeated setup
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=path,
            when="midnight",
            interval=1,
            backupCount=settings.logging.LOG_RETENTION_DAYS,
            encoding="utf-8",
            utc=False
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        # chatapi.log.2026-01-23
        file_handler.suffix = "%Y-%m-%d"
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging started [{service_name}] -> {log_file or 'stdout'}")

    return root_logger
