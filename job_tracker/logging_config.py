"""Logging setup for the job-tracker command."""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _file_handler(log_file: str) -> RotatingFileHandler:
    """Rotating handler for log_file, creating its directory."""
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger from settings.

    Arguments override settings.log_level and settings.log_file. Does
    nothing if the root logger already has handlers, e.g. under pytest.
    """
    if logging.getLogger().handlers:
        return

    level_name = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(_file_handler(log_file))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
    )

    # SQL echo stays off unless explicitly debugging the store
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
