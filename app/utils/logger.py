# app/utils/logger.py
"""
Logging setup for the parking API.

Every module calls get_logger(__name__); the first call configures the root
logger once from Settings: console output always, plus a rotating
<LOG_DIR>/<LOG_FILE> unless LOG_TO_FILE is off. SQLAlchemy's engine logger
follows LOG_SQL so statement tracing can be switched on without code changes.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 10

_configured = False


def log_file_path() -> str:
    return os.path.join(settings.LOG_DIR or DEFAULT_LOG_DIR, settings.LOG_FILE)


def _build_handlers(level: str) -> list:
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    handlers = [console]

    if settings.LOG_TO_FILE:
        path = log_file_path()
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handlers.append(RotatingFileHandler(path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(fmt)
    return handlers


def configure_logging(force: bool = False):
    """Attach handlers to the root logger. No-op after the first call unless force=True."""
    global _configured
    if _configured and not force:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, "_parking_handler", False)]:
        root.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(level):
        handler._parking_handler = True
        root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.LOG_SQL else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    configure_logging()
    return logging.getLogger(name)
