"""
Logging configuration for the bookshelf service.

One pipe-separated format on stdout for the app, uvicorn and the
database layer. Logging must not change program behavior.
Never logs sensitive data (request bodies, database passwords).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers held at WARNING whatever the app level is.
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "aiosqlite", "slowapi")


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure logging for the service.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Leave SQLAlchemy's statement log alone. When False the
            engine logger is held at WARNING even under DEBUG.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if not sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
