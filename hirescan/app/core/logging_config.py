"""
Logging configuration for the application.
Package loggers live under "hirescan."; library loggers that log per page or per request are kept quiet.
"""
import logging
import sys

from hirescan.app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# pdfminer (under pdfplumber) logs every parsed object at DEBUG; httpx logs each request at INFO
NOISY_LOGGERS = ("pdfminer", "httpx", "httpcore")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure stdout logging at settings.log_level. Returns the package logger."""
    level_val = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=level_val,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level_val, logging.WARNING))
    app_logger = logging.getLogger("hirescan")
    app_logger.setLevel(level_val)
    return app_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"hirescan.{name}")
