"""
Logging Configuration

Every module logs through ``setup_logger(__name__)``. Records are written
one per line:

    [2026-03-01 14:02:11.204] [INFO    ] [trip_store:append:151] Trip saved: ... user=admin

Environment:
- LOG_LEVEL: DEBUG / INFO / WARNING / ERROR (default INFO)
- LOG_FILE: also append records to this file
"""

import logging
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional


class StructuredFormatter(logging.Formatter):
    """[TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {user_context}"""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        where = f"{record.module}:{record.funcName}:{record.lineno}"
        text = f"[{stamp}] [{record.levelname:8s}] [{where}] {record.getMessage()}"

        user_context = getattr(record, 'user_context', '')
        if user_context:
            text += f" {user_context}"
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        return text


class PrincipalAdapter(logging.LoggerAdapter):
    """Tags every record with the acting principal, e.g. ``user=admin``."""

    def process(self, msg, kwargs):
        extra = dict(kwargs.get('extra') or {})
        extra.setdefault('user_context', f"user={self.extra['username']}")
        kwargs['extra'] = extra
        return msg, kwargs


class PerformanceLogger:
    """
    Times a block; WARNING above threshold_ms, DEBUG otherwise.

    Exceptions raised inside the block are not suppressed.
    """

    def __init__(self, logger: logging.Logger, operation: str, threshold_ms: float = 1000):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.elapsed_ms: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self):
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._started) * 1000
        outcome = "failed after" if exc_type else "took"

        if self.elapsed_ms > self.threshold_ms:
            self.logger.warning(f"SLOW: {self.operation} {outcome} {self.elapsed_ms:.1f}ms")
        else:
            self.logger.debug(f"{self.operation} {outcome} {self.elapsed_ms:.1f}ms")
        return False


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Get a configured module logger.

    Args:
        name: Logger name (usually __name__)
        level: Overrides LOG_LEVEL
        log_file: Overrides LOG_FILE

    Returns:
        Logger writing to stdout (and the log file, if any)
    """
    logger = logging.getLogger(name)

    # Streamlit re-executes the script on every interaction
    if logger.handlers:
        return logger

    level_name = (level or os.getenv('LOG_LEVEL') or 'INFO').upper()
    log_level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(log_level)

    logger.addHandler(_handler(logging.StreamHandler(sys.stdout), log_level))

    log_file = log_file or os.getenv('LOG_FILE')
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(log_file, encoding='utf-8'), log_level))

    logger.propagate = False
    return logger


def for_principal(logger: logging.Logger, username: str) -> PrincipalAdapter:
    """Logger that appends ``user=<username>`` to each record."""
    return PrincipalAdapter(logger, {'username': username})


def get_perf_logger(logger: logging.Logger, operation: str, threshold_ms: float = 1000) -> PerformanceLogger:
    """
    Usage:
        with get_perf_logger(logger, "load trip history", threshold_ms=500):
            records = store.load_all()
    """
    return PerformanceLogger(logger, operation, threshold_ms)
