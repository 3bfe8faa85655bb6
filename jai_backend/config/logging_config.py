import logging
from logging.handlers import RotatingFileHandler
import io
import sys
from datetime import datetime
from pathlib import Path
from contextvars import ContextVar
from zoneinfo import ZoneInfo
from jai_backend.config.settings import Config

# Context variable to store correlation ID across async boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default="NO Correlation ID"
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists and stamps local (IST) time."""

    def __init__(self, fmt: str, tz_name: str = "Asia/Kolkata"):
        super().__init__(fmt)
        self._tz = ZoneInfo(tz_name)
        self._tz_label = "IST" if tz_name == "Asia/Kolkata" else tz_name

    def formatTime(self, record, datefmt=None):
        stamp = datetime.fromtimestamp(record.created, tz=self._tz)
        return f"{stamp.strftime(datefmt or '%Y-%m-%d %H:%M:%S')} {self._tz_label}"

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "NO Correlation ID"
        return super().format(record)


def setup_logging(level: str = "INFO", log_file: str | None = None):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise
    formatter = SafeFormatter(Config.LOG_FORMAT, Config.LOG_TIMEZONE)

    logger_handler = logging.StreamHandler(
        io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", line_buffering=True)
    )
    logger_handler.setFormatter(formatter)
    logger_handler.addFilter(CorrelationIdFilter())
    root.addHandler(logger_handler)

    # Set up file logging if log_file provided with rotation
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationIdFilter())
        root.addHandler(file_handler)

    logging.getLogger("jai_backend").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger("jai_backend").info("Logging is set up.")

    return root
