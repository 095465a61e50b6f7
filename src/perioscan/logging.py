"""
Structured logging for PerioScan.

Every line is a JSON object with timestamp, level, logger and message,
plus any keyword fields passed at the call site:

    from perioscan.logging import get_logger
    logger = get_logger(__name__)
    logger.info("document_signed", document_id=str(doc.id), kind=doc.kind)

Never pass tokens, secrets or verification codes as fields.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any


class StructuredLogFormatter(logging.Formatter):
    """Render records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "structured_data"):
            log_data.update(record.structured_data)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        if record.levelno >= logging.ERROR:
            log_data["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }
        return json.dumps(log_data, default=str)


class StructuredLogger:
    """Thin wrapper over a stdlib logger that accepts keyword fields."""

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.log(level, message, exc_info=exc_info, extra={"structured_data": kwargs})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


_configured = False


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Install the root handler once. Later calls are no-ops."""
    global _configured
    if _configured:
        return
    _configured = True

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    if json_output:
        console_handler.setFormatter(StructuredLogFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("psycopg").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger (typically for __name__)."""
    return StructuredLogger(name)
