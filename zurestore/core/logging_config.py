"""
Logging infrastructure for zurestore.

Structured JSON or text output, tagging of every record with the client
request id of the operation being parsed, and redaction of storage
credentials (account keys, SAS signatures, authorization headers) from
messages and their arguments.
"""

import logging
import logging.handlers
import json
import sys
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from contextvars import ContextVar

# Client request id of the operation whose response is being read
current_request_id: ContextVar[Optional[str]] = ContextVar('current_request_id', default=None)

_NO_REQUEST_ID = "-"

_SIZE_PATTERN = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*([KMG]?B)?\s*$', re.IGNORECASE)
_SIZE_UNITS = {None: 1, 'B': 1, 'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}


class RequestIdFilter(logging.Filter):
    """Stamp each record with the active client request id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "client_request_id"):
            record.client_request_id = current_request_id.get() or _NO_REQUEST_ID
        return True


class SensitiveDataFilter(logging.Filter):
    """Filter to redact storage credentials from log messages."""

    PATTERNS = [
        (re.compile(r'(Authorization:\s+)(?:SharedKey\s+|SharedKeyLite\s+|Bearer\s+)?\S+', re.IGNORECASE),
         r'\1***REDACTED***'),
        (re.compile(r'(x-ms-encryption-key:\s+)\S+', re.IGNORECASE), r'\1***REDACTED***'),
        (re.compile(r'(AccountKey=)[^;]+', re.IGNORECASE), r'\1***REDACTED***'),
        (re.compile(r'(SharedAccessSignature=)[^;&]+', re.IGNORECASE), r'\1***REDACTED***'),
        (re.compile(r'(sig=)[^;&\s]+', re.IGNORECASE), r'\1***REDACTED***'),
    ]

    def redact(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact credentials from the message and any string arguments."""
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(self.redact(a) if isinstance(a, str) else a for a in record.args)
        return True


def _request_id_of(record: logging.LogRecord) -> Optional[str]:
    request_id = getattr(record, "client_request_id", None) or current_request_id.get()
    if request_id == _NO_REQUEST_ID:
        return None
    return request_id


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }

        if request_id := _request_id_of(record):
            log_data["client_request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_data["context"] = record.context

        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter with the client request id."""

    def __init__(self):
        fmt = "%(asctime)s [%(levelname)s] %(name)s (%(client_request_id)s): %(message)s"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        record.client_request_id = _request_id_of(record) or _NO_REQUEST_ID
        return super().format(record)


def _attach(root_logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())
    handler.addFilter(SensitiveDataFilter())
    root_logger.addHandler(handler)


def setup_logging(
    level: str = "INFO",
    format_type: str = "json",
    log_file: Optional[str] = None,
    rotation_size: str = "10MB",
    rotation_count: int = 5,
    module_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    Configure zurestore logging.

    Args:
        level: Default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Log format ("json" or "text")
        log_file: Optional file path for rotated log output
        rotation_size: Size limit for log rotation (e.g., "10MB")
        rotation_count: Number of rotated log files to keep
        module_levels: Optional per-logger levels, e.g. {"zurestore.models": "DEBUG"}
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    formatter = JSONFormatter() if format_type == "json" else TextFormatter()

    _attach(root_logger, logging.StreamHandler(sys.stdout), formatter)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=_parse_size(rotation_size),
            backupCount=rotation_count,
            encoding='utf-8'
        )
        _attach(root_logger, file_handler, formatter)
        root_logger.info(f"Logging to file: {log_file} (rotation: {rotation_size}, count: {rotation_count})")

    for module_name, module_level in (module_levels or {}).items():
        logging.getLogger(module_name).setLevel(getattr(logging, module_level.upper()))

    root_logger.info(f"Logging configured: level={level}, format={format_type}")


def _parse_size(size_str: str) -> int:
    """
    Parse a rotation size such as "10MB" or "512kb" to bytes.

    Raises:
        ValueError: If the size is not a number with an optional B/KB/MB/GB unit
    """
    match = _SIZE_PATTERN.match(size_str)
    if match is None:
        raise ValueError(f"Invalid log rotation size: {size_str!r}")
    number, unit = match.groups()
    return int(float(number) * _SIZE_UNITS[unit.upper() if unit else None])


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """Log ``message`` with ``context`` attached to the record for JSON output."""
    extra = {"context": context} if context else {}
    logger.log(level, message, extra=extra)
