"""
Centralized logging for the Product Service.

Provides a structured logger with:
- Correlation IDs taken from the current request context
- JSON output for log shippers, coloured console output for development
- Optional JSON file output
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from app.core.config import config
from app.utils.correlation_id import get_correlation_id


class StructuredLogger:
    """
    Logger wrapper producing structured entries with service, environment
    and correlation ID attached to every record.
    """

    def __init__(self, name: str = config.service_name):
        self.service_name = config.service_name
        self.environment = config.environment
        self.log_format = config.log_format
        self._logger = logging.getLogger(name)
        self._setup_logging()

    def _setup_logging(self):
        """Configure handlers on the service logger"""
        level = getattr(logging, config.log_level.upper(), logging.INFO)
        self._logger.handlers.clear()
        self._logger.setLevel(level)
        self._logger.propagate = False

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            if self.log_format == "json":
                console_handler.setFormatter(JSONFormatter())
            else:
                console_handler.setFormatter(ConsoleFormatter())
            self._logger.addHandler(console_handler)

        if config.log_to_file:
            log_dir = os.path.dirname(config.log_file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(config.log_file_path)
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())  # Always JSON for files
            self._logger.addHandler(file_handler)

    def _build_log_entry(
        self,
        level: str,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> Dict[str, Any]:
        """Build structured log entry"""
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "service": self.service_name,
            "environment": self.environment,
            "message": message,
            "correlationId": get_correlation_id(),
        }

        if metadata:
            entry["metadata"] = metadata

        entry.update(kwargs)
        return entry

    def _log(
        self,
        level: str,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        log_entry = self._build_log_entry(level, message, metadata, **kwargs)
        # Don't pass 'message' in extra to avoid conflict with LogRecord
        extra_data = {"structured": {k: v for k, v in log_entry.items() if k != "message"}}
        self._logger.log(getattr(logging, level), message, extra=extra_data)

    def debug(self, message: str, metadata: Optional[Dict[str, Any]] = None, **kwargs):
        self._log("DEBUG", message, metadata, **kwargs)

    def info(self, message: str, metadata: Optional[Dict[str, Any]] = None, **kwargs):
        self._log("INFO", message, metadata, **kwargs)

    def warning(self, message: str, metadata: Optional[Dict[str, Any]] = None, **kwargs):
        self._log("WARNING", message, metadata, **kwargs)

    def error(
        self,
        message: str,
        error: Optional[Union[str, Exception]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Error level logging, attaching the error type and message when given"""
        metadata = dict(metadata or {})

        if error is not None:
            if isinstance(error, Exception):
                metadata["error"] = {
                    "type": type(error).__name__,
                    "message": str(error),
                }
            else:
                metadata["error"] = {"message": str(error)}

        self._log("ERROR", message, metadata, **kwargs)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": config.service_name,
            "message": record.getMessage(),
        }
        structured = getattr(record, "structured", None)
        if structured:
            log_data.update(structured)
        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development"""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        line = f"{color}[{timestamp}] {record.levelname}{reset} - {record.getMessage()}"

        structured = getattr(record, "structured", None) or {}
        if structured.get("correlationId"):
            line += f" [{structured['correlationId']}]"
        if structured.get("metadata"):
            line += f" {json.dumps(structured['metadata'], default=str)}"
        return line


logger = StructuredLogger()
