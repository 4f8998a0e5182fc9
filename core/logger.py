#!/usr/bin/env python3
"""
Service logger setup

Configures named stdlib loggers from LoggingConfig. When structured logging is
enabled each record is emitted as one JSON object, including any event fields
attached through ``extra``.

Usage:
    from core.logger import setup_service_logger
    logger = setup_service_logger("shipping_service")
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from core.config.logging_config import LoggingConfig

_configured = set()


class StructuredFormatter(logging.Formatter):
    """Render log records as single-line JSON"""

    def __init__(self, service_name: str, environment: str):
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service_name,
            "environment": self.environment,
            "message": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event:
            payload["event"] = event
        fields = getattr(record, "fields", None)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class LoggingEventLogger:
    """
    Event logger backed by a stdlib logger

    ``log("warning", "shipping.retry", attempt=2)`` becomes a WARNING record
    with message ``shipping.retry attempt=2`` and the event name and fields
    attached as ``record.event`` / ``record.fields``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, level: str, event: str, **fields: Any) -> None:
        levelno = logging.getLevelName(str(level).upper())
        if not isinstance(levelno, int):
            levelno = logging.INFO
        if fields:
            rendered = " ".join(f"{key}={value}" for key, value in fields.items())
            message = f"{event} {rendered}"
        else:
            message = event
        self._logger.log(levelno, message, extra={"event": event, "fields": fields})


def setup_service_logger(
    name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Get a configured logger for a service.

    Handlers are attached only on the first call for a given name, so calling
    this from several modules is safe.

    Args:
        name: Logger name (usually the service name)
        level: Overrides the configured log level
        config: Logging configuration (loaded from env if omitted)

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel((level or config.log_level).upper())

    if name in _configured:
        return logger

    if config.enable_structured:
        formatter = StructuredFormatter(config.service_name, config.environment)
    else:
        formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    _configured.add(name)
    return logger


__all__ = ["setup_service_logger", "StructuredFormatter", "LoggingEventLogger"]
