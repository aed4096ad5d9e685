"""Structured Logging - JSON formatter, service-tagged logger, console + file outputs.

Invariants:
    - All records carry the static service tag (ServiceLogger merges it into extra)
    - Combined file receives every level; error file receives ERROR and above
    - Files are append-only JSON lines; console is JSON or human-readable per settings
    - setup_logging is idempotent per logger name: previous handlers are closed and replaced
    - Each app owns its own logger name, so two apps in one process never share sinks

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Dedicated "calculator.*" loggers with propagate=False: output goes only to the
      configured sinks, never duplicated through the root logger
    - The returned adapter is the logging capability injected into handlers
"""

import json
import logging
from datetime import datetime, timezone

from calculator.config import Settings

LOGGER_NAME = "calculator"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in (
            "service", "error_code", "operation", "operands", "category", "severity",
        ):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable console lines: `info: GET /add {"service":"..."}`."""

    def format(self, record: logging.LogRecord) -> str:
        line = f"{record.levelname.lower()}: {record.getMessage()}"
        service = record.__dict__.get("service")
        if service is not None:
            line += " " + json.dumps({"service": service}, separators=(",", ":"))
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class ServiceLogger(logging.LoggerAdapter):
    """LoggerAdapter that merges call-site extra with the bound service tag."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def setup_logging(settings: Settings, name: str = LOGGER_NAME) -> ServiceLogger:
    """Configure console, combined and error sinks on logger `name`; return the service logger."""
    logger = logging.getLogger(name)
    _close_handlers(logger)

    console = logging.StreamHandler()
    if settings.log_format == "json":
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(TextFormatter())
    logger.addHandler(console)

    settings.log_dir.mkdir(parents=True, exist_ok=True)
    combined = logging.FileHandler(settings.combined_log_path, mode="a", encoding="utf-8")
    combined.setFormatter(JSONFormatter())
    logger.addHandler(combined)

    errors = logging.FileHandler(settings.error_log_path, mode="a", encoding="utf-8")
    errors.setLevel(logging.ERROR)
    errors.setFormatter(JSONFormatter())
    logger.addHandler(errors)

    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    logger.propagate = False
    return ServiceLogger(logger, {"service": settings.service_name})


def shutdown_logging(service_logger: ServiceLogger) -> None:
    """Flush and close every handler attached by setup_logging."""
    _close_handlers(service_logger.logger)


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
