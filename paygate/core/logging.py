"""
structlog configuration for paygate.
Supports both development (colorful console) and production (JSON) modes.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

import structlog
from structlog.processors import CallsiteParameter
from structlog.types import EventDict, Processor

# Keys whose values never reach log output in clear text
SENSITIVE_KEYS = {
    "password", "token", "secret", "api_key", "authorization",
    "card_number", "credit_card", "cvc", "customer_id",
}


class LoggerProtocol(Protocol):
    """Protocol for logger interface."""

    def debug(self, event: str, **kwargs: Any) -> None: ...
    def info(self, event: str, **kwargs: Any) -> None: ...
    def warning(self, event: str, **kwargs: Any) -> None: ...
    def error(self, event: str, **kwargs: Any) -> None: ...
    def critical(self, event: str, **kwargs: Any) -> None: ...
    def bind(self, **kwargs: Any) -> LoggerProtocol: ...


def add_timestamp(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO-8601 timestamp to log entry."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_process_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add hostname and process id to log entry."""
    event_dict["hostname"] = os.environ.get("HOSTNAME", "unknown")
    event_dict["pid"] = os.getpid()
    return event_dict


def mask_sensitive_data(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask sensitive data in log entries."""

    def mask_value(value: Any) -> Any:
        if isinstance(value, str) and len(value) > 4:
            # Keep first and last 2 chars, mask middle
            return f"{value[:2]}{'*' * (len(value) - 4)}{value[-2:]}"
        return "***"

    def mask_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        masked = {}
        for key, value in d.items():
            if any(s in key.lower() for s in SENSITIVE_KEYS):
                masked[key] = mask_value(value)
            elif isinstance(value, dict):
                masked[key] = mask_dict(value)
            elif isinstance(value, list):
                masked[key] = [mask_dict(item) if isinstance(item, dict) else item for item in value]
            else:
                masked[key] = value
        return masked

    return mask_dict(event_dict)


def drop_null_values(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Remove null values from log entries to reduce size."""
    return {k: v for k, v in event_dict.items() if v is not None}


def get_log_level(env: str, configured: Optional[str] = None) -> str:
    """Resolve the effective log level for an environment."""
    if configured:
        return configured.upper()
    return "DEBUG" if env == "development" else "INFO"


def configure_structlog(env: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """Configure structlog based on environment.

    Args:
        env: Environment mode; defaults to the loaded ``PaymentEnvironment``
        log_level: Explicit level override; defaults to ``LOG_LEVEL`` setting
    """
    from .environment import environment

    env = (env or environment.ENV.value).lower()
    level = get_log_level(env, log_level or environment.LOG_LEVEL)

    common_processors: List[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_timestamp,
        add_process_context,
        mask_sensitive_data,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if env == "development":
        processors = common_processors + [
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.LINENO,
                    CallsiteParameter.FUNC_NAME,
                ]
            ),
            drop_null_values,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(
                    show_locals=True,
                    max_frames=5,
                ),
            ),
        ]
    else:
        processors = common_processors + [
            structlog.processors.format_exc_info,
            drop_null_values,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )


def get_logger(name: Optional[str] = None, **kwargs: Any) -> LoggerProtocol:
    """
    Get a configured structlog logger.

    Args:
        name: Logger name (defaults to module name)
        **kwargs: Additional context to bind to logger

    Returns:
        Configured structlog logger
    """
    logger = structlog.get_logger(name)
    if kwargs:
        logger = logger.bind(**kwargs)
    return logger
