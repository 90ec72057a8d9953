"""
Structured logging configuration using structlog.

Provides machine-readable logs (JSON) or human-readable logs (console).
Logs go to stderr so command output on stdout stays parseable.
"""

import logging
import re
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structlog.types import Processor

from steamr.config import get_settings

# Matches the value of a `key` query parameter in a URL or message
API_KEY_PATTERN = re.compile(r"(?<=[?&]key=)[^&\s\"']+")
REDACTED = "***"


def redact_api_key(text: str) -> str:
    """Mask the value of any `key=` query parameter in text."""
    return API_KEY_PATTERN.sub(REDACTED, text)


class ApiKeyRedactingFilter(logging.Filter):
    """
    Standard-library logging filter masking API keys in request URLs.

    httpx logs every request URL at INFO, and the Steam API key travels
    in the query string.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def install_api_key_redaction(logger_name: str = "httpx") -> None:
    """Attach the redacting filter to a standard-library logger, once."""
    target = logging.getLogger(logger_name)
    if not any(isinstance(f, ApiKeyRedactingFilter) for f in target.filters):
        target.addFilter(ApiKeyRedactingFilter())


def redact_event(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor masking API keys in string values."""
    return {
        k: redact_api_key(v) if isinstance(v, str) else v for k, v in event_dict.items()
    }


def setup_logging() -> None:
    """
    Configure structured logging.

    Libraries should not call this; it is invoked by the command-line
    entry point. Without it, structlog's defaults apply.
    """
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        redact_event,
    ]

    if settings.logging.include_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if settings.logging.format == "json":
        processors = [
            *shared_processors,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.logging.level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.logging.level),
    )
    install_api_key_redaction()


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
        **initial_context: Initial context values to bind to the logger

    Returns:
        structlog.BoundLogger: Configured logger instance

    Example:
        >>> logger = get_logger(__name__, component="client")
        >>> logger.info("Fetching friends", steam_id="76561197960435530")
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
