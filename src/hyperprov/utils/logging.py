"""Structured logging utilities for hyperprov."""

import logging
import sys
from collections.abc import Sequence
from typing import Any

import structlog

# Command-line flags whose values are credentials
SECRET_FLAGS = ("--apikey", "--token")


def setup_logging(level: str = "INFO", format: str = "json", output: str = "stdout") -> None:
    """Configure structured logging for hyperprov.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (json or console)
        output: Output destination (stdout or stderr)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    stream = sys.stdout if output == "stdout" else sys.stderr

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=log_level,
    )

    if format == "json":
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def mask_secret(value: str | None, visible: int = 4) -> str:
    """Mask a secret, keeping only its last few characters.

    Args:
        value: Secret value
        visible: Number of trailing characters left readable

    Returns:
        Masked representation safe for logs
    """
    if not value:
        return ""
    if len(value) <= visible * 2:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


def redact_command(cmd: Sequence[str]) -> str:
    """Render a command line with credential flag values masked.

    Handles both ``--flag=value`` and ``--flag value`` forms.
    """
    redacted: list[str] = []
    mask_next = False
    for arg in cmd:
        if mask_next:
            redacted.append(mask_secret(arg))
            mask_next = False
            continue

        flag, sep, value = arg.partition("=")
        if flag in SECRET_FLAGS:
            if sep:
                redacted.append(f"{flag}={mask_secret(value)}")
            else:
                redacted.append(arg)
                mask_next = True
        else:
            redacted.append(arg)
    return " ".join(redacted)


def log_error(
    logger: structlog.BoundLogger,
    error: Exception,
    operation: str | None = None,
    **kwargs: Any,
) -> None:
    """Log an error with structured context.

    Args:
        logger: Logger instance
        error: Exception instance
        operation: Operation name (optional)
        **kwargs: Additional context fields
    """
    context = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        **kwargs,
    }

    if operation:
        context["operation"] = operation

    logger.error("error_occurred", **context)
