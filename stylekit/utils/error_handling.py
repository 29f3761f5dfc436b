"""
Error Handling Utility Module

Reusable error handling patterns with structured logging:
1. log_and_return_default() - Log error and return a default value
2. log_and_raise() - Log error with context and re-raise

Configuration errors are never retried: mixin expansion is a pure in-memory
computation with no transient failure mode.
"""

import logging
from typing import Any


def _failure_fields(error: Exception, context: dict[str, Any], error_type: str) -> dict[str, Any]:
    """Structured fields carried under extra_fields so JSONFormatter emits them."""
    return {
        "error_type": error_type,
        "exception_class": error.__class__.__name__,
        "context": context,
    }


def log_and_return_default(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    default_value: Any = None,
    error_type: str = "Operation",
) -> Any:
    """
    Log an error and return a default value.

    Use this for optional inputs where a fallback is acceptable.

    Args:
        logger: Logger instance
        error: The caught exception
        context: Structured data about what failed
        default_value: Value to return on error
        error_type: Human-readable description

    Returns:
        default_value

    Example:
        try:
            json_logs = parse_bool(raw)
        except ValueError as e:
            return log_and_return_default(
                logger, e,
                context={"variable": "STYLEKIT_LOG_JSON"},
                default_value=False,
                error_type="Settings parsing"
            )
    """
    logger.warning(
        f"{error_type} failed, returning default value: {error}",
        extra={"extra_fields": {**_failure_fields(error, context, error_type), "default_value": str(default_value)}},
    )
    return default_value


def log_and_raise(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    error_type: str = "Operation",
) -> None:
    """
    Log an error with context and re-raise it.

    Args:
        logger: Logger instance
        error: The caught exception
        context: Structured data about what failed
        error_type: Human-readable description

    Raises:
        The original exception after logging

    Example:
        try:
            spec = resolve_breakpoints(config)
        except ConfigError as e:
            log_and_raise(
                logger, e,
                context={"keys": list(config)},
                error_type="Breakpoint expansion"
            )
    """
    logger.error(
        f"{error_type} failed: {error}",
        extra={"extra_fields": _failure_fields(error, context, error_type)},
    )
    raise error
