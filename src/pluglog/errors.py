"""
Logger errors.

Two categories are raised by pluglog itself:
  - VALIDATION:      bad level, bad formatter/logger, bad options mapping
  - INITIALIZATION:  get before create, create twice

Anything raised by a user formatter or output function is not wrapped;
it reaches the caller of the level method unchanged.
"""

from __future__ import annotations

from typing import Any


VALIDATION = "VALIDATION"
INITIALIZATION = "INITIALIZATION"

ERROR_MESSAGES: dict[str, dict[str, str]] = {
    VALIDATION: {
        "INVALID_LOG_LEVEL": "Invalid log level",
        "INVALID_THRESHOLD": "Log level cannot be used as a threshold",
        "INVALID_FORMATTER": "Formatter must be a callable",
        "INVALID_LOGGER": "Logger function must be a callable",
        "INVALID_VERBOSE": "verbose must be a bool",
        "INVALID_OPTIONS": "Logger options must be a mapping",
        "INVALID_LOGGER_MAP": "logger_map must be a mapping",
        "UNKNOWN_OPTION": "Unknown logger option",
    },
    INITIALIZATION: {
        "LOGGER_ALREADY_CREATED": "Logger already created; call reset_singleton() first",
        "LOGGER_NOT_CREATED": "Logger not created; call create_logger() first",
    },
}


class LoggerError(Exception):
    """Base class for errors raised by pluglog."""

    category: str = "LOGGER"

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = dict(context) if context else {}


class LoggerValidationError(LoggerError, ValueError):
    category = VALIDATION


class LoggerInitializationError(LoggerError, RuntimeError):
    category = INITIALIZATION


def validation_error(key: str, detail: str | None = None, **context: Any) -> LoggerValidationError:
    """Build a LoggerValidationError from a message key plus an optional detail."""
    message = ERROR_MESSAGES[VALIDATION][key]
    if detail:
        message = f"{message} ({detail})"
    return LoggerValidationError(message, context)


def initialization_error(key: str) -> LoggerInitializationError:
    return LoggerInitializationError(ERROR_MESSAGES[INITIALIZATION][key])
