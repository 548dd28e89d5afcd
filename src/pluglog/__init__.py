"""
pluglog: a pluggable, level-filtered logging façade.

One process-wide Logger routes leveled calls through a configurable
formatter to a per-level set of output functions.
"""

from pluglog.core import (
    Logger,
    LoggerRegistry,
    create_logger,
    get_logger,
    reset_singleton,
)
from pluglog.config import LoggerConfig
from pluglog.levels import (
    LogLevel,
    STANDARD_LEVELS,
    PSEUDO_LEVELS,
    level_label,
    label_to_level,
    should_output,
)
from pluglog.records import LogRecord, shape
from pluglog.routing import LoggerFunctionMap, NULL_LOGGER, resolve
from pluglog.formatters import (
    LogFormatter,
    PlainFormatter,
    JsonFormatter,
    NullFormatter,
    plain_formatter,
    json_formatter,
    null_formatter,
)
from pluglog.adapters import (
    ConsoleSink,
    MemoryLogger,
    CONSOLE_LOGGER_MAP,
    console_logger,
    null_logger,
)
from pluglog.errors import (
    LoggerError,
    LoggerValidationError,
    LoggerInitializationError,
)
from pluglog.settings import LoggerSettings

__all__ = [
    "Logger",
    "LoggerRegistry",
    "create_logger",
    "get_logger",
    "reset_singleton",
    "LoggerConfig",
    "LogLevel",
    "STANDARD_LEVELS",
    "PSEUDO_LEVELS",
    "level_label",
    "label_to_level",
    "should_output",
    "LogRecord",
    "shape",
    "LoggerFunctionMap",
    "NULL_LOGGER",
    "resolve",
    "LogFormatter",
    "PlainFormatter",
    "JsonFormatter",
    "NullFormatter",
    "plain_formatter",
    "json_formatter",
    "null_formatter",
    "ConsoleSink",
    "MemoryLogger",
    "CONSOLE_LOGGER_MAP",
    "console_logger",
    "null_logger",
    "LoggerError",
    "LoggerValidationError",
    "LoggerInitializationError",
    "LoggerSettings",
]
