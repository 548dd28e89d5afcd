"""
Logger: process-wide logging façade.

One registry owns at most one Logger. Lifecycle is explicit:
    create_logger(...)  Uninitialized → Active (raises if already Active)
    get_logger()        returns the Active instance (raises if Uninitialized)
    reset_singleton()   → Uninitialized, configuration discarded

Every level call runs to completion before returning:
    policy → shape → format → resolve sink → sink(formatted)

Usage:
    log = create_logger({"log_level": LogLevel.INFO,
                         "default_logger": console_logger,
                         "formatter": plain_formatter})
    log.info("user signed in", {"user_id": 42})
    get_logger().warn("disk almost full")
"""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional

from pluglog.adapters import CONSOLE_LOGGER_MAP, console_logger, sink_name
from pluglog.config import LoggerConfig
from pluglog.errors import initialization_error, validation_error
from pluglog.formatters import FORMATTERS, FormatterFunction
from pluglog.levels import LogLevel, level_label
from pluglog.records import shape
from pluglog.routing import LoggerFunction


class Logger:
    """
    Level-named logging methods over one LoggerConfig.

    Formatter and sink exceptions are not caught: they reach the caller
    of the level method unchanged.
    """

    FATAL = LogLevel.FATAL
    ERROR = LogLevel.ERROR
    WARN = LogLevel.WARN
    INFO = LogLevel.INFO
    DEBUG = LogLevel.DEBUG
    TRACE = LogLevel.TRACE

    def __init__(self, config: LoggerConfig | None = None) -> None:
        self._config = config or LoggerConfig()

    # ── Configuration ─────────────────────────────────────────────

    def set_logger_config(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> None:
        """
        Apply partial options (default_logger, formatter, log_level, verbose,
        logger_map). Passing console_logger as default_logger without a
        logger_map also installs the per-level console routing.
        """
        merged = _merge_options(options, overrides)
        if merged.get("default_logger") is console_logger and "logger_map" not in merged:
            merged["logger_map"] = self._console_slots()
        self._config.apply_config(merged)

    def _console_slots(self) -> dict[LogLevel, LoggerFunction]:
        """CONSOLE_LOGGER_MAP minus the levels that keep an explicit override."""
        logger_map = self._config.logger_map
        # slots pinned to the outgoing default are reseeded, not kept
        previous = self._config.default_logger
        return {
            lvl: fn
            for lvl, fn in CONSOLE_LOGGER_MAP.items()
            if not logger_map.is_overridden(lvl) or logger_map.get(lvl) is previous
        }

    def set_logger_function(self, level: Any, fn: LoggerFunction) -> bool:
        """
        Bind `fn` to one standard level. False if `level` is invalid;
        raises LoggerValidationError if `fn` is None or not callable.
        """
        return self._config.set_logger(level, fn)

    def remove_logger_function(self, level: Any) -> bool:
        """Revert one level to the default logger."""
        return self._config.clear_logger(level)

    def get_logger_function(self, level: Any) -> LoggerFunction:
        return self._config.get_logger_function(level)

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def formatter(self) -> FormatterFunction:
        return self._config.formatter

    # ── Level / verbose ───────────────────────────────────────────

    @property
    def log_level(self) -> LogLevel:
        return self._config.log_level

    @log_level.setter
    def log_level(self, value: LogLevel | int | str) -> None:
        self._config.log_level = value

    @property
    def is_verbose(self) -> bool:
        return self._config.verbose

    def set_verbose(self, value: Optional[bool] = None) -> bool:
        """Set the verbose flag when `value` is given; return the current flag."""
        if value is not None:
            self._config.verbose = value
        return self._config.verbose

    # ── Core logging ──────────────────────────────────────────────

    def _execute(self, level: LogLevel, *args: Any) -> None:
        if not self._config.should_output(level):
            return

        record = shape(level, *args)
        formatted = self._config.formatter(record)
        if formatted == "":
            return

        sink = self._config.get_logger_function(level)
        sink(formatted)

    def fatal(self, *args: Any) -> None:
        self._execute(LogLevel.FATAL, *args)

    def error(self, *args: Any) -> None:
        self._execute(LogLevel.ERROR, *args)

    def warn(self, *args: Any) -> None:
        self._execute(LogLevel.WARN, *args)

    def info(self, *args: Any) -> None:
        self._execute(LogLevel.INFO, *args)

    def debug(self, *args: Any) -> None:
        self._execute(LogLevel.DEBUG, *args)

    def trace(self, *args: Any) -> None:
        self._execute(LogLevel.TRACE, *args)

    def log(self, *args: Any) -> None:
        """Force output regardless of level or verbose flag."""
        self._execute(LogLevel.LOG, *args)

    def verbose(self, *args: Any) -> None:
        """Output only while the verbose flag is set, even at level OFF."""
        self._execute(LogLevel.VERBOSE, *args)

    # ── Status ────────────────────────────────────────────────────

    def status(self) -> dict:
        """Current logger state for display."""
        cfg = self._config
        return {
            "log_level": int(cfg.log_level),
            "log_level_name": level_label(cfg.log_level),
            "verbose": cfg.verbose,
            "formatter": _formatter_name(cfg.formatter),
            "default_logger": sink_name(cfg.default_logger),
            "logger_map": {
                lvl.name: sink_name(fn)
                for lvl, fn in cfg.logger_map.overrides().items()
            },
        }


class LoggerRegistry:
    """
    Owns the single Logger instance. Creation is deliberately not
    idempotent: a second create() without reset() raises.
    """

    def __init__(self) -> None:
        self._instance: Logger | None = None
        self._lock = threading.Lock()

    @property
    def is_active(self) -> bool:
        return self._instance is not None

    def create(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> Logger:
        with self._lock:
            if self._instance is not None:
                raise initialization_error("LOGGER_ALREADY_CREATED")
            logger = Logger()
            merged = _merge_options(options, overrides)
            if merged:
                logger.set_logger_config(merged)
            self._instance = logger
            return logger

    def get(self) -> Logger:
        instance = self._instance
        if instance is None:
            raise initialization_error("LOGGER_NOT_CREATED")
        return instance

    def reset(self) -> None:
        """Discard the instance. For test isolation, not hot reload."""
        with self._lock:
            self._instance = None


_registry = LoggerRegistry()


def create_logger(options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> Logger:
    return _registry.create(options, **overrides)


def get_logger() -> Logger:
    return _registry.get()


def reset_singleton() -> None:
    _registry.reset()


def default_registry() -> LoggerRegistry:
    return _registry


# ── Helpers ───────────────────────────────────────────────────────────

def _merge_options(options: Any, overrides: dict[str, Any]) -> dict[str, Any]:
    if options is None:
        return dict(overrides)
    if not isinstance(options, Mapping):
        raise validation_error("INVALID_OPTIONS", f"got {type(options).__name__}")
    merged = dict(options)
    merged.update(overrides)
    return merged


def _formatter_name(fn: FormatterFunction) -> str:
    for name, builtin in FORMATTERS.items():
        if fn is builtin:
            return name
    return getattr(fn, "__qualname__", None) or type(fn).__name__
