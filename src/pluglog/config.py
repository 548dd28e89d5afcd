"""
Configuration store owned by the logger.

Secure defaults: level OFF, verbose off, every sink the NULL_LOGGER
sentinel, formatter null (returns ""). Nothing is output until configured.

Direct setters raise LoggerValidationError on bad input and keep the
previous value. apply_config() validates everything up front, then
applies in order:
  default_logger → formatter → log_level → verbose → logger_map
An invalid log_level on that path is silently ignored.
"""

from __future__ import annotations

from typing import Any, Mapping

from pluglog.errors import validation_error
from pluglog.formatters import FormatterFunction, null_formatter
from pluglog.levels import LogLevel, is_standard_level, should_output, validate_threshold
from pluglog.routing import NULL_LOGGER, LoggerFunction, LoggerFunctionMap


OPTION_KEYS = ("default_logger", "formatter", "log_level", "verbose", "logger_map")


class LoggerConfig:
    """Holds level, verbose flag, default logger, formatter and the per-level map."""

    def __init__(self) -> None:
        self._log_level: LogLevel = LogLevel.OFF
        self._verbose: bool = False
        self._default_logger: LoggerFunction = NULL_LOGGER
        self._formatter: FormatterFunction = null_formatter
        self._logger_map = LoggerFunctionMap()

    # ── Level ─────────────────────────────────────────────────────

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @log_level.setter
    def log_level(self, value: LogLevel | int | str) -> None:
        self._log_level = validate_threshold(value)

    # ── Verbose ───────────────────────────────────────────────────

    @property
    def verbose(self) -> bool:
        return self._verbose

    @verbose.setter
    def verbose(self, value: bool) -> None:
        _check_verbose(value)
        self._verbose = value

    def should_output_verbose(self) -> bool:
        return self._verbose

    # ── Formatter / default logger ────────────────────────────────

    @property
    def formatter(self) -> FormatterFunction:
        return self._formatter

    @formatter.setter
    def formatter(self, value: FormatterFunction) -> None:
        _check_callable(value, "INVALID_FORMATTER")
        self._formatter = value

    @property
    def default_logger(self) -> LoggerFunction:
        return self._default_logger

    @default_logger.setter
    def default_logger(self, value: LoggerFunction) -> None:
        _check_callable(value, "INVALID_LOGGER")
        previous = self._default_logger
        self._default_logger = value
        self._logger_map.reseed(previous)

    # ── Logger map ────────────────────────────────────────────────

    @property
    def logger_map(self) -> LoggerFunctionMap:
        return self._logger_map

    def get_logger_function(self, level: LogLevel | int) -> LoggerFunction:
        """
        Output function for `level`. VERBOSE and LOG have no map slot and
        dispatch to the default logger.
        """
        if level in (LogLevel.VERBOSE, LogLevel.LOG):
            return self._default_logger
        return self._logger_map.resolve(level, self._default_logger)

    def set_logger(self, level: Any, fn: LoggerFunction) -> bool:
        return self._logger_map.set_logger(level, fn)

    def clear_logger(self, level: Any) -> bool:
        return self._logger_map.clear(level)

    # ── Policy ────────────────────────────────────────────────────

    def should_output(self, level: Any) -> bool:
        return should_output(self._log_level, self._verbose, level)

    # ── Bulk apply ────────────────────────────────────────────────

    def apply_config(self, options: Mapping[str, Any]) -> None:
        """
        Apply a partial options mapping. Keys not present are left alone.

        Raises LoggerValidationError before touching any state if the
        mapping has unknown keys, a None/non-callable default_logger,
        formatter or logger_map value, a non-bool verbose, or a
        non-mapping logger_map.
        """
        if not isinstance(options, Mapping):
            raise validation_error("INVALID_OPTIONS", f"got {type(options).__name__}")

        unknown = sorted(set(options) - set(OPTION_KEYS))
        if unknown:
            raise validation_error("UNKNOWN_OPTION", ", ".join(map(str, unknown)))

        if "default_logger" in options:
            _check_callable(options["default_logger"], "INVALID_LOGGER")
        if "formatter" in options:
            _check_callable(options["formatter"], "INVALID_FORMATTER")
        if "verbose" in options:
            _check_verbose(options["verbose"])
        logger_map = options.get("logger_map")
        if "logger_map" in options:
            if not isinstance(logger_map, Mapping):
                raise validation_error("INVALID_LOGGER_MAP", f"got {type(logger_map).__name__}")
            for fn in logger_map.values():
                _check_callable(fn, "INVALID_LOGGER")

        if "default_logger" in options:
            self.default_logger = options["default_logger"]

        if "formatter" in options:
            self._formatter = options["formatter"]

        if "log_level" in options:
            level = _as_threshold(options["log_level"])
            if level is not None:
                self._log_level = level

        if "verbose" in options:
            self._verbose = options["verbose"]

        if logger_map is not None:
            self._logger_map.update(logger_map)

    def snapshot(self) -> dict[str, Any]:
        """Current settings as a defensive copy."""
        return {
            "default_logger": self._default_logger,
            "formatter": self._formatter,
            "log_level": self._log_level,
            "verbose": self._verbose,
            "logger_map": self._logger_map.as_dict(),
        }


def _check_callable(value: Any, key: str) -> None:
    if value is None or not callable(value):
        detail = "None" if value is None else f"got {type(value).__name__}"
        raise validation_error(key, detail)


def _check_verbose(value: Any) -> None:
    if not isinstance(value, bool):
        raise validation_error("INVALID_VERBOSE", f"got {type(value).__name__}")


def _as_threshold(value: Any) -> LogLevel | None:
    """Threshold for `value`, or None when it is not one (bulk path only)."""
    if isinstance(value, str):
        value = LogLevel.__members__.get(value.strip().upper())
    if not is_standard_level(value):
        return None
    return LogLevel(value)
