"""
Per-level logger function map.

One entry per standard level (OFF..TRACE). An entry holding NULL_LOGGER
means "not explicitly configured" and resolves to the default logger.
A user function that happens to do nothing is an explicit override.

Resolution:
1. level must be standard, otherwise LoggerValidationError (fail closed)
2. explicit entry → that entry
3. NULL_LOGGER → default_logger
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping

from pluglog.errors import validation_error
from pluglog.levels import STANDARD_LEVELS, LogLevel, is_standard_level, label_to_level


LoggerFunction = Callable[..., None]


def null_logger(*args: Any) -> None:
    """No-op sentinel. Installed in every map slot until configured."""


NULL_LOGGER: LoggerFunction = null_logger


class LoggerFunctionMap:
    """Fixed-size map: standard LogLevel → LoggerFunction."""

    def __init__(self) -> None:
        self._entries: dict[LogLevel, LoggerFunction] = {
            level: NULL_LOGGER for level in STANDARD_LEVELS
        }

    # ── Lookup ────────────────────────────────────────────────────

    def resolve(self, level: Any, default_logger: LoggerFunction) -> LoggerFunction:
        """Explicit entry for `level`, or `default_logger` when unset."""
        key = _standard_key(level)
        if key is None:
            raise validation_error("INVALID_LOG_LEVEL", f"{level!r} has no logger map slot", value=level)
        entry = self._entries[key]
        return default_logger if entry is NULL_LOGGER else entry

    def get(self, level: Any) -> LoggerFunction | None:
        """Raw entry (may be NULL_LOGGER). None for an invalid level."""
        key = _standard_key(level)
        return None if key is None else self._entries[key]

    def is_overridden(self, level: Any) -> bool:
        key = _standard_key(level)
        return key is not None and self._entries[key] is not NULL_LOGGER

    def overrides(self) -> dict[LogLevel, LoggerFunction]:
        return {lvl: fn for lvl, fn in self._entries.items() if fn is not NULL_LOGGER}

    def as_dict(self) -> dict[LogLevel, LoggerFunction]:
        return dict(self._entries)

    # ── Mutation ──────────────────────────────────────────────────

    def set_logger(self, level: Any, fn: LoggerFunction) -> bool:
        """
        Install `fn` for `level`. An invalid level is checked first and
        returns False with the map unchanged. None or a non-callable `fn`
        raises LoggerValidationError; use clear() to drop an override.
        """
        key = _standard_key(level)
        if key is None:
            return False
        _check_logger(fn, level=level)
        self._entries[key] = fn
        return True

    def clear(self, level: Any) -> bool:
        """Drop the override for `level` so it follows the default logger."""
        key = _standard_key(level)
        if key is None:
            return False
        self._entries[key] = NULL_LOGGER
        return True

    def update(self, mapping: Mapping[Any, LoggerFunction]) -> list[LogLevel]:
        """
        Merge a partial map. Every value must be callable, even under a key
        that is then skipped; invalid level keys are skipped.
        """
        for fn in mapping.values():
            _check_logger(fn)

        applied = []
        for level, fn in mapping.items():
            if self.set_logger(level, fn):
                applied.append(_standard_key(level))
        return applied

    def reseed(self, previous_default: LoggerFunction) -> None:
        """
        Called when the default logger is replaced. Slots still pointing at
        the previous default go back to the sentinel, so they follow the new
        default; explicit overrides are kept.
        """
        if previous_default is NULL_LOGGER:
            return
        for level, fn in self._entries.items():
            if fn is previous_default:
                self._entries[level] = NULL_LOGGER

    # ── Container protocol ────────────────────────────────────────

    def __contains__(self, level: object) -> bool:
        return _standard_key(level) is not None

    def __iter__(self) -> Iterator[LogLevel]:
        return iter(STANDARD_LEVELS)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        names = ", ".join(lvl.name for lvl in self.overrides())
        return f"LoggerFunctionMap(overrides=[{names}])"


def resolve(
    logger_map: LoggerFunctionMap, level: Any, default_logger: LoggerFunction
) -> LoggerFunction:
    return logger_map.resolve(level, default_logger)


def _check_logger(fn: Any, **context: Any) -> None:
    if fn is None or not callable(fn):
        detail = "None" if fn is None else f"got {type(fn).__name__}"
        raise validation_error("INVALID_LOGGER", detail, **context)


def _standard_key(level: Any) -> LogLevel | None:
    """Standard LogLevel for an int code or name; None otherwise."""
    if isinstance(level, str):
        level = label_to_level(level)
    if not is_standard_level(level):
        return None
    return LogLevel(level)
