"""
Log levels and the output policy.

Standard levels form a contiguous range, most severe first:
  OFF(0) FATAL(1) ERROR(2) WARN(3) INFO(4) DEBUG(5) TRACE(6)

Pseudo-levels tag a call site but are never a valid threshold:
  VERBOSE(-11)  gated only by the verbose flag
  LOG(-12)      force output, bypasses filtering
  DEFAULT(-99)  sentinel, never output
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pluglog.errors import validation_error


class LogLevel(IntEnum):
    """All level codes. Ordering is only meaningful between standard members."""
    OFF = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6

    VERBOSE = -11
    LOG = -12
    DEFAULT = -99

    @property
    def is_standard(self) -> bool:
        return LogLevel.OFF <= self.value <= LogLevel.TRACE

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve level from string name, case-insensitive."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise validation_error(
                "INVALID_LOG_LEVEL",
                f"unknown name {name!r}; valid names: {', '.join(m.name for m in cls)}",
                value=name,
            ) from None

    @classmethod
    def from_value(cls, value: int | str) -> "LogLevel":
        """Resolve level from int code or string name."""
        if isinstance(value, str):
            return cls.from_name(value)
        return validate_level(value)


STANDARD_LEVELS: tuple[LogLevel, ...] = tuple(m for m in LogLevel if m.is_standard)
PSEUDO_LEVELS: tuple[LogLevel, ...] = tuple(m for m in LogLevel if not m.is_standard)

_CODES: frozenset[int] = frozenset(m.value for m in LogLevel)


# ── Labels ────────────────────────────────────────────────────────────

def level_label(level: Any) -> str:
    """Upper-case label for a level. LOG and unknown values have no label."""
    if not is_valid_level(level) or level == LogLevel.LOG:
        return ""
    return LogLevel(level).name


def label_to_level(label: Any) -> LogLevel | None:
    if not isinstance(label, str) or not label.strip():
        return None
    return LogLevel.__members__.get(label.strip().upper())


# ── Validation ────────────────────────────────────────────────────────

def is_valid_level(value: Any) -> bool:
    """True for any LogLevel code, standard or pseudo. bool is never a level."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return int(value) in _CODES


def is_standard_level(value: Any) -> bool:
    return is_valid_level(value) and LogLevel.OFF <= value <= LogLevel.TRACE


def validate_level(value: Any) -> LogLevel:
    """Return the LogLevel for `value` or raise LoggerValidationError naming it."""
    if isinstance(value, str):
        return LogLevel.from_name(value)
    if is_valid_level(value):
        return LogLevel(value)

    if value is None:
        detail = "None"
    elif isinstance(value, bool) or not isinstance(value, int):
        detail = f"{value!r} - expected int or level name, got {type(value).__name__}"
    else:
        detail = f"{value} - out of valid range"
    raise validation_error("INVALID_LOG_LEVEL", detail, value=value)


def validate_threshold(value: Any) -> LogLevel:
    """Like validate_level, but pseudo-levels are rejected."""
    level = validate_level(value)
    if not level.is_standard:
        raise validation_error("INVALID_THRESHOLD", level.name, value=value)
    return level


# ── Policy ────────────────────────────────────────────────────────────

def should_output(configured_level: Any, verbose: bool, message_level: Any) -> bool:
    """
    Decide whether a message at `message_level` is output.

    1. LOG always passes.
    2. VERBOSE passes iff the verbose flag is set, whatever the threshold.
    3. Anything that is not a standard level never passes.
    4. Threshold OFF blocks every standard level.
    5. Otherwise pass iff message_level <= configured_level.
    """
    if is_valid_level(message_level):
        if message_level == LogLevel.LOG:
            return True
        if message_level == LogLevel.VERBOSE:
            return bool(verbose)

    if not is_standard_level(message_level):
        return False

    if not is_standard_level(configured_level) or configured_level == LogLevel.OFF:
        return False

    return message_level <= configured_level
