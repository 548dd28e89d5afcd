"""
Log records and the message shaper.

A LogRecord is built once per emitted call, handed to the formatter,
and dropped. Variadic call arguments are split into a human-readable
message (primitives) and residual structured args (everything else).
"""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from pluglog.levels import LogLevel, level_label


_ISO_TIMESTAMP = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?([+-]\d{2}:\d{2}|Z)$"
)
_PLAIN_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


@dataclass(frozen=True)
class LogRecord:
    """
    Immutable log record.

    `args` holds the non-primitive call arguments in call order;
    they are excluded from `message`.
    """
    level: LogLevel
    timestamp: datetime
    message: str
    args: tuple[Any, ...] = ()

    @property
    def level_label(self) -> str:
        return level_label(self.level)

    @classmethod
    def create(cls, level: LogLevel, *args: Any) -> "LogRecord":
        """Factory method: same as shape()."""
        return shape(level, *args)


def shape(level: LogLevel, *args: Any) -> LogRecord:
    """
    Turn a level and variadic call arguments into a LogRecord.

    A leading date/time string is consumed as the record timestamp;
    otherwise the current UTC time is used.
    """
    timestamp, remaining = _split_timestamp(args)

    parts: list[str] = []
    structured: list[Any] = []
    for arg in remaining:
        if _is_message_argument(arg):
            parts.append(_to_text(arg))
        else:
            structured.append(arg)

    return LogRecord(
        level=level,
        timestamp=timestamp,
        message=" ".join(parts).strip(),
        args=tuple(structured),
    )


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse an explicit timestamp argument.

    Accepts ISO-8601 with zone ('...Z', '...+09:00') or 'YYYY-MM-DD HH:MM:SS'
    (read as UTC). Returns None for anything else, including impossible dates.
    """
    if not isinstance(value, str):
        return None
    if not (_ISO_TIMESTAMP.match(value) or _PLAIN_TIMESTAMP.match(value)):
        return None

    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _split_timestamp(args: tuple[Any, ...]) -> tuple[datetime, tuple[Any, ...]]:
    if args:
        explicit = parse_timestamp(args[0])
        if explicit is not None:
            return explicit, args[1:]
    return datetime.now(timezone.utc), args


def _is_message_argument(arg: Any) -> bool:
    return isinstance(arg, (str, numbers.Number))


def _to_text(arg: Any) -> str:
    try:
        return str(arg)
    except Exception:
        # str() overridden to raise on a primitive subclass
        return object.__repr__(arg)
