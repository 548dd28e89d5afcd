"""
Log formatters.

Any callable taking a LogRecord and returning a string works as a
formatter. An empty string means "nothing to say" and suppresses output.
  - plain: "2025-01-01T12:00:00Z [INFO] message {"k":1}"
  - json:  {"timestamp": "...", "level": "INFO", "message": "...", "args": [...]}
  - null:  "" (default; nothing is output until a formatter is installed)

Formatters do not guard against unserializable args: json raises
TypeError/ValueError (e.g. circular references) and that reaches the caller.
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable

from pluglog.records import LogRecord


FormatterFunction = Callable[[LogRecord], str]


class LogFormatter(ABC):
    """Base formatter. Transforms LogRecord → string; instances are callable."""

    @abstractmethod
    def format(self, record: LogRecord) -> str: ...

    def __call__(self, record: LogRecord) -> str:
        return self.format(record)


class PlainFormatter(LogFormatter):
    """
    Single-line text, second precision.
    Example: 2025-06-22T15:30:45Z [ERROR] login failed {"userId":123}
    """

    def format(self, record: LogRecord) -> str:
        ts = _utc(record.timestamp).strftime("%Y-%m-%dT%H:%M:%SZ")
        label = record.level_label
        parts = [ts]
        if label:
            parts.append(f"[{label}]")
        parts.append(record.message)
        if record.args:
            parts.append(" ".join(_compact_json(arg) for arg in record.args))
        return " ".join(parts).strip()


class JsonFormatter(LogFormatter):
    """One JSON object per line. `args` is present only when non-empty."""

    def format(self, record: LogRecord) -> str:
        obj: dict[str, Any] = {
            "timestamp": _iso_millis(record.timestamp),
            "level": record.level_label,
            "message": record.message,
        }
        if record.args:
            obj["args"] = list(record.args)
        return json.dumps(obj, ensure_ascii=False)


class NullFormatter(LogFormatter):
    def format(self, record: LogRecord) -> str:
        return ""


plain_formatter = PlainFormatter()
json_formatter = JsonFormatter()
null_formatter = NullFormatter()

FORMATTERS: dict[str, LogFormatter] = {
    "plain": plain_formatter,
    "json": json_formatter,
    "null": null_formatter,
}


def _utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def _iso_millis(ts: datetime) -> str:
    """2025-01-01T12:00:00.000Z"""
    ts = _utc(ts)
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def _compact_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
