"""
Output functions (sinks).

A sink is any callable accepting the formatted message (plus optional
extra values) and returning nothing. It may raise; pluglog does not
catch it.

Built-ins:
  - null_logger:        the "not configured" sentinel
  - ConsoleSink:        print to stdout/stderr, optional ANSI color
  - CONSOLE_LOGGER_MAP: FATAL/ERROR/WARN → stderr, INFO/DEBUG/TRACE → stdout
  - MemoryLogger:       ring buffer of formatted messages, for tests
"""

import sys
from collections import deque
from typing import Any, Callable, TextIO

from pluglog.levels import LogLevel, validate_level
from pluglog.routing import NULL_LOGGER, LoggerFunction, null_logger


class ConsoleSink:
    """
    Writes each message as one line. With stream=None the current
    sys.stdout is looked up on every call (so capsys/redirects apply).
    """

    COLORS = {
        LogLevel.FATAL: "\033[1;91m",   # bold bright red
        LogLevel.ERROR: "\033[31m",     # red
        LogLevel.WARN: "\033[33m",      # yellow
        LogLevel.INFO: "\033[37m",      # white/default
        LogLevel.DEBUG: "\033[36m",     # cyan
        LogLevel.TRACE: "\033[90m",     # gray
        LogLevel.VERBOSE: "\033[96m",   # bright cyan
    }
    RESET = "\033[0m"

    def __init__(
        self,
        stream: TextIO | None = None,
        level: LogLevel | None = None,
        color: bool = False,
        use_stderr: bool = False,
    ):
        self._stream = stream
        self.level = level
        self.color = color
        self.use_stderr = use_stderr

    @property
    def stream(self) -> TextIO:
        if self._stream is not None:
            return self._stream
        return sys.stderr if self.use_stderr else sys.stdout

    def __call__(self, message: Any = "", *rest: Any) -> None:
        line = " ".join(str(part) for part in (message, *rest))
        if self.color and self.level in self.COLORS:
            line = f"{self.COLORS[self.level]}{line}{self.RESET}"
        print(line, file=self.stream, flush=True)

    def __repr__(self) -> str:
        target = "stderr" if self.use_stderr else "stdout"
        if self._stream is not None:
            target = type(self._stream).__name__
        return f"ConsoleSink({target})"


console_logger = ConsoleSink()
stderr_logger = ConsoleSink(use_stderr=True)


def console_logger_map(color: bool = False) -> dict[LogLevel, LoggerFunction]:
    """Per-level console routing: severe levels to stderr, the rest to stdout."""
    return {
        LogLevel.OFF: NULL_LOGGER,
        LogLevel.FATAL: ConsoleSink(level=LogLevel.FATAL, color=color, use_stderr=True),
        LogLevel.ERROR: ConsoleSink(level=LogLevel.ERROR, color=color, use_stderr=True),
        LogLevel.WARN: ConsoleSink(level=LogLevel.WARN, color=color, use_stderr=True),
        LogLevel.INFO: ConsoleSink(level=LogLevel.INFO, color=color),
        LogLevel.DEBUG: ConsoleSink(level=LogLevel.DEBUG, color=color),
        LogLevel.TRACE: ConsoleSink(level=LogLevel.TRACE, color=color),
    }


CONSOLE_LOGGER_MAP = console_logger_map()


class MemoryLogger:
    """
    Ring buffer of the last N formatted messages. Does not grow unbounded.

    Used directly as a default logger, or per level through for_level(),
    which tags each captured message with that level.
    """

    def __init__(self, ring_buffer_size: int = 10000):
        self._buffer: deque[tuple[LogLevel | None, str]] = deque(maxlen=ring_buffer_size)

    def __call__(self, message: Any = "", *rest: Any) -> None:
        self._append(None, message, rest)

    def for_level(self, level: LogLevel | int | str) -> LoggerFunction:
        lvl = validate_level(level)

        def capture(message: Any = "", *rest: Any) -> None:
            self._append(lvl, message, rest)

        capture.__qualname__ = f"MemoryLogger.for_level({lvl.name})"
        return capture

    def level_map(self) -> dict[LogLevel, LoggerFunction]:
        """A logger_map that captures every standard level except OFF."""
        return {
            lvl: self.for_level(lvl)
            for lvl in (LogLevel.FATAL, LogLevel.ERROR, LogLevel.WARN,
                        LogLevel.INFO, LogLevel.DEBUG, LogLevel.TRACE)
        }

    def _append(self, level: LogLevel | None, message: Any, rest: tuple[Any, ...]) -> None:
        text = " ".join(str(p) for p in (message, *rest))
        self._buffer.append((level, text))

    def messages(self, level: LogLevel | int | str | None = None) -> list[str]:
        """Captured messages, oldest first, optionally for one level."""
        if level is None:
            return [msg for _, msg in self._buffer]
        lvl = validate_level(level)
        return [msg for entry_level, msg in self._buffer if entry_level == lvl]

    def get_recent(self, n: int = 100) -> list[str]:
        return self.messages()[-n:]

    def get_last(self, level: LogLevel | int | str | None = None) -> str | None:
        captured = self.messages(level)
        return captured[-1] if captured else None

    def clear(self, level: LogLevel | int | str | None = None) -> None:
        if level is None:
            self._buffer.clear()
            return
        lvl = validate_level(level)
        kept = [entry for entry in self._buffer if entry[0] != lvl]
        self._buffer.clear()
        self._buffer.extend(kept)

    @property
    def count(self) -> int:
        return len(self._buffer)


LOGGERS: dict[str, LoggerFunction] = {
    "console": console_logger,
    "stdout": console_logger,
    "stderr": stderr_logger,
    "null": null_logger,
}


def sink_name(fn: Callable[..., Any]) -> str:
    """Display name for a sink in status output."""
    if fn is NULL_LOGGER:
        return "null"
    for name, builtin in LOGGERS.items():
        if fn is builtin:
            return name
    return getattr(fn, "__qualname__", None) or repr(fn)
