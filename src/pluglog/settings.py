"""
Declarative logger settings (YAML / dict), validated with Pydantic.

Built-in formatters and sinks are referenced by name, so a settings
file can configure the logger without importing anything:

    logger:
      log_level: INFO
      verbose: false
      formatter: plain
      default_logger: console
      logger_map:
        ERROR: stderr
        DEBUG: null

Usage:
    settings = LoggerSettings.from_yaml("logging.yaml")
    log = create_logger(settings.to_options())
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, field_validator

from pluglog.adapters import LOGGERS
from pluglog.errors import LoggerValidationError
from pluglog.formatters import FORMATTERS
from pluglog.levels import LogLevel, validate_threshold


class LoggerSettings(BaseModel):
    log_level: int | str = "OFF"
    verbose: bool = False
    formatter: Optional[str] = None
    default_logger: Optional[str] = None
    logger_map: Optional[dict[str, str]] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any) -> str:
        try:
            return validate_threshold(_yaml_level(value)).name
        except LoggerValidationError as exc:
            raise ValueError(str(exc)) from None

    @field_validator("formatter")
    @classmethod
    def validate_formatter(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        name = value.strip().lower()
        if name not in FORMATTERS:
            raise ValueError(
                f"Unknown formatter '{value}'. Valid formatters: {', '.join(FORMATTERS)}"
            )
        return name

    @field_validator("default_logger")
    @classmethod
    def validate_default_logger(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return _sink_key(value)

    @field_validator("logger_map", mode="before")
    @classmethod
    def validate_logger_map(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ValueError("logger_map must be a mapping of level name to logger name")

        resolved: dict[str, str] = {}
        for level, sink in value.items():
            try:
                lvl = validate_threshold(_yaml_level(level))
            except LoggerValidationError as exc:
                raise ValueError(f"logger_map key: {exc}") from None
            # YAML reads a bare `null` as None
            resolved[lvl.name] = _sink_key("null" if sink is None else str(sink))
        return resolved

    @property
    def level(self) -> LogLevel:
        return LogLevel.from_name(str(self.log_level))

    def to_options(self) -> dict[str, Any]:
        """Options mapping accepted by create_logger() / set_logger_config()."""
        options: dict[str, Any] = {
            "log_level": self.level,
            "verbose": self.verbose,
        }
        if self.formatter is not None:
            options["formatter"] = FORMATTERS[self.formatter]
        if self.default_logger is not None:
            options["default_logger"] = LOGGERS[self.default_logger]
        if self.logger_map is not None:
            options["logger_map"] = {
                LogLevel.from_name(level): LOGGERS[sink]
                for level, sink in self.logger_map.items()
            }
        return options

    @classmethod
    def from_yaml(cls, path: str | Path) -> "LoggerSettings":
        """Load and validate from a YAML file."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.from_yaml_string(raw)

    @classmethod
    def from_yaml_string(cls, yaml_string: str) -> "LoggerSettings":
        data = yaml.safe_load(yaml_string) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "LoggerSettings":
        """Load and validate from a dict. A top-level `logger:` section is unwrapped."""
        if isinstance(data, dict) and isinstance(data.get("logger"), dict):
            data = data["logger"]
        return cls.model_validate(data)

    def to_dict(self, exclude_none: bool = True) -> dict:
        return self.model_dump(exclude_none=exclude_none)


def _yaml_level(value: Any) -> Any:
    # YAML 1.1 reads a bare OFF as boolean false
    if value is False:
        return LogLevel.OFF
    return value


def _sink_key(value: str) -> str:
    name = value.strip().lower()
    if name not in LOGGERS:
        raise ValueError(f"Unknown logger '{value}'. Valid loggers: {', '.join(LOGGERS)}")
    return name
