"""
Tests for LoggerConfig.

Covers:
- Secure defaults
- Direct setters (raise, keep previous value)
- Logger function lookup
- apply_config validation and apply order
"""

import pytest

from pluglog.config import LoggerConfig
from pluglog.errors import LoggerValidationError
from pluglog.formatters import json_formatter, null_formatter, plain_formatter
from pluglog.levels import LogLevel
from pluglog.routing import NULL_LOGGER


def sink_a(*args):
    pass


def sink_b(*args):
    pass


# ═══════════════════════════════════════════════════════════════════
#  Defaults
# ═══════════════════════════════════════════════════════════════════

class TestDefaults:
    def test_secure_defaults(self):
        cfg = LoggerConfig()
        assert cfg.log_level == LogLevel.OFF
        assert cfg.verbose is False
        assert cfg.default_logger is NULL_LOGGER
        assert cfg.formatter is null_formatter
        assert cfg.logger_map.overrides() == {}

    def test_nothing_passes_by_default(self):
        cfg = LoggerConfig()
        assert not cfg.should_output(LogLevel.FATAL)
        assert not cfg.should_output_verbose()
        assert cfg.should_output(LogLevel.LOG)

    def test_instances_do_not_share_map(self):
        a, b = LoggerConfig(), LoggerConfig()
        a.set_logger(LogLevel.INFO, sink_a)
        assert not b.logger_map.is_overridden(LogLevel.INFO)


# ═══════════════════════════════════════════════════════════════════
#  Direct setters
# ═══════════════════════════════════════════════════════════════════

class TestSetters:
    def test_log_level(self):
        cfg = LoggerConfig()
        cfg.log_level = LogLevel.DEBUG
        assert cfg.log_level == LogLevel.DEBUG

    def test_log_level_by_name(self):
        cfg = LoggerConfig()
        cfg.log_level = "warn"
        assert cfg.log_level == LogLevel.WARN

    @pytest.mark.parametrize("bad", [LogLevel.VERBOSE, LogLevel.LOG, LogLevel.DEFAULT, 7, -1, None, "LOUD", True])
    def test_log_level_invalid_keeps_previous(self, bad):
        cfg = LoggerConfig()
        cfg.log_level = LogLevel.INFO
        with pytest.raises(LoggerValidationError):
            cfg.log_level = bad
        assert cfg.log_level == LogLevel.INFO

    def test_verbose_requires_bool(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError, match="bool"):
            cfg.verbose = 1
        cfg.verbose = True
        assert cfg.should_output_verbose()

    def test_formatter_requires_callable(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError, match="Formatter"):
            cfg.formatter = None
        with pytest.raises(LoggerValidationError):
            cfg.formatter = "plain"
        assert cfg.formatter is null_formatter

    def test_default_logger_requires_callable(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError, match="Logger function"):
            cfg.default_logger = None
        assert cfg.default_logger is NULL_LOGGER

    def test_default_logger_change_reseeds_map(self):
        cfg = LoggerConfig()
        cfg.default_logger = sink_a
        cfg.set_logger(LogLevel.INFO, sink_a)
        cfg.set_logger(LogLevel.ERROR, sink_b)
        cfg.default_logger = sink_b
        # INFO was pinned to the old default, so it follows the new one
        assert cfg.get_logger_function(LogLevel.INFO) is sink_b
        assert cfg.logger_map.get(LogLevel.INFO) is NULL_LOGGER
        assert cfg.logger_map.get(LogLevel.ERROR) is sink_b


# ═══════════════════════════════════════════════════════════════════
#  Logger function lookup
# ═══════════════════════════════════════════════════════════════════

class TestGetLoggerFunction:
    def test_unset_level_uses_default(self):
        cfg = LoggerConfig()
        cfg.default_logger = sink_a
        assert cfg.get_logger_function(LogLevel.WARN) is sink_a

    def test_override(self):
        cfg = LoggerConfig()
        cfg.default_logger = sink_a
        cfg.set_logger(LogLevel.WARN, sink_b)
        assert cfg.get_logger_function(LogLevel.WARN) is sink_b

    def test_verbose_and_log_use_default(self):
        cfg = LoggerConfig()
        cfg.default_logger = sink_a
        assert cfg.get_logger_function(LogLevel.VERBOSE) is sink_a
        assert cfg.get_logger_function(LogLevel.LOG) is sink_a

    def test_default_pseudo_level_fails_closed(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError):
            cfg.get_logger_function(LogLevel.DEFAULT)


# ═══════════════════════════════════════════════════════════════════
#  apply_config
# ═══════════════════════════════════════════════════════════════════

class TestApplyConfig:
    def test_partial_update_leaves_rest(self):
        cfg = LoggerConfig()
        cfg.apply_config({"log_level": LogLevel.INFO})
        cfg.apply_config({"verbose": True})
        assert cfg.log_level == LogLevel.INFO
        assert cfg.verbose is True
        assert cfg.formatter is null_formatter

    def test_full_options(self):
        cfg = LoggerConfig()
        cfg.apply_config({
            "default_logger": sink_a,
            "formatter": plain_formatter,
            "log_level": "debug",
            "verbose": False,
            "logger_map": {LogLevel.ERROR: sink_b},
        })
        assert cfg.default_logger is sink_a
        assert cfg.formatter is plain_formatter
        assert cfg.log_level == LogLevel.DEBUG
        assert cfg.get_logger_function(LogLevel.ERROR) is sink_b
        assert cfg.get_logger_function(LogLevel.INFO) is sink_a

    def test_not_a_mapping(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError, match="mapping"):
            cfg.apply_config(["log_level", 4])

    def test_unknown_key(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError, match="level"):
            cfg.apply_config({"level": LogLevel.INFO})

    def test_validation_happens_before_any_change(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError):
            cfg.apply_config({"log_level": LogLevel.INFO, "default_logger": sink_a, "formatter": 5})
        assert cfg.log_level == LogLevel.OFF
        assert cfg.default_logger is NULL_LOGGER

    def test_none_formatter_rejected(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError):
            cfg.apply_config({"formatter": None})

    def test_non_bool_verbose_rejected(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError):
            cfg.apply_config({"verbose": "yes"})

    def test_invalid_log_level_silently_ignored(self):
        cfg = LoggerConfig()
        cfg.apply_config({"log_level": LogLevel.WARN})
        cfg.apply_config({"log_level": LogLevel.VERBOSE, "verbose": True})
        assert cfg.log_level == LogLevel.WARN
        assert cfg.verbose is True

    def test_logger_map_must_be_mapping(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError, match="logger_map"):
            cfg.apply_config({"logger_map": [sink_a]})

    def test_logger_map_non_callable_rejected(self):
        cfg = LoggerConfig()
        with pytest.raises(LoggerValidationError):
            cfg.apply_config({"logger_map": {LogLevel.INFO: "stdout"}})
        assert cfg.logger_map.overrides() == {}

    def test_logger_map_merges(self):
        cfg = LoggerConfig()
        cfg.apply_config({"logger_map": {LogLevel.ERROR: sink_a}})
        cfg.apply_config({"logger_map": {LogLevel.INFO: sink_b}})
        assert set(cfg.logger_map.overrides()) == {LogLevel.ERROR, LogLevel.INFO}

    def test_logger_map_none_rejected(self):
        cfg = LoggerConfig()
        cfg.apply_config({"logger_map": {LogLevel.ERROR: sink_a}})
        with pytest.raises(LoggerValidationError, match="None"):
            cfg.apply_config({"log_level": LogLevel.INFO, "logger_map": {LogLevel.ERROR: None}})
        assert cfg.logger_map.overrides() == {LogLevel.ERROR: sink_a}
        assert cfg.log_level == LogLevel.OFF

    def test_clear_logger(self):
        cfg = LoggerConfig()
        cfg.apply_config({"logger_map": {LogLevel.ERROR: sink_a}})
        assert cfg.clear_logger(LogLevel.ERROR)
        assert cfg.logger_map.overrides() == {}

    def test_logger_map_invalid_keys_skipped(self):
        cfg = LoggerConfig()
        cfg.apply_config({"logger_map": {LogLevel.VERBOSE: sink_a, 42: sink_a, "WARN": sink_b}})
        assert cfg.logger_map.overrides() == {LogLevel.WARN: sink_b}

    def test_default_logger_applied_before_map(self):
        cfg = LoggerConfig()
        cfg.apply_config({"default_logger": sink_a, "logger_map": {LogLevel.INFO: sink_a}})
        cfg.apply_config({"default_logger": sink_b, "logger_map": {LogLevel.DEBUG: sink_a}})
        # INFO held the old default and was reseeded; DEBUG was set afterwards
        assert cfg.get_logger_function(LogLevel.INFO) is sink_b
        assert cfg.get_logger_function(LogLevel.DEBUG) is sink_a

    def test_snapshot_is_copy(self):
        cfg = LoggerConfig()
        cfg.apply_config({"formatter": json_formatter, "logger_map": {LogLevel.INFO: sink_a}})
        snap = cfg.snapshot()
        assert snap["formatter"] is json_formatter
        assert snap["logger_map"][LogLevel.INFO] is sink_a
        snap["logger_map"][LogLevel.INFO] = sink_b
        assert cfg.logger_map.get(LogLevel.INFO) is sink_a
