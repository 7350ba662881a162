"""
Component logger factory and JSON formatter.
"""

import json
import logging
import sys

import pytest

from util_logger import ComponentConfig, ComponentType, JSONFormatter, LoggerFactory, LogLevel


class TestLogLevel:
    @pytest.mark.parametrize("raw", ["debug", "DEBUG", "Debug"])
    def test_from_string_case_insensitive(self, raw):
        assert LogLevel.from_string(raw) is LogLevel.DEBUG

    def test_to_python_level(self):
        assert LogLevel.WARNING.to_python_level() == logging.WARNING


class TestLoggerFactory:
    def test_logger_name_includes_component(self):
        adapter = LoggerFactory.create_logger(ComponentType.VALIDATOR, "NameCheck")
        assert adapter.logger.name == "validator.NameCheck"

    def test_single_json_handler(self):
        LoggerFactory.create_logger(ComponentType.SERVICE, "HandlerCheck")
        adapter = LoggerFactory.create_logger(ComponentType.SERVICE, "HandlerCheck")
        json_handlers = [h for h in adapter.logger.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(json_handlers) == 1

    def test_custom_config_level(self):
        config = ComponentConfig(component_type=ComponentType.FACTORY, log_level=LogLevel.ERROR)
        adapter = LoggerFactory.create_logger(ComponentType.FACTORY, "LevelCheck", config)
        assert adapter.logger.level == logging.ERROR

    def test_adapter_merges_custom_dimensions(self):
        adapter = LoggerFactory.create_logger(ComponentType.REPOSITORY, "DimCheck")
        _, kwargs = adapter.process("hello", {"extra": {"custom_dimensions": {"table": "user"}}})
        assert kwargs["extra"]["custom_dimensions"] == {
            "component_type": "repository",
            "component_name": "DimCheck",
            "table": "user",
        }


class TestJSONFormatter:
    def test_formats_record_as_json(self):
        record = logging.LogRecord("validator.X", logging.INFO, __file__, 10, "checked %s", ("user",), None)
        record.custom_dimensions = {"component_name": "X"}

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "checked user"
        assert data["level"] == "INFO"
        assert data["customDimensions"] == {"component_name": "X"}
        assert "exception" not in data

    def test_includes_exception(self):
        try:
            raise ValueError("bad version")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        data = json.loads(JSONFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad version"
