"""Tests for settings, logging and the container."""
import json
import logging

import pytest
from dependency_injector import providers
from pydantic import ValidationError

from chat_completion import ResponseAssembler, UsageDecoder
from core.logger import JsonFormatter, LoggerService, StructuredFormatter, TextFormatter
from core.settings import Settings
from di import Container


def _record(**extra):
    record = logging.LogRecord(
        name="chat_completion.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Failed to process choice: %s",
        args=("x",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_settings_defaults():
    """Test default settings values."""
    settings = Settings(_env_file=None)

    assert settings.LOG_FORMAT == "json"
    assert settings.DIAGNOSTIC_PREVIEW_LIMIT == 2000
    assert settings.LOG_EXTRA_FIELDS == []


def test_settings_from_environment(monkeypatch):
    """Test settings are read from the environment."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    monkeypatch.setenv("DIAGNOSTIC_PREVIEW_LIMIT", "0")

    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FORMAT == "text"
    assert settings.DIAGNOSTIC_PREVIEW_LIMIT == 0


def test_settings_extra_fields_from_string():
    """Test comma-separated extra fields are split."""
    settings = Settings(_env_file=None, LOG_EXTRA_FIELDS="request_id, model")

    assert settings.LOG_EXTRA_FIELDS == ["request_id", "model"]


@pytest.mark.parametrize(
    "overrides",
    [{"LOG_FORMAT": "xml"}, {"DIAGNOSTIC_PREVIEW_LIMIT": -1}],
)
def test_settings_rejects_invalid_values(overrides):
    """Test invalid settings are rejected."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_json_formatter_includes_extra(settings):
    """Test JSON output carries extra fields and masks unserializable ones."""
    output = JsonFormatter(settings).format(_record(choice_position=2, raw=object()))
    data = json.loads(output)

    assert data["level"] == "WARNING"
    assert data["message"] == "Failed to process choice: x"
    assert data["choice_position"] == 2
    assert data["raw"] == "<non-serializable: object>"


def test_text_formatter(settings):
    """Test text output is a readable single line with extras."""
    output = TextFormatter(settings).format(_record(error="boom"))

    assert "WARNING - chat_completion.test - Failed to process choice: x" in output
    assert "extra={'error': 'boom'}" in output


def test_structured_formatter(settings):
    """Test key=value output."""
    output = StructuredFormatter(settings).format(_record(error="boom"))

    assert "level=WARNING" in output
    assert "error=boom" in output


def test_logger_service_attaches_single_handler(settings):
    """Test repeated lookups do not stack handlers."""
    service = LoggerService(settings_instance=settings)

    logger = service.get_logger("chat_completion.test_handlers")
    service.get_logger("chat_completion.test_handlers")

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, TextFormatter)


def test_logger_service_format_override(settings):
    """Test a per-logger format override."""
    service = LoggerService(settings_instance=settings)

    logger = service.get_logger("chat_completion.test_override", format="json")

    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_logger_service_sets_root_level():
    """Test the root level follows LOG_LEVEL."""
    root = logging.getLogger()
    previous = root.level
    try:
        LoggerService(settings_instance=Settings(_env_file=None, LOG_LEVEL="error"))
        assert root.level == logging.ERROR
    finally:
        root.setLevel(previous)


def test_container_wiring(settings):
    """Test the container builds a fully wired assembler."""
    container = Container()
    container.settings.override(providers.Object(settings))

    assembler = container.response_assembler()

    assert isinstance(assembler, ResponseAssembler)
    assert isinstance(assembler.usage_decoder, UsageDecoder)
    assert assembler.settings is settings
    assert container.response_assembler() is assembler
    assert container.usage_decoder() is assembler.usage_decoder


def test_settings_module_import_ignores_environment(monkeypatch):
    """Test importing settings does not validate the environment."""
    import importlib

    import core.settings

    monkeypatch.setenv("LOG_FORMAT", "xml")
    monkeypatch.setenv("DIAGNOSTIC_PREVIEW_LIMIT", "-5")

    module = importlib.reload(core.settings)

    assert not hasattr(module, "settings")
    assert "DEBUG" not in module.Settings.model_fields
