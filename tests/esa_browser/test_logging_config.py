import json
import logging

import pytest

from esa_browser.logging_config import LOG_LEVEL_ENV, build_formatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg, **extra):
    record = logging.LogRecord("esa_browser.test", logging.WARNING, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renames_fields():
    formatter = build_formatter("json")

    payload = json.loads(formatter.format(_record("Failed to load listings", resource="listings")))

    assert payload["message"] == "Failed to load listings"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "esa_browser.test"
    assert payload["resource"] == "listings"
    assert payload["app"] == "esa-browser"


def test_plain_formatter():
    line = build_formatter("plain").format(_record("hello"))

    assert "WARNING" in line
    assert line.endswith("esa_browser.test: hello")


def test_configure_logging_replaces_handlers(restore_root_logger):
    configure_logging(level=logging.DEBUG, force_format="plain")
    configure_logging(level=logging.DEBUG, force_format="plain")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
    assert logging.getLogger("werkzeug").level == logging.WARNING


def test_level_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")

    configure_logging(force_format="json")

    assert logging.getLogger().level == logging.ERROR
