import logging

import pytest

from tasks_api.config import get_settings
from tasks_api.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("TASKS_API_HOST", "TASKS_API_PORT", "TASKS_API_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("TASKS_API_PORT", "9090")
    monkeypatch.setenv("TASKS_API_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.port == 9090
    assert settings.log_level == "DEBUG"


def test_invalid_port_is_rejected(monkeypatch):
    monkeypatch.setenv("TASKS_API_PORT", "eighty")
    with pytest.raises(ValueError):
        get_settings()


def test_setup_logging_installs_one_handler():
    root = logging.getLogger()
    before = len(root.handlers)
    setup_logging("DEBUG")
    after_first = len(root.handlers)
    setup_logging("WARNING")
    assert len(root.handlers) == after_first
    assert after_first - before <= 1
    assert root.level == logging.WARNING
