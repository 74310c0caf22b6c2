import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from slashargs.utils import get_program_invocation, setup_logging


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli(monkeypatch):
    monkeypatch.delenv("SLASHARGS_LOG_MODE", raising=False)
    setup_logging(console_log_level=logging.INFO)
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO


def test_setup_logging_json_from_environment(monkeypatch):
    monkeypatch.setenv("SLASHARGS_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.WARNING


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging("xml")


@pytest.mark.parametrize(
    "argv0, expected",
    [
        ("/usr/local/bin/slashargs", "slashargs"),
        ("/src/slashargs/__main__.py", "python -m slashargs"),
        ("", "python -m slashargs"),
    ],
)
def test_get_program_invocation(monkeypatch, argv0, expected):
    monkeypatch.setattr("sys.argv", [argv0])
    assert get_program_invocation() == expected
