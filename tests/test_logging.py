from __future__ import annotations

import pytest

from scamp.utils import logging as logging_module


@pytest.fixture
def installed(monkeypatch: pytest.MonkeyPatch):
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(
        logging_module.coloredlogs, "install", lambda **kwargs: calls.append(kwargs)
    )
    monkeypatch.delenv("LOGLEVEL", raising=False)
    return calls


def test_defaults_to_warning(installed):
    assert logging_module.setup_logging() == "WARNING"
    assert installed[0]["fmt"] == logging_module.LogFormat.SIMPLE


def test_env_var_sets_level(installed, monkeypatch):
    monkeypatch.setenv("LOGLEVEL", "info")
    assert logging_module.setup_logging() == "INFO"


def test_verbose_uses_detailed_format(installed):
    assert logging_module.setup_logging("ERROR", verbose=True) == "DEBUG"
    assert installed[0]["level"] == "DEBUG"
    assert installed[0]["fmt"] == logging_module.LogFormat.DETAILED
