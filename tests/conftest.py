"""Shared test fixtures."""

from __future__ import annotations

import pytest

from money_input.formatter import MoneyInputFormatter


@pytest.fixture
def formatter() -> MoneyInputFormatter:
    """Formatter with the default European style: 1.234,56."""
    return MoneyInputFormatter()


@pytest.fixture
def us_formatter() -> MoneyInputFormatter:
    """Formatter with US-style separators: 1,234.56."""
    return MoneyInputFormatter(decimal_separator=".", thousand_separator=",")


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point the config module at a config.toml inside tmp_path."""
    path = tmp_path / "config.toml"
    monkeypatch.setattr("money_input.config._CONFIG_PATH", path)
    return path
