"""Shared pytest fixtures and configuration for the console-tools test suite.

Guidelines
----------
* Core tests stay pure: output goes to a list sink, not the console.
* Files live under ``tmp_path`` only.
* Tests must not depend on the host locale; locale-sensitive tests pin
  the decimal point with the ``dot_locale`` / ``comma_locale`` fixtures.
"""

from __future__ import annotations

import locale
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from console_tools.cli.logs import LOGGER_NAME


@pytest.fixture(autouse=True)
def _isolate_process_state() -> Iterator[None]:
    """Undo logger and numeric-locale changes made by ``main()`` calls."""
    numeric_locale = locale.setlocale(locale.LC_NUMERIC)
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
    locale.setlocale(locale.LC_NUMERIC, numeric_locale)


@pytest.fixture
def output() -> list[str]:
    """A list whose ``append`` serves as an output sink."""
    return []


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing *content* to a file under ``tmp_path``."""

    def _make(content: str | bytes = "", name: str = "data.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _make


def _pin_decimal_point(monkeypatch: pytest.MonkeyPatch, decimal_point: str) -> None:
    monkeypatch.setattr(
        "console_tools.core.numbers.current_decimal_point",
        lambda: decimal_point,
    )
    monkeypatch.setattr("console_tools.cli.entry.use_user_locale", lambda: "C")


@pytest.fixture
def dot_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend the active locale uses ``.`` as decimal separator."""
    _pin_decimal_point(monkeypatch, ".")


@pytest.fixture
def comma_locale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend the active locale uses ``,`` as decimal separator."""
    _pin_decimal_point(monkeypatch, ",")
