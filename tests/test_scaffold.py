"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
* Global options are split off before the command name only.
"""

from __future__ import annotations

import pytest

from console_tools import __version__
from console_tools.cli.entry import split_global_options
from console_tools.exceptions import (
    ConsoleToolsError,
    DomainError,
    DuplicateCommandError,
    InvalidNumberError,
    InvalidOperatorError,
    MissingDependencyError,
    MissingFileError,
    UsageError,
)
from console_tools.utils import exit_codes


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            InvalidNumberError,
            InvalidOperatorError,
            MissingFileError,
            DomainError,
            DuplicateCommandError,
            MissingDependencyError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ConsoleToolsError]
    ) -> None:
        assert issubclass(exc_class, ConsoleToolsError)

    @pytest.mark.parametrize(
        "exc_class",
        [InvalidNumberError, InvalidOperatorError, MissingFileError, DomainError],
    )
    def test_user_facing_errors_are_usage_errors(
        self, exc_class: type[ConsoleToolsError]
    ) -> None:
        assert issubclass(exc_class, UsageError)

    def test_duplicate_command_is_not_a_usage_error(self) -> None:
        assert not issubclass(DuplicateCommandError, UsageError)

    def test_hint_is_stored(self) -> None:
        err = ConsoleToolsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert ConsoleToolsError("boom").hint is None

    def test_invalid_number_keeps_attempts(self) -> None:
        first, second = ValueError("a"), ValueError("b")
        err = InvalidNumberError("bad", attempts=(first, second))
        assert err.attempts == (first, second)


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_unexpected_error_is_one(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 1

    def test_usage_error_is_two(self) -> None:
        assert exit_codes.USAGE_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# Global option splitting
# ---------------------------------------------------------------------------

class TestSplitGlobalOptions:
    def test_no_options(self) -> None:
        assert split_global_options(["add", "2", "3"]) == ([], ["add", "2", "3"])

    def test_leading_options_are_split(self) -> None:
        options, tokens = split_global_options(["--verbose", "head", "f.txt", "2"])
        assert options == ["--verbose"]
        assert tokens == ["head", "f.txt", "2"]

    def test_options_after_command_stay_in_tail(self) -> None:
        options, tokens = split_global_options(["greet", "--verbose"])
        assert options == []
        assert tokens == ["greet", "--verbose"]

    def test_help_flag_is_not_a_global_option(self) -> None:
        assert split_global_options(["--help"]) == ([], ["--help"])

    def test_empty(self) -> None:
        assert split_global_options([]) == ([], [])
