"""Custom exception hierarchy for console-tools.

Every failure a command handler wants to report to the user must be a
subclass of :class:`ConsoleToolsError` so that the router and the CLI
error boundaries can render a clean message without leaking stack
traces.

Hierarchy
---------
ConsoleToolsError
├── UsageError
│   ├── InvalidNumberError
│   ├── InvalidOperatorError
│   ├── MissingFileError
│   └── DomainError
├── DuplicateCommandError
└── MissingDependencyError
"""

from __future__ import annotations


class ConsoleToolsError(Exception):
    """Base exception for all console-tools errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- User input ------------------------------------------------------------

class UsageError(ConsoleToolsError):
    """Raised for bad arguments: arity, literals, operators, paths.

    Maps to exit code 2.  The message is shown without stack detail.
    """


class InvalidNumberError(UsageError):
    """Raised when no parse strategy accepts a numeric literal."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        attempts: tuple[Exception, ...] = (),
    ) -> None:
        super().__init__(message, hint=hint)
        self.attempts: tuple[Exception, ...] = attempts
        """Failure of each strategy, in the order they were tried."""


class InvalidOperatorError(UsageError):
    """Raised when an arithmetic operator symbol is not supported."""


class MissingFileError(UsageError):
    """Raised when a path does not name an existing regular file."""


class DomainError(UsageError):
    """Raised when an operation is undefined for its inputs (e.g. x / 0)."""


# --- Programming errors ----------------------------------------------------

class DuplicateCommandError(ConsoleToolsError):
    """Raised when a command name is registered twice on one router."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(ConsoleToolsError):
    """Raised when an optional runtime dependency is not available."""
