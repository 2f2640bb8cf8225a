"""Exit-code constants shared by the router and the CLI boundaries.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed without error."""

UNEXPECTED_ERROR: int = 1
"""An unhandled exception was caught at an error boundary."""

USAGE_ERROR: int = 2
"""Bad arity, flag, literal, operator or path.  Message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
