"""Domain models for console-tools.

All models are **frozen** dataclasses: immutable value objects created
once and never mutated.  They carry zero I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from console_tools.core.protocols import CommandHandler


# ---------------------------------------------------------------------------
# Command registration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    """A registered command: its name, arity bounds and handler."""

    name: str
    """Normalized (trimmed, lowercase) command name."""

    min_arity: int
    """Smallest accepted number of tail tokens."""

    max_arity: int | None
    """Largest accepted number of tail tokens, ``None`` for unbounded."""

    handler: CommandHandler
    """Callable invoked with the validated tail and the output sink."""

    usage: str = ""
    """Argument synopsis, e.g. ``"<path> <n>"``."""

    summary: str = ""
    """One-line description shown in help text."""

    examples: tuple[str, ...] = ()
    """Example tails shown in help text, e.g. ``("2 3",)``."""

    def accepts(self, count: int) -> bool:
        """Return whether *count* tail tokens satisfy the arity bounds."""
        if count < self.min_arity:
            return False
        return self.max_arity is None or count <= self.max_arity

    @property
    def synopsis(self) -> str:
        """Command name followed by its usage, e.g. ``"head <path> <n>"``."""
        return f"{self.name} {self.usage}".rstrip()


# ---------------------------------------------------------------------------
# File inspection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FileStats:
    """Size and text counts for a single file."""

    path: str
    """Absolute path of the inspected file."""

    bytes: int
    """Size on disk in bytes."""

    lines: int
    """Number of lines (a trailing newline does not start a new line)."""

    words: int
    """Number of whitespace-delimited words."""


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Calculation:
    """A completed binary arithmetic operation."""

    left: float
    operator: str
    right: float
    result: float
