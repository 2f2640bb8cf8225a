"""Protocols (interfaces) consumed by the core layer.

The router depends only on these structural contracts, never on the
concrete command handlers or console implementation of the CLI layer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class OutputSink(Protocol):
    """Anything that accepts one line of plain text at a time.

    ``list.append`` satisfies this protocol, which keeps router tests
    free of console capture.
    """

    def __call__(self, line: str, /) -> object:
        ...  # pragma: no cover


class CommandHandler(Protocol):
    """Contract for a command registered on a :class:`CommandRouter`.

    The handler receives the argument tail (already arity-checked) and
    the router's output sink, and returns a process exit code.

    Handlers report bad input by raising
    :class:`~console_tools.exceptions.UsageError`; any other exception
    is treated as an unexpected failure by the router.
    """

    def __call__(self, tail: Sequence[str], out: OutputSink, /) -> int:
        ...  # pragma: no cover
