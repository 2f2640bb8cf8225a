"""Command router — registration table plus validated dispatch.

A :class:`CommandRouter` maps normalized command names to
:class:`~console_tools.core.models.CommandDescriptor` entries.  Dispatch
selects a descriptor from the first token, checks the tail length
against its arity bounds and invokes the handler.

Guarantees
----------
* Every call to :meth:`CommandRouter.dispatch` returns exactly one
  exit code; handler failures never escape except ``KeyboardInterrupt``.
* A handler is never invoked with a tail outside its arity range.
* No console I/O: all text goes to the injected output sink.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from console_tools.core.models import CommandDescriptor
from console_tools.core.protocols import CommandHandler, OutputSink
from console_tools.exceptions import DuplicateCommandError, UsageError
from console_tools.utils import exit_codes

logger = logging.getLogger(__name__)

HELP_FLAGS: frozenset[str] = frozenset({"--help", "-h", "/?"})
"""Help flags, compared case-insensitively."""

UNKNOWN_COMMAND_HINT = "Run with --help to see available commands."


def normalize_name(name: str) -> str:
    """Trim and lowercase a command name for table lookup."""
    return name.strip().lower()


def is_help_flag(token: str) -> bool:
    """Return whether *token* asks for help (``--help``, ``-h``, ``/?``)."""
    return token.lower() in HELP_FLAGS


class CommandRouter:
    """Registration table for named commands.

    Parameters
    ----------
    prog:
        Program name shown in help text (e.g. ``"filereader"``).
    out:
        Sink receiving every line of output, including handler output.
    title:
        First line of the help text.  Defaults to *prog*.
    """

    def __init__(self, prog: str, out: OutputSink, *, title: str | None = None) -> None:
        self._prog = prog
        self._out = out
        self._title = title or prog
        self._commands: dict[str, CommandDescriptor] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        min_arity: int,
        max_arity: int | None,
        handler: CommandHandler,
        *,
        usage: str = "",
        summary: str = "",
        examples: Iterable[str] = (),
    ) -> CommandDescriptor:
        """Add a command and return its descriptor.

        Raises
        ------
        DuplicateCommandError
            If *name* (case-insensitive) is already registered.
        ValueError
            If the arity bounds are negative or inverted.
        """
        key = normalize_name(name)
        if not key:
            raise ValueError("Command name must not be empty.")
        if key in self._commands:
            raise DuplicateCommandError(f"Command already registered: {key}")
        if min_arity < 0 or (max_arity is not None and max_arity < min_arity):
            raise ValueError(f"Invalid arity bounds for {key}: [{min_arity}, {max_arity}]")

        descriptor = CommandDescriptor(
            name=key,
            min_arity=min_arity,
            max_arity=max_arity,
            handler=handler,
            usage=usage,
            summary=summary,
            examples=tuple(examples),
        )
        self._commands[key] = descriptor
        return descriptor

    def lookup(self, name: str) -> CommandDescriptor | None:
        """Return the descriptor registered under *name*, if any."""
        return self._commands.get(normalize_name(name))

    @property
    def commands(self) -> tuple[CommandDescriptor, ...]:
        """Registered descriptors in registration order."""
        return tuple(self._commands.values())

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, tokens: Sequence[str]) -> int:
        """Route *tokens* to a command and return its exit code."""
        if not tokens or is_help_flag(tokens[0]):
            self._emit(self.help_text())
            return exit_codes.SUCCESS

        name = normalize_name(tokens[0])
        descriptor = self._commands.get(name)
        if descriptor is None:
            logger.debug("no command registered under %r", name)
            self._emit([f"Unknown command: {name}", UNKNOWN_COMMAND_HINT])
            return exit_codes.USAGE_ERROR

        tail = tuple(tokens[1:])
        if not descriptor.accepts(len(tail)):
            logger.debug("%s rejected %d argument(s)", name, len(tail))
            self._emit([f"Usage: {descriptor.synopsis}"])
            return exit_codes.USAGE_ERROR

        logger.debug("dispatching %s with %d argument(s)", name, len(tail))
        try:
            return descriptor.handler(tail, self._out)
        except UsageError as exc:
            self._emit([f"Error: {exc}"])
            if exc.hint:
                self._emit([exc.hint])
            return exit_codes.USAGE_ERROR
        except Exception as exc:  # noqa: BLE001
            logger.debug("command %s failed", name, exc_info=True)
            self._emit(["Unexpected error:", str(exc) or type(exc).__name__])
            return exit_codes.UNEXPECTED_ERROR

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def help_text(self) -> list[str]:
        """Build the help screen from the registered descriptors."""
        entries = [(d.synopsis, d.summary) for d in self._commands.values()]
        width = max((len(synopsis) for synopsis, _ in entries), default=0)

        lines = [self._title, "Usage:"]
        for synopsis, summary in entries:
            lines.append(f"  {self._prog} {synopsis:<{width}}  {summary}".rstrip())
        lines.append(f"  {self._prog} --help")

        examples = [
            f"  {self._prog} {d.name} {example}".rstrip()
            for d in self._commands.values()
            for example in d.examples
        ]
        if examples:
            lines.append("")
            lines.append("Examples:")
            lines.extend(examples)
        return lines

    def _emit(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._out(line)
