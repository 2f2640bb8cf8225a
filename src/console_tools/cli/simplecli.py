"""``simplecli`` — greet / add / now commands.

Usage::

    simplecli greet <name>
    simplecli add <a> <b>
    simplecli now
    simplecli --help
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from console_tools.cli.console import console
from console_tools.cli.entry import build_parser, error_boundary, run_tool
from console_tools.core.numbers import parse_number
from console_tools.core.protocols import OutputSink
from console_tools.core.router import CommandRouter
from console_tools.exceptions import InvalidNumberError, UsageError
from console_tools.utils import exit_codes
from console_tools.utils.formatting import format_number, format_timestamp

PROG = "simplecli"


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def cmd_greet(tail: Sequence[str], out: OutputSink) -> int:
    out(f"Hello, {tail[0]}!")
    return exit_codes.SUCCESS


def cmd_add(tail: Sequence[str], out: OutputSink) -> int:
    """Print the sum of two numbers parsed locale-first, then invariant."""
    try:
        left = parse_number(tail[0])
        right = parse_number(tail[1])
    except InvalidNumberError as exc:
        raise UsageError("add expects two numbers.", hint="Example: add 2 3") from exc
    out(format_number(left + right))
    return exit_codes.SUCCESS


def make_now_command(clock: Callable[[], datetime] = datetime.now) -> Callable[..., int]:
    """Build the ``now`` handler around *clock* (injectable for tests)."""

    def cmd_now(tail: Sequence[str], out: OutputSink) -> int:
        out(format_timestamp(clock()))
        return exit_codes.SUCCESS

    return cmd_now


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------

def build_router(
    out: OutputSink = console.write_line,
    *,
    clock: Callable[[], datetime] = datetime.now,
) -> CommandRouter:
    """Register the simplecli commands on a fresh router."""
    router = CommandRouter(PROG, out, title="SimpleCliApp")
    router.register("greet", 1, 1, cmd_greet, usage="<name>",
                    summary="Print a greeting", examples=("Walter",))
    router.register("add", 2, 2, cmd_add, usage="<a> <b>",
                    summary="Print the sum of two numbers", examples=("2 3",))
    router.register("now", 0, 0, make_now_command(clock),
                    summary="Print the local date and time", examples=("",))
    return router


def main(argv: list[str] | None = None) -> int:
    """Run simplecli and return the process exit code."""
    parser = build_parser(PROG, "Greet, add numbers or print the time.")
    return run_tool(parser, build_router, argv)


def cli() -> None:
    """Console-script entry point."""
    error_boundary(main)
