"""``console-tools`` launcher and command routing.

The launcher is itself a :class:`~console_tools.core.router.CommandRouter`:

* ``console-tools calc``             interactive calculator
* ``console-tools simple <tokens>``  simplecli commands
* ``console-tools files <tokens>``   filereader commands
* ``console-tools doctor``           environment diagnostics
* ``console-tools --version``

Sub-tools receive the tail verbatim and write through the launcher's
output sink, so nested help and errors render exactly as they do from
the standalone scripts.
"""

from __future__ import annotations

from collections.abc import Sequence

from console_tools.cli.console import console
from console_tools.cli.entry import build_parser, error_boundary, run_tool
from console_tools.core.protocols import OutputSink
from console_tools.core.router import CommandRouter

PROG = "console-tools"


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_calc(tail: Sequence[str], out: OutputSink) -> int:
    from console_tools.cli.calculator import initialize, run_calculator

    initialize()
    return run_calculator(out=out)


def _handle_simple(tail: Sequence[str], out: OutputSink) -> int:
    from console_tools.cli import simplecli

    return simplecli.build_router(out).dispatch(tail)


def _handle_files(tail: Sequence[str], out: OutputSink) -> int:
    from console_tools.cli import filereader

    return filereader.build_router(out).dispatch(tail)


def _handle_doctor(tail: Sequence[str], out: OutputSink) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from console_tools.cli.doctor import run_doctor

    return run_doctor()


def build_router(out: OutputSink = console.write_line) -> CommandRouter:
    """Register the launcher commands on a fresh router."""
    router = CommandRouter(PROG, out, title="console-tools")
    router.register("calc", 0, 0, _handle_calc,
                    summary="Interactive calculator")
    router.register("simple", 0, None, _handle_simple, usage="<command> [args...]",
                    summary="greet / add / now", examples=("add 2 3",))
    router.register("files", 0, None, _handle_files, usage="<command> [args...]",
                    summary="read / stats / head", examples=("head ./data.txt 5",))
    router.register("doctor", 0, 0, _handle_doctor,
                    summary="Environment diagnostics", examples=("",))
    return router


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the console-tools launcher.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = build_parser(PROG, "Small console utilities.")
    return run_tool(parser, build_router, argv)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    error_boundary(main)
