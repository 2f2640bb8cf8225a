"""Shared plumbing for the console-script entry points.

Each tool is a :class:`~console_tools.core.router.CommandRouter` behind
the same two wrappers:

* :func:`run_tool` pre-parses global options with argparse, configures
  logging and hands the remaining tokens to the router untouched.
* :func:`error_boundary` is the script-level boundary that maps any
  escaping exception to an exit code and calls :func:`sys.exit`.

Global options are only recognized **before** the command name, so a
command's tail is never reinterpreted (``greet --verbose`` greets
``--verbose``).
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import NoReturn

from console_tools.cli.console import console
from console_tools.cli.logs import configure_logging
from console_tools.core.numbers import use_user_locale
from console_tools.core.router import CommandRouter
from console_tools.exceptions import ConsoleToolsError, UsageError
from console_tools.utils import exit_codes
from console_tools.version import __version__

GLOBAL_OPTIONS: frozenset[str] = frozenset({"-V", "--version", "--verbose"})


# ---------------------------------------------------------------------------
# Argument pre-parsing
# ---------------------------------------------------------------------------

def build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    """Construct the global-options parser shared by every tool.

    Help flags are left to the router so that ``--help``, ``-h`` and
    ``/?`` behave identically.
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description=description,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr.",
    )
    return parser


def split_global_options(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *argv* into leading global options and the router tokens."""
    index = 0
    while index < len(argv) and argv[index] in GLOBAL_OPTIONS:
        index += 1
    return list(argv[:index]), list(argv[index:])


# ---------------------------------------------------------------------------
# Tool runner
# ---------------------------------------------------------------------------

def run_tool(
    parser: argparse.ArgumentParser,
    build_router: Callable[[], CommandRouter],
    argv: Sequence[str] | None = None,
) -> int:
    """Parse global options, then dispatch the remaining tokens.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    raw = list(sys.argv[1:] if argv is None else argv)
    options, tokens = split_global_options(raw)
    args = parser.parse_args(options)
    configure_logging(args.verbose)
    use_user_locale()
    return build_router().dispatch(tokens)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def error_boundary(main: Callable[[], int]) -> NoReturn:
    """Run *main* and exit the process with its code.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UsageError as exc:
        _render_error(exc)
        sys.exit(exit_codes.USAGE_ERROR)
    except ConsoleToolsError as exc:
        _render_error(exc)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    except KeyboardInterrupt:
        console.write_line()
        console.write_line("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.write_line("Unexpected error:")
        console.write_line(f"  {type(exc).__name__}: {exc}")
        sys.exit(exit_codes.UNEXPECTED_ERROR)


def _render_error(exc: ConsoleToolsError) -> None:
    console.write_line(f"Error: {exc}")
    if exc.hint:
        console.write_line(exc.hint)
