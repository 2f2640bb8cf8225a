"""``filereader`` — read / stats / head commands for text files.

Usage::

    filereader read <path>
    filereader stats <path>
    filereader head <path> <n>
    filereader --help

Every command resolves the path to an absolute one and checks that it
names an existing regular file before opening it.  The file is opened
only inside :func:`~console_tools.infra.text_files.open_lines`, which
releases the handle on every exit path.
"""

from __future__ import annotations

from collections.abc import Sequence

from console_tools.cli.console import console
from console_tools.cli.entry import build_parser, error_boundary, run_tool
from console_tools.core.numbers import parse_positive_int
from console_tools.core.protocols import OutputSink
from console_tools.core.router import CommandRouter
from console_tools.infra.text_files import compute_stats, head_lines, open_lines, require_file
from console_tools.utils import exit_codes

PROG = "filereader"


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def cmd_read(tail: Sequence[str], out: OutputSink) -> int:
    """Print the whole file line by line."""
    path = require_file(tail[0])
    with open_lines(path) as lines:
        for line in lines:
            out(line)
    return exit_codes.SUCCESS


def cmd_stats(tail: Sequence[str], out: OutputSink) -> int:
    """Print path, byte size, line count and word count."""
    stats = compute_stats(require_file(tail[0]))
    out(f"Path:  {stats.path}")
    out(f"Bytes: {stats.bytes}")
    out(f"Lines: {stats.lines}")
    out(f"Words: {stats.words}")
    return exit_codes.SUCCESS


def cmd_head(tail: Sequence[str], out: OutputSink) -> int:
    """Print at most the first ``n`` lines."""
    path = require_file(tail[0])
    count = parse_positive_int(tail[1])
    for line in head_lines(path, count):
        out(line)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------

def build_router(out: OutputSink = console.write_line) -> CommandRouter:
    """Register the filereader commands on a fresh router."""
    router = CommandRouter(PROG, out, title="FileReaderApp")
    router.register("read", 1, 1, cmd_read, usage="<path>",
                    summary="Print entire file", examples=("./data.txt",))
    router.register("stats", 1, 1, cmd_stats, usage="<path>",
                    summary="Print bytes, lines, words", examples=("/tmp/log.txt",))
    router.register("head", 2, 2, cmd_head, usage="<path> <n>",
                    summary="Print first n lines", examples=("./data.txt 5",))
    return router


def main(argv: list[str] | None = None) -> int:
    """Run filereader and return the process exit code."""
    parser = build_parser(PROG, "Inspect text files.")
    return run_tool(parser, build_router, argv)


def cli() -> None:
    """Console-script entry point."""
    error_boundary(main)
