"""``calculator`` — interactive two-operand arithmetic loop.

Each round prompts for a number, an operator and a second number.  A
prompt repeats until it gets valid input; ``q`` (any case) or end of
input at any prompt ends the session.  Division by zero is reported
and the loop continues.

The line reader and the output sink are injectable so the loop can be
driven without a terminal.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from console_tools.cli.console import console
from console_tools.cli.entry import build_parser, error_boundary
from console_tools.cli.logs import configure_logging
from console_tools.core.arithmetic import calculate, parse_operator
from console_tools.core.numbers import parse_number, use_user_locale
from console_tools.core.protocols import OutputSink
from console_tools.exceptions import DomainError, InvalidNumberError, InvalidOperatorError
from console_tools.utils import exit_codes
from console_tools.utils.formatting import format_number

logger = logging.getLogger(__name__)

LineReader = Callable[[str], str]
"""Shows a prompt and returns one line; raises ``EOFError`` at end of input."""

TITLE = "CalculatorApp"
QUIT = "q"

BANNER: tuple[str, ...] = (
    f"=== {TITLE} ===",
    "Operations: +  -  *  /",
    f"Type '{QUIT}' at any prompt to quit.",
    "",
)

FIRST_PROMPT = "Enter first number: "
OPERATOR_PROMPT = "Enter operator (+, -, *, /): "
SECOND_PROMPT = "Enter second number: "

INVALID_NUMBER = f"Invalid number. Try again (or type '{QUIT}' to quit)."
INVALID_OPERATOR = f"Invalid operator. Use +, -, *, / (or type '{QUIT}' to quit)."


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def _ask(read_line: LineReader, prompt: str) -> str | None:
    """Return the stripped answer, or ``None`` on quit or end of input."""
    try:
        answer = read_line(prompt)
    except EOFError:
        return None
    answer = answer.strip()
    if answer.lower() == QUIT:
        return None
    return answer


def read_number(read_line: LineReader, out: OutputSink, prompt: str) -> float | None:
    """Prompt until a number is entered; ``None`` means the user quit."""
    while True:
        answer = _ask(read_line, prompt)
        if answer is None:
            return None
        try:
            return parse_number(answer)
        except InvalidNumberError:
            out(INVALID_NUMBER)


def read_operator(read_line: LineReader, out: OutputSink, prompt: str) -> str | None:
    """Prompt until one of ``+ - * /`` is entered; ``None`` means quit."""
    while True:
        answer = _ask(read_line, prompt)
        if answer is None:
            return None
        try:
            return parse_operator(answer)
        except InvalidOperatorError:
            out(INVALID_OPERATOR)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

def initialize() -> None:
    """One-time process setup: window title and numeric locale."""
    console.set_title(TITLE)
    logger.debug("numeric locale: %s", use_user_locale())


def run_calculator(
    read_line: LineReader = console.input,
    out: OutputSink = console.write_line,
) -> int:
    """Run the prompt loop until the user quits; always returns 0."""
    for line in BANNER:
        out(line)

    while True:
        left = read_number(read_line, out, FIRST_PROMPT)
        if left is None:
            break
        operator = read_operator(read_line, out, OPERATOR_PROMPT)
        if operator is None:
            break
        right = read_number(read_line, out, SECOND_PROMPT)
        if right is None:
            break

        try:
            calc = calculate(left, operator, right)
        except DomainError as exc:
            out(f"Error: {exc}")
            out("")
            continue

        out(
            f"Result: {format_number(calc.left)} {calc.operator} "
            f"{format_number(calc.right)} = {format_number(calc.result)}"
        )
        out("")

    out("")
    out("Goodbye!")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = build_parser("calculator", "Interactive calculator for + - * /.")
    parser.add_argument("-h", "--help", action="help", help="Show this message and exit.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the calculator and return the process exit code."""
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)
    initialize()
    return run_calculator()


def cli() -> None:
    """Console-script entry point."""
    error_boundary(main)
