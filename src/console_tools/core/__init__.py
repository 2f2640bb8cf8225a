"""Core / service layer — routing, parsing and arithmetic.

Rules
-----
* No console I/O; output goes through an injected sink.
* No filesystem access.
* No imports from ``cli`` or ``infra``.
"""

from console_tools.core.arithmetic import calculate, parse_operator
from console_tools.core.models import Calculation, CommandDescriptor, FileStats
from console_tools.core.numbers import parse_number, parse_positive_int
from console_tools.core.protocols import CommandHandler, OutputSink
from console_tools.core.router import CommandRouter

__all__: list[str] = [
    "Calculation",
    "CommandDescriptor",
    "CommandHandler",
    "CommandRouter",
    "FileStats",
    "OutputSink",
    "calculate",
    "parse_number",
    "parse_operator",
    "parse_positive_int",
]
