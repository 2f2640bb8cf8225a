"""Binary arithmetic over the calculator's operator table."""

from __future__ import annotations

import operator as _op
from collections.abc import Callable

from console_tools.core.models import Calculation
from console_tools.exceptions import DomainError, InvalidOperatorError

OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


def parse_operator(text: str) -> str:
    """Return the operator symbol in *text* or raise ``InvalidOperatorError``."""
    symbol = text.strip()
    if symbol not in OPERATORS:
        raise InvalidOperatorError(
            f"Invalid operator: {symbol}",
            hint="Use +, -, *, /",
        )
    return symbol


def calculate(left: float, operator: str, right: float) -> Calculation:
    """Apply *operator* to the operands.

    Raises
    ------
    DomainError
        On division by zero.
    InvalidOperatorError
        If *operator* is not one of ``+ - * /``.
    """
    func = OPERATORS.get(operator)
    if func is None:
        raise InvalidOperatorError(f"Unknown operator: {operator}")
    if operator == "/" and right == 0:
        raise DomainError("Division by zero is not allowed.")
    return Calculation(left=left, operator=operator, right=right, result=func(left, right))
