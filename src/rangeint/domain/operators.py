"""Named forms of the seven BoundedValue operators.

Lets callers (the service layer and CLI) pick an operator by name or by
symbol. Each function has the same contract as the matching dunder on
:class:`~rangeint.domain.value.BoundedValue`.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from rangeint.domain.value import BoundedValue


class Operator(StrEnum):
    """Binary operators supported by BoundedValue."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    BITWISE_AND = "bitwise_and"
    BITWISE_OR = "bitwise_or"
    BITWISE_XOR = "bitwise_xor"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, token: str) -> Operator:
        """Resolve an operator from its name (``"add"``) or symbol (``"+"``).

        Names are case-insensitive and accept ``-`` for ``_``.
        """
        stripped = token.strip()
        key = stripped.lower().replace("-", "_")
        for op in cls:
            if stripped == op.symbol or key == op.value:
                return op
        raise ValueError(f"Unknown operator: {token!r}")


_SYMBOLS: dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "*",
    Operator.DIVIDE: "/",
    Operator.BITWISE_AND: "&",
    Operator.BITWISE_OR: "|",
    Operator.BITWISE_XOR: "^",
}


def add(a: BoundedValue, b: BoundedValue) -> BoundedValue:
    return a + b


def subtract(a: BoundedValue, b: BoundedValue) -> BoundedValue:
    return a - b


def multiply(a: BoundedValue, b: BoundedValue) -> BoundedValue:
    return a * b


def divide(a: BoundedValue, b: BoundedValue) -> BoundedValue:
    """Integer division."""
    return a // b


def bitwise_and(a: BoundedValue, b: BoundedValue) -> BoundedValue:
    return a & b


def bitwise_or(a: BoundedValue, b: BoundedValue) -> BoundedValue:
    return a | b


def bitwise_xor(a: BoundedValue, b: BoundedValue) -> BoundedValue:
    return a ^ b


_DISPATCH: dict[Operator, Callable[[BoundedValue, BoundedValue], BoundedValue]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
    Operator.BITWISE_AND: bitwise_and,
    Operator.BITWISE_OR: bitwise_or,
    Operator.BITWISE_XOR: bitwise_xor,
}


def apply(op: Operator | str, a: BoundedValue, b: BoundedValue) -> BoundedValue:
    """Apply *op* (an Operator, name, or symbol) to *a* and *b*."""
    if not isinstance(op, Operator):
        op = Operator.parse(op)
    return _DISPATCH[op](a, b)
