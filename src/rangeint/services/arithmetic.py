"""ArithmeticService — construct values and evaluate operators for the CLI.

Construction failures and unknown operators become failed ServiceResults.
An out-of-bounds operator result raises BoundViolation, which is not
caught here.
"""

from __future__ import annotations

import logging

from rangeint.domain.errors import ConstructionError
from rangeint.domain.operators import Operator, apply
from rangeint.domain.value import BoundedValue, construct
from rangeint.services.result import ServiceResult

logger = logging.getLogger(__name__)

UNKNOWN_OPERATOR = "UNKNOWN_OPERATOR"

# (lhs, operator, rhs) triples with known in-range results.
DEMO_EXPRESSIONS: list[tuple[int, Operator, int]] = [
    (2, Operator.ADD, 4),
    (4, Operator.SUBTRACT, 2),
    (4, Operator.MULTIPLY, 2),
    (4, Operator.DIVIDE, 2),
    (3, Operator.BITWISE_AND, 2),
    (3, Operator.BITWISE_OR, 2),
    (3, Operator.BITWISE_XOR, 2),
]


def _construction_failure(op: str, error: ConstructionError, **detail: object) -> ServiceResult:
    return ServiceResult.failure(op, error.code, error.message, **error.detail, **detail)


class ArithmeticService:
    """Service operations over BoundedValue."""

    def construct(self, raw: int) -> ServiceResult:
        """Validate a raw integer."""
        result = construct(raw)
        if result.error is not None:
            return _construction_failure("construct", result.error)
        assert result.value is not None
        return ServiceResult(ok=True, op="construct", data={"value": result.value.value})

    def evaluate(self, lhs: int, operator: str, rhs: int) -> ServiceResult:
        """Construct both operands and apply *operator* (a name or symbol).

        Raises:
            BoundViolation: the operands are valid but the result is not.
        """
        op_name = "evaluate"
        operands: list[BoundedValue] = []
        for side, raw in (("lhs", lhs), ("rhs", rhs)):
            result = construct(raw)
            if result.error is not None:
                return _construction_failure(op_name, result.error, operand=side)
            operands.append(result.unwrap())

        try:
            op = Operator.parse(operator)
        except ValueError as exc:
            return ServiceResult.failure(
                op_name,
                UNKNOWN_OPERATOR,
                str(exc),
                operator=operator,
                choices=[o.value for o in Operator],
            )

        a, b = operands
        logger.debug("Evaluating %d %s %d", a.value, op.symbol, b.value)
        value = apply(op, a, b)
        return ServiceResult(
            ok=True,
            op=op_name,
            data={
                "lhs": a.value,
                "operator": op.value,
                "symbol": op.symbol,
                "rhs": b.value,
                "value": value.value,
            },
        )

    def demo(self) -> ServiceResult:
        """Run the reference computations."""
        results: list[dict[str, object]] = []
        for lhs, op, rhs in DEMO_EXPRESSIONS:
            value = apply(op, construct(lhs).unwrap(), construct(rhs).unwrap())
            results.append({"expression": f"{lhs} {op.symbol} {rhs}", "value": value.value})
        return ServiceResult(ok=True, op="demo", data={"results": results})
