"""BoundedValue — an integer confined to the closed range [1, 10].

Instances come from :func:`construct`, which returns a
:class:`~rangeint.domain.result.ConstructionResult` instead of raising.
Operators compute on plain Python integers (signed, unbounded), build a
provisional instance, and check it before returning it. A result outside
the bound raises :class:`~rangeint.domain.errors.BoundViolation`.

INVARIANT: every instance a caller can observe satisfies the bound.
"""

from __future__ import annotations

import functools
import logging
import operator
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, field_validator

from rangeint.domain.bounds import LOWER, UPPER, fits_storage, in_bounds
from rangeint.domain.errors import BoundViolation, ConstructionError, ErrorCode
from rangeint.domain.result import ConstructionResult

logger = logging.getLogger(__name__)


@functools.total_ordering
class BoundedValue(BaseModel):
    """Immutable integer in [1, 10].

    Equality and ordering follow ``value``. ``/`` and ``//`` are both
    integer division.
    """

    model_config = {"frozen": True, "strict": True}

    value: int

    @field_validator("value")
    @classmethod
    def check_bounds(cls, v: int) -> int:
        if not in_bounds(v):
            raise ValueError(f"{v} is outside [{LOWER}, {UPPER}]")
        return v

    @classmethod
    def construct_from(cls, raw: int) -> ConstructionResult:
        """Validate *raw* and wrap the outcome in a ConstructionResult."""
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"{cls.__name__} requires an int, got {type(raw).__name__}")
        if not in_bounds(raw):
            logger.debug("Rejected %s: %d outside [%d, %d]", cls.__name__, raw, LOWER, UPPER)
            detail: dict[str, Any] = {"raw": raw, "lower": LOWER, "upper": UPPER}
            if not fits_storage(raw):
                detail["storage"] = "u8"
            return ConstructionResult(
                ok=False,
                error=ConstructionError(
                    code=ErrorCode.OUT_OF_RANGE,
                    message=f"{raw} is outside [{LOWER}, {UPPER}]",
                    detail=detail,
                ),
            )
        return ConstructionResult(ok=True, value=cls(value=raw))

    def assert_in_bounds(self) -> None:
        """Raise BoundViolation if ``value`` is outside the bound; otherwise do nothing."""
        if not in_bounds(self.value):
            name = type(self).__name__
            logger.critical("%s is out of bounds! %d was value", name, self.value)
            raise BoundViolation(name, self.value)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> BoundedValue:
        """Copy, then check the bound. ``update`` bypasses field validation."""
        rval = super().model_copy(update=update, deep=deep)
        rval.assert_in_bounds()
        return rval

    def _combine(self, other: object, op: Callable[[int, int], int]) -> Any:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        # Provisional: skips validation so the bound check decides.
        rval = type(self).model_construct(value=op(self.value, other.value))
        rval.assert_in_bounds()
        return rval

    def __add__(self, other: object) -> BoundedValue:
        return self._combine(other, operator.add)

    def __sub__(self, other: object) -> BoundedValue:
        return self._combine(other, operator.sub)

    def __mul__(self, other: object) -> BoundedValue:
        return self._combine(other, operator.mul)

    def __floordiv__(self, other: object) -> BoundedValue:
        return self._combine(other, operator.floordiv)

    __truediv__ = __floordiv__

    def __and__(self, other: object) -> BoundedValue:
        return self._combine(other, operator.and_)

    def __or__(self, other: object) -> BoundedValue:
        return self._combine(other, operator.or_)

    def __xor__(self, other: object) -> BoundedValue:
        return self._combine(other, operator.xor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((BoundedValue, self.value))

    def __int__(self) -> int:
        return self.value


def construct(raw: int) -> ConstructionResult:
    """Validate *raw* and return a ConstructionResult (never raises for out-of-range input)."""
    return BoundedValue.construct_from(raw)


ConstructionResult.model_rebuild()
