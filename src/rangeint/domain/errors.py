"""The two failure channels of BoundedValue.

* :class:`ConstructionError` is a value. ``construct`` hands it back inside a
  failed :class:`~rangeint.domain.result.ConstructionResult`; the caller decides.
* :class:`BoundViolation` is a signal. It is raised when an operator's result
  escapes the bound and is never caught inside this package.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Codes a ConstructionError can carry."""

    OUT_OF_RANGE = "OUT_OF_RANGE"


class ConstructionError(BaseModel):
    """Recoverable failure: the raw integer given to ``construct`` is outside the bound."""

    model_config = {"frozen": True}

    code: Literal[ErrorCode.OUT_OF_RANGE] = ErrorCode.OUT_OF_RANGE
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class BoundViolation(BaseException):
    """Fatal failure: an operator produced a value outside the bound.

    Derives from ``BaseException`` so that ``except Exception`` handlers
    do not absorb it. The operands were valid; their combination is a
    logic error in the calling code.
    """

    def __init__(self, type_name: str, value: int) -> None:
        self.type_name = type_name
        self.value = value
        super().__init__(type_name, value)

    def __str__(self) -> str:
        return f"{self.type_name} is out of bounds! {self.value} was value"
