"""rangeint — an integer value type confined to the closed range [1, 10]."""

from __future__ import annotations

from rangeint.domain.errors import BoundViolation, ConstructionError, ErrorCode
from rangeint.domain.result import ConstructionResult
from rangeint.domain.value import BoundedValue, construct

__version__ = "0.1.0"

__all__ = [
    "BoundViolation",
    "BoundedValue",
    "ConstructionError",
    "ConstructionResult",
    "ErrorCode",
    "__version__",
    "construct",
]
