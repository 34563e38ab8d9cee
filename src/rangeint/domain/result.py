"""ConstructionResult — the return type of ``construct``.

INVARIANT: exactly one of ``value`` and ``error`` is set, and ``ok`` says which.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, model_validator

from rangeint.domain.errors import ConstructionError

if TYPE_CHECKING:
    from rangeint.domain.value import BoundedValue


class ConstructionResult(BaseModel):
    """Outcome of validating a raw integer.

    Attributes:
        ok: Whether construction succeeded.
        op: Name of the operation, always ``"construct"``.
        value: The live instance on success.
        error: The out-of-range error on failure.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str = "construct"
    value: BoundedValue | None = None
    error: ConstructionError | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> ConstructionResult:
        if self.ok and (self.value is None or self.error is not None):
            raise ValueError("a successful result carries a value and no error")
        if not self.ok and (self.error is None or self.value is not None):
            raise ValueError("a failed result carries an error and no value")
        return self

    def is_ok(self) -> bool:
        return self.ok

    def is_err(self) -> bool:
        return not self.ok

    def unwrap(self) -> BoundedValue:
        """Return the value, or raise ``ValueError`` with the construction error message."""
        if self.value is None:
            assert self.error is not None
            raise ValueError(self.error.message)
        return self.value

    def unwrap_or(self, default: BoundedValue) -> BoundedValue:
        return self.value if self.value is not None else default
