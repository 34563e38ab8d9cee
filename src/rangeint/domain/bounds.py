"""The bound every live BoundedValue satisfies.

INVARIANT: ``LOWER <= value <= UPPER`` for every instance handed to a caller.
Both the constructor and the post-operation check go through :func:`in_bounds`.
"""

from __future__ import annotations

LOWER = 1
UPPER = 10

# Width of the backing field (8-bit unsigned).
STORAGE_MIN = 0
STORAGE_MAX = 255


def in_bounds(raw: int) -> bool:
    """Return True when *raw* lies in the closed range [LOWER, UPPER]."""
    return LOWER <= raw <= UPPER


def fits_storage(raw: int) -> bool:
    """Return True when *raw* is representable in the 8-bit backing field."""
    return STORAGE_MIN <= raw <= STORAGE_MAX
