"""
Type aliases for PGA-Axioms.

Shape Conventions:
==================

Multivector tensors have shape (..., 8). Everything before the last
dimension is a batch shape that every algebra operation broadcasts over.

Cartesian data uses the trailing dimension for coordinates:
    points: Tensor[..., 2]  # (x, y)
    lines:  Tensor[..., 3]  # (a, b, c) for ax + by + c = 0

The axiom solver works on single (unbatched) multivectors.
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..pga.algebra import Multivector


# Result of a construction that may have no solution
MaybeMultivector = Optional["Multivector"]

# Ordered candidate creases
CreaseList = List["Multivector"]
