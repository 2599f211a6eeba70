"""
Core module for PGA-Axioms.

Contains:
- Constants: Centralized default values and numeric constants
- Exceptions: Error types raised by the algebra and solver
- Types: Type aliases for common tensor shapes
"""

from .constants import (
    BASIS_ELEMENTS,
    BASIS_COUNT,
    DEFAULT_TOLERANCE,
    DEFAULT_EPS,
    PI,
)
from .exceptions import (
    PGAError,
    NotInvertibleError,
    UnsupportedAxiomError,
)

__all__ = [
    "BASIS_ELEMENTS",
    "BASIS_COUNT",
    "DEFAULT_TOLERANCE",
    "DEFAULT_EPS",
    "PI",
    "PGAError",
    "NotInvertibleError",
    "UnsupportedAxiomError",
]
