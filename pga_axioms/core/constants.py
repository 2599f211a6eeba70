"""
Centralized constants for PGA-Axioms.

This module defines all default values and numeric constants used throughout
the library. Using these constants ensures consistency and makes it easy to
adjust defaults globally.

Usage:
    from pga_axioms.core.constants import DEFAULT_TOLERANCE

    def my_function(tolerance: float = DEFAULT_TOLERANCE):
        ...
"""

# =============================================================================
# Algebra Layout
# =============================================================================

# Basis blades of 2D PGA in storage order
BASIS_ELEMENTS = ("1", "e0", "e1", "e2", "e01", "e20", "e12", "e012")

# Number of coefficients in a multivector
BASIS_COUNT: int = len(BASIS_ELEMENTS)


# =============================================================================
# Numeric Constants
# =============================================================================

# Geometric tolerance for parallelism, incidence and sign classification
DEFAULT_TOLERANCE: float = 0.001

# Norms below this are treated as zero (normalization passthrough, inverse)
DEFAULT_EPS: float = 1e-8

# Pi constant (for angle comparisons)
PI: float = 3.14159265358979323846
