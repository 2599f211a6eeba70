"""
PGA-Axioms: origami folds in 2D Projective Geometric Algebra

A PyTorch library that expresses the Huzita–Justin origami axioms as
constructions on points and lines of the plane-based algebra G(2,0,1).

Key Features:
- Full 2D PGA algebra implementation (8-component multivectors)
- Batched geometric, outer, inner and regressive products
- Metric queries: distances, angles, projections, reflections
- Rotors and translators for rigid motions
- Crease solvers for axioms 1-5 and 7
- Folding a sheet of paper along a crease, with JSON/NumPy output

API Design:
- Points are bivectors y*e01 + x*e20 + w*e12, lines are vectors c*e0 + a*e1 + b*e2
- Multivector wraps a tensor of shape (..., 8)
- Axiom solvers return a normalized crease line, or None when no fold exists

Example:
    >>> import pga_axioms
    >>> from pga_axioms.pga import point
    >>> crease = pga_axioms.axioms.axiom_2(point(0.0, 0.0), point(2.0, 0.0))
    >>> paper = pga_axioms.folding.Paper.square(2.0)
    >>> result = pga_axioms.folding.bundle_results(paper, crease)
    >>> result.to_json()
"""

__version__ = "0.1.0"
__author__ = "PGA-Axioms Contributors"

from . import core
from . import pga
from . import axioms
from . import folding
from . import utils

__all__ = [
    "core",
    "pga",
    "axioms",
    "folding",
    "utils",
]
