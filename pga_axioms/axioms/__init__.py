"""
Huzita–Justin axiom solver.

Seven stateless constructions, one per axiom, each returning a crease line
(or None when the configuration has no solution).
"""

from .solver import (
    axiom_1,
    axiom_2,
    axiom_3,
    axiom_3_candidates,
    axiom_4,
    axiom_5,
    axiom_5_candidates,
    axiom_6,
    axiom_7,
    AXIOMS,
    solve,
)

__all__ = [
    "axiom_1",
    "axiom_2",
    "axiom_3",
    "axiom_3_candidates",
    "axiom_4",
    "axiom_5",
    "axiom_5_candidates",
    "axiom_6",
    "axiom_7",
    "AXIOMS",
    "solve",
]
