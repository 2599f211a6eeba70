"""
Folding a sheet of paper: host boundary types, crease clipping and the
per-axiom fold entry points.
"""

from .types import Point, Line, FoldResult
from .paper import Paper
from .api import (
    bundle_results,
    fold_axiom_1,
    fold_axiom_2,
    fold_axiom_3,
    fold_axiom_4,
    fold_axiom_5,
    fold_axiom_6,
    fold_axiom_7,
)

__all__ = [
    "Point",
    "Line",
    "FoldResult",
    "Paper",
    "bundle_results",
    "fold_axiom_1",
    "fold_axiom_2",
    "fold_axiom_3",
    "fold_axiom_4",
    "fold_axiom_5",
    "fold_axiom_6",
    "fold_axiom_7",
]
