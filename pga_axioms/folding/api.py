"""
Host-facing fold entry points.

Each ``fold_axiom_N`` takes Cartesian inputs (lines are given by two
points on them, as a user would drag a segment), solves the axiom and
folds the sheet along the resulting crease. They return None when the
axiom has no usable crease for the inputs.
"""

import logging
from typing import Optional

from ..axioms import solver
from ..core.exceptions import UnsupportedAxiomError
from ..pga.algebra import Multivector
from ..pga.primitives import join
from ..utils.config import SolverConfig
from .paper import Paper
from .types import FoldResult, Line, Point

logger = logging.getLogger(__name__)


def _mv(p: Point, config: SolverConfig) -> Multivector:
    return p.to_multivector(dtype=config.torch_dtype, device=config.torch_device)


def _segment(src: Point, dst: Point, config: SolverConfig) -> Multivector:
    """Join two segment endpoints into the line through them."""
    return join(_mv(src, config), _mv(dst, config))


def bundle_results(paper: Paper, crease: Multivector, config: Optional[SolverConfig] = None) -> FoldResult:
    """Fold ``paper`` along ``crease`` and package the outlines."""
    config = config or SolverConfig()
    positive, negative = paper.intersect(
        crease,
        tolerance=config.tolerance,
        dtype=config.torch_dtype,
        device=config.torch_device,
    )
    return FoldResult(Line.from_multivector(crease), positive, negative)


def fold_axiom_1(paper: Paper, p0: Point, p1: Point,
                 config: Optional[SolverConfig] = None) -> FoldResult:
    """Fold through ``p0`` and ``p1``."""
    config = config or SolverConfig()
    crease = solver.axiom_1(_mv(p0, config), _mv(p1, config))
    return bundle_results(paper, crease, config)


def fold_axiom_2(paper: Paper, p0: Point, p1: Point,
                 config: Optional[SolverConfig] = None) -> FoldResult:
    """Fold ``p0`` onto ``p1``."""
    config = config or SolverConfig()
    crease = solver.axiom_2(_mv(p0, config), _mv(p1, config))
    return bundle_results(paper, crease, config)


def fold_axiom_3(paper: Paper,
                 l0_src: Point, l0_dst: Point,
                 l1_src: Point, l1_dst: Point,
                 config: Optional[SolverConfig] = None) -> Optional[FoldResult]:
    """Fold line ``l0`` onto line ``l1``."""
    config = config or SolverConfig()
    l0 = _segment(l0_src, l0_dst, config)
    l1 = _segment(l1_src, l1_dst, config)
    crease = solver.axiom_3(l0, l1)

    # Parallel lines with opposite orientation give the line at infinity,
    # which cannot be drawn
    if float(crease.norm()) < config.tolerance:
        logger.warning("axiom 3: degenerate crease for anti-parallel lines, no fold")
        return None
    return bundle_results(paper, crease, config)


def fold_axiom_4(paper: Paper, p0: Point,
                 l0_src: Point, l0_dst: Point,
                 config: Optional[SolverConfig] = None) -> FoldResult:
    """Fold through ``p0`` perpendicular to line ``l0``."""
    config = config or SolverConfig()
    l = _segment(l0_src, l0_dst, config)
    crease = solver.axiom_4(_mv(p0, config), l)
    return bundle_results(paper, crease, config)


def fold_axiom_5(paper: Paper, p0: Point, p1: Point,
                 l0_src: Point, l0_dst: Point,
                 config: Optional[SolverConfig] = None) -> Optional[FoldResult]:
    """Fold ``p0`` onto line ``l0`` with a crease through ``p1``."""
    config = config or SolverConfig()
    l = _segment(l0_src, l0_dst, config)
    crease = solver.axiom_5(_mv(p0, config), _mv(p1, config), l, tolerance=config.tolerance)
    if crease is None:
        return None
    return bundle_results(paper, crease, config)


def fold_axiom_6(paper: Paper, p0: Point, p1: Point,
                 l0_src: Point, l0_dst: Point,
                 l1_src: Point, l1_dst: Point,
                 config: Optional[SolverConfig] = None) -> Optional[FoldResult]:
    """
    Fold ``p0`` onto ``l0`` and ``p1`` onto ``l1``.

    Raises:
        UnsupportedAxiomError: always
    """
    raise UnsupportedAxiomError("Axiom 6 folds are not supported")


def fold_axiom_7(paper: Paper, p0: Point,
                 l0_src: Point, l0_dst: Point,
                 l1_src: Point, l1_dst: Point,
                 config: Optional[SolverConfig] = None) -> Optional[FoldResult]:
    """Fold ``p0`` onto line ``l0`` with a crease perpendicular to ``l1``."""
    config = config or SolverConfig()
    l0 = _segment(l0_src, l0_dst, config)
    l1 = _segment(l1_src, l1_dst, config)
    crease = solver.axiom_7(_mv(p0, config), l0, l1, tolerance=config.tolerance)
    if crease is None:
        return None
    return bundle_results(paper, crease, config)
