"""
Huzita–Justin origami axioms in 2D PGA.

Each axiom consumes points (grade-2) and lines (grade-1) and returns the
crease line that realises the fold, or None when the configuration has no
solution. Axiom 6 needs a cubic tangency solver and is not supported.

All functions work on single, unbatched multivectors.
"""

import logging
import math
from typing import Callable, Dict

from ..core.constants import DEFAULT_TOLERANCE, PI
from ..core.exceptions import UnsupportedAxiomError
from ..core.types import CreaseList, MaybeMultivector
from ..pga.algebra import Multivector, pseudoscalar, sandwich
from ..pga.geometry import (
    angle,
    bisector,
    dist_point_to_line,
    dist_point_to_point,
    midpoint,
    normalize_point,
    orthogonal,
    project,
)
from ..pga.primitives import join, meet
from ..pga.transforms import translator_from_ideal_point

logger = logging.getLogger(__name__)


def _is_degenerate(crease: Multivector, tolerance: float) -> bool:
    return float(crease.norm()) < tolerance


def axiom_1(p0: Multivector, p1: Multivector) -> Multivector:
    """
    Given two points ``p0`` and ``p1``, there is a unique fold that passes
    through both of them.
    """
    return join(p0, p1).normalize()


def axiom_2(p0: Multivector, p1: Multivector) -> Multivector:
    """
    Given two points ``p0`` and ``p1``, there is a unique fold that places
    ``p0`` onto ``p1``.

    The crease is the perpendicular bisector of the segment p0 p1.
    """
    return orthogonal(midpoint(p0, p1), join(p0, p1)).normalize()


def axiom_3(l0: Multivector, l1: Multivector) -> Multivector:
    """
    Given two lines ``l0`` and ``l1``, there is a fold that places ``l0``
    onto ``l1``.

    Returns the bisector normalize(l0) + normalize(l1). When the lines are
    parallel with opposite orientation this is degenerate (norm ≈ 0) and
    the caller must discard it; see axiom_3_candidates for both bisectors.
    """
    return bisector(l0, l1).normalize()


def axiom_3_candidates(
    l0: Multivector,
    l1: Multivector,
    tolerance: float = DEFAULT_TOLERANCE
) -> CreaseList:
    """
    Every non-degenerate crease that places ``l0`` onto ``l1``.

    Two creases for intersecting lines, one for parallel lines.
    """
    l0 = l0.normalize()
    l1 = l1.normalize()
    candidates = [(l0 + l1).normalize(), (l0 - l1).normalize()]
    return [c for c in candidates if not _is_degenerate(c, tolerance)]


def axiom_4(p: Multivector, l: Multivector) -> Multivector:
    """
    Given a point ``p`` and a line ``l``, there is a unique fold
    perpendicular to ``l`` that passes through ``p``.
    """
    return orthogonal(p, l).normalize()


def axiom_5_candidates(
    p0: Multivector,
    p1: Multivector,
    l: Multivector,
    tolerance: float = DEFAULT_TOLERANCE
) -> CreaseList:
    """
    Every fold through ``p1`` that places ``p0`` onto ``l``.

    The image of p0 must lie on the circle centred on p1 with radius
    |p0 p1|, so the candidates come from intersecting that circle with l:
    none when the line misses the circle, one when it is tangent, two
    otherwise.
    """
    # Radius of the circle centred on p1 that passes through p0
    r = float(dist_point_to_point(p0, p1))

    # Distance from the centre of the circle to the line
    h = abs(float(dist_point_to_line(p1, l)))

    if h > r:
        logger.debug(f"axiom 5: line misses circle (h={h:.6f} > r={r:.6f})")
        return []

    # Foot of the perpendicular from p1 onto l
    foot = normalize_point(meet(orthogonal(p1, l), l))

    # Pythagoras: half the chord the line cuts from the circle
    d = math.sqrt(max(r * r - h * h, 0.0))

    # l * I is the ideal point in the direction of l's normal; a translator
    # built from it moves along l
    direction = (l * pseudoscalar()).normalize_ideal()

    offsets = [d] if d < tolerance else [d, -d]
    creases = []
    for offset in offsets:
        intersection = sandwich(translator_from_ideal_point(direction * offset), foot)

        if float(dist_point_to_point(intersection, p0)) < tolerance:
            # p0 already lies on l: fold along the line through p0 and p1
            crease = join(p0, p1).normalize()
        else:
            # The crease is the perpendicular bisector of (intersection, p0),
            # which always passes through p1
            crease = orthogonal(p1, join(intersection, p0)).normalize()
        if _is_degenerate(crease, tolerance):
            continue
        creases.append(crease)
    return creases


def axiom_5(
    p0: Multivector,
    p1: Multivector,
    l: Multivector,
    tolerance: float = DEFAULT_TOLERANCE
) -> MaybeMultivector:
    """
    Given two points ``p0`` and ``p1`` and a line ``l``, there is a fold
    that places ``p0`` onto ``l`` and passes through ``p1``.

    Returns one of the (generally two) solutions, or None when
    dist(p1, l) > dist(p0, p1).
    """
    creases = axiom_5_candidates(p0, p1, l, tolerance)
    if not creases:
        return None
    return creases[0]


def axiom_6(
    p0: Multivector,
    p1: Multivector,
    l0: Multivector,
    l1: Multivector,
    tolerance: float = DEFAULT_TOLERANCE
) -> MaybeMultivector:
    """
    Given two points ``p0`` and ``p1`` and two lines ``l0`` and ``l1``,
    there is a fold that places ``p0`` onto ``l0`` and ``p1`` onto ``l1``.

    Solving it means finding a common tangent of two parabolas (a cubic),
    which is not supported.

    Raises:
        UnsupportedAxiomError: always
    """
    raise UnsupportedAxiomError("Axiom 6 (common tangent of two parabolas) is not supported")


def axiom_7(
    p: Multivector,
    l0: Multivector,
    l1: Multivector,
    tolerance: float = DEFAULT_TOLERANCE
) -> MaybeMultivector:
    """
    Given a point ``p`` and two lines ``l0`` and ``l1``, there is a fold
    that places ``p`` onto ``l0`` and is perpendicular to ``l1``.

    Returns None when ``l0`` and ``l1`` are parallel.
    """
    theta = float(angle(l0, l1))
    if theta < tolerance or abs(theta - PI) < tolerance:
        logger.debug(f"axiom 7: lines are parallel (angle={theta:.6f})")
        return None

    # The line through p parallel to l1, intersected with l0, is where p lands
    shifted = project(l1, p)
    target = normalize_point(meet(shifted, l0))

    center = midpoint(p, target)
    return orthogonal(center, l1).normalize()


AXIOMS: Dict[int, Callable[..., MaybeMultivector]] = {
    1: axiom_1,
    2: axiom_2,
    3: axiom_3,
    4: axiom_4,
    5: axiom_5,
    6: axiom_6,
    7: axiom_7,
}


def solve(number: int, *args: Multivector, **kwargs) -> MaybeMultivector:
    """
    Dispatch to the solver for axiom ``number``.

    Raises:
        ValueError: if ``number`` is not between 1 and 7
    """
    try:
        solver = AXIOMS[number]
    except KeyError:
        raise ValueError(f"Unknown axiom {number}, expected 1-7") from None
    return solver(*args, **kwargs)
