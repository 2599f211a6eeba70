"""
Metric queries and constructions on points and lines in 2D PGA.

Every function here is expressed purely through the algebra operators.
Inputs are normalized internally, so callers may pass homogeneous points
with any weight and lines with any scale.
"""

from __future__ import annotations
from typing import Union
import torch

from .algebra import Multivector, inner_product, outer_product
from .primitives import join, meet
from ..core.constants import DEFAULT_TOLERANCE


def dist_point_to_point(p1: Multivector, p2: Multivector) -> torch.Tensor:
    """
    Distance between two points.

    Algebraically, this is the norm of the line joining the two points.
    """
    return join(p1.normalize(), p2.normalize()).norm()


def dist_point_to_line(p: Multivector, l: Multivector) -> torch.Tensor:
    """
    Signed distance from point ``p`` to line ``l``.

    This is the pseudoscalar part of p ∧ l. For a normalized point and
    line it equals ax + by + c, so its sign tells which side of the
    line the point is on.
    """
    return outer_product(p.normalize(), l.normalize()).e012()


def angle(l1: Multivector, l2: Multivector) -> torch.Tensor:
    """
    Angle between two lines, in [0, π].

    The cosine of the angle is the inner product of the normalized lines.
    It is clamped to [-1, 1] before acos so round-off never yields NaN.
    """
    cos_theta = inner_product(l1.normalize(), l2.normalize()).scalar()
    return torch.acos(cos_theta.clamp(-1.0, 1.0))


def bisector(l1: Multivector, l2: Multivector) -> Multivector:
    """
    One of the two angle bisectors of ``l1`` and ``l2``.

    The other one is ``orthogonal(meet(l1, l2), bisector(l1, l2))``. For
    parallel lines of opposite orientation the sum degenerates to a
    multiple of the ideal line (or zero), which has norm 0.
    """
    return l1.normalize() + l2.normalize()


def project(a: Multivector, b: Multivector) -> Multivector:
    """
    Project ``a`` onto ``b``: (a · b) b.

    - point onto line: the foot of the perpendicular from the point
    - line onto point: the line through the point parallel to the line
    """
    a = a.normalize()
    b = b.normalize()
    return inner_product(a, b) * b


def project_point_onto_line(p: Multivector, l: Multivector) -> Multivector:
    """The point on ``l`` closest to ``p``."""
    return project(p, l)


def project_line_onto_point(l: Multivector, p: Multivector) -> Multivector:
    """The line through ``p`` parallel to ``l``."""
    return project(l, p)


def orthogonal(p: Multivector, l: Multivector) -> Multivector:
    """
    The line through point ``p`` perpendicular to line ``l``: p · l.
    """
    return inner_product(p, l)


def reflect(a: Multivector, b: Multivector) -> Multivector:
    """
    Reflect ``a`` across ``b`` with the sandwich b a b.

    Reflecting a point across a normalized line yields a point whose
    weight has flipped sign; divide by e12 (or use point_to_cartesian)
    to read its coordinates.
    """
    a = a.normalize()
    b = b.normalize()
    return b * a * b


def normalize_point(p: Multivector) -> Multivector:
    """
    Normalize a point to weight +1.

    ``normalize`` divides by |w|, so a point with negative weight (as
    produced by ``reflect`` or by ``meet`` with swapped operands) keeps
    w = -1. Summing such points cancels their weights; this flips them
    back first. Ideal points keep their sign.
    """
    p = p.normalize()
    w = p.e12()
    sign = torch.where(w < 0, -torch.ones_like(w), torch.ones_like(w))
    return Multivector(p.mv * sign.unsqueeze(-1))


def midpoint(p: Multivector, q: Multivector) -> Multivector:
    """The normalized midpoint of two Euclidean points of any weight."""
    return (normalize_point(p) + normalize_point(q)).normalize()


def intersect_lines(l1: Multivector, l2: Multivector) -> Multivector:
    """Point of intersection of two lines (ideal if they are parallel)."""
    return meet(l1, l2)


def sign_with_tolerance(
    value: Union[float, torch.Tensor],
    tolerance: float = DEFAULT_TOLERANCE
) -> Union[float, torch.Tensor]:
    """
    Sign of ``value``, or 0 when it lies within ``tolerance`` of zero.

    Returns a float for python input and a tensor for tensor input.
    """
    if isinstance(value, torch.Tensor):
        positive = (value > tolerance).to(value.dtype)
        negative = (value < -tolerance).to(value.dtype)
        return positive - negative
    if value > tolerance:
        return 1.0
    if value < -tolerance:
        return -1.0
    return 0.0
