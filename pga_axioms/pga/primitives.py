"""
Geometric primitives in 2D Projective Geometric Algebra (PGA).

2D PGA represents geometric objects as follows:
- Lines: Grade-1 vectors (a*e1 + b*e2 + c*e0 for ax + by + c = 0)
- Points: Grade-2 bivectors (x*e20 + y*e01 + w*e12)
- Ideal points: bivectors with w = 0, i.e. directions / points at infinity

Key operations:
- Join (∨): point ∨ point → line through both
- Meet (∧): line ∧ line → their point of intersection
"""

from __future__ import annotations
from typing import Union
import torch

from .algebra import (
    Multivector,
    outer_product,
    regressive_product,
    IDX_E0, IDX_E1, IDX_E2,
    IDX_E01, IDX_E20, IDX_E12,
)
from ..core.constants import BASIS_COUNT, DEFAULT_EPS


def _broadcast(*values: Union[float, torch.Tensor]):
    """Convert python scalars to tensors and broadcast them together."""
    tensors = [
        v if isinstance(v, torch.Tensor) else torch.as_tensor(v, dtype=torch.get_default_dtype())
        for v in values
    ]
    return torch.broadcast_tensors(*tensors)


def point(
    x: Union[float, torch.Tensor],
    y: Union[float, torch.Tensor],
    w: Union[float, torch.Tensor] = 1.0
) -> Multivector:
    """
    Create a PGA point from Cartesian coordinates.

    In 2D PGA, a point is represented as:
        P = x*e20 + y*e01 + w*e12

    The e20 and e01 blades are dual to e1 and e2, which is why x and y
    land on them. A point with w = 1 is normalized.

    Args:
        x, y: Cartesian coordinates (scalars or tensors)
        w: Homogeneous weight

    Returns:
        Point multivector (grade-2 bivector)
    """
    x, y, w = _broadcast(x, y, w)
    mv = torch.zeros(*x.shape, BASIS_COUNT, device=x.device, dtype=x.dtype)
    mv[..., IDX_E01] = y
    mv[..., IDX_E20] = x
    mv[..., IDX_E12] = w
    return Multivector(mv)


def ideal_point(
    x: Union[float, torch.Tensor],
    y: Union[float, torch.Tensor]
) -> Multivector:
    """
    Create an ideal point (point at infinity) from a direction.

    Ideal points have e12 component = 0 and behave like 2D vectors.

    Args:
        x, y: Direction components

    Returns:
        Ideal point multivector
    """
    return point(x, y, 0.0)


def origin() -> Multivector:
    """The origin, e12."""
    return point(0.0, 0.0)


def point_from_tensor(coords: torch.Tensor) -> Multivector:
    """
    Create points from a tensor of coordinates.

    Args:
        coords: Tensor of shape (..., 2) containing [x, y]

    Returns:
        Point multivector
    """
    x, y = coords.unbind(dim=-1)
    return point(x, y)


def point_to_cartesian(p: Multivector, eps: float = DEFAULT_EPS) -> torch.Tensor:
    """
    Extract Cartesian coordinates from a PGA point.

    Euclidean points are divided by their weight. Ideal points (|w| < eps)
    return their raw direction.

    Args:
        p: Point multivector

    Returns:
        Tensor of shape (..., 2) containing [x, y]
    """
    w = p.e12()
    w = torch.where(w.abs() < eps, torch.ones_like(w), w)
    return torch.stack([p.e20() / w, p.e01() / w], dim=-1)


def is_ideal(p: Multivector, eps: float = DEFAULT_EPS) -> torch.Tensor:
    """True where the point lies at infinity (w ≈ 0)."""
    return p.e12().abs() < eps


def line(
    a: Union[float, torch.Tensor],
    b: Union[float, torch.Tensor],
    c: Union[float, torch.Tensor]
) -> Multivector:
    """
    Create the line ax + by + c = 0.

    In 2D PGA, a line is represented as:
        l = a*e1 + b*e2 + c*e0

    Args:
        a, b: Normal vector components
        c: Offset

    Returns:
        Line multivector (grade-1 vector)
    """
    a, b, c = _broadcast(a, b, c)
    mv = torch.zeros(*a.shape, BASIS_COUNT, device=a.device, dtype=a.dtype)
    mv[..., IDX_E0] = c
    mv[..., IDX_E1] = a
    mv[..., IDX_E2] = b
    return Multivector(mv)


def line_from_tensor(coefficients: torch.Tensor) -> Multivector:
    """
    Create lines from a tensor of (a, b, c) coefficients of shape (..., 3).
    """
    a, b, c = coefficients.unbind(dim=-1)
    return line(a, b, c)


def line_coefficients(l: Multivector) -> torch.Tensor:
    """
    Extract (a, b, c) such that the line is ax + by + c = 0.

    Returns:
        Tensor of shape (..., 3)
    """
    return torch.stack([l.e1(), l.e2(), l.e0()], dim=-1)


def line_from_points(p1: Multivector, p2: Multivector) -> Multivector:
    """
    Create a line through two points using the join operation.

    L = P1 ∨ P2, oriented from P1 towards P2.
    """
    return regressive_product(p1, p2)


def join(a: Multivector, b: Multivector) -> Multivector:
    """
    Join operation (regressive product): a ∨ b

    For two points this is the line through both of them.
    """
    return regressive_product(a, b)


def meet(a: Multivector, b: Multivector) -> Multivector:
    """
    Meet operation (outer product): a ∧ b

    For two lines this is their point of intersection, which is an
    ideal point when the lines are parallel.
    """
    return outer_product(a, b)
