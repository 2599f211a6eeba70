"""
Rigid transformations in 2D PGA.

Rotors and translators are even-grade multivectors (scalar + bivector)
applied with the sandwich product R X R̄. Any grade of element can be
transformed this way: points, lines, or other versors.

``translator(dx, dy)`` is built from ideal_point(dy, -dx) on purpose: a
translator made from ideal_point(dx, -dy) would move by (dy, dx) instead.
"""

from __future__ import annotations
from typing import Union
import torch

from .algebra import Multivector, sandwich
from .primitives import point, ideal_point


def _as_tensor(value: Union[float, torch.Tensor]) -> torch.Tensor:
    if isinstance(value, torch.Tensor):
        return value
    return torch.as_tensor(value, dtype=torch.get_default_dtype())


def rotor(
    angle: Union[float, torch.Tensor],
    cx: Union[float, torch.Tensor] = 0.0,
    cy: Union[float, torch.Tensor] = 0.0
) -> Multivector:
    """
    Rotor for a rotation by ``angle`` radians about the point (cx, cy).

        R = cos(angle/2) + sin(angle/2) * C

    where C is the normalized center point. With y pointing up a positive
    angle turns clockwise (counter-clockwise on a y-down canvas).
    """
    half_angle = _as_tensor(angle) * 0.5
    center = point(cx, cy)
    return center * torch.sin(half_angle) + torch.cos(half_angle)


def translator_from_ideal_point(direction: Multivector) -> Multivector:
    """
    Translator T = 1 + P∞ / 2 built from an ideal point.

    The translation is orthogonal to the direction of P∞, by a distance
    equal to its ideal norm: P∞ = (x, y) moves elements by (-y, x).
    """
    return direction * 0.5 + 1.0


def translator(
    dx: Union[float, torch.Tensor],
    dy: Union[float, torch.Tensor]
) -> Multivector:
    """
    Translator that moves elements by (dx, dy).

    The ideal point is the quarter-turn of (dx, dy), since a translator
    moves orthogonally to its ideal point.
    """
    return translator_from_ideal_point(ideal_point(dy, -_as_tensor(dx)))


def rotate(
    element: Multivector,
    angle: Union[float, torch.Tensor],
    cx: Union[float, torch.Tensor] = 0.0,
    cy: Union[float, torch.Tensor] = 0.0
) -> Multivector:
    """
    Rotate a geometric element about the point (cx, cy).

    Args:
        element: Multivector to rotate
        angle: Rotation angle in radians
        cx, cy: Center of rotation (defaults to origin)

    Returns:
        Rotated multivector
    """
    return sandwich(rotor(angle, cx, cy), element)


def translate(
    element: Multivector,
    dx: Union[float, torch.Tensor],
    dy: Union[float, torch.Tensor]
) -> Multivector:
    """
    Translate a geometric element by (dx, dy).

    Args:
        element: Multivector to translate
        dx, dy: Translation vector

    Returns:
        Translated multivector
    """
    return sandwich(translator(dx, dy), element)


def transform(element: Multivector, versor: Multivector) -> Multivector:
    """
    Apply an arbitrary rotor/translator (or their product) to an element.
    """
    return sandwich(versor, element)


def compose(*versors: Multivector) -> Multivector:
    """
    Compose versors so that the first argument is applied first.

    compose(A, B) applied to X equals B (A X Ā) B̄.
    """
    if not versors:
        raise ValueError("compose() needs at least one versor")
    result = versors[0]
    for versor in versors[1:]:
        result = versor * result
    return result
