"""
PGA (Projective Geometric Algebra) module.

Implements the algebra of G(2,0,1) with 8-component multivectors,
geometric products, metric queries on points and lines, and rigid
transformations (rotors and translators).
"""

from .algebra import (
    Multivector,
    geometric_product,
    outer_product,
    inner_product,
    regressive_product,
    sandwich,
    scalar,
    pseudoscalar,
    e0, e1, e2,
    e01, e20, e12,
    e012,
)

from .primitives import (
    point,
    ideal_point,
    origin,
    line,
    point_from_tensor,
    point_to_cartesian,
    is_ideal,
    line_from_tensor,
    line_coefficients,
    line_from_points,
    join,
    meet,
)

from .geometry import (
    dist_point_to_point,
    dist_point_to_line,
    angle,
    bisector,
    project,
    project_point_onto_line,
    project_line_onto_point,
    orthogonal,
    reflect,
    midpoint,
    normalize_point,
    intersect_lines,
    sign_with_tolerance,
)

from .transforms import (
    rotor,
    translator,
    translator_from_ideal_point,
    rotate,
    translate,
    transform,
    compose,
)

__all__ = [
    # Algebra
    "Multivector",
    "geometric_product",
    "outer_product",
    "inner_product",
    "regressive_product",
    "sandwich",
    "scalar",
    "pseudoscalar",
    # Basis elements
    "e0", "e1", "e2",
    "e01", "e20", "e12",
    "e012",
    # Primitives
    "point",
    "ideal_point",
    "origin",
    "line",
    "point_from_tensor",
    "point_to_cartesian",
    "is_ideal",
    "line_from_tensor",
    "line_coefficients",
    "line_from_points",
    "join",
    "meet",
    # Geometry
    "dist_point_to_point",
    "dist_point_to_line",
    "angle",
    "bisector",
    "project",
    "project_point_onto_line",
    "project_line_onto_point",
    "orthogonal",
    "reflect",
    "midpoint",
    "normalize_point",
    "intersect_lines",
    "sign_with_tolerance",
    # Transforms
    "rotor",
    "translator",
    "translator_from_ideal_point",
    "rotate",
    "translate",
    "transform",
    "compose",
]
