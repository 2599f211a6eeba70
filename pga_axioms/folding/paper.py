"""
A sheet of paper and what happens to it along a crease.

The crease splits the (convex) sheet into the part on its positive side,
which stays in place, and the part on its negative side, which is
reflected across the crease to simulate the fold.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import torch

from ..core.constants import DEFAULT_TOLERANCE
from ..pga.algebra import Multivector
from ..pga.geometry import dist_point_to_line, reflect, sign_with_tolerance
from ..pga.primitives import join, meet
from .types import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Paper:
    """
    A convex sheet given by its corners in drawing order.
    """

    vertices: Tuple[Point, ...]

    def __post_init__(self):
        if len(self.vertices) < 3:
            raise ValueError(f"A sheet needs at least 3 vertices, got {len(self.vertices)}")
        object.__setattr__(self, 'vertices', tuple(self.vertices))

    @classmethod
    def rectangle(cls, ul: Point, ur: Point, lr: Point, ll: Point) -> 'Paper':
        """Sheet from its upper-left, upper-right, lower-right and lower-left corners."""
        return cls((ul, ur, lr, ll))

    @classmethod
    def square(cls, size: float, cx: float = 0.0, cy: float = 0.0) -> 'Paper':
        """Axis-aligned square sheet of side ``size`` centred on (cx, cy)."""
        h = size * 0.5
        return cls.rectangle(
            Point(cx - h, cy - h),
            Point(cx + h, cy - h),
            Point(cx + h, cy + h),
            Point(cx - h, cy + h),
        )

    def points(
        self,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None
    ) -> List[Multivector]:
        return [v.to_multivector(dtype=dtype, device=device) for v in self.vertices]

    def intersect(
        self,
        crease: Multivector,
        tolerance: float = DEFAULT_TOLERANCE,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None
    ) -> Tuple[List[Point], List[Point]]:
        """
        Split the sheet along ``crease``.

        Returns:
            (positive, negative) outlines. Points on the crease belong to
            both; the negative outline is reflected across the crease.
        """
        vertices = self.points(dtype=dtype, device=device)
        crease = crease.to(device=vertices[0].device, dtype=vertices[0].dtype)

        def side(p: Multivector) -> float:
            return sign_with_tolerance(float(dist_point_to_line(p, crease)), tolerance)

        signs = [side(v) for v in vertices]

        cut_points = []
        for i, vertex in enumerate(vertices):
            # The other vertex that forms this edge of the sheet
            j = (i + 1) % len(vertices)

            # Always include the corner points
            cut_points.append(vertex)

            # Edge strictly crosses the crease: insert the crossing point
            if signs[i] != 0.0 and signs[j] != 0.0 and signs[i] != signs[j]:
                edge = join(vertex, vertices[j])
                cut_points.append(meet(edge, crease))

        positive = []
        negative = []
        for p in cut_points:
            p = p.normalize()
            s = side(p)
            if s <= 0.0:
                negative.append(Point.from_multivector(reflect(p, crease)))
            if s >= 0.0:
                positive.append(Point.from_multivector(p))

        logger.debug(
            f"Split sheet into {len(positive)} positive and {len(negative)} negative points"
        )
        return positive, negative
