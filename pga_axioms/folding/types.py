"""
Plain data types exchanged with a host application.

The host works in Cartesian terms: points are (x, y) and lines are
(a, b, c) for ax + by + c = 0. These types convert to and from
multivectors and serialize to JSON-friendly dictionaries.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
import torch

from ..pga.algebra import Multivector
from ..pga import primitives


@dataclass(frozen=True)
class Point:
    """A Euclidean point (x, y)."""

    x: float
    y: float

    def to_multivector(
        self,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None
    ) -> Multivector:
        """Point as the bivector x*e20 + y*e01 + e12."""
        return primitives.point(float(self.x), float(self.y)).to(device=device, dtype=dtype)

    @classmethod
    def from_multivector(cls, mv: Multivector) -> 'Point':
        """
        Read (x, y) from a point multivector, dividing out its weight.
        """
        x, y = primitives.point_to_cartesian(mv).tolist()
        return cls(x, y)

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class Line:
    """The line ax + by + c = 0."""

    a: float
    b: float
    c: float

    def to_multivector(
        self,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None
    ) -> Multivector:
        """Line as the vector c*e0 + a*e1 + b*e2."""
        return primitives.line(float(self.a), float(self.b), float(self.c)).to(device=device, dtype=dtype)

    @classmethod
    def from_multivector(cls, mv: Multivector) -> 'Line':
        a, b, c = primitives.line_coefficients(mv).tolist()
        return cls(a, b, c)

    @classmethod
    def through(cls, src: Point, dst: Point) -> 'Line':
        """The line through two points, oriented from ``src`` to ``dst``."""
        return cls.from_multivector(primitives.join(src.to_multivector(), dst.to_multivector()))

    def to_dict(self) -> Dict[str, float]:
        return {'a': self.a, 'b': self.b, 'c': self.c}


@dataclass
class FoldResult:
    """
    The outcome of folding a sheet along a crease.

    Attributes:
        line: The crease
        positive: Outline of the part that stays in place
        negative: Outline of the part that was folded over (already reflected)
    """

    line: Line
    positive: List[Point] = field(default_factory=list)
    negative: List[Point] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'line': self.line.to_dict(),
            'positive': [p.to_dict() for p in self.positive],
            'negative': [p.to_dict() for p in self.negative],
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def to_numpy(self) -> Dict[str, np.ndarray]:
        """
        Outlines as arrays.

        Returns:
            Dict with 'line' of shape (3,) and 'positive' / 'negative'
            of shape (N, 2)
        """
        def _outline(points: List[Point]) -> np.ndarray:
            return np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)

        return {
            'line': np.array([self.line.a, self.line.b, self.line.c], dtype=np.float64),
            'positive': _outline(self.positive),
            'negative': _outline(self.negative),
        }
