"""
Visualization utilities for PGA-Axioms.

Plots a sheet, a crease and the two halves produced by folding along it.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np

from ..folding.paper import Paper
from ..folding.types import FoldResult, Line, Point


@dataclass
class PlotStyle:
    """Plotting style for fold diagrams."""
    figsize: Tuple[int, int] = (6, 6)
    dpi: int = 100
    paper_color: str = '#888888'
    positive_color: str = '#4ECDC4'
    negative_color: str = '#FF6B6B'
    crease_color: str = '#1a1a2e'
    fill_alpha: float = 0.5
    margin: float = 0.1


DEFAULT_STYLE = PlotStyle()


def _ensure_matplotlib():
    """Ensure matplotlib is available."""
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install matplotlib"
        )


def _outline(points: List[Point]) -> np.ndarray:
    return np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)


def _crease_segment(
    line: Line,
    xlim: Tuple[float, float],
    ylim: Tuple[float, float]
) -> np.ndarray:
    """
    Two points of ``line`` spanning the plot window.

    Solves ax + by + c = 0 for y along the x range, or for x along the
    y range when the line is closer to vertical.
    """
    if abs(line.b) >= abs(line.a):
        xs = np.array(xlim, dtype=np.float64)
        ys = -(line.a * xs + line.c) / line.b
    else:
        ys = np.array(ylim, dtype=np.float64)
        xs = -(line.b * ys + line.c) / line.a
    return np.stack([xs, ys], axis=-1)


def plot_fold(
    paper: Paper,
    result: Optional[FoldResult] = None,
    ax: Any = None,
    title: str = None,
    style: PlotStyle = None,
):
    """
    Draw a sheet and, if given, the result of folding it.

    The unfolded outline is dashed; the part that stays and the part that
    was folded over are filled in different colours, and the crease is
    drawn across the whole window.

    Args:
        paper: The unfolded sheet
        result: Output of one of the fold_axiom_N functions
        ax: Existing matplotlib axis
        title: Plot title
        style: PlotStyle configuration

    Returns:
        The matplotlib axis
    """
    plt = _ensure_matplotlib()
    style = style or DEFAULT_STYLE

    if ax is None:
        fig = plt.figure(figsize=style.figsize, dpi=style.dpi)
        ax = fig.add_subplot(111)

    outline = _outline(list(paper.vertices))
    closed = np.vstack([outline, outline[:1]])
    ax.plot(closed[:, 0], closed[:, 1], linestyle='--', color=style.paper_color, label='paper')

    # Window covering the sheet and everything folded off it
    extent = [outline]
    if result is not None:
        extent += [_outline(result.positive), _outline(result.negative)]
    extent = np.vstack(extent)
    lo = extent.min(axis=0)
    hi = extent.max(axis=0)
    pad = style.margin * max(float((hi - lo).max()), 1.0)
    xlim = (float(lo[0] - pad), float(hi[0] + pad))
    ylim = (float(lo[1] - pad), float(hi[1] + pad))

    if result is not None:
        for points, color, label in (
            (result.positive, style.positive_color, 'positive'),
            (result.negative, style.negative_color, 'negative'),
        ):
            poly = _outline(points)
            if len(poly) >= 3:
                ax.fill(poly[:, 0], poly[:, 1], color=color, alpha=style.fill_alpha, label=label)

        segment = _crease_segment(result.line, xlim, ylim)
        ax.plot(segment[:, 0], segment[:, 1], color=style.crease_color, linewidth=2, label='crease')

    ax.set_xlim(*xlim)
    ax.set_ylim(*ylim)
    ax.set_aspect('equal')
    ax.legend(loc='best')
    if title:
        ax.set_title(title)

    return ax
