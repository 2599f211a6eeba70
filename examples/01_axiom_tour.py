"""
Example 01: A Tour of the Folding Axioms

Demonstrates:
1. Building points and lines in 2D PGA and reading them back.
2. Solving each supported Huzita–Justin axiom on a unit square.
3. Folding the sheet along each crease and plotting the result.

Axiom 6 is attempted too, to show how the unsupported case is reported.
"""

import logging

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from pga_axioms.core import UnsupportedAxiomError
from pga_axioms.folding import (
    Paper,
    Point,
    fold_axiom_1,
    fold_axiom_2,
    fold_axiom_3,
    fold_axiom_4,
    fold_axiom_5,
    fold_axiom_6,
    fold_axiom_7,
)
from pga_axioms.pga import point, line, join, meet, point_to_cartesian, line_coefficients
from pga_axioms.utils import SolverConfig, plot_fold

# =============================================================================
# 1. Points and Lines
# =============================================================================

def algebra_basics():
    print("=" * 60)
    print("Points and Lines")
    print("=" * 60)

    p = point(1.0, 2.0)
    q = point(3.0, -1.0)
    l = join(p, q)
    print(f"p           = {p}")
    print(f"q           = {q}")
    print(f"join(p, q)  = {l}  (a, b, c) = {line_coefficients(l).tolist()}")

    x_axis = line(0.0, 1.0, 0.0)
    crossing = meet(l, x_axis)
    print(f"meet with y = 0 at {point_to_cartesian(crossing).tolist()}")

# =============================================================================
# 2. Folding
# =============================================================================

def fold_tour():
    print("\n" + "=" * 60)
    print("Folding a Unit Square")
    print("=" * 60)

    config = SolverConfig(dtype='float64')
    paper = Paper.square(1.0, cx=0.5, cy=0.5)

    # Corners and edges of the sheet
    ll, lr, ur, ul = Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)

    folds = {
        'Axiom 1: through two corners': fold_axiom_1(paper, ll, ur, config),
        'Axiom 2: corner onto corner': fold_axiom_2(paper, ll, lr, config),
        'Axiom 3: bottom edge onto left edge': fold_axiom_3(paper, ll, lr, ll, ul, config),
        'Axiom 4: through centre, perpendicular to bottom': fold_axiom_4(
            paper, Point(0.5, 0.5), ll, lr, config
        ),
        'Axiom 5: corner onto top edge through centre': fold_axiom_5(
            paper, ll, Point(0.5, 0.5), ul, ur, config
        ),
        'Axiom 7: corner onto right edge, perpendicular to top': fold_axiom_7(
            paper, ll, lr, ur, ul, ur, config
        ),
    }

    try:
        fold_axiom_6(paper, ll, ur, lr, ur, ul, ur, config)
    except UnsupportedAxiomError as e:
        print(f"Axiom 6: {e}")

    fig, axes = plt.subplots(2, 3, figsize=(15, 10))
    for ax, (title, result) in zip(axes.flat, folds.items()):
        if result is None:
            print(f"{title}: no fold")
            ax.set_title(f"{title}\n(no fold)")
            continue
        print(f"{title}: crease {result.line}")
        plot_fold(paper, result, ax=ax, title=title)

    plt.tight_layout()
    plt.savefig("01_axiom_tour.png")
    print("Saved 01_axiom_tour.png")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    algebra_basics()
    fold_tour()
