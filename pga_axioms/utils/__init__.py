"""
Utility functions for PGA-Axioms.

Includes configuration management and fold plotting.
"""

from .config import SolverConfig, load_config, save_config
from .visualization import PlotStyle, plot_fold

__all__ = [
    # Config
    "SolverConfig",
    "load_config",
    "save_config",
    # Visualization
    "PlotStyle",
    "plot_fold",
]
