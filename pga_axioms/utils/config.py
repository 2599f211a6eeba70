"""
Configuration management for PGA-Axioms.

Provides a configuration class for the tolerances and tensor settings used
when solving folds for a host application.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any
from pathlib import Path

import torch

from ..core.constants import DEFAULT_TOLERANCE

logger = logging.getLogger(__name__)

_DTYPES = {
    'float32': torch.float32,
    'float64': torch.float64,
}


@dataclass
class SolverConfig:
    """
    Configuration for fold solving.

    Attributes:
        tolerance: Band used for parallelism, incidence and side tests
        dtype: Tensor dtype for boundary conversions ('float32' or 'float64')
        device: Device for boundary conversions ('cpu', 'cuda', 'mps')
        extra: Unrecognised keys from a loaded config
    """

    tolerance: float = DEFAULT_TOLERANCE
    dtype: str = 'float32'
    device: str = 'cpu'

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.dtype not in _DTYPES:
            raise ValueError(f"Unsupported dtype '{self.dtype}', expected one of {sorted(_DTYPES)}")
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")

    @property
    def torch_dtype(self) -> torch.dtype:
        return _DTYPES[self.dtype]

    @property
    def torch_device(self) -> torch.device:
        return torch.device(self.device)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SolverConfig':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields and k != 'extra'}
        unknown = {k: v for k, v in config_dict.items() if k not in known_fields}
        if unknown:
            logger.warning(f"Unknown config keys kept in 'extra': {sorted(unknown)}")

        extra_kwargs = dict(config_dict.get('extra') or {})
        extra_kwargs.update(unknown)

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'SolverConfig':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return SolverConfig.from_dict(config_dict)


def load_config(filepath: str) -> SolverConfig:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        SolverConfig object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    return SolverConfig.from_dict(config_dict)


def save_config(config: SolverConfig, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: SolverConfig object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
