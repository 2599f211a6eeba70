"""
Pytest configuration and fixtures for PGA-Axioms tests.
"""

import pytest
import torch

from pga_axioms.pga.algebra import Multivector
from pga_axioms.pga.primitives import point, line
from pga_axioms.folding import Paper


@pytest.fixture
def device():
    """Get available device."""
    if torch.cuda.is_available():
        return torch.device('cuda')
    elif torch.backends.mps.is_available():
        return torch.device('mps')
    return torch.device('cpu')


@pytest.fixture
def cpu_device():
    """Force CPU device for consistent testing."""
    return torch.device('cpu')


@pytest.fixture
def batch_size():
    """Default batch size for tests."""
    return 16


@pytest.fixture
def generator():
    """Seeded generator so random batches are reproducible."""
    return torch.Generator().manual_seed(0)


@pytest.fixture
def random_mv(batch_size, generator):
    """Random float64 multivectors of shape (batch_size,)."""
    return Multivector(torch.randn(batch_size, 8, generator=generator, dtype=torch.float64))


@pytest.fixture
def random_mv_pair(batch_size, generator):
    """Two independent random float64 multivector batches."""
    a = torch.randn(batch_size, 8, generator=generator, dtype=torch.float64)
    b = torch.randn(batch_size, 8, generator=generator, dtype=torch.float64)
    return Multivector(a), Multivector(b)


@pytest.fixture
def random_points(batch_size, generator):
    """Random Euclidean points with coordinates in [-2, 2]^2."""
    coords = torch.rand(batch_size, 2, generator=generator, dtype=torch.float64) * 4 - 2
    return point(coords[:, 0], coords[:, 1])


@pytest.fixture
def x_axis():
    """The line y = 0."""
    return line(0.0, 1.0, 0.0)


@pytest.fixture
def y_axis():
    """The line x = 0."""
    return line(1.0, 0.0, 0.0)


@pytest.fixture
def unit_square():
    """Axis-aligned unit square with corners (0, 0) and (1, 1)."""
    return Paper.square(1.0, cx=0.5, cy=0.5)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "gpu: marks tests that require GPU"
    )


def pytest_collection_modifyitems(config, items):
    """Skip GPU tests if no GPU available."""
    if not torch.cuda.is_available():
        skip_gpu = pytest.mark.skip(reason="No GPU available")
        for item in items:
            if "gpu" in item.keywords:
                item.add_marker(skip_gpu)
