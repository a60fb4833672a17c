"""Shared pytest fixtures for the region_lib test suite.

Fixtures:
    standard_region: 1024x1024 region at the origin
    offset_region: 500x600 region at (100, 200)
    rng: Seeded numpy random generator for property tests
    random_strokes: Factory producing random strokes around a region

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from region_lib.domain.geometry import BoundaryRegion, Point, Stroke


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (skip with -m 'not slow')"
    )


@pytest.fixture
def standard_region():
    """The 1024x1024 region used throughout the host editor's defaults."""
    return BoundaryRegion(0, 0, 1024, 1024)


@pytest.fixture
def offset_region():
    """Region whose corner is not at the origin."""
    return BoundaryRegion(100, 200, 500, 600)


@pytest.fixture
def rng():
    """Seeded generator so property tests are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def random_strokes(rng):
    """Factory for random strokes scattered in and around a region.

    Origins and points are arbitrary floats, so absolute <-> relative
    conversions round.
    """
    def _make(region, count=50, max_points=40):
        strokes = []
        span = max(region.width, region.height)
        for _ in range(count):
            n = int(rng.integers(1, max_points + 1))
            origin = Point(float(rng.uniform(region.x - span, region.max_x + span)),
                           float(rng.uniform(region.y - span, region.max_y + span)))
            rel = rng.uniform(-span, span, size=(n, 2))
            strokes.append(Stroke.from_array(origin, rel))
        return strokes
    return _make
