"""Unit tests for containment predicates.

Tests the functions in region_lib.analysis.containment:
    - is_point_inside: closed point-in-rectangle test
    - overlaps: box touches or intersects the region
    - is_fully_inside: box lies completely in the region
    - region_bounds: bounds tuple of a region
    - classify_points: vectorized is_point_inside
"""

import unittest

import numpy as np

from region_lib.analysis.containment import (
    classify_points,
    is_fully_inside,
    is_point_inside,
    overlaps,
    region_bounds,
)
from region_lib.domain.geometry import BBox, BoundaryRegion, Point

REGION = BoundaryRegion(0, 0, 1024, 1024)


class TestIsPointInside(unittest.TestCase):
    """Tests for is_point_inside function."""

    def test_point_inside(self):
        """Point well inside the region."""
        self.assertTrue(is_point_inside(Point(500, 500), REGION))

    def test_x_too_large(self):
        """x past the right edge is outside."""
        self.assertFalse(is_point_inside(Point(1500, 500), REGION))

    def test_y_too_large(self):
        """y past the bottom edge is outside."""
        self.assertFalse(is_point_inside(Point(500, 1500), REGION))

    def test_negative_x(self):
        """x left of the region is outside."""
        self.assertFalse(is_point_inside(Point(-100, 500), REGION))

    def test_top_left_corner_is_inside(self):
        """Boundary is inclusive."""
        self.assertTrue(is_point_inside(Point(0, 0), REGION))

    def test_bottom_right_corner_is_inside(self):
        """Far corner is inside too."""
        self.assertTrue(is_point_inside(Point(1024, 1024), REGION))

    def test_just_past_edge(self):
        """No tolerance beyond the edge."""
        self.assertFalse(is_point_inside(Point(1024.0001, 10), REGION))

    def test_offset_region(self):
        """Region corner away from the origin."""
        region = BoundaryRegion(100, 200, 500, 600)
        self.assertTrue(is_point_inside(Point(600, 800), region))
        self.assertFalse(is_point_inside(Point(50, 300), region))
        self.assertFalse(is_point_inside(Point(300, 100), region))


class TestOverlaps(unittest.TestCase):
    """Tests for overlaps function."""

    def test_completely_inside(self):
        """Box inside the region overlaps it."""
        self.assertTrue(overlaps(BBox.from_rect(100, 100, 200, 200), REGION))

    def test_partially_overlapping(self):
        """Box straddling the corner overlaps."""
        self.assertTrue(overlaps(BBox.from_rect(900, 900, 300, 300), REGION))

    def test_completely_outside(self):
        """Box past the far corner does not overlap."""
        self.assertFalse(overlaps(BBox.from_rect(2000, 2000, 200, 200), REGION))

    def test_outside_left(self):
        """Box left of the region does not overlap."""
        self.assertFalse(overlaps(BBox.from_rect(-500, 500, 200, 200), REGION))

    def test_touching_edge_counts(self):
        """A box sharing only the right edge still overlaps."""
        self.assertTrue(overlaps(BBox(1024, 100, 1100, 200), REGION))

    def test_touching_corner_counts(self):
        """A single shared corner is enough."""
        self.assertTrue(overlaps(BBox(-10, -10, 0, 0), REGION))

    def test_box_containing_region(self):
        """Box larger than the region overlaps it."""
        self.assertTrue(overlaps(BBox(-100, -100, 2000, 2000), REGION))


class TestIsFullyInside(unittest.TestCase):
    """Tests for is_fully_inside function."""

    def test_fully_inside(self):
        """Box well inside the region."""
        self.assertTrue(is_fully_inside(BBox.from_rect(100, 100, 200, 200), REGION))

    def test_small_box_near_corner(self):
        """(900, 900)-(1000, 1000) still fits in a 1024 region."""
        box = BBox(900, 900, 1000, 1000)
        self.assertTrue(overlaps(box, REGION))
        self.assertTrue(is_fully_inside(box, REGION))

    def test_overlapping_boundary(self):
        """Box straddling the edge overlaps but is not inside."""
        box = BBox.from_rect(900, 900, 300, 300)
        self.assertTrue(overlaps(box, REGION))
        self.assertFalse(is_fully_inside(box, REGION))

    def test_completely_outside(self):
        """Box outside the region is not inside."""
        self.assertFalse(is_fully_inside(BBox.from_rect(2000, 2000, 200, 200), REGION))

    def test_touching_boundary_but_inside(self):
        """Box equal to the region is inside."""
        self.assertTrue(is_fully_inside(BBox.from_rect(0, 0, 1024, 1024), REGION))

    def test_larger_than_region(self):
        """Box one unit larger on each side is not inside."""
        self.assertFalse(is_fully_inside(BBox(-1, -1, 1025, 1025), REGION))


class TestRegionBounds(unittest.TestCase):
    """Tests for region_bounds function."""

    def test_origin_region(self):
        """Bounds of a region at the origin."""
        self.assertEqual(region_bounds(REGION), (0, 0, 1024, 1024))

    def test_non_zero_origin(self):
        """Bounds match the region's own property."""
        region = BoundaryRegion(100, 200, 500, 600)
        self.assertEqual(region_bounds(region), (100, 200, 600, 800))
        self.assertEqual(region_bounds(region), region.bounds)


class TestClassifyPoints(unittest.TestCase):
    """Tests for classify_points function."""

    def test_matches_scalar_predicate(self):
        """Same answers as is_point_inside, boundary included."""
        pts = np.array([
            [500, 500], [1500, 500], [0, 0], [1024, 1024],
            [-0.5, 10], [10, 1024.5], [1024, 0],
        ], dtype=float)
        expected = [is_point_inside(Point(x, y), REGION) for x, y in pts]
        self.assertEqual(classify_points(pts, REGION).tolist(), expected)

    def test_empty(self):
        """No points gives an empty mask."""
        result = classify_points(np.empty((0, 2)), REGION)
        self.assertEqual(result.shape, (0,))


def test_fully_inside_implies_overlap(rng, standard_region):
    """Anything fully inside must also overlap."""
    for _ in range(500):
        x0, y0 = rng.uniform(-500, 1500, size=2)
        w, h = rng.uniform(0, 800, size=2)
        box = BBox(x0, y0, x0 + w, y0 + h)
        if is_fully_inside(box, standard_region):
            assert overlaps(box, standard_region)
