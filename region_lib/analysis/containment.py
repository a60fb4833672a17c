"""Containment predicates for the restricted area.

Every predicate treats the region as a closed rectangle: points and edges
lying exactly on the boundary are inside. Callers pass the region in on
each call; nothing here reads shared configuration.

The module provides the following functions:
    is_point_inside: Point-in-rectangle test.
    overlaps: Whether a bounding box touches or intersects the region.
    is_fully_inside: Whether a bounding box lies completely in the region.
    region_bounds: The region as a (min_x, min_y, max_x, max_y) tuple.
    classify_points: Vectorized is_point_inside over an (N, 2) array.

Example usage:
    Checking a new element before it is committed::

        from region_lib.analysis.containment import overlaps, is_fully_inside
        from region_lib.domain import BBox, BoundaryRegion

        region = BoundaryRegion(0, 0, 1024, 1024)
        box = BBox(900, 900, 1000, 1000)
        overlaps(box, region)         # True
        is_fully_inside(box, region)  # True
"""

from __future__ import annotations

import numpy as np

from ..domain.geometry import BBox, BoundaryRegion, Point


def is_point_inside(point: Point, region: BoundaryRegion) -> bool:
    """Check whether a point lies in the closed region rectangle.

    Args:
        point: Point in absolute canvas coordinates.
        region: The restricted area.

    Returns:
        True if ``region.x <= point.x <= region.max_x`` and the same holds
        for y. Points on any of the four edges count as inside.

    Example:
        >>> region = BoundaryRegion(0, 0, 1024, 1024)
        >>> is_point_inside(Point(1024, 1024), region)
        True
        >>> is_point_inside(Point(1500, 500), region)
        False
    """
    return (region.x <= point.x <= region.x + region.width and
            region.y <= point.y <= region.y + region.height)


def overlaps(box: BBox, region: BoundaryRegion) -> bool:
    """Check whether a box intersects the region at all.

    Both rectangles are closed, so a box that only shares an edge or a corner
    with the region still overlaps it.

    Args:
        box: Un-rotated bounds of the element.
        region: The restricted area.

    Returns:
        True unless the box lies entirely to one side of the region.
    """
    return not (box.x_max < region.x or
                box.x_min > region.x + region.width or
                box.y_max < region.y or
                box.y_min > region.y + region.height)


def is_fully_inside(box: BBox, region: BoundaryRegion) -> bool:
    """Check whether all four box edges lie within the region.

    Edges coinciding with the region boundary are allowed, so a box equal to
    the region is fully inside it. Anything fully inside also overlaps.
    """
    return (box.x_min >= region.x and
            box.x_max <= region.x + region.width and
            box.y_min >= region.y and
            box.y_max <= region.y + region.height)


def region_bounds(region: BoundaryRegion) -> tuple[float, float, float, float]:
    """Region as a (min_x, min_y, max_x, max_y) tuple."""
    return (region.x, region.y, region.x + region.width, region.y + region.height)


def classify_points(points: np.ndarray, region: BoundaryRegion) -> np.ndarray:
    """Vectorized point-in-region test.

    Args:
        points: Array of shape (N, 2) holding absolute (x, y) coordinates.
        region: The restricted area.

    Returns:
        Boolean array of shape (N,), True where the point is inside the
        closed rectangle. Matches is_point_inside element for element.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    min_x, min_y, max_x, max_y = region_bounds(region)
    xs = pts[:, 0]
    ys = pts[:, 1]
    return (xs >= min_x) & (xs <= max_x) & (ys >= min_y) & (ys <= max_y)
