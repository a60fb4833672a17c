"""Clamping points and drag offsets into the restricted area.

The module provides the following functions:
    clamp_point: Snap a single point onto the nearest in-region position.
    clamp_drag_offset: Cap a proposed translation so a box stays inside.

Example usage:
    Capping a drag of an element near the right edge::

        from region_lib.analysis.clamping import clamp_drag_offset
        from region_lib.domain import BBox, BoundaryRegion

        region = BoundaryRegion(0, 0, 1024, 1024)
        box = BBox(900, 400, 1000, 500)
        offset = clamp_drag_offset(box, 100, 0, region)  # Point(24, 0)
"""

from __future__ import annotations

from ..domain.geometry import BBox, BoundaryRegion, Point


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def clamp_point(point: Point, region: BoundaryRegion) -> Point:
    """Clamp a point into the region, one axis at a time.

    Args:
        point: Point in absolute canvas coordinates.
        region: The restricted area.

    Returns:
        A new Point with each coordinate clamped into the closed region
        range. Points already inside come back with the same coordinates,
        so clamping twice gives the same result as clamping once.

    Example:
        >>> clamp_point(Point(-50, 1500), BoundaryRegion(0, 0, 1024, 1024))
        Point(x=0, y=1024)
    """
    return Point(
        _clamp(point.x, region.x, region.x + region.width),
        _clamp(point.y, region.y, region.y + region.height),
    )


def _clamp_axis_offset(lo: float, hi: float, delta: float,
                       region_lo: float, region_hi: float) -> float:
    # Low edge is checked first, so an oversized box always snaps to it.
    if lo + delta < region_lo:
        return region_lo - lo
    if hi + delta > region_hi:
        return region_hi - hi
    return delta


def clamp_drag_offset(box: BBox, dx: float, dy: float,
                      region: BoundaryRegion) -> Point:
    """Largest part of a drag that keeps a box inside the region.

    Each axis is handled independently. If moving by the proposed offset
    would push the box past the left (top) edge, the offset is reduced so
    the box's left (top) edge lands on the region's; otherwise, if it would
    pass the right (bottom) edge, the box's right (bottom) edge lands on the
    region's. Offsets that keep the box inside are returned unchanged.

    A box wider or taller than the region cannot fit on that axis. The
    left/top check runs first, so such a box snaps its left/top edge onto
    the region whenever that edge would leave it, even though the
    right/bottom edge then overflows.

    For a box no larger than the region the moved box lies inside the
    region up to float rounding: with non-integer coordinates
    ``box.x_max + dx'`` can exceed ``region.max_x`` by an ulp.

    Args:
        box: Current un-rotated bounds of the dragged element.
        dx: Proposed horizontal translation.
        dy: Proposed vertical translation.
        region: The restricted area.

    Returns:
        The offset to apply, as a Point (``offset.to_tuple()`` gives
        ``(dx', dy')``). The caller applies it to the element.

    Example:
        >>> region = BoundaryRegion(0, 0, 1024, 1024)
        >>> clamp_drag_offset(BBox(900, 900, 1000, 1000), 200, 200, region)
        Point(x=24, y=24)
    """
    return Point(
        _clamp_axis_offset(box.x_min, box.x_max, dx,
                           region.x, region.x + region.width),
        _clamp_axis_offset(box.y_min, box.y_max, dy,
                           region.y, region.y + region.height),
    )
