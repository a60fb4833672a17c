"""Trimming freehand strokes to the restricted area.

A stroke is clipped by walking its segments in drawing order. Segments that
stay inside are kept, and wherever the path leaves or re-enters the region
the exact crossing on the boundary is inserted, so the trimmed path ends and
resumes on the region edge instead of at the last kept vertex.

All crossing math is done in absolute canvas coordinates with a parametric
(Liang-Barsky style) segment test; results are converted back to points
relative to the stroke origin.

The module provides the following functions:
    segment_crossings: Parametric window of a segment inside the region.
    segment_intersection: The single boundary point used at a transition.
    clip_polyline: Clip a stroke's relative points to the region.
    trim_stroke: Same as clip_polyline, returning a new Stroke.

Example usage:
    Trimming a stroke that runs off the right edge::

        from region_lib.analysis.clipping import clip_polyline
        from region_lib.domain import BoundaryRegion, Stroke

        region = BoundaryRegion(0, 0, 1024, 1024)
        stroke = Stroke.from_tuples((500, 500), [(0, 0), (600, 0)])
        clip_polyline(stroke, region)  # [Point(0, 0), Point(524, 0)]
"""

from __future__ import annotations

import logging
import math

from ..domain.geometry import BoundaryRegion, Point, Stroke
from .clamping import clamp_point
from .containment import classify_points, region_bounds

logger = logging.getLogger(__name__)


def segment_crossings(start: Point, end: Point,
                      region: BoundaryRegion) -> tuple[float, float] | None:
    """Parametric window of a segment that lies inside the region.

    The segment is ``P(t) = start + t * (end - start)`` for ``t`` in [0, 1].
    Each of the four half-planes bounding the region either raises the
    entering limit ``t_min`` or lowers the leaving limit ``t_max``.

    Args:
        start: Segment start in absolute coordinates.
        end: Segment end in absolute coordinates.
        region: The restricted area.

    Returns:
        ``(t_min, t_max)`` with ``0 <= t_min <= t_max <= 1``, or None if the
        segment misses the region. A zero-length segment always gives None.
        A segment parallel to a pair of edges gets no limit from them, and
        gives None if it runs outside the slab between them.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    if dx == 0 and dy == 0:
        return None

    min_x, min_y, max_x, max_y = region_bounds(region)
    t_min = 0.0
    t_max = 1.0

    for delta, origin, low, high in ((dx, start.x, min_x, max_x),
                                     (dy, start.y, min_y, max_y)):
        if delta == 0:
            if origin < low or origin > high:
                return None
            continue
        t_low = (low - origin) / delta
        t_high = (high - origin) / delta
        if delta > 0:
            t_min = max(t_min, t_low)
            t_max = min(t_max, t_high)
        else:
            t_min = max(t_min, t_high)
            t_max = min(t_max, t_low)

    if t_min > t_max:
        return None
    return t_min, t_max


def _point_at(start: Point, end: Point, t: float,
              region: BoundaryRegion) -> Point:
    if t == 0:
        return start
    if t == 1:
        return end
    p = Point(start.x + t * (end.x - start.x), start.y + t * (end.y - start.y))
    # Keeps rounding error from landing a boundary point just outside.
    return clamp_point(p, region)


def _relative_offset(value: float, base: float, low: float, high: float) -> float:
    offset = value - base
    # base + (value - base) can round past the edge; step back one ulp at a time.
    while base + offset > high:
        offset = math.nextafter(offset, -math.inf)
    while base + offset < low:
        offset = math.nextafter(offset, math.inf)
    return offset


def _to_relative(point: Point, origin: Point, region: BoundaryRegion) -> Point:
    """Relative form of an inside point whose absolute form stays inside."""
    return Point(_relative_offset(point.x, origin.x, region.x, region.max_x),
                 _relative_offset(point.y, origin.y, region.y, region.max_y))


def segment_intersection(start: Point, end: Point,
                         region: BoundaryRegion) -> Point | None:
    """Boundary point where a segment enters or leaves the region.

    Used at inside/outside transitions, where exactly one crossing exists:
    when the segment starts outside this is the entry point (``t_min``),
    otherwise it is the exit point (``t_max``).

    Args:
        start: Segment start in absolute coordinates.
        end: Segment end in absolute coordinates.
        region: The restricted area.

    Returns:
        The crossing in absolute coordinates, or None if the segment misses
        the region or has zero length.

    Example:
        >>> region = BoundaryRegion(0, 0, 1024, 1024)
        >>> segment_intersection(Point(500, 500), Point(1100, 500), region)
        Point(x=1024.0, y=500.0)
    """
    window = segment_crossings(start, end, region)
    if window is None:
        return None
    t_min, t_max = window
    t = t_min if t_min > 0 else t_max
    return _point_at(start, end, t, region)


def clip_polyline(stroke: Stroke, region: BoundaryRegion,
                  include_chords: bool = False) -> list[Point]:
    """Clip a stroke to the region, inserting boundary crossings.

    Every vertex is classified as inside or outside (boundary counts as
    inside). The first vertex is kept if inside. Then, for each consecutive
    pair ``(prev, cur)``:

    - both inside: keep ``cur``;
    - inside to outside: keep the exit crossing, drop ``cur``;
    - outside to inside: keep the entry crossing, then ``cur``;
    - both outside: keep nothing.

    In the last case the segment may still pass through the region between
    its endpoints. Such a pass is dropped unless ``include_chords`` is set,
    in which case its entry and exit crossings are kept.

    A crossing that coincides with a vertex on the boundary is not emitted a
    second time, and every emitted point satisfies
    ``is_point_inside(stroke.origin + p, region)`` exactly.

    Args:
        stroke: Stroke whose points are relative to ``stroke.origin``.
        region: The restricted area.
        include_chords: Also keep segments whose endpoints are both outside
            but whose middle crosses the region.

    Returns:
        New list of points relative to ``stroke.origin``. Equal to the
        stroke's points if all of them are inside; empty if none are (and no
        chord is kept).

    Example:
        >>> region = BoundaryRegion(0, 0, 1024, 1024)
        >>> stroke = Stroke.from_tuples((2000, 2000), [(0, 0)])
        >>> clip_polyline(stroke, region)
        []
    """
    if not stroke.points:
        return []

    origin = stroke.origin
    relative = stroke.points
    absolute = stroke.absolute_points()
    inside = classify_points(stroke.absolute_array(), region).tolist()

    clipped: list[Point] = []
    if inside[0]:
        clipped.append(relative[0])

    for i in range(1, len(relative)):
        prev_abs, cur_abs = absolute[i - 1], absolute[i]
        prev_in, cur_in = inside[i - 1], inside[i]

        if prev_in and cur_in:
            clipped.append(relative[i])
        elif prev_in:
            exit_point = segment_intersection(prev_abs, cur_abs, region)
            # A boundary vertex is its own exit point; it was already kept.
            if exit_point is not None and exit_point != prev_abs:
                clipped.append(_to_relative(exit_point, origin, region))
        elif cur_in:
            entry_point = segment_intersection(prev_abs, cur_abs, region)
            if entry_point is not None and entry_point != cur_abs:
                clipped.append(_to_relative(entry_point, origin, region))
            clipped.append(relative[i])
        elif include_chords:
            window = segment_crossings(prev_abs, cur_abs, region)
            if window is not None:
                t_min, t_max = window
                entry_point = _point_at(prev_abs, cur_abs, t_min, region)
                clipped.append(_to_relative(entry_point, origin, region))
                if t_max > t_min:
                    exit_point = _point_at(prev_abs, cur_abs, t_max, region)
                    clipped.append(_to_relative(exit_point, origin, region))

    logger.debug("clip_polyline: %d -> %d points", len(relative), len(clipped))
    return clipped


def trim_stroke(stroke: Stroke, region: BoundaryRegion,
                include_chords: bool = False) -> Stroke:
    """Clipped copy of a stroke, keeping its origin."""
    return stroke.with_points(clip_polyline(stroke, region, include_chords))
