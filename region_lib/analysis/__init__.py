"""Geometry operations against the restricted area.

All functions are pure: the region is always passed in explicitly and
nothing is cached between calls.

The module exports the following functions:

Containment:
    is_point_inside: Closed point-in-rectangle test.
    overlaps: Box touches or intersects the region.
    is_fully_inside: Box lies completely in the region.
    region_bounds: Region as a (min_x, min_y, max_x, max_y) tuple.
    classify_points: Vectorized is_point_inside for numpy arrays.

Clamping:
    clamp_point: Clamp a point into the region.
    clamp_drag_offset: Cap a drag so a box stays inside.

Clipping:
    segment_crossings: Parametric window of a segment inside the region.
    segment_intersection: Entry or exit point of a crossing segment.
    clip_polyline: Clip a stroke's points, inserting boundary crossings.
    trim_stroke: clip_polyline returning a new Stroke.
"""

from .clamping import clamp_drag_offset, clamp_point
from .clipping import clip_polyline, segment_crossings, segment_intersection, trim_stroke
from .containment import classify_points, is_fully_inside, is_point_inside, overlaps, region_bounds

__all__ = [
    'is_point_inside', 'overlaps', 'is_fully_inside', 'region_bounds', 'classify_points',
    'clamp_point', 'clamp_drag_offset',
    'segment_crossings', 'segment_intersection', 'clip_polyline', 'trim_stroke',
]
