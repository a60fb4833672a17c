"""Restricted drawing area geometry.

Constrains drawing on an unbounded 2-D canvas to an axis-aligned rectangle.
A host editor uses this package to decide whether a new element lies in the
region, how far an element may be dragged, and how a freehand stroke is
trimmed at the region boundary.

The package is organized into the following modules:
    domain: Value objects (Point, BBox, BoundaryRegion, Stroke) and the
        restricted-area configuration.
    analysis: Pure containment, clamping and clipping functions.
    api: RestrictedAreaService, the host-facing facade.

Example usage:
    Trimming a stroke::

        from region_lib import BoundaryRegion, Stroke, clip_polyline

        region = BoundaryRegion(0, 0, 1024, 1024)
        stroke = Stroke.from_tuples((500, 500), [(0, 0), (600, 0)])
        points = clip_polyline(stroke, region)  # [(0, 0), (524, 0)]

    Checking a drag::

        from region_lib import BBox, clamp_drag_offset

        offset = clamp_drag_offset(BBox(900, 400, 1000, 500), 100, 0, region)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import (
    clamp_drag_offset,
    clamp_point,
    clip_polyline,
    is_fully_inside,
    is_point_inside,
    overlaps,
    region_bounds,
    segment_intersection,
    trim_stroke,
)
from .api import RestrictedAreaService
from .domain import (
    BBox,
    BoundaryRegion,
    BoundaryStyle,
    Enforcement,
    InvalidRegionError,
    Point,
    RestrictedAreaConfig,
    Stroke,
    should_enforce,
)

__all__ = [
    # Domain objects
    'Point', 'BBox', 'BoundaryRegion', 'Stroke',
    'RestrictedAreaConfig', 'BoundaryStyle', 'Enforcement', 'InvalidRegionError',
    'should_enforce',
    # Analysis
    'is_point_inside', 'overlaps', 'is_fully_inside', 'region_bounds',
    'clamp_point', 'clamp_drag_offset',
    'segment_intersection', 'clip_polyline', 'trim_stroke',
    # Services
    'RestrictedAreaService',
]

__version__ = '1.0.0'
