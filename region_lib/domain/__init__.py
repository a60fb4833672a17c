"""Domain objects for restricted-area drawing.

This module provides the value objects shared by the analysis functions
and the service layer.

Geometry classes:
    Point: Immutable 2D point with vector addition and subtraction.
    BBox: Immutable axis-aligned bounding box of an element.
    BoundaryRegion: The rectangle drawing is restricted to.
    Stroke: Freehand path as an origin plus relative points.

Configuration classes:
    RestrictedAreaConfig: Host settings for the restricted area.
    BoundaryStyle: Outline and tint style for the renderer.
    Enforcement: Acceptance rule for new elements.
    InvalidRegionError: Raised for unusable configurations.
"""

from .config import BoundaryStyle, Enforcement, RestrictedAreaConfig, should_enforce
from .geometry import BBox, BoundaryRegion, InvalidRegionError, Point, Stroke

__all__ = [
    'Point', 'BBox', 'BoundaryRegion', 'Stroke',
    'RestrictedAreaConfig', 'BoundaryStyle', 'Enforcement', 'InvalidRegionError',
    'should_enforce',
]
