"""Service layer for restricted-area enforcement.

This module provides the host-facing entry point to the geometry in
``region_lib.analysis``. A host editor builds one service from its current
restricted-area settings and calls it at three points of its workflow:

    - before committing a newly created element (allows_element);
    - while an element is dragged or resized (constrain_drag,
      constrain_point);
    - when a freehand stroke is finished or updated live (trim_stroke).

When no restriction is configured, or it is switched off, every method
passes its input through unchanged, so the host can call the service
unconditionally.

Example usage:
    Wiring the service into a drag handler::

        from region_lib.api import RestrictedAreaService
        from region_lib.domain import BBox, RestrictedAreaConfig

        service = RestrictedAreaService(RestrictedAreaConfig.from_dict(settings))
        offset = service.constrain_drag(BBox(900, 400, 1000, 500), 100, 0)
        element.move_by(*offset.to_tuple())
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from ..analysis.clamping import clamp_drag_offset, clamp_point
from ..analysis.clipping import trim_stroke
from ..analysis.containment import is_fully_inside, overlaps
from ..domain.config import Enforcement, RestrictedAreaConfig, should_enforce
from ..domain.geometry import BBox, Point, Stroke

# Logger for enforcement decisions
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestrictedAreaService:
    """Applies a restricted-area configuration to editor operations.

    The service only holds the (immutable) configuration it was built with;
    every call reads its arguments and returns new values, so one instance
    can be shared freely.

    Attributes:
        config: Current settings, or None when the host has no restricted
            area configured.

    Example:
        >>> service = RestrictedAreaService(None)
        >>> service.enforced
        False
        >>> service.constrain_drag(BBox(0, 0, 10, 10), 5000, 0)
        Point(x=5000, y=0)
    """
    config: Optional[RestrictedAreaConfig] = None

    @property
    def enforced(self) -> bool:
        """True if a restriction is configured and enabled."""
        return should_enforce(self.config)

    def allows_element(self, box: BBox) -> bool:
        """Decide whether a newly created element may be kept.

        Args:
            box: Un-rotated bounds of the new element.

        Returns:
            True when no restriction is enforced. Otherwise, under
            ``Enforcement.SOFT`` the element is kept if it overlaps the
            region at all, and under ``Enforcement.STRICT`` only if it lies
            completely inside.
        """
        if not self.enforced:
            return True

        region = self.config.region
        if self.config.enforcement is Enforcement.STRICT:
            allowed = is_fully_inside(box, region)
        else:
            allowed = overlaps(box, region)

        if not allowed:
            _logger.debug("Discarding element %s outside restricted area %s (%s)",
                          box.to_tuple(), region.bounds, self.config.enforcement.value)
        return allowed

    def constrain_point(self, point: Point) -> Point:
        """Clamp a pointer position into the region when enforced."""
        if not self.enforced:
            return point
        return clamp_point(point, self.config.region)

    def constrain_drag(self, box: BBox, dx: float, dy: float) -> Point:
        """Cap a proposed translation of an element.

        Args:
            box: Current un-rotated bounds of the element.
            dx: Proposed horizontal offset.
            dy: Proposed vertical offset.

        Returns:
            The offset to apply. Equal to ``(dx, dy)`` when no restriction is
            enforced or the move keeps the element inside.
        """
        if not self.enforced:
            return Point(dx, dy)
        return clamp_drag_offset(box, dx, dy, self.config.region)

    def trim_stroke(self, stroke: Stroke) -> Stroke:
        """Trim a freehand stroke to the region when enforced.

        Args:
            stroke: Finished or in-progress stroke.

        Returns:
            A new Stroke with the same origin. Its points are the clipped
            points, or a copy of the original points when nothing is
            enforced. An empty result means nothing of the stroke lies
            inside the region and the host should discard it.
        """
        if not self.enforced:
            return stroke.with_points(stroke.points)

        trimmed = trim_stroke(stroke, self.config.region,
                              include_chords=self.config.include_chords)
        if len(trimmed) != len(stroke):
            _logger.debug("Trimmed stroke at %s from %d to %d points",
                          stroke.origin.to_tuple(), len(stroke), len(trimmed))
        return trimmed
