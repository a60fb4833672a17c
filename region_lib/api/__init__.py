"""API services for restricted-area enforcement.

This module provides the high-level service a host editor calls into. It
hides the individual containment, clamping and clipping functions behind a
single object built from the host's restricted-area settings.

The module exports the following classes:
    RestrictedAreaService: Applies a RestrictedAreaConfig to element
        creation, dragging and freehand strokes.

Example usage:
    Trim a finished stroke::

        from region_lib.api import RestrictedAreaService

        service = RestrictedAreaService(config)
        stroke = service.trim_stroke(stroke)
        if len(stroke) == 0:
            discard(stroke)
"""

from .services import RestrictedAreaService

__all__ = ['RestrictedAreaService']
