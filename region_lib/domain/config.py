"""Restricted-area configuration as handed over by the host editor.

The host owns and persists these settings. This module turns them into
validated value objects so the geometry functions can trust the region they
are given; validation happens here, once, and never inside the per-call
geometry code.

Typical usage example:

    from region_lib.domain.config import RestrictedAreaConfig, should_enforce

    config = RestrictedAreaConfig.from_dict({
        'enabled': True,
        'x': 0, 'y': 0, 'width': 1024, 'height': 1024,
    })
    if should_enforce(config):
        region = config.region
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .geometry import BoundaryRegion, InvalidRegionError

logger = logging.getLogger(__name__)

# --- Boundary style defaults (consumed by the renderer, carried through here) ---
DEFAULT_STROKE_COLOR = '#000'
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_OPACITY = 0.1


class Enforcement(Enum):
    """How new elements are judged against the region.

    SOFT accepts an element that overlaps the region at all; STRICT only
    accepts elements lying completely inside it.
    """
    SOFT = 'soft'
    STRICT = 'strict'


@dataclass(frozen=True)
class BoundaryStyle:
    """Visual style of the boundary outline and tint.

    Attributes:
        stroke_color: Outline color as a CSS color string.
        stroke_width: Outline width in canvas units.
        background_color: Tint color, or None for no tint.
        opacity: Tint opacity in [0, 1].
    """
    stroke_color: str = DEFAULT_STROKE_COLOR
    stroke_width: float = DEFAULT_STROKE_WIDTH
    background_color: str | None = None
    opacity: float = DEFAULT_OPACITY

    def to_dict(self) -> dict[str, Any]:
        return {
            'strokeColor': self.stroke_color,
            'strokeWidth': self.stroke_width,
            'backgroundColor': self.background_color,
            'opacity': self.opacity,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> BoundaryStyle:
        return cls(
            stroke_color=d.get('strokeColor', DEFAULT_STROKE_COLOR),
            stroke_width=float(d.get('strokeWidth', DEFAULT_STROKE_WIDTH)),
            background_color=d.get('backgroundColor'),
            opacity=float(d.get('opacity', DEFAULT_OPACITY)),
        )


@dataclass(frozen=True)
class RestrictedAreaConfig:
    """Full restricted-area settings.

    Attributes:
        enabled: Whether the restriction is currently enforced.
        region: The rectangle drawing is confined to. Validated on
            construction; an unusable region raises InvalidRegionError.
        show_boundary: Whether the renderer draws the outline.
        boundary_style: Outline and tint style for the renderer.
        enforcement: Acceptance rule for newly created elements.
        include_chords: When True, trimming a stroke also keeps segments
            whose endpoints are both outside but whose middle passes through
            the region.
    """
    enabled: bool
    region: BoundaryRegion
    show_boundary: bool = True
    boundary_style: BoundaryStyle = field(default_factory=BoundaryStyle)
    enforcement: Enforcement = Enforcement.SOFT
    include_chords: bool = False

    def __post_init__(self):
        self.region.validate()

    def to_dict(self) -> dict[str, Any]:
        """Flat dict in the host's camelCase layout."""
        return {
            'enabled': self.enabled,
            **self.region.to_dict(),
            'showBoundary': self.show_boundary,
            'boundaryStyle': self.boundary_style.to_dict(),
            'enforcement': self.enforcement.value,
            'includeChords': self.include_chords,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> RestrictedAreaConfig:
        """Build a config from the host's flat dict.

        Args:
            d: Mapping with at least 'x', 'y', 'width' and 'height'. Optional
                keys: 'enabled' (default True), 'showBoundary',
                'boundaryStyle', 'enforcement' ('soft' or 'strict'),
                'includeChords'.

        Returns:
            A validated RestrictedAreaConfig.

        Raises:
            InvalidRegionError: If a rectangle key is missing or not numeric,
                the region is degenerate, or the enforcement mode is unknown.
        """
        try:
            region = BoundaryRegion(
                float(d['x']), float(d['y']), float(d['width']), float(d['height']))
        except KeyError as e:
            logger.warning("Rejected restricted area config: missing %s", e)
            raise InvalidRegionError(f"restricted area is missing key {e}") from e
        except (TypeError, ValueError) as e:
            logger.warning("Rejected restricted area config: %s", e)
            raise InvalidRegionError(f"restricted area has a non-numeric rectangle: {e}") from e

        raw_mode = d.get('enforcement', Enforcement.SOFT.value)
        try:
            enforcement = Enforcement(raw_mode)
        except ValueError as e:
            logger.warning("Rejected restricted area config: enforcement=%r", raw_mode)
            raise InvalidRegionError(f"unknown enforcement mode {raw_mode!r}") from e

        try:
            return cls(
                enabled=bool(d.get('enabled', True)),
                region=region,
                show_boundary=bool(d.get('showBoundary', True)),
                boundary_style=BoundaryStyle.from_dict(d.get('boundaryStyle') or {}),
                enforcement=enforcement,
                include_chords=bool(d.get('includeChords', False)),
            )
        except InvalidRegionError as e:
            logger.warning("Rejected restricted area config: %s", e)
            raise


def should_enforce(config: RestrictedAreaConfig | None) -> bool:
    """True if a restriction is configured and switched on."""
    return config is not None and config.enabled
