"""Geometric value objects for restricted-area drawing."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple
import math

import numpy as np


class InvalidRegionError(ValueError):
    """Raised when a restricted-area rectangle cannot be used."""


@dataclass(frozen=True)
class Point:
    """Immutable 2D point (or offset)."""
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def is_close(self, other: Point, tol: float = 1e-9) -> bool:
        """Coordinate-wise comparison with an absolute tolerance."""
        return (math.isclose(self.x, other.x, abs_tol=tol) and
                math.isclose(self.y, other.y, abs_tol=tol))

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> Point:
        """Create from tuple."""
        return cls(t[0], t[1])

    @classmethod
    def from_list(cls, lst: List[float]) -> Point:
        """Create from list."""
        return cls(lst[0], lst[1])


@dataclass(frozen=True)
class BBox:
    """Immutable axis-aligned bounding box of an already un-rotated shape."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def translated(self, dx: float, dy: float) -> BBox:
        """Box moved by (dx, dy)."""
        return BBox(self.x_min + dx, self.y_min + dy,
                    self.x_max + dx, self.y_max + dy)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Convert to tuple for compatibility."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_tuple(cls, t: Tuple[float, float, float, float]) -> BBox:
        """Create from tuple."""
        return cls(t[0], t[1], t[2], t[3])

    @classmethod
    def from_rect(cls, x: float, y: float, width: float, height: float) -> BBox:
        """Create from an element's position and size."""
        return cls(x, y, x + width, y + height)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> BBox:
        """Create bounding box containing all points."""
        if not points:
            return cls(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class BoundaryRegion:
    """The rectangle drawing is restricted to.

    Callers are expected to keep ``width`` and ``height`` positive; the
    geometry functions do not re-check it. Use :meth:`validate` once where
    the region is configured.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)."""
        return (self.x, self.y, self.max_x, self.max_y)

    def validate(self) -> BoundaryRegion:
        """Raise InvalidRegionError unless the region is usable."""
        values = (self.x, self.y, self.width, self.height)
        if not all(math.isfinite(v) for v in values):
            raise InvalidRegionError(f"region has non-finite coordinates: {values}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidRegionError(
                f"region must have positive size, got {self.width}x{self.height}")
        return self

    def to_bbox(self) -> BBox:
        return BBox(*self.bounds)

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

    @classmethod
    def from_bounds(cls, x_min: float, y_min: float,
                    x_max: float, y_max: float) -> BoundaryRegion:
        """Create from (min_x, min_y, max_x, max_y)."""
        return cls(x_min, y_min, x_max - x_min, y_max - y_min)


@dataclass(frozen=True)
class Stroke:
    """A freehand path: points relative to ``origin``, in drawing order."""
    origin: Point
    points: Tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.points, tuple):
            object.__setattr__(self, 'points', tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx) -> Point:
        return self.points[idx]

    def to_absolute(self, point: Point) -> Point:
        return self.origin + point

    def to_relative(self, point: Point) -> Point:
        return point - self.origin

    def absolute_points(self) -> List[Point]:
        """Points in canvas coordinates."""
        return [self.origin + p for p in self.points]

    def to_array(self) -> np.ndarray:
        """Relative points as an (N, 2) float array."""
        if not self.points:
            return np.empty((0, 2), dtype=float)
        return np.array([(p.x, p.y) for p in self.points], dtype=float)

    def absolute_array(self) -> np.ndarray:
        """Absolute points as an (N, 2) float array."""
        return self.to_array() + np.array([self.origin.x, self.origin.y], dtype=float)

    def with_points(self, points: Iterable[Point]) -> Stroke:
        """Same origin, different points."""
        return Stroke(self.origin, tuple(points))

    def to_list(self) -> List[List[float]]:
        """Relative points as nested lists for JSON serialization."""
        return [p.to_list() for p in self.points]

    @classmethod
    def from_tuples(cls, origin: Tuple[float, float],
                    tuples: Iterable[Tuple[float, float]]) -> Stroke:
        """Create from an origin tuple and relative point tuples."""
        return cls(Point.from_tuple(origin), tuple(Point.from_tuple(t) for t in tuples))

    @classmethod
    def from_array(cls, origin: Point, array: np.ndarray) -> Stroke:
        """Create from an (N, 2) array of relative points."""
        arr = np.asarray(array, dtype=float).reshape(-1, 2)
        return cls(origin, tuple(Point(float(x), float(y)) for x, y in arr))
