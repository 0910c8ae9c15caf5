"""Core geometric types for path representation.

This module defines the drawing events a path is made of:
- Point: A 2D point
- Begin: Start of the (single) contour
- Line: A straight segment
- Curve: A quadratic or cubic Bezier segment
- End: End of the contour, optionally closing it
- Path: An immutable, ordered sequence of events
- PathBuilder: Incremental construction of a well-formed Path
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union

from fourierdraw.exceptions import MalformedPathError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in path units
        y: Y coordinate in path units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_complex(self) -> complex:
        """Convert to a complex number x + iy."""
        return complex(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards another point.

        Args:
            other: Target point (reached at t = 1)
            t: Interpolation parameter

        Returns:
            Point at parameter t on the segment self -> other
        """
        return Point(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def from_complex(cls, value: complex) -> "Point":
        """Build a point from a complex number x + iy."""
        return cls(value.real, value.imag)


@dataclass(frozen=True, slots=True)
class Begin:
    """Start of a contour at the given point."""

    at: Point


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment from start to end."""

    start: Point
    end: Point

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return self.start.distance_to(self.end)


@dataclass(frozen=True, slots=True)
class Curve:
    """Bezier segment.

    Three points describe a quadratic curve, four a cubic one. The first and
    last points are on the curve, the others are control points.
    """

    points: tuple[Point, ...]

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    @property
    def degree(self) -> int:
        return len(self.points) - 1


@dataclass(frozen=True, slots=True)
class End:
    """End of a contour.

    Attributes:
        last: Final point reached by the contour
        first: Point the contour began at
        closed: Whether the implicit segment last -> first is part of the path
    """

    last: Point
    first: Point
    closed: bool

    @property
    def closing_line(self) -> Line:
        """The implicit closing segment last -> first."""
        return Line(self.last, self.first)


PathEvent = Union[Begin, Line, Curve, End]


@dataclass(frozen=True)
class Path:
    """An immutable, ordered sequence of drawing events.

    Attributes:
        events: Drawing events in traversal order
    """

    events: tuple[PathEvent, ...]

    def __iter__(self) -> Iterator[PathEvent]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def is_empty(self) -> bool:
        """Check if the path has no drawing events."""
        return not self.events

    @property
    def is_closed(self) -> bool:
        """Check if the path ends with a closing segment."""
        return bool(self.events) and isinstance(self.events[-1], End) and self.events[-1].closed

    def segment_count(self) -> int:
        """Number of Line and Curve segments."""
        return sum(1 for event in self.events if isinstance(event, (Line, Curve)))

    @classmethod
    def from_points(cls, points: list[Point], closed: bool = False) -> "Path":
        """Build a polyline path through the given points.

        Args:
            points: Polyline vertices, at least one
            closed: Whether to close the polyline back to its first point

        Returns:
            Path made of Line segments
        """
        builder = PathBuilder()
        if not points:
            return builder.build()
        builder.move_to(points[0])
        for point in points[1:]:
            builder.line_to(point)
        if closed:
            builder.close()
        return builder.build()


class PathBuilder:
    """Builds a well-formed single-contour Path.

    Example:
        path = (
            PathBuilder()
            .move_to(Point(0, 0))
            .line_to(Point(10, 0))
            .cubic_to(Point(15, 0), Point(15, 10), Point(10, 10))
            .close()
            .build()
        )
    """

    def __init__(self) -> None:
        self._events: list[PathEvent] = []
        self._first: Point | None = None
        self._current: Point | None = None
        self._ended = False

    def _require_open(self) -> Point:
        if self._ended:
            raise MalformedPathError("contour already ended")
        if self._current is None:
            raise MalformedPathError("segment added before move_to")
        return self._current

    def move_to(self, point: Point) -> "PathBuilder":
        """Begin the contour at point."""
        if self._current is not None or self._ended:
            raise MalformedPathError("only a single contour is supported")
        self._events.append(Begin(point))
        self._first = point
        self._current = point
        return self

    def line_to(self, point: Point) -> "PathBuilder":
        """Add a straight segment to point."""
        current = self._require_open()
        self._events.append(Line(current, point))
        self._current = point
        return self

    def quadratic_to(self, control: Point, point: Point) -> "PathBuilder":
        """Add a quadratic Bezier segment to point."""
        current = self._require_open()
        self._events.append(Curve((current, control, point)))
        self._current = point
        return self

    def cubic_to(self, control1: Point, control2: Point, point: Point) -> "PathBuilder":
        """Add a cubic Bezier segment to point."""
        current = self._require_open()
        self._events.append(Curve((current, control1, control2, point)))
        self._current = point
        return self

    def close(self) -> "PathBuilder":
        """End the contour with a closing segment back to its start."""
        return self._finish(closed=True)

    def end(self) -> "PathBuilder":
        """End the contour without closing it."""
        return self._finish(closed=False)

    def _finish(self, closed: bool) -> "PathBuilder":
        current = self._require_open()
        assert self._first is not None
        self._events.append(End(current, self._first, closed))
        self._ended = True
        return self

    def build(self) -> Path:
        """Return the built path, ending an open contour if needed."""
        if self._current is not None and not self._ended:
            self.end()
        return Path(tuple(self._events))
