"""Domain models for fourierdraw.

This module contains the core domain models representing paths and the
rotating vector descriptors computed from them. All models are designed to be:

- Immutable (frozen dataclasses)
- Independent of svgpathtools implementation details

Key classes:
- Point: A 2D point
- Begin, Line, Curve, End: Path drawing events
- Path: An immutable single-contour path
- PathBuilder: Incremental construction of a Path
- DrawDescriptor: One rotating vector (frequency, radius, angle)
"""

from fourierdraw.domain.descriptor import DrawDescriptor
from fourierdraw.domain.path import (
    Begin,
    Curve,
    End,
    Line,
    Path,
    PathBuilder,
    PathEvent,
    Point,
)

__all__: list[str] = [
    # Path events
    "Begin",
    "Curve",
    "End",
    "Line",
    "PathEvent",
    # Core types
    "Point",
    "Path",
    "PathBuilder",
    "DrawDescriptor",
]
