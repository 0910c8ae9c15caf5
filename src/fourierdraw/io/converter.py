"""Conversion between svgpathtools and domain representations.

This module handles the conversion of svgpathtools segments (complex-number
based Line, QuadraticBezier, CubicBezier and Arc objects) into the domain
Path model used by the pipeline.
"""

import logging
import math

from svgpathtools import Arc, CubicBezier, QuadraticBezier
from svgpathtools import Line as SvgLine
from svgpathtools import Path as SvgPath

from fourierdraw.domain import Path, PathBuilder, Point

logger = logging.getLogger(__name__)

# Two points closer than this are the same point (subpath continuity, closing)
CONTINUITY_TOLERANCE = 1e-6

# Largest arc sweep approximated by a single cubic; 45 degrees keeps the
# cubic within ~4e-6 * radius of the true arc
MAX_ARC_SWEEP_DEGREES = 45.0


def _point(value: complex) -> Point:
    return Point(float(value.real), float(value.imag))


def arc_to_cubics(arc: Arc) -> list[tuple[complex, complex, complex, complex]]:
    """Approximate an elliptical arc by cubic Bezier pieces.

    Each piece spans at most MAX_ARC_SWEEP_DEGREES of the arc's parametric
    angle. Handles follow the tangent with the standard
    ``4/3 * tan(sweep / 4)`` length, which is exact in the limit and stays
    valid for ellipses because they are affine images of circles.

    Args:
        arc: svgpathtools Arc with non-zero radii

    Returns:
        List of (p0, p1, p2, p3) control points as complex numbers
    """
    delta = math.radians(arc.delta)
    pieces = max(1, math.ceil(abs(arc.delta) / MAX_ARC_SWEEP_DEGREES))
    handle = 4.0 / 3.0 * math.tan(delta / pieces / 4.0) / delta

    cubics = []
    for k in range(pieces):
        t0 = k / pieces
        t1 = (k + 1) / pieces
        p0 = arc.start if k == 0 else arc.point(t0)
        p3 = arc.end if k == pieces - 1 else arc.point(t1)
        p1 = p0 + handle * arc.derivative(t0)
        p2 = p3 - handle * arc.derivative(t1)
        cubics.append((p0, p1, p2, p3))
    return cubics


def svgpathtools_to_domain(svg_path: SvgPath) -> Path:
    """Convert an svgpathtools Path into a domain Path.

    Only the first continuous subpath is converted: multi-contour paths are
    not supported by the pipeline. A subpath whose end coincides with its
    start is treated as closed.

    Args:
        svg_path: Parsed svgpathtools path

    Returns:
        Domain Path (empty if svg_path has no segments)
    """
    builder = PathBuilder()
    segments = list(svg_path)
    if not segments:
        return builder.build()

    first = segments[0].start
    current = first
    builder.move_to(_point(first))

    for index, segment in enumerate(segments):
        if abs(segment.start - current) > CONTINUITY_TOLERANCE:
            logger.warning(
                "Path has multiple subpaths; using the first (%d of %d segments)",
                index,
                len(segments),
            )
            break

        if isinstance(segment, SvgLine):
            builder.line_to(_point(segment.end))
        elif isinstance(segment, QuadraticBezier):
            builder.quadratic_to(_point(segment.control), _point(segment.end))
        elif isinstance(segment, CubicBezier):
            builder.cubic_to(
                _point(segment.control1),
                _point(segment.control2),
                _point(segment.end),
            )
        elif isinstance(segment, Arc):
            for _p0, p1, p2, p3 in arc_to_cubics(segment):
                builder.cubic_to(_point(p1), _point(p2), _point(p3))
        else:
            raise TypeError(f"Unsupported svgpathtools segment: {type(segment).__name__}")

        current = segment.end

    if abs(current - first) <= CONTINUITY_TOLERANCE:
        builder.close()
    else:
        builder.end()
    return builder.build()
