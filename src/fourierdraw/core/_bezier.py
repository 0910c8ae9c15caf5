"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for the flattener.
Not intended for public use.
"""

import math

from fourierdraw.domain import Point

# Hard limit on subdivision depth, i.e. at most 2**24 lines per curve
MAX_DEPTH = 24


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def distance_to_segment(point: Point, start: Point, end: Point) -> float:
    """Distance from point to the segment start -> end.

    Args:
        point: The point to measure from
        start: First endpoint of the segment
        end: Second endpoint of the segment

    Returns:
        Shortest Euclidean distance between point and the segment
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return math.hypot(point.x - start.x, point.y - start.y)

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(point.x - (start.x + t * dx), point.y - (start.y + t * dy))


def is_flat(points: list[Point], tolerance: float) -> bool:
    """Check whether a Bezier control polygon is within tolerance of its chord.

    A Bezier curve lies in the convex hull of its control points, so if every
    control point is within tolerance of the chord, so is the whole curve.
    """
    start, end = points[0], points[-1]
    return all(distance_to_segment(p, start, end) <= tolerance for p in points[1:-1])


def subdivision_depth(points: list[Point], tolerance: float) -> int:
    """Depth at which every piece of the curve passes is_flat.

    Halving a quadratic or cubic divides the second differences of its
    control points by four, and a control polygon whose second differences
    are all within tolerance has its inner points within tolerance of the
    chord.

    Args:
        points: 3 or 4 control points
        tolerance: Maximum distance from true curve

    Returns:
        Number of halvings needed, 0 if the curve is already flat
    """
    spread = max(
        math.hypot(a.x - 2 * b.x + c.x, a.y - 2 * b.y + c.y)
        for a, b, c in zip(points, points[1:], points[2:])
    )
    if spread <= tolerance:
        return 0
    return math.ceil(math.log(spread / tolerance, 4))


def flatten_quadratic(
    points: list[Point], tolerance: float, max_depth: int = MAX_DEPTH, depth: int = 0
) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        max_depth: Depth at which pieces are emitted without a flatness check
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    p0, p1, p2 = points

    if depth >= max_depth or is_flat(points, tolerance):
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = _midpoint(p0, p1)
    r1 = _midpoint(p1, p2)
    mid = _midpoint(q1, r1)

    left = flatten_quadratic([p0, q1, mid], tolerance, max_depth, depth + 1)
    right = flatten_quadratic([mid, r1, p2], tolerance, max_depth, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(
    points: list[Point], tolerance: float, max_depth: int = MAX_DEPTH, depth: int = 0
) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        max_depth: Depth at which pieces are emitted without a flatness check
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, including both endpoints
    """
    p0, p1, p2, p3 = points

    if depth >= max_depth or is_flat(points, tolerance):
        return [p0, p3]

    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (point on the curve at t=0.5)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, max_depth, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, max_depth, depth + 1)

    return left[:-1] + right
