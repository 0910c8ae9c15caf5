"""Curve flattening.

Turns a Path into a lazy stream of Begin, Line and End events in which every
Curve has been replaced by straight segments within a fixed tolerance. The
stream is validated while it is produced: anything that is not a well-formed
single contour raises MalformedPathError.
"""

import logging
import math
from collections.abc import Iterable, Iterator
from typing import Protocol, Union

from fourierdraw.config.settings import DEFAULT_FLATTEN_TOLERANCE
from fourierdraw.core._bezier import MAX_DEPTH, flatten_cubic, flatten_quadratic, subdivision_depth
from fourierdraw.domain import Begin, Curve, End, Line, Path, PathEvent
from fourierdraw.exceptions import InvalidToleranceError, MalformedPathError

logger = logging.getLogger(__name__)

FlatEvent = Union[Begin, Line, End]


class SegmentSource(Protocol):
    """A restartable source of flattened events.

    Every call to ``__iter__`` must produce the same event stream, so that
    consumers can traverse it more than once.
    """

    def __iter__(self) -> Iterator[FlatEvent]: ...


def validate_tolerance(tolerance: float) -> float:
    """Return tolerance if it is a positive finite number.

    Raises:
        InvalidToleranceError: If tolerance is zero, negative, NaN or infinite
    """
    if not math.isfinite(tolerance) or tolerance <= 0:
        raise InvalidToleranceError(tolerance)
    return tolerance


def flatten_curve(curve: Curve, tolerance: float) -> Iterator[Line]:
    """Approximate a Bezier curve by consecutive lines.

    Subdivision goes as deep as the curve needs to stay within tolerance, up
    to 2**MAX_DEPTH lines. Curves that would need more are cut off at that
    depth with a warning.

    Args:
        curve: Quadratic (3 points) or cubic (4 points) Bezier
        tolerance: Maximum deviation of the lines from the curve

    Yields:
        Line segments from curve.start to curve.end

    Raises:
        InvalidToleranceError: If tolerance is not positive and finite
        MalformedPathError: If the curve has an unsupported number of points
    """
    validate_tolerance(tolerance)
    points = list(curve.points)
    if len(points) not in (3, 4):
        raise MalformedPathError(f"curve with {len(points)} points is not a quadratic or cubic Bezier")

    depth = subdivision_depth(points, tolerance)
    if depth > MAX_DEPTH:
        logger.warning(
            "Curve from %s to %s needs subdivision depth %d, capped at %d; "
            "flattening may exceed tolerance %g",
            curve.start.to_tuple(),
            curve.end.to_tuple(),
            depth,
            MAX_DEPTH,
            tolerance,
        )
        depth = MAX_DEPTH

    if len(points) == 3:
        polyline = flatten_quadratic(points, tolerance, depth)
    else:
        polyline = flatten_cubic(points, tolerance, depth)

    for start, end in zip(polyline, polyline[1:]):
        yield Line(start, end)


def flatten(events: Iterable[PathEvent], tolerance: float = DEFAULT_FLATTEN_TOLERANCE) -> Iterator[FlatEvent]:
    """Lazily flatten path events.

    The tolerance is checked immediately; the events are checked as they are
    consumed.

    Args:
        events: Path events (usually a Path)
        tolerance: Maximum deviation of the lines from each curve

    Returns:
        Iterator of Begin, Line and End events in path order

    Raises:
        InvalidToleranceError: If tolerance is not positive and finite
        MalformedPathError: If the events do not form exactly one contour
            (Begin, segments, End) or contain an unknown event kind
    """
    return _flatten_events(events, validate_tolerance(tolerance))


def _flatten_events(events: Iterable[PathEvent], tolerance: float) -> Iterator[FlatEvent]:
    began = False
    ended = False

    for event in events:
        if ended:
            raise MalformedPathError(
                f"{type(event).__name__} after End; multi-contour paths are not supported"
            )

        if isinstance(event, Begin):
            if began:
                raise MalformedPathError("Begin inside an open contour")
            began = True
            yield event
        elif isinstance(event, Line):
            if not began:
                raise MalformedPathError("Line before Begin")
            yield event
        elif isinstance(event, Curve):
            if not began:
                raise MalformedPathError("Curve before Begin")
            yield from flatten_curve(event, tolerance)
        elif isinstance(event, End):
            if not began:
                raise MalformedPathError("End without matching Begin")
            ended = True
            yield event
        else:
            raise MalformedPathError(f"unsupported event {event!r}")

    if began and not ended:
        raise MalformedPathError("contour is missing its End")


class FlattenedPath:
    """Restartable flattened view of a Path.

    Iterating re-flattens the path lazily each time, so the sampler can
    measure and then sample the path without storing the line segments.

    Example:
        source = FlattenedPath(path, tolerance=0.01)
        total = compute_path_length(source)
        samples = sample_path(source, total, 1024)
    """

    def __init__(self, path: Path, tolerance: float = DEFAULT_FLATTEN_TOLERANCE) -> None:
        self._path = path
        self._tolerance = validate_tolerance(tolerance)

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def __iter__(self) -> Iterator[FlatEvent]:
        return flatten(self._path, self._tolerance)
