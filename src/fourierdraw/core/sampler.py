"""Arc-length uniform sampling of flattened paths.

The sampler makes two passes over a restartable stream of flattened events:
the first measures the total arc length, the second places exactly N samples
at multiples of ``total_length / N`` along the path.

Every segment owns the half-open arc-length interval
``[accumulated, accumulated + length)``. A sample that lands exactly on a
segment boundary therefore belongs to the later segment, and the closing
segment of a closed path follows the same rule as every other segment.
"""

import logging
import math

from fourierdraw.core.flatten import SegmentSource
from fourierdraw.domain import Begin, End, Line
from fourierdraw.exceptions import (
    DegeneratePathError,
    InvalidSampleCountError,
    MalformedPathError,
    SamplingError,
)

logger = logging.getLogger(__name__)


def compute_path_length(source: SegmentSource) -> float:
    """Measure the total arc length of a flattened path.

    Includes the implicit closing segment when the path is closed.

    Args:
        source: Restartable flattened events (Begin, Line, End)

    Returns:
        Total arc length in path units

    Raises:
        MalformedPathError: If the path is empty or contains curves
    """
    total_length = 0.0
    began = False

    for event in source:
        if isinstance(event, Begin):
            began = True
        elif isinstance(event, Line):
            total_length += event.length
        elif isinstance(event, End):
            if event.closed:
                total_length += event.closing_line.length
        else:
            raise MalformedPathError(f"unexpected event in flattened path: {event!r}")

    if not began:
        raise MalformedPathError("path has no segments")

    return total_length


def _place_samples(
    line: Line,
    accumulated: float,
    spacing: float,
    next_index: int,
    samples: list[complex],
) -> tuple[float, int]:
    """Emit every sample whose target arc length falls on this segment.

    Returns:
        Tuple of (accumulated length after the segment, next sample index)
    """
    length = line.length
    end_length = accumulated + length
    start = line.start.to_complex()
    delta = line.end.to_complex() - start

    # A long segment can hold several samples
    target = spacing * next_index
    while accumulated <= target < end_length:
        samples.append(start + delta * ((target - accumulated) / length))
        next_index += 1
        target = spacing * next_index

    return end_length, next_index


def sample_path(
    source: SegmentSource,
    total_length: float,
    sample_count: int,
) -> list[complex]:
    """Place sample_count points at uniform arc-length spacing.

    Sample k lies at arc length ``k * total_length / sample_count`` from the
    path start; sample 0 is the start point itself.

    Args:
        source: Flattened events, the same stream that was measured
        total_length: Result of compute_path_length on source
        sample_count: Number of samples N

    Returns:
        Exactly sample_count complex samples (x + iy) in traversal order

    Raises:
        InvalidSampleCountError: If sample_count < 1
        DegeneratePathError: If total_length is zero, negative or not finite
        SamplingError: If fewer than sample_count samples could be placed
    """
    if sample_count < 1:
        raise InvalidSampleCountError(sample_count)
    if not math.isfinite(total_length) or total_length <= 0.0:
        raise DegeneratePathError(total_length)

    spacing = total_length / sample_count
    samples: list[complex] = []
    accumulated = 0.0
    next_index = 0

    for event in source:
        if isinstance(event, Begin):
            samples.append(event.at.to_complex())
            next_index = 1
        elif isinstance(event, Line):
            accumulated, next_index = _place_samples(
                event, accumulated, spacing, next_index, samples
            )
        elif isinstance(event, End):
            if event.closed:
                accumulated, next_index = _place_samples(
                    event.closing_line, accumulated, spacing, next_index, samples
                )
        else:
            raise MalformedPathError(f"unexpected event in flattened path: {event!r}")

    # Rounding at the path end can add one sample too many
    if len(samples) > sample_count:
        logger.debug(
            "Truncating %d extra samples (spacing=%.6g)",
            len(samples) - sample_count,
            spacing,
        )
        del samples[sample_count:]

    if len(samples) < sample_count:
        raise SamplingError(sample_count, len(samples))

    return samples
