"""Conversion of a spectrum into ordered rotating vector descriptors."""

import cmath
import math
from collections.abc import Iterable

from fourierdraw.core.spectrum import Spectrum
from fourierdraw.domain import DrawDescriptor
from fourierdraw.exceptions import InvalidWaveCountError


def descriptor_from_coefficient(frequency: int, coefficient: complex) -> DrawDescriptor:
    """Polar decomposition of a single coefficient."""
    radius, angle = cmath.polar(coefficient)
    return DrawDescriptor(frequency=frequency, radius=radius, angle=angle)


def build_descriptors(spectrum: Spectrum, wave_count: int) -> tuple[DrawDescriptor, ...]:
    """Select a symmetric band of frequencies around zero.

    Descriptors come out in draw order: the DC term first, then +1, -1, +2,
    -2 and so on, with ``wave_count // 2`` frequency pairs. Negative frequency
    -i is read from bin N - i. When N is even, frequency N/2 has a single
    bin and is emitted once, as +N/2.

    Args:
        spectrum: Normalized coefficients of size N
        wave_count: Requested number of waves W, already clamped to N

    Returns:
        Tuple of descriptors in summation order

    Raises:
        InvalidWaveCountError: If W < 1 or W > N
    """
    size = spectrum.size
    if wave_count < 1:
        raise InvalidWaveCountError(wave_count, "must be at least 1")
    if wave_count > size:
        raise InvalidWaveCountError(wave_count, f"exceeds the spectrum size {size}")

    descriptors = [descriptor_from_coefficient(0, spectrum[0])]
    for i in range(1, wave_count // 2 + 1):
        descriptors.append(descriptor_from_coefficient(i, spectrum[i]))
        if size - i != i:
            descriptors.append(descriptor_from_coefficient(-i, spectrum[size - i]))

    return tuple(descriptors)


def reconstruct_point(descriptors: Iterable[DrawDescriptor], t: float) -> complex:
    """Sum the rotating vectors at time t (one period is t in [0, 1)).

    Args:
        descriptors: Rotating vectors to sum
        t: Time as a fraction of the period

    Returns:
        Tip of the last vector, as x + iy
    """
    total = 0j
    for descriptor in descriptors:
        total += cmath.rect(
            descriptor.radius,
            descriptor.angle + 2.0 * math.pi * descriptor.frequency * t,
        )
    return total
