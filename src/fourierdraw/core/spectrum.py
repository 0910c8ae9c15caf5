"""Spectral analysis of sampled paths.

Runs a discrete Fourier transform over the complex samples and normalizes it
by the sample count, so that summing all coefficients rebuilds the first
sample without any extra scaling.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from fourierdraw.exceptions import InvalidSampleCountError, SamplingError


@dataclass(frozen=True, eq=False)
class Spectrum:
    """Normalized DFT coefficients indexed by frequency bin.

    Bin k (0 <= k < size) holds frequency +k; bin size - k stands for the
    negative frequency -k.

    Attributes:
        coefficients: Read-only complex array of length N
    """

    coefficients: np.ndarray

    @property
    def size(self) -> int:
        """Number of bins N."""
        return int(self.coefficients.shape[0])

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> complex:
        return complex(self.coefficients[index])

    def coefficient(self, frequency: int) -> complex:
        """Coefficient of a signed frequency, wrapping negatives to N - k."""
        return self[frequency % self.size]


def compute_spectrum(
    samples: Sequence[complex] | np.ndarray,
    sample_count: int | None = None,
) -> Spectrum:
    """Compute the normalized DFT of the samples.

    numpy's FFT handles any length, not only powers of two, in O(N log N).

    Args:
        samples: Complex samples in traversal order
        sample_count: Expected N; checked against len(samples) when given

    Returns:
        Spectrum with every bin divided by N

    Raises:
        InvalidSampleCountError: If there are no samples
        SamplingError: If the number of samples differs from sample_count
    """
    values = np.asarray(samples, dtype=np.complex128)
    if values.ndim != 1 or values.size == 0:
        raise InvalidSampleCountError(int(values.size))
    if sample_count is not None and values.size != sample_count:
        raise SamplingError(sample_count, int(values.size))

    coefficients = np.fft.fft(values)
    coefficients /= values.size
    coefficients.setflags(write=False)
    return Spectrum(coefficients=coefficients)
