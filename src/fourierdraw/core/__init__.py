"""Core processing algorithms for fourierdraw.

This module contains the path-to-spectrum pipeline:

- Curve flattening (Bezier curves to line segments within a tolerance)
- Arc-length sampling (exactly N uniformly spaced complex samples)
- Spectral analysis (normalized DFT)
- Descriptor building (ordered rotating vectors)

All functions are pure and keep no state between calls.

Key functions:
- flatten: Lazily flatten path events
- compute_path_length: Total arc length of a flattened path
- sample_path: Uniform arc-length samples
- compute_spectrum: Normalized DFT of the samples
- build_descriptors: Symmetric frequency band in draw order
- path_to_descriptors: The whole pipeline in one call

Key classes:
- FlattenedPath: Restartable flattened view of a Path
- Spectrum: Coefficients indexed by frequency bin
- FourierProcessor: Orchestrator with logging and rendering
"""

from fourierdraw.core.descriptors import (
    build_descriptors,
    descriptor_from_coefficient,
    reconstruct_point,
)
from fourierdraw.core.flatten import (
    FlattenedPath,
    SegmentSource,
    flatten,
    flatten_curve,
    validate_tolerance,
)
from fourierdraw.core.pipeline import (
    FourierProcessor,
    normalize_wave_count,
    path_to_descriptors,
    path_to_samples,
    path_to_spectrum,
)
from fourierdraw.core.sampler import compute_path_length, sample_path
from fourierdraw.core.spectrum import Spectrum, compute_spectrum

__all__ = [
    # Flattening
    "FlattenedPath",
    # Processor
    "FourierProcessor",
    "SegmentSource",
    # Spectrum
    "Spectrum",
    "build_descriptors",
    "compute_path_length",
    "compute_spectrum",
    "descriptor_from_coefficient",
    "flatten",
    "flatten_curve",
    "normalize_wave_count",
    "path_to_descriptors",
    "path_to_samples",
    "path_to_spectrum",
    "reconstruct_point",
    "sample_path",
    "validate_tolerance",
]
