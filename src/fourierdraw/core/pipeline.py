"""Path-to-spectrum pipeline.

This module wires the flattener, sampler, spectral analyzer and descriptor
builder together.

Key components:
- normalize_wave_count: Validates counts and clamps the wave count
- path_to_samples / path_to_spectrum / path_to_descriptors: Pure entry points
- FourierProcessor: Orchestrator used by the CLI, with logging and rendering
"""

import logging
import time
from pathlib import Path as FilePath

from fourierdraw.config import FourierDrawSettings
from fourierdraw.config.settings import DEFAULT_FLATTEN_TOLERANCE
from fourierdraw.core.descriptors import build_descriptors
from fourierdraw.core.flatten import FlattenedPath, validate_tolerance
from fourierdraw.core.sampler import compute_path_length, sample_path
from fourierdraw.core.spectrum import Spectrum, compute_spectrum
from fourierdraw.domain import DrawDescriptor, Path
from fourierdraw.exceptions import (
    FourierDrawError,
    InvalidSampleCountError,
    InvalidWaveCountError,
)
from fourierdraw.io.visualizer import get_visualizer
from fourierdraw.utils import PipelineLogger, PipelineStats, configure_logging

logger = logging.getLogger(__name__)


def normalize_wave_count(sample_count: int, wave_count: int) -> int:
    """Validate the counts and clamp the wave count to the sample count.

    A wave count above the sample count is not an error: there are only
    sample_count coefficients to draw from, so it is reduced silently.

    Args:
        sample_count: Number of samples N
        wave_count: Requested number of waves W

    Returns:
        min(W, N)

    Raises:
        InvalidSampleCountError: If N < 1
        InvalidWaveCountError: If W < 1
    """
    if sample_count < 1:
        raise InvalidSampleCountError(sample_count)
    if wave_count < 1:
        raise InvalidWaveCountError(wave_count, "must be at least 1")

    if wave_count > sample_count:
        logger.debug("Clamping wave count %d to sample count %d", wave_count, sample_count)
        return sample_count
    return wave_count


def path_to_samples(
    path: Path,
    sample_count: int,
    tolerance: float = DEFAULT_FLATTEN_TOLERANCE,
) -> list[complex]:
    """Flatten and resample a path at uniform arc-length spacing.

    Args:
        path: Single-contour path
        sample_count: Number of samples N
        tolerance: Curve flattening tolerance

    Returns:
        Exactly N complex samples

    Raises:
        ConfigurationError: If N < 1 or the tolerance is not positive
        PathError: If the path is malformed or degenerate
    """
    if sample_count < 1:
        raise InvalidSampleCountError(sample_count)
    validate_tolerance(tolerance)

    source = FlattenedPath(path, tolerance)
    total_length = compute_path_length(source)
    return sample_path(source, total_length, sample_count)


def path_to_spectrum(
    path: Path,
    sample_count: int,
    tolerance: float = DEFAULT_FLATTEN_TOLERANCE,
) -> Spectrum:
    """Normalized spectrum of a path sampled at N points."""
    samples = path_to_samples(path, sample_count, tolerance)
    return compute_spectrum(samples, sample_count)


def path_to_descriptors(
    path: Path,
    sample_count: int,
    wave_count: int,
    tolerance: float = DEFAULT_FLATTEN_TOLERANCE,
) -> tuple[DrawDescriptor, ...]:
    """Convert a path into ordered rotating vector descriptors.

    Args:
        path: Single-contour path
        sample_count: Number of samples N (DFT size)
        wave_count: Number of waves W, clamped to N
        tolerance: Curve flattening tolerance

    Returns:
        Descriptors in draw order (DC, +1, -1, +2, -2, ...)

    Raises:
        ConfigurationError: If N or W is below 1
        PathError: If the path is malformed or degenerate
    """
    wave_count = normalize_wave_count(sample_count, wave_count)
    spectrum = path_to_spectrum(path, sample_count, tolerance)
    return build_descriptors(spectrum, wave_count)


class FourierProcessor:
    """Orchestrates the pipeline for the CLI.

    Manages the complete workflow:
    1. Normalize sample and wave counts
    2. Flatten and sample the path
    3. Compute the spectrum and descriptors
    4. Render descriptors with the configured visualizer

    Example:
        settings = FourierDrawSettings()
        processor = FourierProcessor(settings)
        stats = processor.process(path, output_path=Path("output.html"))
    """

    def __init__(self, config: FourierDrawSettings, quiet: bool = False) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings with sampling, render and logging config
            quiet: Suppress console logging except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.pipeline_logger = PipelineLogger(self.logger)

    @property
    def stats(self) -> PipelineStats:
        """Statistics of the most recent run."""
        return self.pipeline_logger.stats

    def describe(self, path: Path) -> tuple[DrawDescriptor, ...]:
        """Run the pipeline on a path.

        Args:
            path: Single-contour path

        Returns:
            Descriptors in draw order

        Raises:
            FourierDrawError: If the configuration or path is invalid
        """
        sampling = self.config.sampling
        self.pipeline_logger.reset()
        stats = self.pipeline_logger.stats
        stats.start_time = time.time()

        self.pipeline_logger.log_path_loaded(path.segment_count(), path.is_closed)

        stage = "configuration"
        try:
            wave_count = normalize_wave_count(sampling.sample_count, sampling.wave_count)
            validate_tolerance(sampling.flatten_tolerance)
            self.pipeline_logger.log_wave_count(sampling.wave_count, wave_count)

            stage = "sampling"
            started = time.perf_counter()
            source = FlattenedPath(path, sampling.flatten_tolerance)
            total_length = compute_path_length(source)
            samples = sample_path(source, total_length, sampling.sample_count)
            self.pipeline_logger.log_sampling(
                total_length, len(samples), (time.perf_counter() - started) * 1000
            )

            stage = "transform"
            started = time.perf_counter()
            spectrum = compute_spectrum(samples, sampling.sample_count)
            descriptors = build_descriptors(spectrum, wave_count)
            self.pipeline_logger.log_transform(
                len(descriptors), (time.perf_counter() - started) * 1000
            )
        except FourierDrawError as e:
            self.pipeline_logger.log_error(stage, e)
            raise

        stats.end_time = time.time()
        return descriptors

    def process(self, path: Path, output_path: FilePath) -> PipelineStats:
        """Run the pipeline and write the visualizer output.

        Args:
            path: Single-contour path
            output_path: Where to write the rendered output

        Returns:
            Statistics of the run

        Raises:
            FourierDrawError: If the pipeline or rendering fails
        """
        descriptors = self.describe(path)

        render = self.config.render
        visualizer = get_visualizer(render)
        try:
            visualizer.write(descriptors, output_path)
        except FourierDrawError as e:
            self.pipeline_logger.log_error("render", e)
            raise
        self.pipeline_logger.log_render(output_path, render.output_format.value)

        stats = self.pipeline_logger.stats
        stats.end_time = time.time()
        return stats
