"""Tests for the path-to-descriptor pipeline and its orchestrator."""

import cmath
import json
import math

import pytest

from fourierdraw.config import (
    FourierDrawSettings,
    OutputFormat,
    RenderConfig,
    SamplingConfig,
)
from fourierdraw.core.descriptors import reconstruct_point
from fourierdraw.core.pipeline import (
    FourierProcessor,
    normalize_wave_count,
    path_to_descriptors,
    path_to_samples,
    path_to_spectrum,
)
from fourierdraw.domain import Begin, Line, Path, PathBuilder, Point
from fourierdraw.exceptions import (
    DegeneratePathError,
    FourierDrawError,
    InvalidSampleCountError,
    InvalidToleranceError,
    InvalidWaveCountError,
    MalformedPathError,
)


def regular_polygon(sides: int, radius: float, center: complex = 0j) -> Path:
    """Closed regular polygon starting at a vertex."""
    vertices = [
        Point.from_complex(center + radius * cmath.exp(2j * math.pi * k / sides))
        for k in range(sides)
    ]
    return Path.from_points(vertices, closed=True)


@pytest.fixture
def blob_path() -> Path:
    """Closed curved path."""
    return (
        PathBuilder()
        .move_to(Point(0, 0))
        .cubic_to(Point(40, -30), Point(90, 20), Point(60, 60))
        .quadratic_to(Point(20, 90), Point(-10, 40))
        .close()
        .build()
    )


class TestNormalizeWaveCount:
    """Tests for wave count clamping."""

    def test_wave_count_below_sample_count(self):
        assert normalize_wave_count(10240, 201) == 201

    def test_wave_count_clamped(self):
        """W > N is reduced to N, not rejected."""
        assert normalize_wave_count(10, 201) == 10

    def test_equal_counts(self):
        assert normalize_wave_count(64, 64) == 64

    @pytest.mark.parametrize("n", [0, -5])
    def test_invalid_sample_count(self, n):
        with pytest.raises(InvalidSampleCountError):
            normalize_wave_count(n, 10)

    def test_invalid_wave_count(self):
        with pytest.raises(InvalidWaveCountError):
            normalize_wave_count(10, 0)


class TestPathToDescriptors:
    """Tests for the pure pipeline entry points."""

    @pytest.mark.parametrize("sides", [3, 4, 6])
    def test_dc_of_centered_polygon(self, sides):
        """The DC term of a centered regular polygon is at the origin."""
        descriptors = path_to_descriptors(regular_polygon(sides, 50.0), 600, 21)

        assert descriptors[0].frequency == 0
        assert descriptors[0].radius == pytest.approx(0.0, abs=1e-9)

    def test_dc_of_offset_polygon(self):
        """The DC term sits at the polygon's centroid."""
        descriptors = path_to_descriptors(regular_polygon(4, 10.0, complex(3, 4)), 400, 5)
        assert descriptors[0].radius == pytest.approx(5.0, rel=1e-9)
        assert descriptors[0].angle == pytest.approx(math.atan2(4, 3), rel=1e-9)

    def test_default_counts(self, blob_path):
        """Default sample and wave counts give 201 descriptors."""
        descriptors = path_to_descriptors(blob_path, 10240, 201)
        assert len(descriptors) == 201
        assert all(d.radius >= 0 for d in descriptors)

    def test_wave_count_clamped_to_samples(self, blob_path):
        """W=201 with N=10 keeps every bin exactly once."""
        descriptors = path_to_descriptors(blob_path, 10, 201)
        assert [d.frequency for d in descriptors] == [0, 1, -1, 2, -2, 3, -3, 4, -4, 5]

    @pytest.mark.parametrize("n", [255, 256])
    def test_round_trip_first_sample(self, blob_path, n):
        """All N descriptors summed at t=0 give back the first sample."""
        samples = path_to_samples(blob_path, n)
        descriptors = path_to_descriptors(blob_path, n, n)

        assert len(descriptors) == n
        assert reconstruct_point(descriptors, 0.0) == pytest.approx(samples[0], abs=1e-9)
        assert reconstruct_point(descriptors, 0.0) == pytest.approx(0j, abs=1e-9)

    def test_spectrum_size(self, blob_path):
        """The spectrum has one bin per sample."""
        assert path_to_spectrum(blob_path, 300).size == 300

    def test_tolerance_is_used(self, blob_path):
        """A coarser tolerance changes the flattened geometry."""
        fine = path_to_samples(blob_path, 64, tolerance=0.01)
        coarse = path_to_samples(blob_path, 64, tolerance=5.0)
        assert fine != coarse

    def test_sample_count_checked_first(self):
        """An invalid N is reported before the path is inspected."""
        malformed = Path((Line(Point(0, 0), Point(1, 0)),))
        with pytest.raises(InvalidSampleCountError):
            path_to_descriptors(malformed, 0, 10)

    @pytest.mark.parametrize("tolerance", [0.0, -0.5, math.nan])
    def test_invalid_tolerance(self, blob_path, tolerance):
        """A bad tolerance is a typed configuration error."""
        with pytest.raises(InvalidToleranceError) as exc_info:
            path_to_descriptors(blob_path, 8, 3, tolerance=tolerance)
        assert isinstance(exc_info.value, FourierDrawError)

    def test_tolerance_checked_before_path(self):
        """The tolerance is validated before a malformed path is inspected."""
        malformed = Path((Line(Point(0, 0), Point(1, 0)),))
        with pytest.raises(InvalidToleranceError):
            path_to_samples(malformed, 8, tolerance=0.0)

    def test_sample_count_checked_before_tolerance(self, blob_path):
        with pytest.raises(InvalidSampleCountError):
            path_to_samples(blob_path, 0, tolerance=0.0)

    def test_malformed_path(self):
        malformed = Path((Begin(Point(0, 0)), Line(Point(0, 0), Point(1, 0))))
        with pytest.raises(MalformedPathError):
            path_to_descriptors(malformed, 16, 5)

    def test_degenerate_path(self):
        with pytest.raises(DegeneratePathError):
            path_to_descriptors(Path.from_points([Point(1, 1)]), 16, 5)

    def test_deterministic(self, blob_path):
        """The pipeline is pure: same input, same output."""
        assert path_to_descriptors(blob_path, 128, 31) == path_to_descriptors(
            blob_path, 128, 31
        )


class TestFourierProcessor:
    """Tests for the orchestrator."""

    @pytest.fixture
    def settings(self) -> FourierDrawSettings:
        return FourierDrawSettings(
            sampling=SamplingConfig(sample_count=128, wave_count=301),
        )

    def test_describe_records_stats(self, settings, blob_path):
        """describe runs the pipeline and fills the statistics."""
        processor = FourierProcessor(settings, quiet=True)
        descriptors = processor.describe(blob_path)
        stats = processor.stats

        assert len(descriptors) == 128
        assert stats.sample_count == 128
        assert stats.requested_wave_count == 301
        assert stats.wave_count == 128
        assert stats.wave_count_clamped
        assert stats.descriptor_count == 128
        assert stats.segment_count == 2
        assert stats.closed
        assert stats.total_length > 0
        assert stats.duration_seconds >= 0

    def test_process_writes_html(self, settings, blob_path, tmp_path):
        """process renders through the HTML visualizer by default."""
        output = tmp_path / "output.html"
        stats = FourierProcessor(settings, quiet=True).process(blob_path, output)

        assert output.exists()
        assert "fourier_canvas" in output.read_text(encoding="utf-8")
        assert stats.output_path == output

    def test_process_writes_json(self, blob_path, tmp_path):
        """The JSON format writes the descriptor list."""
        settings = FourierDrawSettings(
            sampling=SamplingConfig(sample_count=64, wave_count=7),
            render=RenderConfig(output_format=OutputFormat.JSON),
        )
        output = tmp_path / "vectors.json"
        FourierProcessor(settings, quiet=True).process(blob_path, output)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert [d["frequency"] for d in data] == [0, 1, -1, 2, -2, 3, -3]

    def test_failure_leaves_no_output(self, settings, tmp_path):
        """Fatal errors propagate and nothing is written."""
        output = tmp_path / "output.html"
        processor = FourierProcessor(settings, quiet=True)

        with pytest.raises(DegeneratePathError):
            processor.process(Path.from_points([Point(0, 0)], closed=True), output)
        assert not output.exists()

    def test_invalid_tolerance(self, blob_path, tmp_path):
        """Settings built without validation still fail with a typed error."""
        sampling = SamplingConfig.model_construct(
            sample_count=16, wave_count=5, flatten_tolerance=0.0
        )
        output = tmp_path / "output.html"
        processor = FourierProcessor(FourierDrawSettings(sampling=sampling), quiet=True)

        with pytest.raises(InvalidToleranceError):
            processor.process(blob_path, output)
        assert not output.exists()

    def test_log_file(self, blob_path, tmp_path):
        """Pipeline events are written to the configured log file."""
        log_file = tmp_path / "run.log"
        settings = FourierDrawSettings(
            sampling=SamplingConfig(sample_count=32, wave_count=5),
            logging={"log_file": log_file},
        )
        FourierProcessor(settings, quiet=True).describe(blob_path)

        content = log_file.read_text(encoding="utf-8")
        assert "Path sampled" in content
        assert "Descriptors built" in content
