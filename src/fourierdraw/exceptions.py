"""Exception hierarchy for Fourierdraw."""


class FourierDrawError(Exception):
    """Base exception for all Fourierdraw errors."""

    pass


class PathError(FourierDrawError):
    """Errors related to path structure or geometry."""

    pass


class MalformedPathError(PathError):
    """Path contains an event the pipeline cannot handle."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed path: {reason}")


class DegeneratePathError(PathError):
    """Path has no usable arc length."""

    def __init__(self, total_length: float) -> None:
        self.total_length = total_length
        super().__init__(
            f"Degenerate path: total length is {total_length!r}, cannot sample"
        )


class SamplingError(PathError):
    """Sampler could not place the requested number of samples."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Sampling produced {actual} samples, expected {expected}")


class ConfigurationError(FourierDrawError):
    """Invalid pipeline configuration."""

    pass


class InvalidSampleCountError(ConfigurationError):
    """Sample count is not a positive integer."""

    def __init__(self, sample_count: int) -> None:
        self.sample_count = sample_count
        super().__init__(f"Sample count must be at least 1, got {sample_count}")


class InvalidWaveCountError(ConfigurationError):
    """Wave count is not usable with the given spectrum."""

    def __init__(self, wave_count: int, reason: str) -> None:
        self.wave_count = wave_count
        self.reason = reason
        super().__init__(f"Invalid wave count {wave_count}: {reason}")


class InvalidToleranceError(ConfigurationError):
    """Flattening tolerance is not a positive finite number."""

    def __init__(self, tolerance: float) -> None:
        self.tolerance = tolerance
        super().__init__(f"Flattening tolerance must be positive and finite, got {tolerance!r}")


class SvgError(FourierDrawError):
    """Errors related to SVG input."""

    pass


class SvgParseError(SvgError):
    """SVG path data could not be parsed."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        preview = path_data if len(path_data) <= 40 else path_data[:37] + "..."
        super().__init__(f"Failed to parse SVG path '{preview}': {reason}")


class SvgLoadError(SvgError):
    """SVG file could not be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load SVG '{path}': {reason}")


class RenderError(FourierDrawError):
    """Error writing rendered output."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to render '{path}': {reason}")
