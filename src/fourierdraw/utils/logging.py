"""Logging utilities for Fourierdraw."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_TAG = "_fourierdraw_handler"


@dataclass
class PipelineStats:
    """Statistics from a pipeline run."""

    segment_count: int = 0
    closed: bool = False
    total_length: float = 0.0
    sample_count: int = 0
    requested_wave_count: int = 0
    wave_count: int = 0
    descriptor_count: int = 0
    sampling_ms: float = 0.0
    transform_ms: float = 0.0
    output_path: Path | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def wave_count_clamped(self) -> bool:
        """Whether the requested wave count was reduced to the sample count."""
        return self.wave_count < self.requested_wave_count

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _install_handler(root_logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG, True)
    root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install_handler(root_logger, file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _install_handler(root_logger, console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("fourierdraw")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class PipelineLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PipelineStats()

    def reset(self) -> None:
        """Start a fresh set of statistics."""
        self._stats = PipelineStats()

    def log_path_loaded(self, segment_count: int, closed: bool) -> None:
        """Log the path handed to the pipeline."""
        self._logger.debug("Path loaded", segments=segment_count, closed=closed)
        self._stats.segment_count = segment_count
        self._stats.closed = closed

    def log_wave_count(self, requested: int, effective: int) -> None:
        """Log the wave count after clamping to the sample count."""
        if effective < requested:
            self._logger.info(
                "Wave count clamped to sample count",
                requested=requested,
                wave_count=effective,
            )
        self._stats.requested_wave_count = requested
        self._stats.wave_count = effective

    def log_sampling(self, total_length: float, sample_count: int, duration_ms: float) -> None:
        """Log arc-length sampling results."""
        self._logger.debug(
            "Path sampled",
            total_length=round(total_length, 6),
            samples=sample_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.total_length = total_length
        self._stats.sample_count = sample_count
        self._stats.sampling_ms = duration_ms

    def log_transform(self, descriptor_count: int, duration_ms: float) -> None:
        """Log spectrum and descriptor construction."""
        self._logger.debug(
            "Descriptors built",
            descriptors=descriptor_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.descriptor_count = descriptor_count
        self._stats.transform_ms = duration_ms

    def log_render(self, output_path: Path, output_format: str) -> None:
        """Log visualizer output."""
        self._logger.info("Output written", path=str(output_path), format=output_format)
        self._stats.output_path = output_path

    def log_error(self, stage: str, error: Exception) -> None:
        """Log a fatal pipeline error."""
        self._logger.error(
            "Pipeline failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> PipelineStats:
        """Get current pipeline statistics."""
        return self._stats
