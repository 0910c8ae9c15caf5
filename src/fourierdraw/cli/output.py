"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted steps, summaries and error messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Fourierdraw[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_path_info(source: str, segment_count: int, closed: bool) -> None:
    """Print information about the loaded path.

    Args:
        source: Where the path came from (file name or "command line")
        segment_count: Number of line and curve segments
        closed: Whether the path is closed
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    shape = "closed" if closed else "open"
    console.print(f"  {segment_count:,} segments {SYM_DOT} {shape}")


def print_sampling_info(sample_count: int, wave_count: int, requested_waves: int) -> None:
    """Print sampling configuration.

    Args:
        sample_count: Number of samples N
        wave_count: Effective wave count after clamping
        requested_waves: Wave count requested by the user
    """
    clamp_suffix = f" (clamped from {requested_waves})" if wave_count < requested_waves else ""
    console.print(f"  {sample_count:,} samples {SYM_DOT} {wave_count:,} waves{clamp_suffix}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    descriptors: int,
    total_length: float,
    sampling_ms: float | None = None,
    transform_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        descriptors: Number of rotating vectors written
        total_length: Arc length of the path
        sampling_ms: Time spent flattening and sampling
        transform_ms: Time spent in the transform and descriptor building
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {descriptors} vectors {SYM_DOT} path length {total_length:,.2f}")

    if sampling_ms is not None and transform_ms is not None:
        console.print(f"  sampling {sampling_ms:.1f}ms {SYM_DOT} transform {transform_ms:.1f}ms")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Messages carry user input and library errors, never markup
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
