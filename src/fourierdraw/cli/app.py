"""CLI application entry point for fourierdraw.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from fourierdraw import __version__
from fourierdraw.cli.output import (
    console,
    print_error,
    print_header,
    print_path_info,
    print_sampling_info,
    print_step,
    print_success,
)
from fourierdraw.config import (
    FourierDrawSettings,
    LoggingConfig,
    OutputFormat,
    RenderConfig,
    SamplingConfig,
)
from fourierdraw.config.settings import (
    DEFAULT_FLATTEN_TOLERANCE,
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_WAVE_COUNT,
)
from fourierdraw.core import FourierProcessor, normalize_wave_count
from fourierdraw.domain import Path as DrawPath
from fourierdraw.exceptions import (
    FourierDrawError,
    PathError,
    RenderError,
    SvgError,
)
from fourierdraw.io import SvgReader, parse_svg_path

# Create the Typer app
app = typer.Typer(
    name="fourierdraw",
    help="Draw an SVG path with rotating vectors using the Fourier transform.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Fourierdraw[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def draw(
    path_data: Annotated[
        str | None,
        typer.Option(
            "--path",
            "-p",
            help="Draw an SVG path given as a string",
        ),
    ] = None,
    svg_file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Draw the first SVG path in a file",
        ),
    ] = None,
    sample_count: Annotated[
        int,
        typer.Option(
            "--sample",
            "-s",
            help="Number of sample points taken along the path",
            min=1,
        ),
    ] = DEFAULT_SAMPLE_COUNT,
    wave_count: Annotated[
        int,
        typer.Option(
            "--wave",
            "-w",
            help="Number of waves used to draw the path (clamped to the sample count)",
            min=1,
        ),
    ] = DEFAULT_WAVE_COUNT,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: output.html or output.json)",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            help="Output format (html|json)",
        ),
    ] = "html",
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Curve flattening tolerance in path units",
        ),
    ] = DEFAULT_FLATTEN_TOLERANCE,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Draw an SVG path with rotating vectors using the Fourier transform.

    The path is resampled at uniform arc-length spacing, transformed, and the
    strongest frequencies around zero are written as an HTML animation.

    Example:
        fourierdraw --path "M 0 0 L 100 0 L 100 100 Z" --wave 51

    This will create output.html animating 51 rotating vectors.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if path_data is None and svg_file is None:
        print_error(
            "No SVG path provided.",
            details="Use --path to pass path data or --file to read an SVG file.",
        )
        raise typer.Exit(code=1)

    if path_data is not None and svg_file is not None:
        print_error("Cannot use --path and --file together")
        raise typer.Exit(code=1)

    if svg_file is not None and not svg_file.is_file():
        print_error(
            f"Input file not found: {svg_file}",
            details=f"The file '{svg_file}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    # Validate format argument
    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        print_error(
            f"Invalid format: {output_format}",
            details="Valid values: html, json",
        )
        raise typer.Exit(code=1)

    try:
        settings = FourierDrawSettings(
            sampling=SamplingConfig(
                sample_count=sample_count,
                wave_count=wave_count,
                flatten_tolerance=tolerance,
            ),
            render=RenderConfig(output_format=fmt),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if output is None:
        output = Path(f"output.{fmt.value}")

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading path")

        path, source = _load_path(path_data, svg_file)

        if not quiet:
            print_path_info(source, path.segment_count(), path.is_closed)
            print_step("Sampling")
            print_sampling_info(
                sample_count,
                normalize_wave_count(sample_count, wave_count),
                wave_count,
            )

        processor = FourierProcessor(settings, quiet=quiet)
        stats = processor.process(path, output)

        if not quiet:
            print_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                total_time_s=stats.duration_seconds,
                descriptors=stats.descriptor_count,
                total_length=stats.total_length,
                sampling_ms=stats.sampling_ms if verbose else None,
                transform_ms=stats.transform_ms if verbose else None,
            )

    except SvgError as e:
        print_error(f"Could not read SVG path: {e}")
        raise typer.Exit(code=1)
    except PathError as e:
        print_error(f"Could not draw path: {e}")
        raise typer.Exit(code=1)
    except RenderError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except FourierDrawError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _load_path(path_data: str | None, svg_file: Path | None) -> tuple[DrawPath, str]:
    """Load the path from the command line or an SVG file.

    Args:
        path_data: Raw SVG path data, if given
        svg_file: SVG file to read the first path from, if given

    Returns:
        Tuple of (domain path, human-readable source)
    """
    if svg_file is not None:
        reader = SvgReader(svg_file)
        reader.load()
        return reader.read_path(), str(svg_file)

    assert path_data is not None
    return parse_svg_path(path_data), "command line"


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"

    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
