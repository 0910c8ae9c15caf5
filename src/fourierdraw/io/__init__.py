"""SVG and output I/O layer for fourierdraw.

This module handles reading SVG path data using svgpathtools and writing
visualizer output. It provides a clean abstraction layer between
svgpathtools and the domain models.

Key responsibilities:
- Parse SVG path data (including arcs and relative commands)
- Load the first path element of an SVG file
- Convert svgpathtools segments to domain models
- Render descriptors to HTML or JSON

Key classes:
- SvgReader: Load the first path of an SVG file
- HtmlVisualizer / JsonVisualizer: Render descriptors
"""

from fourierdraw.io.reader import SvgReader, parse_svg_path
from fourierdraw.io.visualizer import (
    HtmlVisualizer,
    JsonVisualizer,
    Visualizer,
    get_visualizer,
)

__all__ = [
    "HtmlVisualizer",
    "JsonVisualizer",
    "SvgReader",
    "Visualizer",
    "get_visualizer",
    "parse_svg_path",
]
