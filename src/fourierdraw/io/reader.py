"""SVG input for fourierdraw.

This module provides parse_svg_path for raw path data and the SvgReader
class for loading the first path element of an SVG file.
"""

import xml.etree.ElementTree as ET
from pathlib import Path as FilePath

from svgpathtools import parse_path

from fourierdraw.domain import Path
from fourierdraw.exceptions import SvgLoadError, SvgParseError
from fourierdraw.io.converter import svgpathtools_to_domain

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def parse_svg_path(path_data: str) -> Path:
    """Parse SVG path data into a domain Path.

    Supports the full SVG path grammar (absolute and relative commands,
    smooth curves and elliptical arcs) through svgpathtools.

    Args:
        path_data: Contents of a path "d" attribute

    Returns:
        Single-contour domain Path

    Raises:
        SvgParseError: If the data is empty, invalid, or has no segments
    """
    if not path_data or not path_data.strip():
        raise SvgParseError(path_data, "path data is empty")

    try:
        svg_path = parse_path(path_data)
    except AssertionError as e:
        # svgpathtools asserts that an arc ends away from its start point
        raise SvgParseError(
            path_data, "degenerate segment, such as an arc that ends at its start point"
        ) from e
    except Exception as e:
        raise SvgParseError(path_data, str(e) or type(e).__name__) from e

    if len(svg_path) == 0:
        raise SvgParseError(path_data, "path has no drawable segments")

    return svgpathtools_to_domain(svg_path)


def find_first_path_data(root: ET.Element) -> str | None:
    """Return the "d" attribute of the first path element under root."""
    for element in root.iter():
        if element.tag in (f"{{{SVG_NAMESPACE}}}path", "path"):
            data = element.get("d")
            if data:
                return data
    return None


class SvgReader:
    """Loads the first path of an SVG file.

    Example:
        reader = SvgReader(Path("drawing.svg"))
        reader.load()
        path = reader.read_path()
    """

    def __init__(self, svg_path: FilePath) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._path_data: str | None = None

    def load(self) -> None:
        """Load the SVG file and locate its first path element.

        Raises:
            FileNotFoundError: If the SVG file does not exist
            SvgLoadError: If the file is not valid XML or has no path element
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        try:
            root = ET.parse(self._svg_path).getroot()
        except ET.ParseError as e:
            raise SvgLoadError(str(self._svg_path), f"invalid XML: {e}") from e

        path_data = find_first_path_data(root)
        if path_data is None:
            raise SvgLoadError(str(self._svg_path), "no <path> element with path data")
        self._path_data = path_data

    @property
    def path_data(self) -> str:
        """Raw "d" attribute of the first path element.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._path_data is None:
            raise RuntimeError("SVG not loaded. Call load() first.")
        return self._path_data

    def read_path(self) -> Path:
        """Parse the first path element into a domain Path.

        Raises:
            RuntimeError: If the file has not been loaded yet
            SvgParseError: If the path data cannot be parsed
        """
        return parse_svg_path(self.path_data)
