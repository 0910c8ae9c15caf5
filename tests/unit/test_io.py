"""Unit tests for the SVG input and visualizer layer.

Tests for parse_svg_path, SvgReader, the svgpathtools converter and the
HTML/JSON visualizers.
"""

import json
import logging
import math
from pathlib import Path

import pytest
from svgpathtools import Arc, parse_path

from fourierdraw.config import OutputFormat, RenderConfig
from fourierdraw.core import FlattenedPath, compute_path_length
from fourierdraw.domain import Begin, Curve, DrawDescriptor, End, Line, Point
from fourierdraw.exceptions import RenderError, SvgLoadError, SvgParseError
from fourierdraw.io import (
    HtmlVisualizer,
    JsonVisualizer,
    SvgReader,
    get_visualizer,
    parse_svg_path,
)
from fourierdraw.io.converter import arc_to_cubics, svgpathtools_to_domain

CIRCLE = "M 100 0 A 100 100 0 1 0 -100 0 A 100 100 0 1 0 100 0 Z"


def flattened_points(path, tolerance=0.01):
    """All vertices of the flattened path."""
    points = []
    for event in FlattenedPath(path, tolerance):
        if isinstance(event, Begin):
            points.append(event.at)
        elif isinstance(event, Line):
            points.append(event.end)
    return points


class TestParseSvgPath:
    """Tests for parse_svg_path."""

    def test_closed_polyline(self):
        """Z closes the path back to its start."""
        path = parse_svg_path("M 0 0 L 100 0 L 100 100 Z")

        assert path.is_closed
        assert isinstance(path.events[0], Begin)
        assert path.events[0].at == Point(0, 0)
        assert isinstance(path.events[-1], End)
        assert compute_path_length(FlattenedPath(path)) == pytest.approx(
            200 + 100 * math.sqrt(2)
        )

    def test_open_polyline(self):
        path = parse_svg_path("M 0 0 L 10 0 L 10 10")

        assert not path.is_closed
        assert path.segment_count() == 2
        assert compute_path_length(FlattenedPath(path)) == pytest.approx(20.0)

    def test_relative_commands(self):
        """Relative commands are resolved against the current point."""
        path = parse_svg_path("m 10 10 l 20 0 l 0 20 z")

        lines = [event for event in path if isinstance(event, Line)]
        assert lines[0] == Line(Point(10, 10), Point(30, 10))
        assert lines[1] == Line(Point(30, 10), Point(30, 30))
        assert path.is_closed

    def test_cubic_and_quadratic(self):
        """Bezier commands become curves with all control points."""
        path = parse_svg_path("M 0 0 C 10 20 30 20 40 0 Q 50 -20 60 0")

        curves = [event for event in path if isinstance(event, Curve)]
        assert [curve.degree for curve in curves] == [3, 2]
        assert curves[0].points == (Point(0, 0), Point(10, 20), Point(30, 20), Point(40, 0))
        assert curves[1].points == (Point(40, 0), Point(50, -20), Point(60, 0))

    def test_arc_circle(self):
        """Arcs are approximated closely enough to stay on the circle."""
        path = parse_svg_path(CIRCLE)

        assert path.is_closed
        assert all(isinstance(event, (Begin, Curve, End)) for event in path)
        for point in flattened_points(path):
            assert math.hypot(point.x, point.y) == pytest.approx(100.0, abs=1e-2)
        length = compute_path_length(FlattenedPath(path))
        assert length == pytest.approx(2 * math.pi * 100, rel=1e-4)

    def test_zero_radius_arc_is_line(self):
        """An arc with a zero radius is drawn as a straight line."""
        path = parse_svg_path("M 0 0 A 0 10 0 0 1 10 0")

        assert [type(event) for event in path] == [Begin, Line, End]
        assert path.events[1] == Line(Point(0, 0), Point(10, 0))

    def test_arc_ending_at_start(self):
        """An arc that ends where it starts is reported with a reason."""
        with pytest.raises(SvgParseError, match="ends at its start point") as exc_info:
            parse_svg_path("M 0 0 L 10 0 A 5 5 0 0 1 10 0 L 10 10 Z")
        assert exc_info.value.reason

    def test_multiple_subpaths_warns(self, caplog):
        """Only the first subpath is kept."""
        with caplog.at_level(logging.WARNING, logger="fourierdraw.io.converter"):
            path = parse_svg_path("M 0 0 L 10 0 L 10 10 M 50 50 L 60 60")

        assert path.segment_count() == 2
        assert "multiple subpaths" in caplog.text

    @pytest.mark.parametrize("data", ["", "   "])
    def test_empty_data(self, data):
        with pytest.raises(SvgParseError):
            parse_svg_path(data)

    def test_move_only(self):
        """A path with no drawing commands is rejected."""
        with pytest.raises(SvgParseError, match="no drawable segments"):
            parse_svg_path("M 10 10")

    def test_invalid_data(self):
        with pytest.raises(SvgParseError):
            parse_svg_path("M 0 0 L foo bar")


class TestArcConversion:
    """Tests for arc_to_cubics."""

    def test_piece_count(self):
        """A half circle needs four 45 degree pieces."""
        path = parse_path("M 100 0 A 100 100 0 0 1 -100 0")
        arc = path[0]
        assert isinstance(arc, Arc)

        cubics = arc_to_cubics(arc)
        assert len(cubics) == 4
        assert cubics[0][0] == arc.start
        assert cubics[-1][3] == arc.end

    def test_pieces_are_connected(self):
        arc = parse_path("M 0 0 A 30 10 20 1 1 50 20")[0]
        cubics = arc_to_cubics(arc)
        for previous, current in zip(cubics, cubics[1:]):
            assert current[0] == pytest.approx(previous[3])

    def test_midpoint_on_arc(self):
        """Each cubic passes close to the arc at its middle."""
        arc = parse_path("M 100 0 A 100 100 0 0 1 -100 0")[0]
        for p0, p1, p2, p3 in arc_to_cubics(arc):
            mid = (p0 + 3 * p1 + 3 * p2 + p3) / 8
            assert abs(mid) == pytest.approx(100.0, abs=1e-3)

    def test_empty_svg_path(self):
        """An empty svgpathtools path converts to an empty domain path."""
        assert svgpathtools_to_domain(parse_path("")).is_empty()


class TestSvgReader:
    """Tests for SvgReader."""

    def test_load_namespaced(self, tmp_path):
        svg = tmp_path / "shape.svg"
        svg.write_text(
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">'
            '<g><path d="M 0 0 L 10 0 L 10 10 Z"/></g>'
            '<path d="M 5 5 L 6 6"/>'
            "</svg>",
            encoding="utf-8",
        )
        reader = SvgReader(svg)
        reader.load()

        assert reader.path_data == "M 0 0 L 10 0 L 10 10 Z"
        assert reader.read_path().is_closed

    def test_load_without_namespace(self, tmp_path):
        svg = tmp_path / "bare.svg"
        svg.write_text('<svg><path d="M 1 1 L 2 2"/></svg>', encoding="utf-8")
        reader = SvgReader(svg)
        reader.load()
        assert reader.read_path().segment_count() == 1

    def test_load_nonexistent_file(self):
        reader = SvgReader(Path("nonexistent.svg"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_invalid_xml(self, tmp_path):
        svg = tmp_path / "broken.svg"
        svg.write_text("<svg><path d='M 0 0'", encoding="utf-8")
        with pytest.raises(SvgLoadError, match="invalid XML"):
            SvgReader(svg).load()

    def test_no_path_element(self, tmp_path):
        svg = tmp_path / "empty.svg"
        svg.write_text('<svg><rect width="10" height="10"/></svg>', encoding="utf-8")
        with pytest.raises(SvgLoadError):
            SvgReader(svg).load()

    def test_not_loaded(self):
        reader = SvgReader(Path("shape.svg"))
        with pytest.raises(RuntimeError, match="SVG not loaded"):
            _ = reader.path_data


@pytest.fixture
def descriptors():
    return (
        DrawDescriptor(0, 1.5, 0.25),
        DrawDescriptor(1, 40.0, -1.0),
        DrawDescriptor(-1, 12.5, math.pi),
    )


class TestHtmlVisualizer:
    """Tests for the HTML canvas page."""

    def test_render_embeds_descriptors(self, descriptors):
        html = HtmlVisualizer().render(descriptors)

        start = html.index("const data = ") + len("const data = ")
        end = html.index(";\n", start)
        data = json.loads(html[start:end])
        assert data == [
            {"s": 0, "r": 1.5, "a": 0.25},
            {"s": 1, "r": 40.0, "a": -1.0},
            {"s": -1, "r": 12.5, "a": math.pi},
        ]
        assert "init_fourier(canvas, data, 3)" in html

    def test_render_uses_config(self, descriptors):
        config = RenderConfig(
            title="Star",
            canvas_width=1024,
            canvas_height=768,
            center_x=512.0,
            trail_length=50,
        )
        html = HtmlVisualizer(config).render(descriptors)

        assert "<title>Star</title>" in html
        assert 'width="1024" height="768"' in html
        assert "new Point(512.0, 150.0)" in html
        assert "wave.length > 50" in html
        assert "radius * 0.5" in html
        assert "time += 0.04" in html

    def test_defaults_match_playback(self, descriptors):
        html = HtmlVisualizer().render(descriptors)
        assert 'width="800" height="600"' in html
        assert "wave.length > 400" in html

    def test_title_is_escaped(self, descriptors):
        html = HtmlVisualizer(RenderConfig(title="<b>x</b>")).render(descriptors)
        assert "<title>&lt;b&gt;x&lt;/b&gt;</title>" in html

    def test_render_empty(self):
        with pytest.raises(ValueError, match="No descriptors"):
            HtmlVisualizer().render(())

    def test_write(self, descriptors, tmp_path):
        output = tmp_path / "output.html"
        HtmlVisualizer().write(descriptors, output)
        assert output.read_text(encoding="utf-8").startswith("<html>")

    def test_write_missing_directory(self, descriptors, tmp_path):
        output = tmp_path / "missing" / "output.html"
        with pytest.raises(RenderError) as exc_info:
            HtmlVisualizer().write(descriptors, output)
        assert exc_info.value.path == str(output)


class TestJsonVisualizer:
    """Tests for the JSON descriptor list."""

    def test_render(self, descriptors):
        data = json.loads(JsonVisualizer().render(descriptors))
        assert [DrawDescriptor.from_dict(item) for item in data] == list(descriptors)

    def test_get_visualizer(self):
        assert isinstance(get_visualizer(RenderConfig()), HtmlVisualizer)
        json_config = RenderConfig(output_format=OutputFormat.JSON)
        assert isinstance(get_visualizer(json_config), JsonVisualizer)
        assert get_visualizer(json_config).suffix == ".json"
