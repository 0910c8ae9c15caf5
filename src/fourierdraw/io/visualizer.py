"""Descriptor visualizers.

This module renders rotating vector descriptors for playback:
- HtmlVisualizer: standalone page animating the epicycles on a canvas
- JsonVisualizer: plain descriptor list for other renderers
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from string import Template

from fourierdraw.config import OutputFormat, RenderConfig
from fourierdraw.domain import DrawDescriptor
from fourierdraw.exceptions import RenderError

HTML_TEMPLATE = Template("""<html>
<head>
    <meta charset="utf-8">
    <title>$title</title>
</head>
<canvas id="fourier_canvas" width="$width" height="$height"></canvas>
<script>
let canvas = null;
let context = null;
let time = 0;
const Point = class {
    constructor(x, y) {
        this.x = x;
        this.y = y;
    }
};

const FourierCircle = class {
    constructor(speed, radius, initial_angle) {
        this.radius = radius * $radius_scale;
        this.speed = speed * $speed_scale;
        this.initial_angle = initial_angle;
    }
    draw(ctx, at) {
        const next = this.nextCenter(at);
        ctx.beginPath();
        ctx.moveTo(at.x, at.y);
        ctx.lineTo(next.x, next.y);
        ctx.closePath();
        ctx.strokeStyle = 'rgba(202, 126, 86, 0.7)';
        ctx.lineWidth = 1;
        ctx.stroke();
    }
    nextCenter(at) {
        const angle = this.initial_angle + 2 * Math.PI * time * this.speed;
        return new Point(at.x + this.radius * Math.cos(angle),
                         at.y + this.radius * Math.sin(angle));
    }
};

let n;
let circles;
let animation_id = 0;
const center = new Point($center_x, $center_y);
let wave = [];

function init_fourier(canvas_elm, constants, count) {
    canvas = canvas_elm;
    context = canvas.getContext('2d');
    if (animation_id !== 0)
        window.cancelAnimationFrame(animation_id);
    n = count;
    circles = [];
    wave = [];
    for (let i = 0; i < count; i++) {
        const constant = constants[i];
        circles[i] = new FourierCircle(constant.s, constant.r, constant.a);
    }
    animation_id = window.requestAnimationFrame(draw);
}

function draw_wave(ctx) {
    for (let i = 1; i < wave.length; i++) {
        ctx.beginPath();
        ctx.moveTo(wave[i - 1].x, wave[i - 1].y);
        ctx.lineTo(wave[i].x, wave[i].y);
        ctx.closePath();
        const alpha = 1 - i / wave.length;
        ctx.strokeStyle = 'rgba(0, 0, 0, ' + alpha + ')';
        ctx.lineWidth = 1;
        ctx.stroke();
    }
}

function draw() {
    context.clearRect(0, 0, canvas.width, canvas.height);
    // The DC term only moves the origin
    let new_center = circles[0].nextCenter(center);
    for (let i = 1; i < n; i++) {
        circles[i].draw(context, new_center);
        new_center = circles[i].nextCenter(new_center);
    }

    wave.unshift(new_center);
    draw_wave(context);

    animation_id = window.requestAnimationFrame(draw);

    time += $time_step;
    if (wave.length > $trail_length) {
        wave.pop();
    }
}

window.onload = function() {
    canvas = document.getElementById("fourier_canvas");
    const data = $data;
    init_fourier(canvas, data, $count);
};
</script>
</html>
""")


class Visualizer(ABC):
    """Renders descriptors into a text document."""

    #: File suffix of the rendered document
    suffix: str = ""

    @abstractmethod
    def render(self, descriptors: Sequence[DrawDescriptor]) -> str:
        """Render descriptors.

        Args:
            descriptors: Rotating vectors in draw order

        Returns:
            Rendered document
        """

    def write(self, descriptors: Sequence[DrawDescriptor], output_path: Path) -> None:
        """Render descriptors and save them to output_path.

        Raises:
            RenderError: If the file cannot be written
        """
        content = self.render(descriptors)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise RenderError(str(output_path), str(e)) from e


class HtmlVisualizer(Visualizer):
    """Standalone HTML page animating the epicycles on a canvas.

    Example:
        visualizer = HtmlVisualizer(RenderConfig())
        visualizer.write(descriptors, Path("output.html"))
    """

    suffix = ".html"

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    @staticmethod
    def encode_descriptors(descriptors: Sequence[DrawDescriptor]) -> str:
        """Encode descriptors as the compact JSON the page script reads."""
        data = [{"s": d.frequency, "r": d.radius, "a": d.angle} for d in descriptors]
        # Keep the JSON from closing the script element
        return json.dumps(data).replace("</", "<\\/")

    def render(self, descriptors: Sequence[DrawDescriptor]) -> str:
        if not descriptors:
            raise ValueError("No descriptors to render")

        config = self.config
        return HTML_TEMPLATE.substitute(
            title=config.title.replace("<", "&lt;").replace(">", "&gt;"),
            width=config.canvas_width,
            height=config.canvas_height,
            center_x=repr(config.center_x),
            center_y=repr(config.center_y),
            radius_scale=repr(config.radius_scale),
            speed_scale=repr(config.speed_scale),
            time_step=repr(config.time_step),
            trail_length=config.trail_length,
            data=self.encode_descriptors(descriptors),
            count=len(descriptors),
        )


class JsonVisualizer(Visualizer):
    """Descriptor list as JSON."""

    suffix = ".json"

    def render(self, descriptors: Sequence[DrawDescriptor]) -> str:
        return json.dumps([d.to_dict() for d in descriptors], indent=2)


def get_visualizer(config: RenderConfig) -> Visualizer:
    """Create the visualizer for the configured output format."""
    if config.output_format == OutputFormat.JSON:
        return JsonVisualizer()
    return HtmlVisualizer(config)
