"""Fourierdraw - Draw SVG paths with rotating vectors.

Fourierdraw converts an SVG path into a truncated Fourier series: the path is
flattened, resampled at uniform arc-length intervals, transformed with a
discrete Fourier transform, and emitted as an ordered list of rotating vectors
(epicycles) whose superposition traces the original path.

Example:
    $ fourierdraw --path "M 0 0 L 100 0 L 100 100 Z"

This will create output.html with a canvas animation of the epicycles.
"""

__version__ = "1.0.0"
__author__ = "Inoki"

__all__ = ["__author__", "__version__"]
