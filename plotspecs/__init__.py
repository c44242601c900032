"""Chainable builders for gnuplot plot specifications, plus a small 3D vector type."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "vector",
    "lines",
    "fill",
    "draw",
    "labels",
    "border",
    "histogram",
    "grid",
    "legend",
    "tics",
]