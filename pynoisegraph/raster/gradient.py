"""
Map noise values to colors through a piecewise-linear color gradient.

A gradient is a list of (position, color) points sorted by position. Values
between two points get a linear blend of their colors; values beyond the
first or last point get that point's color.

Author: B.G.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from ..exceptions import InvalidParameterError
from .noise_map import NoiseMap


class Color(NamedTuple):
    """RGBA color with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255


class GradientPoint(NamedTuple):
    pos: float
    color: Color


class GradientColor:
    """
    Color gradient defined by gradient points with unique positions.

    Example:
        gradient = GradientColor()
        gradient.add_gradient_point(-1.0, Color(0, 0, 0))
        gradient.add_gradient_point(0.0, Color(255, 255, 255))
        gradient.add_gradient_point(1.0, Color(255, 0, 0))
        gradient.get_color(-0.5)  # mid grey
    """

    def __init__(self, points=()):
        self._points: list[GradientPoint] = []
        for pos, color in points:
            self.add_gradient_point(pos, color)

    @property
    def points(self) -> tuple[GradientPoint, ...]:
        """Gradient points sorted by position."""
        return tuple(self._points)

    def __len__(self):
        return len(self._points)

    def add_gradient_point(self, pos: float, color) -> None:
        """
        Insert a gradient point, keeping the points sorted by position.

        Raises:
            InvalidParameterError: If a point already sits at ``pos``
        """
        pos = float(pos)
        color = Color(*color)
        index = 0
        for index, point in enumerate(self._points):
            if pos < point.pos:
                break
            if pos == point.pos:
                raise InvalidParameterError(f"gradient already has a point at {pos}")
        else:
            index = len(self._points)
        self._points.insert(index, GradientPoint(pos, color))

    def clear(self) -> None:
        self._points.clear()

    def get_color(self, pos: float) -> Color:
        """Color at ``pos``."""
        rgba = self.map_values(np.array([pos], dtype=np.float64))[0]
        return Color(*(int(c) for c in rgba))

    def map_values(self, values) -> np.ndarray:
        """
        Colors for an array of values.

        Args:
            values: Array of any shape

        Returns:
            np.ndarray: uint8 array of shape values.shape + (4,), RGBA order

        Raises:
            InvalidParameterError: If the gradient has fewer than two points
        """
        if len(self._points) < 2:
            raise InvalidParameterError("a color gradient needs at least two points")

        values = np.asarray(values, dtype=np.float64)
        positions = np.array([p.pos for p in self._points], dtype=np.float64)
        colors = np.array([p.color for p in self._points], dtype=np.float32)

        # First point strictly above each value
        index_pos = np.searchsorted(positions, values, side="right")
        last = len(positions) - 1
        index0 = np.clip(index_pos - 1, 0, last)
        index1 = np.clip(index_pos, 0, last)

        same = index0 == index1
        span = positions[index1] - positions[index0]
        alpha = np.where(same, 0.0, (values - positions[index0]) / np.where(same, 1.0, span))
        alpha = alpha.astype(np.float32)[..., None]

        blended = colors[index1] * alpha + colors[index0] * (np.float32(1.0) - alpha)
        # Channels truncate towards zero
        return np.clip(blended, 0.0, 255.0).astype(np.uint8)


def grayscale_gradient() -> GradientColor:
    """Black at -1.0 to white at +1.0."""
    return GradientColor([
        (-1.0, Color(0, 0, 0, 255)),
        (1.0, Color(255, 255, 255, 255)),
    ])


def terrain_gradient() -> GradientColor:
    """Deep water below -0.2 through sand, grass and rock to snow at +1.0."""
    return GradientColor([
        (-1.00, Color(0, 0, 128, 255)),
        (-0.20, Color(32, 64, 128, 255)),
        (-0.04, Color(64, 96, 192, 255)),
        (-0.02, Color(192, 192, 128, 255)),
        (0.00, Color(0, 192, 0, 255)),
        (0.25, Color(192, 192, 0, 255)),
        (0.50, Color(160, 96, 64, 255)),
        (0.75, Color(128, 255, 255, 255)),
        (1.00, Color(255, 255, 255, 255)),
    ])


def colorize(values, gradient: GradientColor | None = None) -> np.ndarray:
    """
    Color a noise map or 2D array.

    Args:
        values: NoiseMap or array of shape (height, width)
        gradient: Color gradient; grayscale when omitted

    Returns:
        np.ndarray: uint8 RGBA image of shape (height, width, 4)
    """
    if gradient is None:
        gradient = grayscale_gradient()
    if isinstance(values, NoiseMap):
        values = values.data
    return gradient.map_values(values)


__all__ = [
    "Color", "GradientPoint", "GradientColor",
    "grayscale_gradient", "terrain_gradient", "colorize",
]
