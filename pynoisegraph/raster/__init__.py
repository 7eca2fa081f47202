"""
Raster helpers consuming noise graphs.

These sit downstream of the module graph and only use its evaluation
contract (``get_value``): a noise map buffer, a builder sampling a module over
a rectangle of the plane y = 0, and a color gradient turning sampled values
into RGBA arrays.

Usage:
    import pynoisegraph as png

    source = png.module.Billow(frequency=2.0, seed=11)
    noise_map = png.raster.build_plane_map(source, 128, 128, bounds=(0.0, 4.0, 0.0, 4.0))
    rgba = png.raster.colorize(noise_map, png.raster.terrain_gradient())

Author: B.G.
"""

from .noise_map import NoiseMap
from .builder import NoiseMapBuilderPlane, build_plane_map
from .gradient import (
    Color,
    GradientPoint,
    GradientColor,
    grayscale_gradient,
    terrain_gradient,
    colorize,
)

__all__ = [
    "NoiseMap",
    "NoiseMapBuilderPlane",
    "build_plane_map",
    "Color",
    "GradientPoint",
    "GradientColor",
    "grayscale_gradient",
    "terrain_gradient",
    "colorize",
]
