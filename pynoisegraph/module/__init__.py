"""
Noise modules for PyNoiseGraph.

Modules are the nodes of a noise graph. Each returns a scalar for any 3D
coordinate through ``get_value(x, y, z)``; modifier modules pull the values of
their source modules first.

Generators (no source modules):
- Const: fixed value everywhere
- Perlin: layered coherent noise
- Billow: layered coherent noise with folded octaves

Modifiers (one source module):
- Clamp: clamp the source output to [lower_bound, upper_bound]
- Exponent: remap the source output along an exponential curve

Usage:
    import pynoisegraph as png

    base = png.module.Perlin(frequency=4.0, octave_count=5, seed=7)
    shaped = png.module.Exponent(base, exponent=2.0)
    clipped = png.module.Clamp(shaped, lower_bound=-0.8, upper_bound=0.8)

    value = clipped.get_value(0.25, 0.0, 0.75)

Author: B.G.
"""

from .base import Module
from .fractal import OctaveGenerator
from .const import Const
from .perlin import Perlin
from .billow import Billow
from .clamp import Clamp
from .exponent import Exponent

__all__ = [
    "Module", "OctaveGenerator",
    "Const", "Perlin", "Billow",
    "Clamp", "Exponent",
]
