"""
Coherent-noise primitive for PyNoiseGraph.

Provides the seeded gradient-lattice noise that the octave generators in
``pynoisegraph.module`` sum into layered noise. Everything here is a plain
function of its arguments: no state, no caching, no allocation per sample.

Contents:
- NoiseQuality: FAST (linear), STD (cubic s-curve), BEST (quintic s-curve)
- gradient_coherent_noise_3d: the 3D coherent-noise sample
- gradient_noise_3d: contribution of a single lattice corner
- make_int32_range: coordinate wrapping for very large inputs
- linear_interp, s_curve3, s_curve5: interpolation helpers

Usage:
    import pynoisegraph as png

    v = png.noise.gradient_coherent_noise_3d(0.3, 1.7, -2.2, seed=42,
                                            quality=png.noise.NoiseQuality.BEST)

Author: B.G.
"""

from .quality import NoiseQuality, as_quality
from .interp import linear_interp, linear_curve, s_curve3, s_curve5
from .vector_table import random_unit_vectors, RANDOM_VECTORS
from .coherent import (
    make_int32_range,
    lattice_index,
    gradient_noise_3d,
    gradient_coherent_noise_3d,
)

__all__ = [
    "NoiseQuality", "as_quality",
    "linear_interp", "linear_curve", "s_curve3", "s_curve5",
    "random_unit_vectors", "RANDOM_VECTORS",
    "make_int32_range", "lattice_index",
    "gradient_noise_3d", "gradient_coherent_noise_3d",
]
