"""
Perlin noise generator module.

Author: B.G.
"""

from .. import constants as cte
from .fractal import OctaveGenerator


class Perlin(OctaveGenerator):
    """
    Generator producing layered Perlin noise.

    Sums ``octave_count`` octaves of coherent noise. Octave i is sampled at
    ``frequency * lacunarity**i`` with seed ``seed + i`` and weighted by
    ``persistence**i``. Output is not normalised: with the default persistence
    of 0.5 it stays roughly within [-2, 2], most values within [-1, 1].

    Needs no source modules.

    Example:
        terrain = Perlin(frequency=2.0, octave_count=8, seed=1234)
        height = terrain.get_value(0.5, 0.0, 0.25)
    """

    max_octave = cte.PERLIN_MAX_OCTAVE

    def __init__(self,
                 frequency: float = cte.DEFAULT_PERLIN_FREQUENCY,
                 lacunarity: float = cte.DEFAULT_PERLIN_LACUNARITY,
                 octave_count: int = cte.DEFAULT_PERLIN_OCTAVE_COUNT,
                 persistence: float = cte.DEFAULT_PERLIN_PERSISTENCE,
                 seed: int = cte.DEFAULT_PERLIN_SEED,
                 quality=cte.DEFAULT_PERLIN_QUALITY):
        super().__init__(frequency, lacunarity, octave_count, persistence, seed, quality)


__all__ = ["Perlin"]
