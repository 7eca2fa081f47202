"""
Billow noise generator module.

Author: B.G.
"""

from .. import constants as cte
from .fractal import OctaveGenerator


class Billow(OctaveGenerator):
    """
    Generator producing "billowy" noise suited to clouds and rocks.

    Same octave recipe and parameters as Perlin, except that each raw octave
    sample s is folded to ``2*|s| - 1`` before weighting. For a sample in
    [-1, 1] the folded value also lies in [-1, 1].

    Needs no source modules.
    """

    max_octave = cte.BILLOW_MAX_OCTAVE

    def __init__(self,
                 frequency: float = cte.DEFAULT_BILLOW_FREQUENCY,
                 lacunarity: float = cte.DEFAULT_BILLOW_LACUNARITY,
                 octave_count: int = cte.DEFAULT_BILLOW_OCTAVE_COUNT,
                 persistence: float = cte.DEFAULT_BILLOW_PERSISTENCE,
                 seed: int = cte.DEFAULT_BILLOW_SEED,
                 quality=cte.DEFAULT_BILLOW_QUALITY):
        super().__init__(frequency, lacunarity, octave_count, persistence, seed, quality)

    def _shape_signal(self, signal: float) -> float:
        return 2.0 * abs(signal) - 1.0


__all__ = ["Billow"]
