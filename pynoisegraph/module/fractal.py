"""
Octave summation shared by the Perlin and Billow generators.

Both generators sample the coherent-noise primitive once per octave. Octave i
samples at ``frequency * lacunarity**i`` with seed ``seed + i`` and contributes
with weight ``persistence**i``. Subclasses only decide how a raw octave sample
is shaped before it is weighted.

Author: B.G.
"""

from __future__ import annotations

import logging

from ..exceptions import InvalidParameterError
from ..noise import NoiseQuality, as_quality, gradient_coherent_noise_3d, make_int32_range
from .base import Module, as_finite_float, as_float, as_int

logger = logging.getLogger(__name__)


class OctaveGenerator(Module):
    """
    Generator summing several octaves of coherent noise.

    Every parameter is a property whose setter validates the new value and
    raises InvalidParameterError without touching the previous one.

    Args:
        frequency: Frequency of the first octave (> 0)
        lacunarity: Frequency multiplier between successive octaves
            (best results between 1.5 and 3.5)
        octave_count: Number of octaves, 1 to ``max_octave``
        persistence: Amplitude multiplier between successive octaves
            (best results between 0.0 and 1.0)
        seed: Seed of the first octave
        quality: NoiseQuality of the coherent-noise samples
    """

    source_module_count = 0
    max_octave = 30

    def __init__(self, frequency: float, lacunarity: float, octave_count: int,
                 persistence: float, seed: int, quality: NoiseQuality):
        super().__init__()
        self.frequency = frequency
        self.lacunarity = lacunarity
        self.octave_count = octave_count
        self.persistence = persistence
        self.seed = seed
        self.quality = quality

    @property
    def frequency(self) -> float:
        """Frequency of the first octave."""
        return self._frequency

    @frequency.setter
    def frequency(self, value):
        value = as_finite_float("frequency", value)
        if value <= 0.0:
            raise InvalidParameterError(f"frequency must be > 0, got {value}")
        self._frequency = value

    @property
    def lacunarity(self) -> float:
        """Frequency multiplier between successive octaves."""
        return self._lacunarity

    @lacunarity.setter
    def lacunarity(self, value):
        self._lacunarity = as_float("lacunarity", value)

    @property
    def octave_count(self) -> int:
        """Number of octaves summed per sample."""
        return self._octave_count

    @octave_count.setter
    def octave_count(self, value):
        value = as_int("octave_count", value)
        if value < 1 or value > self.max_octave:
            raise InvalidParameterError(
                f"octave_count must be in [1, {self.max_octave}], got {value}"
            )
        self._octave_count = value
        logger.debug("%s: octave_count=%d", type(self).__name__, value)

    @property
    def persistence(self) -> float:
        """Amplitude multiplier between successive octaves."""
        return self._persistence

    @persistence.setter
    def persistence(self, value):
        self._persistence = as_float("persistence", value)

    @property
    def seed(self) -> int:
        """Seed of the first octave; octave i uses ``seed + i``."""
        return self._seed

    @seed.setter
    def seed(self, value):
        self._seed = as_int("seed", value)

    @property
    def quality(self) -> NoiseQuality:
        """Interpolation quality of the coherent-noise samples."""
        return self._quality

    @quality.setter
    def quality(self, value):
        self._quality = as_quality(value)

    def _shape_signal(self, signal: float) -> float:
        """Transform one raw octave sample before it is weighted."""
        return signal

    def get_value(self, x: float, y: float, z: float) -> float:
        lacunarity = self._lacunarity
        persistence = self._persistence
        quality = self._quality

        value = 0.0
        cur_persistence = 1.0

        x *= self._frequency
        y *= self._frequency
        z *= self._frequency

        for octave in range(self._octave_count):
            signal = gradient_coherent_noise_3d(
                make_int32_range(x),
                make_int32_range(y),
                make_int32_range(z),
                self._seed + octave,
                quality,
            )
            value += self._shape_signal(signal) * cur_persistence

            x *= lacunarity
            y *= lacunarity
            z *= lacunarity
            cur_persistence *= persistence

        return value

    def __repr__(self):
        return (
            f"{type(self).__name__}(frequency={self._frequency}, lacunarity={self._lacunarity}, "
            f"octave_count={self._octave_count}, persistence={self._persistence}, "
            f"seed={self._seed}, quality={self._quality.name})"
        )


__all__ = ["OctaveGenerator"]
