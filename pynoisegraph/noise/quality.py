"""
Interpolation quality levels for the coherent-noise primitive.

Author: B.G.
"""

from enum import IntEnum

from ..exceptions import InvalidParameterError


class NoiseQuality(IntEnum):
    """Smoothness of the interpolation between lattice gradients.

    FAST interpolates linearly, STD through a cubic s-curve and BEST through a
    quintic s-curve. Higher levels cost more CPU per sample but remove the
    visible creases at lattice boundaries.
    """

    FAST = 0
    STD = 1
    BEST = 2


def as_quality(value) -> NoiseQuality:
    """
    Coerce ``value`` to a NoiseQuality.

    Accepts a NoiseQuality member, its integer value, or its case-insensitive
    name (``"fast"``, ``"std"``, ``"best"``).

    Raises:
        InvalidParameterError: If ``value`` names no quality level
    """
    if isinstance(value, NoiseQuality):
        return value
    if isinstance(value, str):
        try:
            return NoiseQuality[value.strip().upper()]
        except KeyError:
            pass
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            return NoiseQuality(value)
        except ValueError:
            pass
    names = ", ".join(q.name.lower() for q in NoiseQuality)
    raise InvalidParameterError(f"quality must be one of {names}, got {value!r}")


__all__ = ["NoiseQuality", "as_quality"]
