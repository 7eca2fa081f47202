"""
Coherent gradient noise over 3D space.

This is the primitive every octave generator samples. Integer lattice points
are hashed together with the seed to pick a gradient from a fixed table of unit
vectors; the contributions of the eight corners of the enclosing lattice cell
are then blended with an interpolation curve chosen by the quality level.

Properties callers rely on:
- Deterministic: identical arguments give identical results
- Seed-separable: different seeds select different gradients everywhere
- Continuous in (x, y, z) for a fixed seed
- Nominal output range [-1, 1], not a hard guarantee

Author: B.G.
"""

import math

from .interp import linear_curve, linear_interp, s_curve3, s_curve5
from .quality import NoiseQuality, as_quality
from .vector_table import RANDOM_VECTORS

# Lattice hash multipliers
X_NOISE_GEN = 1619
Y_NOISE_GEN = 31337
Z_NOISE_GEN = 6971
SEED_NOISE_GEN = 1013
SHIFT_NOISE_GEN = 8

# Scales corner contributions so the blended output spans roughly [-1, 1]
GRADIENT_SCALE = 2.12

_INT32_HALF_RANGE = 1073741824.0

_CURVES = {
    NoiseQuality.FAST: linear_curve,
    NoiseQuality.STD: s_curve3,
    NoiseQuality.BEST: s_curve5,
}


def make_int32_range(n: float) -> float:
    """
    Wrap a coordinate into the range the 32-bit lattice hash can address.

    Coordinates whose magnitude stays below 2**30 are returned unchanged; larger
    ones are folded back so the integer cell indices never overflow a signed
    32-bit integer. Octave generators apply this after scaling by frequency.

    Infinite and NaN coordinates, reached when octave scaling overflows, map to
    the lattice origin.
    """
    if not math.isfinite(n):
        return 0.0
    if n >= _INT32_HALF_RANGE:
        return (2.0 * math.fmod(n, _INT32_HALF_RANGE)) - _INT32_HALF_RANGE
    elif n <= -_INT32_HALF_RANGE:
        return (2.0 * math.fmod(n, _INT32_HALF_RANGE)) + _INT32_HALF_RANGE
    return n


def lattice_index(ix: int, iy: int, iz: int, seed: int = 0) -> int:
    """Hash an integer lattice point and a seed into a gradient table index."""
    index = (
        X_NOISE_GEN * ix + Y_NOISE_GEN * iy + Z_NOISE_GEN * iz + SEED_NOISE_GEN * seed
    ) & 0xFFFFFFFF
    index ^= index >> SHIFT_NOISE_GEN
    return index & 0xFF


def gradient_noise_3d(fx: float, fy: float, fz: float, ix: int, iy: int, iz: int, seed: int = 0) -> float:
    """
    Contribution of lattice point (ix, iy, iz) to the noise at (fx, fy, fz).

    The result is the dot product of the lattice point's gradient with the
    offset from the lattice point to the sample, so it is zero on the lattice
    point itself.
    """
    gx, gy, gz = RANDOM_VECTORS[lattice_index(ix, iy, iz, seed)]
    return (gx * (fx - ix) + gy * (fy - iy) + gz * (fz - iz)) * GRADIENT_SCALE


def gradient_coherent_noise_3d(x: float, y: float, z: float, seed: int = 0,
                               quality=NoiseQuality.STD) -> float:
    """
    Sample coherent gradient noise at (x, y, z).

    Args:
        x, y, z: Sample coordinates; keep them within +/-2**30 (see make_int32_range)
        seed: Any integer; only its low 32 bits matter
        quality: NoiseQuality (or its name) selecting the interpolation curve

    Returns:
        float: Noise value, nominally in [-1, 1]
    """
    curve = _CURVES.get(quality) if isinstance(quality, NoiseQuality) else None
    if curve is None:
        curve = _CURVES[as_quality(quality)]

    # Lower corner of the enclosing lattice cell
    x0 = math.floor(x)
    y0 = math.floor(y)
    z0 = math.floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = curve(x - x0)
    ys = curve(y - y0)
    zs = curve(z - z0)

    n0 = gradient_noise_3d(x, y, z, x0, y0, z0, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y0, z0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise_3d(x, y, z, x0, y1, z0, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y1, z0, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy0 = linear_interp(ix0, ix1, ys)

    n0 = gradient_noise_3d(x, y, z, x0, y0, z1, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y0, z1, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise_3d(x, y, z, x0, y1, z1, seed)
    n1 = gradient_noise_3d(x, y, z, x1, y1, z1, seed)
    ix1 = linear_interp(n0, n1, xs)
    iy1 = linear_interp(ix0, ix1, ys)

    return linear_interp(iy0, iy1, zs)


__all__ = [
    "make_int32_range",
    "lattice_index",
    "gradient_noise_3d",
    "gradient_coherent_noise_3d",
    "GRADIENT_SCALE",
]
