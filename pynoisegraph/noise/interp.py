"""
Interpolation helpers used inside the gradient lattice.

Author: B.G.
"""


def linear_interp(n0: float, n1: float, a: float) -> float:
    """Linear interpolation between n0 and n1 by factor a"""
    return n0 + a * (n1 - n0)


def linear_curve(a: float) -> float:
    return a


def s_curve3(a: float) -> float:
    """Cubic s-curve: 3a^2 - 2a^3"""
    return a * a * (3.0 - 2.0 * a)


def s_curve5(a: float) -> float:
    """Quintic s-curve: 6a^5 - 15a^4 + 10a^3"""
    return a * a * a * (a * (a * 6.0 - 15.0) + 10.0)


__all__ = ["linear_interp", "linear_curve", "s_curve3", "s_curve5"]
