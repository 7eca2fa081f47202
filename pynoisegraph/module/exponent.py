"""
Exponent modifier module.

Author: B.G.
"""

from __future__ import annotations

import math

from .. import constants as cte
from .base import Module, as_float


class Exponent(Module):
    """
    Modifier mapping the output of its source module onto an exponential curve.

    Source output is assumed to lie in [-1, 1]. It is normalised to [0, 1],
    raised to ``exponent``, clamped to [0, 1] and rescaled to [-1, 1]. An
    exponent of 1.0 leaves the signal unchanged; larger exponents push values
    towards -1, smaller ones towards +1.

    Needs one source module.
    """

    source_module_count = 1

    def __init__(self, source: Module | None = None, exponent: float = cte.DEFAULT_EXPONENT):
        super().__init__(source)
        self.exponent = exponent

    @property
    def exponent(self) -> float:
        return self._exponent

    @exponent.setter
    def exponent(self, value):
        self._exponent = as_float("exponent", value)

    def get_value(self, x: float, y: float, z: float) -> float:
        value = self.get_source_module(0).get_value(x, y, z)
        normalized = abs((value + 1.0) / 2.0)
        try:
            curved = math.pow(normalized, self._exponent)
        except (ValueError, OverflowError):
            # 0 ** negative and overflow both diverge to +inf under IEEE pow
            curved = math.inf
        curved = min(max(curved, 0.0), 1.0)
        return curved * 2.0 - 1.0

    def __repr__(self):
        return f"Exponent(exponent={self._exponent})"


__all__ = ["Exponent"]
