"""
Clamp modifier module.

Author: B.G.
"""

from __future__ import annotations

import logging
import math

from .. import constants as cte
from ..exceptions import InvalidParameterError
from .base import Module, as_float

logger = logging.getLogger(__name__)


class Clamp(Module):
    """
    Modifier clamping the output of its source module to a range.

    Values below ``lower_bound`` become ``lower_bound`` and values above
    ``upper_bound`` become ``upper_bound``. Both bounds are set together through
    ``set_bounds`` so that an inconsistent pair can never be observed.

    Needs one source module.

    Args:
        source: Optional source module bound to slot 0
        lower_bound: Lower bound of the clamping range
        upper_bound: Upper bound of the clamping range
    """

    source_module_count = 1

    def __init__(self, source: Module | None = None,
                 lower_bound: float = cte.DEFAULT_CLAMP_LOWER_BOUND,
                 upper_bound: float = cte.DEFAULT_CLAMP_UPPER_BOUND):
        super().__init__(source)
        self._lower_bound = cte.DEFAULT_CLAMP_LOWER_BOUND
        self._upper_bound = cte.DEFAULT_CLAMP_UPPER_BOUND
        self.set_bounds(lower_bound, upper_bound)

    @property
    def lower_bound(self) -> float:
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        return self._upper_bound

    def set_bounds(self, lower_bound: float, upper_bound: float) -> None:
        """
        Set the clamping range.

        Raises:
            InvalidParameterError: If a bound is NaN or lower_bound > upper_bound;
                the previous bounds are kept
        """
        lower_bound = as_float("lower_bound", lower_bound)
        upper_bound = as_float("upper_bound", upper_bound)
        if math.isnan(lower_bound) or math.isnan(upper_bound):
            raise InvalidParameterError("clamp bounds must not be NaN")
        if lower_bound > upper_bound:
            raise InvalidParameterError(
                f"lower bound {lower_bound} is greater than upper bound {upper_bound}"
            )
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound
        logger.debug("Clamp: bounds=(%g, %g)", lower_bound, upper_bound)

    def get_value(self, x: float, y: float, z: float) -> float:
        value = self.get_source_module(0).get_value(x, y, z)
        if value < self._lower_bound:
            return self._lower_bound
        elif value > self._upper_bound:
            return self._upper_bound
        return value

    def __repr__(self):
        return f"Clamp(lower_bound={self._lower_bound}, upper_bound={self._upper_bound})"


__all__ = ["Clamp"]
