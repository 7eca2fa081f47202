"""
Base class shared by every noise module.

A module produces one scalar for any 3D coordinate. Modules that transform
other modules declare how many source modules they need and hold references to
them in numbered slots. A graph is simply whichever module is queried: calling
``get_value`` on it evaluates every module it depends on, once, for that
coordinate.

Source references are ordinary Python references, so a module keeps its sources
alive for as long as it is itself alive.

Author: B.G.
"""

from __future__ import annotations

import logging
import math
import numbers

from ..exceptions import InvalidParameterError, UnboundSourceError

logger = logging.getLogger(__name__)


class Module:
    """
    Abstract noise module.

    Subclasses set ``source_module_count`` and implement ``get_value``.

    Args:
        *sources: Optional source modules bound to slots 0, 1, ... in order;
            ``None`` leaves the corresponding slot unbound
    """

    source_module_count: int = 0

    def __init__(self, *sources: Module | None):
        self._source_modules: list[Module | None] = [None] * self.source_module_count
        for index, source in enumerate(sources):
            if source is not None:
                self.set_source_module(index, source)

    def get_source_module_count(self) -> int:
        """Number of source modules that must be bound before evaluation."""
        return self.source_module_count

    def get_source_module(self, index: int) -> Module:
        """
        Return the source module bound at ``index``.

        Raises:
            InvalidParameterError: If ``index`` is outside [0, source count)
            UnboundSourceError: If nothing is bound at ``index``
        """
        self._check_index(index)
        source = self._source_modules[index]
        if source is None:
            raise UnboundSourceError(self, index)
        return source

    def set_source_module(self, index: int, source: Module) -> None:
        """
        Bind ``source`` to slot ``index``.

        Raises:
            InvalidParameterError: If ``index`` is outside [0, source count)
            TypeError: If ``source`` is not a Module
        """
        self._check_index(index)
        if not isinstance(source, Module):
            raise TypeError(f"source module must be a Module, got {type(source).__name__}")
        self._source_modules[index] = source
        logger.debug("%s: bound %s to source slot %d",
                     type(self).__name__, type(source).__name__, index)

    def is_bound(self) -> bool:
        """True when every source slot has a module bound to it."""
        return all(source is not None for source in self._source_modules)

    def get_value(self, x: float, y: float, z: float) -> float:
        """Evaluate this module at (x, y, z)."""
        raise NotImplementedError

    def _check_index(self, index) -> None:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise InvalidParameterError(f"source index must be an integer, got {index!r}")
        if not 0 <= index < self.source_module_count:
            raise InvalidParameterError(
                f"source index {index} out of range for {type(self).__name__}, "
                f"which takes {self.source_module_count} source module(s)"
            )

    def __repr__(self):
        return f"{type(self).__name__}()"


def as_float(name: str, value) -> float:
    """Convert a numeric parameter to float, rejecting non-numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}")
    return float(value)


def as_finite_float(name: str, value) -> float:
    value = as_float(name, value)
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    return value


def as_int(name: str, value) -> int:
    """Convert an integral parameter to int; floats such as 6.0 are rejected."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    return int(value)


__all__ = ["Module", "as_float", "as_finite_float", "as_int"]
