"""
Constant generator module.

Author: B.G.
"""

from .. import constants as cte
from .base import Module, as_float


class Const(Module):
    """
    Generator returning the same value at every coordinate.

    Not useful on its own; it feeds a fixed baseline into modifier modules.
    Needs no source modules.
    """

    source_module_count = 0

    def __init__(self, const_value: float = cte.DEFAULT_CONST_VALUE):
        super().__init__()
        self.const_value = const_value

    @property
    def const_value(self) -> float:
        return self._const_value

    @const_value.setter
    def const_value(self, value):
        self._const_value = as_float("const_value", value)

    def get_value(self, x: float, y: float, z: float) -> float:
        return self._const_value

    def __repr__(self):
        return f"Const(const_value={self._const_value})"


__all__ = ["Const"]
