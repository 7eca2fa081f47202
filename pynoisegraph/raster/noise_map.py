"""
Dense 2D buffer of sampled noise values.

Author: B.G.
"""

from __future__ import annotations

import numpy as np

from .. import constants as cte
from ..exceptions import InvalidParameterError


class NoiseMap:
    """
    2D grid of float32 noise samples with a border value.

    Values are stored in a numpy array of shape (height, width), indexed as
    ``data[y, x]``. Reads outside the map return ``border_value`` instead of
    failing, which lets neighbourhood operations run up to the edges.

    Args:
        width: Number of columns, 0 to RASTER_MAX_WIDTH
        height: Number of rows, 0 to RASTER_MAX_HEIGHT
        border_value: Value returned for reads outside the map
    """

    def __init__(self, width: int = 0, height: int = 0,
                 border_value: float = cte.DEFAULT_BORDER_VALUE):
        self._data = np.zeros((0, 0), dtype=np.float32)
        self.border_value = border_value
        self.set_size(width, height)

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width), numpy order."""
        return self._data.shape

    @property
    def data(self) -> np.ndarray:
        """The underlying (height, width) float32 array."""
        return self._data

    @property
    def border_value(self) -> float:
        return self._border_value

    @border_value.setter
    def border_value(self, value):
        self._border_value = float(np.float32(value))

    def set_size(self, width: int, height: int) -> None:
        """
        Resize the map. Existing values are discarded; new cells hold zero.

        A zero width or height empties the map.

        Raises:
            InvalidParameterError: If a dimension is negative or above the maximum
        """
        if (width < 0 or height < 0
                or width > cte.RASTER_MAX_WIDTH or height > cte.RASTER_MAX_HEIGHT):
            raise InvalidParameterError(
                f"noise map size must be within [0, {cte.RASTER_MAX_WIDTH}] x "
                f"[0, {cte.RASTER_MAX_HEIGHT}], got {width} x {height}"
            )
        if width == 0 or height == 0:
            width = height = 0
        if self._data.shape != (height, width):
            self._data = np.zeros((int(height), int(width)), dtype=np.float32)
        else:
            self._data.fill(0.0)

    def get_value(self, x: int, y: int) -> float:
        """Value at column x, row y, or the border value outside the map."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return float(self._data[y, x])
        return self._border_value

    def set_value(self, x: int, y: int, value: float) -> None:
        """Store a value at column x, row y; writes outside the map are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._data[y, x] = value

    def clear(self, value: float = 0.0) -> None:
        """Set every cell to ``value``."""
        self._data.fill(value)

    def copy(self) -> NoiseMap:
        """Independent copy, border value included."""
        other = NoiseMap(border_value=self._border_value)
        other._data = self._data.copy()
        return other

    @classmethod
    def from_array(cls, array, border_value: float = cte.DEFAULT_BORDER_VALUE) -> NoiseMap:
        """
        Wrap a copy of a 2D array as a noise map.

        Raises:
            InvalidParameterError: If ``array`` is not 2D or exceeds the size limits
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise InvalidParameterError("Input numpy array must be 2D")
        height, width = array.shape
        noise_map = cls(width, height, border_value=border_value)
        if noise_map.shape == array.shape:
            noise_map._data[...] = array
        return noise_map

    def __repr__(self):
        return f"NoiseMap(width={self.width}, height={self.height}, border_value={self._border_value})"


__all__ = ["NoiseMap"]
