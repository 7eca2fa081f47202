"""
Fill a noise map by sampling a module over a rectangle of the plane y = 0.

Author: B.G.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .. import constants as cte
from ..exceptions import InvalidParameterError
from ..module import Module
from ..module.base import as_finite_float, as_int
from ..noise import linear_interp
from .noise_map import NoiseMap

logger = logging.getLogger(__name__)


class NoiseMapBuilderPlane:
    """
    Sample a module on the plane y = 0 into a NoiseMap.

    Column i and row j of the destination sample the module at
    ``x = lower_x + i * (upper_x - lower_x) / width`` and
    ``z = lower_z + j * (upper_z - lower_z) / height``.

    With ``seamless`` enabled each sample is a bilinear blend of the module at
    the point and its copies shifted by one full extent along x and z, so
    the resulting map tiles without visible seams.

    Args:
        source_module: Module to sample
        dest_noise_map: NoiseMap receiving the values; resized by ``build``
        dest_size: (width, height) of the destination
        bounds: (lower_x, upper_x, lower_z, upper_z)
        seamless: Enable tiling blend
        callback: Called with each finished row index
    """

    def __init__(self, source_module: Optional[Module] = None,
                 dest_noise_map: Optional[NoiseMap] = None,
                 dest_size: tuple[int, int] = (0, 0),
                 bounds: tuple[float, float, float, float] = (0.0, 1.0, 0.0, 1.0),
                 seamless: bool = False,
                 callback: Optional[Callable[[int], None]] = None):
        self.source_module = source_module
        self.dest_noise_map = dest_noise_map
        self.set_dest_size(*dest_size)
        self.set_bounds(*bounds)
        self.seamless = seamless
        self.callback = callback

    def set_dest_size(self, width: int, height: int) -> None:
        """
        Set the (width, height) of the destination map.

        Raises:
            InvalidParameterError: If a dimension is not an integer or lies outside
                [0, RASTER_MAX_WIDTH] x [0, RASTER_MAX_HEIGHT]
        """
        width = as_int("width", width)
        height = as_int("height", height)
        if not (0 <= width <= cte.RASTER_MAX_WIDTH and 0 <= height <= cte.RASTER_MAX_HEIGHT):
            raise InvalidParameterError(
                f"destination size must be within [0, {cte.RASTER_MAX_WIDTH}] x "
                f"[0, {cte.RASTER_MAX_HEIGHT}], got {width} x {height}"
            )
        self.dest_width = width
        self.dest_height = height

    def set_bounds(self, lower_x: float, upper_x: float, lower_z: float, upper_z: float) -> None:
        """
        Set the sampled rectangle.

        Raises:
            InvalidParameterError: If a bound is not finite or an upper bound does
                not exceed its lower bound
        """
        lower_x = as_finite_float("lower_x", lower_x)
        upper_x = as_finite_float("upper_x", upper_x)
        lower_z = as_finite_float("lower_z", lower_z)
        upper_z = as_finite_float("upper_z", upper_z)
        if upper_x <= lower_x or upper_z <= lower_z:
            raise InvalidParameterError(
                f"plane bounds must satisfy lower < upper, got "
                f"x=({lower_x}, {upper_x}) z=({lower_z}, {upper_z})"
            )
        self.lower_x = lower_x
        self.upper_x = upper_x
        self.lower_z = lower_z
        self.upper_z = upper_z

    def build(self) -> NoiseMap:
        """
        Sample the source module into the destination map.

        Returns:
            NoiseMap: The filled destination map

        Raises:
            InvalidParameterError: If the destination size is not positive or the
                source module or destination map is missing
        """
        if self.dest_width <= 0 or self.dest_height <= 0:
            raise InvalidParameterError(
                f"destination size must be positive, got {self.dest_width} x {self.dest_height}"
            )
        if self.source_module is None:
            raise InvalidParameterError("no source module to sample")
        if self.dest_noise_map is None:
            raise InvalidParameterError("no destination noise map")

        dest = self.dest_noise_map
        dest.set_size(self.dest_width, self.dest_height)
        data = dest.data
        module = self.source_module

        x_extent = self.upper_x - self.lower_x
        z_extent = self.upper_z - self.lower_z
        x_delta = x_extent / self.dest_width
        z_delta = z_extent / self.dest_height

        logger.debug("building %dx%d plane map of %r over x=[%g, %g) z=[%g, %g)%s",
                     self.dest_width, self.dest_height, module,
                     self.lower_x, self.upper_x, self.lower_z, self.upper_z,
                     " (seamless)" if self.seamless else "")
        t_start = time.perf_counter()

        for j in range(self.dest_height):
            z_cur = self.lower_z + j * z_delta
            row = data[j]
            for i in range(self.dest_width):
                x_cur = self.lower_x + i * x_delta
                if not self.seamless:
                    row[i] = module.get_value(x_cur, 0.0, z_cur)
                else:
                    sw_value = module.get_value(x_cur, 0.0, z_cur)
                    se_value = module.get_value(x_cur + x_extent, 0.0, z_cur)
                    nw_value = module.get_value(x_cur, 0.0, z_cur + z_extent)
                    ne_value = module.get_value(x_cur + x_extent, 0.0, z_cur + z_extent)
                    x_blend = 1.0 - ((x_cur - self.lower_x) / x_extent)
                    z_blend = 1.0 - ((z_cur - self.lower_z) / z_extent)
                    z0 = linear_interp(sw_value, se_value, x_blend)
                    z1 = linear_interp(nw_value, ne_value, x_blend)
                    row[i] = linear_interp(z0, z1, z_blend)
            if self.callback is not None:
                self.callback(j)

        logger.debug("plane map built in %.1f ms", (time.perf_counter() - t_start) * 1000)
        return dest


def build_plane_map(source_module: Module, width: int, height: int,
                    bounds: tuple[float, float, float, float] = (0.0, 1.0, 0.0, 1.0),
                    seamless: bool = False, border_value: float = 0.0) -> NoiseMap:
    """
    Convenience wrapper: sample ``source_module`` into a new (height, width) map.

    Example:
        noise_map = build_plane_map(Perlin(seed=3), 256, 256, bounds=(2.0, 6.0, 1.0, 5.0))
        array = noise_map.data
    """
    noise_map = NoiseMap(border_value=border_value)
    builder = NoiseMapBuilderPlane(source_module, noise_map, (width, height), bounds, seamless)
    return builder.build()


__all__ = ["NoiseMapBuilderPlane", "build_plane_map"]
