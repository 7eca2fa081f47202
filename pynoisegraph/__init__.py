"""
PyNoiseGraph: deterministic 3D noise from composable modules.

Noise fields are built by wiring small modules into a directed acyclic graph.
Generators (Perlin, Billow, Const) produce values from coordinates alone;
modifiers (Clamp, Exponent) reshape the output of a source module. Querying the
root module with ``get_value(x, y, z)`` evaluates the whole graph for that
coordinate.

Submodules:
- noise: coherent-noise primitive and interpolation quality levels
- module: the generator and modifier modules
- graph: build graphs from plain dict/JSON descriptions
- raster: noise maps, plane sampling and color gradients
- misc: .npy helpers
- cli: command line entry points (imported lazily)

Usage:
    import pynoisegraph as png

    perlin = png.Perlin(octave_count=6, seed=0)
    value = perlin.get_value(0.5, 0.5, 0.5)

Author: B.G.
"""

__version__ = "0.1.0"

from . import constants
from . import exceptions
from . import noise
from . import module
from . import graph
from . import raster
from . import misc

from .exceptions import NoiseGraphError, InvalidParameterError, UnboundSourceError
from .noise import NoiseQuality
from .module import Module, Const, Perlin, Billow, Clamp, Exponent

__all__ = [
    "__version__",
    "constants", "exceptions", "noise", "module", "graph", "raster", "misc", "cli",
    "NoiseGraphError", "InvalidParameterError", "UnboundSourceError",
    "NoiseQuality",
    "Module", "Const", "Perlin", "Billow", "Clamp", "Exponent",
]


def __getattr__(name):
    if name == "cli":
        import importlib
        return importlib.import_module(".cli", __name__)
    raise AttributeError(name)
