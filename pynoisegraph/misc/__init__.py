"""
Miscellaneous Utilities for PyNoiseGraph

Available Functions:
- save_noise_map_numpy: Write a noise map to a .npy file
- load_noise_map_numpy: Read a .npy file back into a NoiseMap

Author: B.G.
"""

from .raster_utils import save_noise_map_numpy, load_noise_map_numpy

# Export public API
__all__ = [
    "save_noise_map_numpy",
    "load_noise_map_numpy",
]
