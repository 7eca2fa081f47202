"""
Miscellaneous Raster Utilities for PyNoiseGraph

Helpers moving noise maps in and out of numpy's ``.npy`` format, so sampled
fields can be reloaded later without re-evaluating the graph.

Author: B.G.
"""

import logging

import numpy as np

from ..raster import NoiseMap

logger = logging.getLogger(__name__)


def save_noise_map_numpy(noise_map, output_path):
    """
    Save the values of a noise map (or a 2D array) as a .npy file.

    Args:
        noise_map (NoiseMap | np.ndarray): Values to save
        output_path (str | Path): Path for the output .npy file

    Raises:
        OSError: If the output file cannot be written

    Note:
        - The saved array has shape (height, width) and dtype float32
        - The border value is not stored
    """
    array = noise_map.data if isinstance(noise_map, NoiseMap) else np.asarray(noise_map, dtype=np.float32)
    try:
        np.save(output_path, array)
    except Exception as e:
        raise OSError(f"Failed to save numpy array to '{output_path}': {e}") from e

    logger.info("saved %s noise map to '%s' (range [%.4f, %.4f])",
                array.shape, output_path,
                float(array.min()) if array.size else 0.0,
                float(array.max()) if array.size else 0.0)


def load_noise_map_numpy(input_path, border_value=0.0):
    """
    Load a .npy file written by save_noise_map_numpy into a NoiseMap.

    Raises:
        FileNotFoundError: If the input file does not exist
        InvalidParameterError: If the stored array is not 2D
    """
    array = np.load(input_path)
    return NoiseMap.from_array(array, border_value=border_value)
