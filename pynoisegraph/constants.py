"""
Named defaults and limits for PyNoiseGraph.

Module constructors take their keyword defaults from here, so the values below
describe what a freshly created module produces. Import as::

    from pynoisegraph import constants as cte

Author: B.G.
"""

from .noise.quality import NoiseQuality

# Perlin generator
DEFAULT_PERLIN_FREQUENCY = 1.0
DEFAULT_PERLIN_LACUNARITY = 2.0
DEFAULT_PERLIN_OCTAVE_COUNT = 6
DEFAULT_PERLIN_PERSISTENCE = 0.5
DEFAULT_PERLIN_QUALITY = NoiseQuality.STD
DEFAULT_PERLIN_SEED = 0
PERLIN_MAX_OCTAVE = 30

# Billow generator
DEFAULT_BILLOW_FREQUENCY = 1.0
DEFAULT_BILLOW_LACUNARITY = 2.0
DEFAULT_BILLOW_OCTAVE_COUNT = 6
DEFAULT_BILLOW_PERSISTENCE = 0.5
DEFAULT_BILLOW_QUALITY = NoiseQuality.STD
DEFAULT_BILLOW_SEED = 0
BILLOW_MAX_OCTAVE = 30

# Const generator
DEFAULT_CONST_VALUE = 0.0

# Clamp modifier
DEFAULT_CLAMP_LOWER_BOUND = -1.0
DEFAULT_CLAMP_UPPER_BOUND = 1.0

# Exponent modifier
DEFAULT_EXPONENT = 1.0

# Noise maps
RASTER_MAX_WIDTH = 32767
RASTER_MAX_HEIGHT = 32767
DEFAULT_BORDER_VALUE = 0.0
