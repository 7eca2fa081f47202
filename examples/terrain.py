import json
import time

import numpy as np

import pynoisegraph as png

nx, ny = 256, 256
bounds = (0.0, 4.0, 0.0, 4.0)

with open("terrain.json", encoding="utf-8") as fh:
	terrain = png.graph.build_graph(json.load(fh))

st = time.time()
noise_map = png.raster.build_plane_map(terrain, nx, ny, bounds=bounds, seamless=True)
print(f"sampled {ny}x{nx} in {time.time() - st:.2f} s")
print("range:", noise_map.data.min(), noise_map.data.max())

png.misc.save_noise_map_numpy(noise_map, "terrain.npy")

rgba = png.raster.colorize(noise_map, png.raster.terrain_gradient())
np.save("terrain_rgba.npy", rgba)

# hand wired equivalent of terrain.json
hills = png.Billow(frequency=2.0, octave_count=5, persistence=0.55, seed=11, quality=png.NoiseQuality.BEST)
same = png.Clamp(png.Exponent(hills, exponent=1.6))
print("same value:", same.get_value(0.5, 0., 0.5) == terrain.get_value(0.5, 0., 0.5))
