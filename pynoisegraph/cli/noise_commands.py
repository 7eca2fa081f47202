"""
Noise evaluation CLI commands for PyNoiseGraph.

Author: B.G.
"""

import json
import logging
import sys

import click

import pynoisegraph as png
from .. import constants as cte


def _generator_options(func):
    """Attach the octave-generator options shared by every command."""
    options = [
        click.option("--generator", "-g", type=click.Choice(["perlin", "billow", "const"]),
                     default="perlin", show_default=True, help="Generator module"),
        click.option("--frequency", "-f", type=float, default=cte.DEFAULT_PERLIN_FREQUENCY,
                     show_default=True, help="Frequency of the first octave"),
        click.option("--lacunarity", "-l", type=float, default=cte.DEFAULT_PERLIN_LACUNARITY,
                     show_default=True, help="Frequency multiplier between octaves"),
        click.option("--octaves", "-o", type=int, default=cte.DEFAULT_PERLIN_OCTAVE_COUNT,
                     show_default=True, help=f"Number of octaves (1-{cte.PERLIN_MAX_OCTAVE})"),
        click.option("--persistence", "-p", type=float, default=cte.DEFAULT_PERLIN_PERSISTENCE,
                     show_default=True, help="Amplitude multiplier between octaves"),
        click.option("--seed", "-s", type=int, default=cte.DEFAULT_PERLIN_SEED,
                     show_default=True, help="Seed of the first octave"),
        click.option("--quality", "-q", type=click.Choice(["fast", "std", "best"]),
                     default=cte.DEFAULT_PERLIN_QUALITY.name.lower(), show_default=True,
                     help="Coherent-noise interpolation quality"),
        click.option("--value", type=float, default=cte.DEFAULT_CONST_VALUE,
                     show_default=True, help="Output of the const generator"),
        click.option("--clamp", nargs=2, type=float, default=None,
                     help="Clamp output to LOWER UPPER"),
        click.option("--exponent", type=float, default=None,
                     help="Remap output along an exponential curve"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _make_module(generator, frequency, lacunarity, octaves, persistence, seed, quality,
                 value, clamp, exponent):
    """Build the generator chain described by the command options."""
    if generator == "const":
        module = png.module.Const(value)
    else:
        cls = png.module.Perlin if generator == "perlin" else png.module.Billow
        module = cls(frequency=frequency, lacunarity=lacunarity, octave_count=octaves,
                     persistence=persistence, seed=seed, quality=quality)
    if exponent is not None:
        module = png.module.Exponent(module, exponent=exponent)
    if clamp:
        module = png.module.Clamp(module, lower_bound=clamp[0], upper_bound=clamp[1])
    return module


def _setup_logging(verbose):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )


@click.command()
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.argument("z", type=float)
@_generator_options
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noise_value(x, y, z, verbose, **options):
    """
    Evaluate a noise generator at the coordinate X Y Z.

    Examples:

        # Default Perlin noise
        noisegraph-value 0.5 0.5 0.5

        # Billow noise, best quality, clamped
        noisegraph-value -g billow -q best --clamp -0.5 0.5 1.2 0.0 3.4
    """
    _setup_logging(verbose)
    try:
        module = _make_module(**options)
        if verbose:
            click.echo(f"Evaluating {module!r} at ({x}, {y}, {z})")
        click.echo(repr(module.get_value(x, y, z)))
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("output_npy", type=click.Path())
@click.option("--width", "-W", type=int, default=256, show_default=True, help="Columns")
@click.option("--height", "-H", type=int, default=256, show_default=True, help="Rows")
@click.option("--bounds", "-b", nargs=4, type=float, default=(0.0, 1.0, 0.0, 1.0),
              show_default=True, help="LOWER_X UPPER_X LOWER_Z UPPER_Z of the plane y=0")
@click.option("--seamless", is_flag=True, help="Blend edges so the map tiles")
@click.option("--graph", "graph_file", type=click.Path(exists=True), default=None,
              help="JSON graph description; overrides the generator options")
@_generator_options
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noise_sample(output_npy, width, height, bounds, seamless, graph_file, verbose, **options):
    """
    Sample a noise graph over a plane and save it to OUTPUT_NPY.

    The output is a float32 array of shape (HEIGHT, WIDTH).

    Examples:

        # 512x512 Perlin noise over four lattice cells
        noisegraph-sample -W 512 -H 512 -b 0 4 0 4 perlin.npy

        # Tileable map of a graph described in JSON
        noisegraph-sample --graph terrain.json --seamless terrain.npy
    """
    _setup_logging(verbose)
    try:
        if graph_file is not None:
            with open(graph_file, encoding="utf-8") as fh:
                module = png.graph.build_graph(json.load(fh))
        else:
            module = _make_module(**options)

        if verbose:
            click.echo(f"Sampling {module!r} into a {width}x{height} map...")

        noise_map = png.raster.build_plane_map(module, width, height, bounds=bounds,
                                               seamless=seamless)
        png.misc.save_noise_map_numpy(noise_map, output_npy)

        data = noise_map.data
        click.echo(f"Saved {height}x{width} noise map to '{output_npy}'")
        if verbose:
            click.echo(f"Value range: [{data.min():.4f}, {data.max():.4f}]")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["noise_value", "noise_sample"]
