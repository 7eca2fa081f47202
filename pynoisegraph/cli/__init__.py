"""
Command Line Interface for PyNoiseGraph

Command line utilities to evaluate and sample noise graphs without writing
Python scripts.

Available Commands:
- noise_value: Evaluate a generator at one coordinate
- noise_sample: Sample a generator or a JSON graph over a plane into a .npy file

Author: B.G.
"""

_CLI_SUBMODULES = {
    "noise_value": (".noise_commands", "noise_value"),
    "noise_sample": (".noise_commands", "noise_sample"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
