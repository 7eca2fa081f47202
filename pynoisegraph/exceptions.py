"""
Exception types raised by PyNoiseGraph.

Configuration mistakes surface as ``ValueError`` subclasses at the call that
made them; evaluating a graph that is not fully wired is a programming error
and surfaces as a ``RuntimeError`` subclass.

Author: B.G.
"""


class NoiseGraphError(Exception):
    """Base class for every error raised by this package."""


class InvalidParameterError(NoiseGraphError, ValueError):
    """A setter, constructor or builder received a value outside its domain.

    The object the call was made on keeps its previous state.
    """


class UnboundSourceError(NoiseGraphError, RuntimeError):
    """A module was queried for a source slot that has nothing bound to it."""

    def __init__(self, module, index):
        self.module = module
        self.index = index
        super().__init__(
            f"{type(module).__name__} has no source module bound at index {index}"
        )


__all__ = ["NoiseGraphError", "InvalidParameterError", "UnboundSourceError"]
