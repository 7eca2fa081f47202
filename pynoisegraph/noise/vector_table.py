"""
Gradient vector table for the coherent-noise primitive.

The table is generated once at import from a fixed seed with numpy's legacy
``RandomState`` generator, whose stream is frozen across numpy releases, so
every installation sees the same 256 vectors.

Author: B.G.
"""

import numpy as np

VECTOR_TABLE_SIZE = 256
VECTOR_TABLE_SEED = 0x5EED


def random_unit_vectors(count: int = VECTOR_TABLE_SIZE, seed: int = VECTOR_TABLE_SEED) -> np.ndarray:
    """
    Generate ``count`` directions uniformly distributed on the unit sphere.

    Args:
        count: Number of vectors
        seed: Seed for the local RandomState; the global numpy state is untouched

    Returns:
        float64 array of shape (count, 3) whose rows have unit length
    """
    rng = np.random.RandomState(seed)
    vectors = rng.standard_normal((count, 3))
    norms = np.linalg.norm(vectors, axis=1)

    # A zero-length draw has no direction; redraw until none remain
    degenerate = norms < 1e-12
    while np.any(degenerate):
        vectors[degenerate] = rng.standard_normal((int(degenerate.sum()), 3))
        norms = np.linalg.norm(vectors, axis=1)
        degenerate = norms < 1e-12

    return vectors / norms[:, None]


# Per-sample lookups index plain float tuples
RANDOM_VECTORS = tuple(tuple(v) for v in random_unit_vectors().tolist())

__all__ = ["VECTOR_TABLE_SIZE", "VECTOR_TABLE_SEED", "random_unit_vectors", "RANDOM_VECTORS"]
