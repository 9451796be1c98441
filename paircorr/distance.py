"""Minimum-image distances between particles in a periodic cell."""

from __future__ import annotations

import itertools
import math

from paircorr.config import Config


def measure_distance(config: Config, i: int, j: int) -> float:
    """Return the shortest distance between particles ``i`` and ``j``.

    Images of ``j`` shifted by -1, 0 or +1 of each lattice vector are tried.
    """
    dim = config.dim
    if dim not in (1, 2, 3):
        raise ValueError(f"dimension {dim} not implemented")
    lattice = [config.unit_cell[k * dim:(k + 1) * dim] for k in range(dim)]
    p = config.coords[dim * i:dim * (i + 1)]
    q = config.coords[dim * j:dim * (j + 1)]
    best = math.inf
    for shifts in itertools.product((-1, 0, 1), repeat=dim):
        r2 = 0.0
        for axis in range(dim):
            image = q[axis] + sum(s * vec[axis] for s, vec in zip(shifts, lattice))
            r2 += (p[axis] - image) ** 2
        best = min(best, r2)
    return math.sqrt(best)