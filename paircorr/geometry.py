"""Volumes of simulation cells and of spheres in one to three dimensions."""

from __future__ import annotations

import math
from collections.abc import Sequence

SUPPORTED_DIMENSIONS = (1, 2, 3)


def _check_dim(dim: int) -> None:
    if dim not in SUPPORTED_DIMENSIONS:
        raise ValueError(f"dimension {dim} not implemented")


def cell_volume(dim: int, unit_cell: Sequence[float]) -> float:
    """Return the volume of a cell whose lattice vectors are stored column-major."""
    _check_dim(dim)
    if len(unit_cell) < dim * dim:
        raise ValueError(
            f"unit cell needs {dim * dim} entries for dimension {dim}, got {len(unit_cell)}"
        )
    if dim == 1:
        return unit_cell[0]
    if dim == 2:
        a, b, c, d = unit_cell[:4]
        # Columns are (a, b) and (c, d).
        return abs(a * d - c * b)
    # Columns are u, v, w; the determinant is the triple product u . (v x w).
    u = unit_cell[0:3]
    v = unit_cell[3:6]
    w = unit_cell[6:9]
    cross = (
        v[1] * w[2] - v[2] * w[1],
        v[2] * w[0] - v[0] * w[2],
        v[0] * w[1] - v[1] * w[0],
    )
    return abs(sum(ui * ci for ui, ci in zip(u, cross)))


def sphere_vol(dim: int, r: float) -> float:
    """Return the volume of a sphere of radius ``r`` in ``dim`` dimensions."""
    _check_dim(dim)
    if dim == 1:
        return 2.0 * r
    if dim == 2:
        return math.pi * r * r
    return 4.0 * math.pi * r * r * r / 3.0


def sphere_radius(dim: int, vol: float) -> float:
    """Return the radius of a sphere of volume ``vol`` in ``dim`` dimensions."""
    _check_dim(dim)
    if dim == 1:
        return 0.5 * vol
    if dim == 2:
        return math.sqrt(vol / math.pi)
    return (3.0 * vol / (4.0 * math.pi)) ** (1.0 / 3.0)