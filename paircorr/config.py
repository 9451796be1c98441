"""Reading particle configurations from the supported file formats."""

from __future__ import annotations

import enum
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class FileFormat(enum.Enum):
    """Layouts of configuration files that can be read."""

    GE = "ge"
    ASC = "asc"
    DONEV = "donev"


@dataclass
class Config:
    """A periodic configuration of point particles.

    ``unit_cell`` holds the lattice vectors column-major (vector ``k`` is
    ``unit_cell[k*dim:(k+1)*dim]``) and ``coords`` holds the flattened
    Cartesian coordinates of every particle.
    """

    dim: int
    n_particles: int
    unit_cell: list[float] = field(default_factory=list)
    coords: list[float] = field(default_factory=list)
    diameter: Optional[float] = None


def _floats(line: str) -> list[float]:
    return [float(token) for token in line.split()]


def parse_ge(path: PathLike) -> Config:
    """Read a file whose first line is the dimension, then cell rows, then particles."""
    unit_cell: list[float] = []
    coords: list[float] = []
    n_particles = 0
    with open(path) as handle:
        dim = int(handle.readline().strip())
        for index, line in enumerate(handle):
            values = [float(token) for token in line.split()[:dim]]
            if index < dim:
                unit_cell.extend(values)
            else:
                coords.extend(values)
                n_particles += 1
    return Config(dim=dim, n_particles=n_particles, unit_cell=unit_cell, coords=coords)


def parse_asc(path: PathLike) -> Config:
    """Read a file of relative coordinates, converting them to Cartesian ones."""
    with open(path) as handle:
        header = handle.readline().split()
        if not header:
            raise ValueError(f"{path}: missing dimension line")
        dim = int(header[0])
        if dim not in (2, 3):
            raise ValueError(f"{path}: dimension {dim} not supported for this format")
        unit_cell = _floats(handle.readline())
        if len(unit_cell) != dim * dim:
            raise ValueError(
                f"{path}: unit cell needs {dim * dim} entries, got {len(unit_cell)}"
            )
        columns = [unit_cell[k * dim:(k + 1) * dim] for k in range(dim)]
        coords: list[float] = []
        n_particles = 0
        for line in handle:
            relative = _floats(line)[:dim]
            if len(relative) < dim:
                raise ValueError(f"{path}: particle line has fewer than {dim} values")
            coords.extend(_to_cartesian(columns, relative))
            n_particles += 1
    return Config(dim=dim, n_particles=n_particles, unit_cell=unit_cell, coords=coords)


def _to_cartesian(columns: Sequence[Sequence[float]], relative: Sequence[float]) -> list[float]:
    dim = len(columns)
    return [sum(column[row] * weight for column, weight in zip(columns, relative))
            for row in range(dim)]


def parse_donev(path: PathLike) -> Config:
    """Read a three-dimensional hard-sphere packing file carrying a diameter."""
    with open(path) as handle:
        handle.readline()
        handle.readline()
        n_particles = int(handle.readline().strip())
        diameter = float(handle.readline().strip())
        unit_cell = _floats(handle.readline())
        handle.readline()
        coords: list[float] = []
        for line in handle:
            coords.extend(_floats(line))
    return Config(
        dim=3,
        n_particles=n_particles,
        unit_cell=unit_cell,
        coords=coords,
        diameter=diameter,
    )


_PARSERS = {
    FileFormat.GE: parse_ge,
    FileFormat.ASC: parse_asc,
    FileFormat.DONEV: parse_donev,
}


def load_config(path: PathLike, file_format: FileFormat = FileFormat.GE) -> Config:
    """Read ``path`` with the parser for ``file_format``."""
    return _PARSERS[FileFormat(file_format)](path)