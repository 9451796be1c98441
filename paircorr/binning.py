"""Construction of radial bins and histogramming of pair distances."""

from __future__ import annotations

import bisect
import itertools
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from paircorr.config import Config, PathLike, load_config
from paircorr.distance import measure_distance
from paircorr.geometry import cell_volume, sphere_radius, sphere_vol
from paircorr.options import Options


@dataclass
class Bins:
    """Bin midpoints with their lower (inclusive) and upper (exclusive) edges."""

    domain: list[float]
    lower_limit: list[float]
    upper_limit: list[float]


@dataclass
class BinResult:
    """Histogram of one configuration or of an accumulated set of them."""

    dim: int
    n_obs: int
    rho: float
    count: list[int]
    count2: list[int] = field(default_factory=list)

    @classmethod
    def empty(cls, n_bins: int) -> "BinResult":
        """Return a zeroed accumulator with ``n_bins`` bins."""
        return cls(dim=0, n_obs=0, rho=0.0, count=[0] * n_bins, count2=[0] * n_bins)


def make_bins(options: Options, first_config: Config) -> Bins:
    """Build the bins described by ``options`` for configurations like ``first_config``.

    A configuration that carries a particle diameter uses it as the offset.
    """
    lower_offset = (first_config.diameter if first_config.diameter is not None
                    else options.offset)

    if options.autoscale is not None:
        first_width = options.autoscale
        if first_width <= 0:
            raise ValueError("first bin width must be positive")
        dim = first_config.dim
        bin_vol = sphere_vol(dim, lower_offset + first_width) - sphere_vol(dim, lower_offset)
        radii = [lower_offset, lower_offset + first_width]
        while radii[-1] < options.cutoff:
            radii.append(sphere_radius(dim, bin_vol + sphere_vol(dim, radii[-1])))
        radii.pop()
        lower = radii[:-1]
        upper = radii[1:]
        domain = [(lo + hi) / 2.0 for lo, hi in zip(lower, upper)]
        if options.verbosity > 0:
            print(f"Using {len(domain)} bins", file=sys.stderr)
        return Bins(domain, lower, upper)

    if options.logarithm:
        if not options.cumulative:
            raise ValueError("Logarithmic spacing currently only available for Z(r)!")
        interval = options.cutoff - lower_offset
        upper = [lower_offset + interval * 2.0 ** -k for k in range(options.nbins)]
        upper.reverse()
        return Bins([0.0] * options.nbins, [0.0] * options.nbins, upper)

    if options.nbins == 0:
        return Bins([], [], [])
    step = (options.cutoff - lower_offset) / options.nbins
    domain = [step / 2.0 + k * step + lower_offset for k in range(options.nbins)]
    lower = [k * step + lower_offset for k in range(options.nbins)]
    upper = [(k + 1) * step + lower_offset for k in range(options.nbins)]
    return Bins(domain, lower, upper)


def bin_distance(r: float, lower_limit: Sequence[float], upper_limit: Sequence[float]) -> int:
    """Return the index of the bin with ``lower <= r < upper``.

    Raises ``ValueError`` when ``r`` lies in no bin.
    """
    index = bisect.bisect_right(lower_limit, r) - 1
    if index < 0 or index >= len(upper_limit) or not r < upper_limit[index]:
        raise ValueError(f"distance {r} lies outside every bin")
    return index


def sample_file(path: PathLike, lower_limit: Sequence[float],
                upper_limit: Sequence[float], options: Options) -> BinResult:
    """Histogram every pair distance of the configuration stored at ``path``."""
    config = load_config(path, options.file_format())
    count = [0] * len(lower_limit)
    for i, j in itertools.combinations(range(config.n_particles), 2):
        r = measure_distance(config, j, i)
        if options.cumulative:
            for k, r_cut in enumerate(upper_limit):
                if r <= r_cut:
                    count[k] += 1
        elif lower_limit and lower_limit[0] <= r <= upper_limit[-1]:
            count[bin_distance(r, lower_limit, upper_limit)] += 1

    volume = cell_volume(config.dim, config.unit_cell)
    return BinResult(
        dim=config.dim,
        n_obs=config.n_particles,
        rho=config.n_particles / volume,
        count=count,
        count2=[],
    )


def add_bins(acc: BinResult, b: BinResult) -> BinResult:
    """Return ``acc`` with ``b`` added: counts summed, squares of ``b``'s counts accumulated.

    The dimension is taken from ``b``.
    """
    paired = min(len(acc.count), len(acc.count2), len(b.count))
    pairs = list(zip(acc.count, acc.count2, b.count))
    count = [x + y for x, _, y in pairs] + acc.count[paired:]
    count2 = [x2 + y * y for _, x2, y in pairs] + acc.count2[paired:]
    return BinResult(
        dim=b.dim,
        n_obs=acc.n_obs + b.n_obs,
        rho=acc.rho + b.rho,
        count=count,
        count2=count2,
    )