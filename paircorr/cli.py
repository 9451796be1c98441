"""Command-line entry point: histogram configurations and report g2(r) or Z(r)."""

from __future__ import annotations

import functools
import itertools
import math
import platform
import sys
from collections.abc import Iterable, Iterator, Sequence
from decimal import Decimal
from typing import Optional, TextIO

from paircorr.binning import BinResult, Bins, add_bins, make_bins, sample_file
from paircorr.config import load_config
from paircorr.geometry import sphere_vol
from paircorr.options import Options, parse_options


def _fmt(value: float) -> str:
    """Format a float as its shortest decimal, without exponent or trailing '.0'."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _div(a: float, b: float) -> float:
    """Divide following IEEE rules instead of raising on a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 or math.isnan(x) else math.nan


def _ensemble_variance(c: int, c2: int, f_n_ens: float) -> tuple[float, float]:
    ens_c = _div(float(c), f_n_ens)
    ens_var_c = _div(float(c2), f_n_ens - 1.0) - _div(ens_c * ens_c * f_n_ens, f_n_ens - 1.0)
    return ens_c, ens_var_c


def format_output(count: Sequence[int], count2: Sequence[int], bins: Bins, n_obs: int,
                  dim: int, n_ens: int, rho: float, tstar: bool = False,
                  out: Optional[TextIO] = None) -> float:
    """Write g2(r) per bin (or the T* metric) and return the sum of squared errors.

    Each line reads: domain g2 std_err(g2) poisson_std_err(g2) bin_width.
    """
    out = sys.stdout if out is None else out
    f_n_ens = float(n_ens)
    eff_n_particles = _div(float(n_obs), f_n_ens)
    sum_of_variance = 0.0
    tstar_acc = 0.0
    for c, c2, r, lo, hi in zip(count, count2, bins.domain, bins.lower_limit, bins.upper_limit):
        width = hi - lo
        ens_c, ens_var_c = _ensemble_variance(c, c2, f_n_ens)
        g2_coeff = _div(2.0, (sphere_vol(dim, hi) - sphere_vol(dim, lo)) * rho * eff_n_particles)
        g2 = ens_c * g2_coeff
        tstar_acc += width * abs(g2 - 1.0)
        var_g2 = ens_var_c * g2_coeff * g2_coeff
        std_err_g2 = _div(_sqrt(var_g2), math.sqrt(f_n_ens))
        poisson_est = _div(math.sqrt(c) * g2_coeff, f_n_ens)
        if not tstar:
            print(f"{_fmt(r)} {_fmt(g2)} {_fmt(std_err_g2)} {_fmt(poisson_est)} {_fmt(width)}",
                  file=out)
        sum_of_variance += std_err_g2 * std_err_g2
    if tstar:
        if not bins.upper_limit:
            raise ValueError("T* needs at least one bin")
        span = bins.upper_limit[-1] - bins.lower_limit[0]
        print(_fmt(_div(tstar_acc, span)), file=out)
    return sum_of_variance


def format_output_cumulative(count: Sequence[int], count2: Sequence[int],
                             upper_limit: Sequence[float], n_obs: int, n_ens: int,
                             out: Optional[TextIO] = None) -> float:
    """Write Z(r) per cutoff and return the sum of squared errors.

    Each line reads: r Z(r) std_err(Z) poisson_std_err(Z).
    """
    out = sys.stdout if out is None else out
    f_n_ens = float(n_ens)
    eff_n_particles = _div(float(n_obs), f_n_ens)
    z_coeff = _div(2.0, eff_n_particles)
    sum_of_variance = 0.0
    for c, c2, u in zip(count, count2, upper_limit):
        ens_c, ens_var_c = _ensemble_variance(c, c2, f_n_ens)
        z_r = z_coeff * ens_c
        var_z_r = z_coeff * z_coeff * ens_var_c
        std_err_z_r = _sqrt(_div(var_z_r, f_n_ens))
        poisson_est = _div(math.sqrt(c) * z_coeff, f_n_ens)
        print(f"{_fmt(u)} {_fmt(z_r)} {_fmt(std_err_z_r)} {_fmt(poisson_est)}", file=out)
        sum_of_variance += std_err_z_r * std_err_z_r
    return sum_of_variance


def _chunks(items: Sequence[BinResult], size: int) -> Iterator[list[BinResult]]:
    if size <= 0:
        raise ValueError("block size must be positive")
    iterator = iter(items)
    while chunk := list(itertools.islice(iterator, size)):
        yield chunk


def _accumulate(results: Iterable[BinResult], n_bins: int) -> BinResult:
    return functools.reduce(add_bins, results, BinResult.empty(n_bins))


def _report(result: BinResult, bins: Bins, n_ens: int, rho: float, options: Options) -> float:
    if options.cumulative:
        return format_output_cumulative(result.count, result.count2, bins.upper_limit,
                                        result.n_obs, n_ens)
    return format_output(result.count, result.count2, bins, result.n_obs, result.dim,
                         n_ens, rho, options.tstar)


def _print_build_info() -> None:
    err = sys.stderr
    print("Build info for pair_correlation:", file=err)
    print(f"Python version: {platform.python_version()}", file=err)
    print(f"Implementation: {platform.python_implementation()}", file=err)
    print(f"Platform: {platform.platform()}", file=err)
    print("Start program:\n", file=err)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tool on the given arguments and return an exit status."""
    _print_build_info()
    options = parse_options(argv)
    if options.verbosity > 0:
        print(options, file=sys.stderr)
    if not options.files:
        print("error: no configuration files given", file=sys.stderr)
        return 1

    first_config = load_config(options.files[0], options.file_format())
    bins = make_bins(options, first_config)
    n_bins = len(bins.domain)
    n_ens = len(options.files)

    individual_results = []
    for index, path in enumerate(options.files):
        if options.verbosity > 1:
            print(f"Working on {index}", file=sys.stderr)
        individual_results.append(
            sample_file(path, bins.lower_limit, bins.upper_limit, options)
        )

    if options.blocks is None:
        summed = _accumulate(individual_results, n_bins)
        _report(summed, bins, n_ens, summed.rho / n_ens, options)
        return 0

    blocked_results: list[BinResult] = []
    for size in options.blocks:
        if options.verbosity > 0:
            print(f"----- {size} block -----")
        blocked_results = [_accumulate(chunk, n_bins)
                           for chunk in _chunks(individual_results, size)]
        final_result = _accumulate(blocked_results, n_bins)
        sum_of_variance = _report(final_result, bins, n_ens // size,
                                  final_result.rho / n_ens, options)
        if options.verbosity > 0:
            print("Summary uncertainty estimate (block size, statistic)")
            print(f"sue {size} {_fmt(sum_of_variance)}")

    if options.verbosity > 0:
        print("----- Drift analysis, using final block size -----")
        block_size = options.blocks[-1]
        for result in blocked_results:
            _report(result, bins, block_size, result.rho / block_size, options)
    return 0


if __name__ == "__main__":
    sys.exit(main())