"""Command-line options for the pair correlation tool."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from paircorr.config import FileFormat

_DESCRIPTION = (
    "Read configuration files and write the pair correlation function on "
    "stdout as: domain g2 std_err(g2) poisson_std_err(g2) bin_width. "
    "All numeric conversions are assumed to be valid, so do not give "
    "absurdly large numbers."
)


@dataclass
class Options:
    """Settings that control binning, input format and output."""

    files: list[str] = field(default_factory=list)
    verbosity: int = 0
    cutoff: float = 1.0
    nbins: int = 1
    offset: float = 0.0
    autoscale: Optional[float] = None
    blocks: Optional[list[int]] = None
    asc: bool = False
    donev: bool = False
    logarithm: bool = False
    cumulative: bool = False
    tstar: bool = False

    def file_format(self) -> FileFormat:
        """Return the configuration file format selected by the flags."""
        if self.asc:
            return FileFormat.ASC
        if self.donev:
            return FileFormat.DONEV
        return FileFormat.GE


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _positive_int(text: str) -> int:
    value = _non_negative_int(text)
    if value == 0:
        raise argparse.ArgumentTypeError("block size must be positive")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pair_correlation", description=_DESCRIPTION)
    parser.add_argument("-v", "--verbosity", action="count", default=0,
                        help="verbosity of monitoring output")
    parser.add_argument("-c", "--cutoff", type=float, default=1.0,
                        help="maximum radius to sample to")
    parser.add_argument("-n", "--nbins", type=_non_negative_int, default=1,
                        help="number of bins")
    parser.add_argument("-o", "--offset", type=float, default=0.0,
                        help="offset for every bin, leaving a gap around the origin")
    parser.add_argument("--autoscale", type=float, default=None,
                        help="width of the first bin; later bins keep its volume "
                             "(overrides --nbins)")
    parser.add_argument("--blocks", type=_positive_int, nargs="+", default=None,
                        help="block sizes to compute for uncertainty analysis")
    parser.add_argument("files", nargs="*", default=[],
                        help="configuration files, treated as an ensemble")
    parser.add_argument("--asc", action="store_true",
                        help="read files in the relative-coordinate format")
    parser.add_argument("--donev", action="store_true",
                        help="read files in the hard-sphere packing format")
    parser.add_argument("--logarithm", action="store_true",
                        help="use logarithmically spaced bins")
    parser.add_argument("--cumulative", action="store_true",
                        help="compute Z(r) instead of g2(r)")
    parser.add_argument("--tstar", action="store_true",
                        help="compute the T* order metric")
    return parser


def parse_options(argv: Optional[Sequence[str]] = None) -> Options:
    """Parse ``argv`` (or the process arguments) into :class:`Options`."""
    namespace = _build_parser().parse_args(None if argv is None else list(argv))
    return Options(**vars(namespace))