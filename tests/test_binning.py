import math

import pytest

from paircorr.binning import BinResult, Bins, add_bins, bin_distance, make_bins, sample_file
from paircorr.config import Config
from paircorr.geometry import sphere_vol
from paircorr.options import Options, parse_options


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_binary_search1():
    with pytest.raises(ValueError):
        bin_distance(0.9999999, [1.0, 2.0, 3.0, 4.0], [2.0, 3.0, 4.0, 5.0])


def test_binary_search2():
    with pytest.raises(ValueError):
        bin_distance(5.0, [1.0, 2.0, 3.0], [2.0, 3.0, 4.0])


def test_binary_search3():
    assert bin_distance(3.5, [1.0, 2.0, 3.0], [2.0, 3.0, 4.0]) == 2


def test_binary_search4():
    lower = [float(x) for x in range(1, 101)]
    upper = [float(x) for x in range(2, 102)]
    with pytest.raises(ValueError):
        bin_distance(0.9, lower, upper)


def test_binary_search5():
    lower = [float(x) for x in range(1, 103)]
    upper = [float(x) for x in range(2, 104)]
    with pytest.raises(ValueError):
        bin_distance(104.1, lower, upper)


def test_binary_search6():
    assert bin_distance(1.5, [1.0, 2.0, 3.0], [2.0, 3.0, 4.0]) == 0


def test_binary_search_lower_edge_inclusive():
    assert bin_distance(2.0, [1.0, 2.0, 3.0], [2.0, 3.0, 4.0]) == 1


def test_logarithmic_binning():
    options = parse_options(["--cumulative", "--logarithm", "-c", "1.0", "-n", "5"])
    config = Config(dim=3, n_particles=0)
    upper = make_bins(options, config).upper_limit
    expected = [0.125 / 2.0, 0.125, 0.25, 0.5, 1.0]
    assert len(upper) == len(expected)
    for u, e in zip(upper, expected):
        assert abs(u - e) / e < 1e-10


def test_logarithmic_binning_offset():
    options = parse_options(
        ["--cumulative", "--logarithm", "-c", "2.1", "-n", "5", "-o", "2.0"]
    )
    config = Config(dim=3, n_particles=0)
    upper = make_bins(options, config).upper_limit
    expected = [1e-1 / 16.0 + 2.0, 1e-1 / 8.0 + 2.0, 1e-1 / 4.0 + 2.0,
                1e-1 / 2.0 + 2.0, 1e-1 + 2.0]
    for u, e in zip(upper, expected):
        assert abs(u - e) / e < 1e-10


def test_logarithmic_requires_cumulative():
    options = Options(logarithm=True, nbins=3)
    with pytest.raises(ValueError):
        make_bins(options, Config(dim=3, n_particles=0))


def test_equal_width_bins_are_contiguous():
    options = Options(cutoff=2.0, nbins=8, offset=0.4)
    bins = make_bins(options, Config(dim=2, n_particles=0))
    assert len(bins.domain) == 8
    assert bins.lower_limit[0] == pytest.approx(0.4)
    assert bins.upper_limit[-1] == pytest.approx(2.0)
    assert bins.upper_limit[:-1] == pytest.approx(bins.lower_limit[1:])
    widths = [hi - lo for lo, hi in zip(bins.lower_limit, bins.upper_limit)]
    assert widths == pytest.approx([widths[0]] * 8)
    midpoints = [(lo + hi) / 2 for lo, hi in zip(bins.lower_limit, bins.upper_limit)]
    assert bins.domain == pytest.approx(midpoints)


def test_diameter_overrides_offset():
    options = Options(cutoff=2.0, nbins=4, offset=0.1)
    bins = make_bins(options, Config(dim=3, n_particles=0, diameter=0.5))
    assert bins.lower_limit[0] == pytest.approx(0.5)


def test_autoscale_keeps_shell_volume(capsys):
    options = Options(cutoff=1.0, autoscale=0.1, verbosity=1)
    bins = make_bins(options, Config(dim=3, n_particles=0))
    assert bins.lower_limit[0] == 0.0
    assert bins.upper_limit[0] == pytest.approx(0.1)
    assert bins.upper_limit[-1] < 1.0
    assert bins.upper_limit[:-1] == bins.lower_limit[1:]
    volumes = [sphere_vol(3, hi) - sphere_vol(3, lo)
               for lo, hi in zip(bins.lower_limit, bins.upper_limit)]
    assert volumes == pytest.approx([volumes[0]] * len(volumes))
    assert f"Using {len(bins.domain)} bins" in capsys.readouterr().err


def test_sample_file_histogram(tmp_path):
    path = _write(tmp_path, "one.dat", "1\n10\n0\n1\n3\n")
    bins = make_bins(Options(cutoff=4.0, nbins=4), Config(dim=1, n_particles=0))
    result = sample_file(path, bins.lower_limit, bins.upper_limit, Options(cutoff=4.0, nbins=4))
    assert result.count == [0, 1, 1, 1]
    assert result.n_obs == 3
    assert result.dim == 1
    assert result.rho == pytest.approx(0.3)
    assert result.count2 == []


def test_sample_file_cumulative(tmp_path):
    path = _write(tmp_path, "one.dat", "1\n10\n0\n1\n3\n")
    options = Options(cutoff=4.0, nbins=4, cumulative=True)
    result = sample_file(path, [0.0, 1.0, 2.0, 3.0], [1.0, 2.0, 3.0, 4.0], options)
    assert result.count == [1, 2, 3, 3]


def test_sample_file_uses_periodic_images(tmp_path):
    path = _write(tmp_path, "two.dat", "2\n4 0\n0 4\n0 0\n3 0\n")
    options = Options(cutoff=2.0, nbins=2)
    result = sample_file(path, [0.0, 1.5], [1.5, 3.0], options)
    assert result.count == [1, 0]
    assert result.rho == pytest.approx(2 / 16)


def test_sample_file_ignores_distances_beyond_cutoff(tmp_path):
    path = _write(tmp_path, "one.dat", "1\n100\n0\n20\n")
    result = sample_file(path, [0.0], [1.0], Options())
    assert result.count == [0]


def test_empty_accumulator():
    acc = BinResult.empty(3)
    assert acc.count == [0, 0, 0]
    assert acc.count2 == [0, 0, 0]
    assert (acc.dim, acc.n_obs, acc.rho) == (0, 0, 0.0)


def test_add_bins_accumulates_counts_and_squares():
    b = BinResult(dim=1, n_obs=3, rho=0.3, count=[1, 2])
    once = add_bins(BinResult.empty(2), b)
    assert once.count == [1, 2]
    assert once.count2 == [1, 4]
    assert once.dim == 1
    assert once.n_obs == 3
    twice = add_bins(once, b)
    assert twice.count == [2, 4]
    assert twice.count2 == [2, 8]
    assert twice.n_obs == 6
    assert math.isclose(twice.rho, 0.6)


def test_bins_holds_edges():
    bins = Bins(domain=[0.5], lower_limit=[0.0], upper_limit=[1.0])
    assert bin_distance(0.25, bins.lower_limit, bins.upper_limit) == 0