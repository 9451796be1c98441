# paircorr

Computes the pair correlation function g2(r), or the cumulative
coordination number Z(r), from one or more periodic particle
configurations in one, two or three dimensions. When several configuration
files are given they are treated as an ensemble, and the output includes
uncertainty estimates.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
pair-correlation [options] FILE [FILE ...]
```

Results go to standard output; a short banner with the Python version and
platform goes to standard error. Running without any files prints an error
and exits with status 1.

Each line of output for g2(r) has the form:

```
r  g2  std_err(g2)  poisson_std_err(g2)  bin_width
```

where `r` is the midpoint of the bin. With `--cumulative`, each line has the form:

```
r_upper  Z  std_err(Z)  poisson_std_err(Z)
```

where Z counts pairs at distance at most `r_upper`. Numbers are written as
plain decimals, without exponents.

Distances are minimum-image distances: images shifted by -1, 0 or +1 of
each lattice vector are tried.

### Options

| Option | Meaning |
| --- | --- |
| `-c`, `--cutoff R` | Largest radius to sample (default 1.0) |
| `-n`, `--nbins N` | Number of bins (default 1) |
| `-o`, `--offset R` | Start the bins at this radius (default 0.0) |
| `--autoscale W` | Bins of equal volume, the first of width `W`; overrides `--nbins` |
| `--logarithm` | Bin edges halving towards the offset; only allowed with `--cumulative` |
| `--cumulative` | Compute Z(r) in place of g2(r) |
| `--tstar` | For g2(r), print only the T* order metric in place of the per-bin lines |
| `--blocks N [N ...]` | Block sizes for a block-averaging uncertainty analysis |
| `--asc` | Read files in the relative-coordinate format |
| `--donev` | Read files in the hard-sphere packing format (3D only) |
| `-v`, `--verbosity` | More monitoring output; repeat for more |

With `--blocks` and `-v`, each block size is followed by a line
`sue SIZE VALUE` giving the sum of squared standard errors, and after all
block sizes the per-block results for the last size are printed as a drift
analysis.

### Input formats

The default format has the dimension on the first line, then `dim` lines
giving the unit cell vectors, then one particle per line in Cartesian
coordinates. Columns beyond `dim` are ignored.

The `--asc` format (2D or 3D) has the dimension on the first line, the unit
cell (column-major) on the second, and then one particle per line in
coordinates relative to the cell; they are converted to Cartesian ones.

The `--donev` format is 3D: two header lines, the particle count, the
particle diameter, the unit cell, a further line, then the coordinates.
Bins start at the diameter instead of at `--offset`.

### Example

```
pair-correlation -c 3.0 -n 60 config_*.dat > g2.txt
```

## Library use

```python
from paircorr.config import load_config, FileFormat
from paircorr.distance import measure_distance
from paircorr.geometry import cell_volume

config = load_config("config.dat", FileFormat.GE)
print(measure_distance(config, 0, 1))
print(cell_volume(config.dim, config.unit_cell))
```

The modules are:

- `paircorr.config`: `Config`, `FileFormat`, `parse_ge`, `parse_asc`,
  `parse_donev` and `load_config`.
- `paircorr.distance`: `measure_distance`.
- `paircorr.geometry`: `cell_volume`, `sphere_vol`, `sphere_radius`.
- `paircorr.options`: `Options` and `parse_options`.
- `paircorr.binning`: `Bins`, `BinResult`, `make_bins`, `bin_distance`,
  `sample_file` and `add_bins`.
- `paircorr.cli`: `format_output`, `format_output_cumulative` and `main`.

## Limitations

Only dimensions one to three are supported, and the `--asc` format only two
and three. Files are processed one after another in a single process, and
every pair of particles is compared, so very large configurations are slow.