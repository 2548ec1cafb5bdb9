# pbitfactor

A simulator for factoring integers with probabilistic bits (p-bits). Two
registers of p-bits, `A` and `B`, hold odd candidate factors. Each p-bit is
refreshed stochastically from the residual `(N - x*y)` until the product of
the two registers equals the number under test. The number of completed
sweeps needed is recorded and averaged over repeated runs.

The simulator models both a floating-point energy calculator and a quantised,
shift-based one, with optional self-feedback adaptation (SFA), a truncated
inverse-sigmoid threshold and a power-of-two approximation of the local
temperature factor.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
pbitfactor paras.csv
pbitfactor paras.csv --seed 42
```

`--seed` fixes the random number generator so that runs can be reproduced.
For every factorisation found the command prints `Get answer:<factor>`, and
after each input number `One line complete!<mean>`.

### Parameter file

The parameter file is a CSV of `name,value` rows. Empty lines and lines
starting with `#` are ignored; only the first two fields of a row are read.
The names are not interpreted: the values are used by position, and at least
18 are required.

| Position | Meaning |
|---|---|
| 0 | version label |
| 1 | path of the input data file |
| 2 | prefix of the output folder (a timestamp is appended) |
| 3 | number of repeated runs per number (at most 10000) |
| 4 | suppression type (`0`: suppress while the bit is 0, otherwise while it is 1) |
| 5 | check the product before every bit update (`0`/`1`) |
| 6 | quantised energy calculator (`0`/`1`) |
| 7 | self-feedback adaptation, SFA (`0`/`1`) |
| 8 | truncated inverse-sigmoid approximation (`0`/`1`) |
| 9 | truncation limit for the sigmoid approximation |
| 10 | power-of-two approximation of the temperature factor (`0`/`1`) |
| 11–13 | three shift amounts forming the background temperature |
| 14–15 | two shift amounts forming the SFA rate |
| 16–17 | two shift amounts forming the SFA region top |

A warning is printed when the sigmoid approximation is enabled without the
quantised energy calculator, since it has no effect then.

### Input data file

One positive number to factor per line, as the first comma-separated field.
Empty lines and lines starting with `#` are skipped. Numbers whose factor
registers would need more than 15 bits are rejected with a `ValueError`.

### Output

Each run creates a folder named after the prefix and the current local time
(`YYYYmmddHH-MM-SS`). It holds `info.csv`, a copy of the parameter file, and
`data.csv`, with one row per input number: the number, the repeat count, the
temperature settings in effect (the three shift amounts when quantised, the
floating-point temperature otherwise), the SFA settings when SFA is on, and
the mean number of sweeps, with `-` separating the groups.

## Library use

- `pbitfactor.config.read_config(path)` returns the `(name, value)` pairs of
  a parameter file; `copy_config(path, dir_name)` copies it to
  `<dir_name>/info.csv` and returns that path.
- `pbitfactor.pbit.PBitInfo` is a dataclass holding the simulation settings.
  `PBit(k, n, info, rng)` is one probabilistic bit at position `k`;
  `refresh_bit(nxy_y, y2)` updates it and returns `0` if it rose to 1, `2` if
  it fell to 0 and `1` if it stayed. `inverse_sigmoid(rand_value)` gives the
  threshold `16*ln(2048/r - 1)` clamped to `[-128, 127]`, and
  `get_x(bits, n)` assembles the first `n - 1` bits into an odd integer.
- `pbitfactor.simulate.prepare_info(values, line)` builds a `PBitInfo` from
  the parameter values and one input line, `run_number(repeat, info, rng)`
  returns the mean sweep count and the list of sweep counts per run, and
  `format_result(info, repeat, mean)` renders one output row.
- `pbitfactor.simulate.main(argv)` is the command-line entry point.