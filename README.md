# qtelab

Small tools for experimenting with quantum time evolution on
finite-dimensional systems. Most tools take and return flat lists of
numbers, so the output of one can be passed to the next.

## Installation

```
pip install .
```

## Tools

| Class | What it does |
| --- | --- |
| `qtelab.herm_maker.HermitianMaker(n=3)` | `make(values)` takes an upper-triangular `n×n` matrix as `n·n` floats, row-major, and returns `U + Uᵀ` as `n·n` floats (diagonal entries doubled). A dimension of 0 or less falls back to 3. |
| `qtelab.herm_combiner.HermitianCombiner(n=3)` | `combine(values)` takes `M1` (`n·n` floats), `M2` (`n·n` floats), then `c1` and `c2`, and returns `c1·M1 + c2·M2` as `n·n` floats. |
| `qtelab.rand_herm.RandomHermitian(n=3, re_min=0.0, re_max=1.0, im_min=0.0, im_max=0.0, rng=None)` | `generate()` returns a random Hermitian matrix as `2·n·n` floats (row-major real/imaginary pairs). Diagonal entries are real; the ranges can be changed with `set_re_range`, `set_im_range`, and the size with `set_dimension`. Values are rounded to single precision. Pass a `random.Random` as `rng` for reproducible output. |
| `qtelab.quantum_ho.HarmonicOscillator(n=8, a=1.0)` | `hamiltonian()` returns `H = ½(P² + Q²)` as a complex `n×n` NumPy array rounded to 5 decimals, where `P = Fᴴ·diag(0…n-1)·F` and `Q = diag(-(n-1)·a/2 + i)`; `flat()` returns it as `2·n·n` floats. |
| `qtelab.quantum_ho.fourier_matrix(n)` | The unitary Fourier matrix `F[k][l] = exp(2πi·k·l/n)/√n`. |
| `qtelab.eigen_calc.EigenCalculator(n=3)` | `load(values)` stores a complex matrix given as `2·n·n` row-major real/imaginary floats; `compute()` diagonalises it (reading the upper triangle) and returns an `EigenResult`. |
| `qtelab.eigen_calc.EigenResult` | `eigenvalues` in ascending order, `eigenvectors` as the columns of a complex array, and `flat_eigenvectors()` giving them column by column as real/imaginary pairs. |
| `qtelab.initstate_calc.InitialStateCalculator(n=3)` | `coefficients(values)` takes `n` eigenstates (each `n` real/imaginary pairs) followed by the initial state (`n` pairs) and returns the coefficients `R_k = Σᵢ conj(e_k[i])·ψ[i]` as `n` pairs. |
| `qtelab.time_dev.TimeDeveloper(n=3, tsteps=100, tmin=0.0, tmax=1.0)` | `compute()` evaluates `ψ(t) = Σ_k exp(-i·E_k·t)` on `tsteps` evenly spaced times from `tmin` to `tmax` and returns magnitude/phase pairs, `2·tsteps` floats. |

## Errors

- Input lists of the wrong length raise `ValueError`.
- `RandomHermitian.set_dimension` raises `ValueError` for a dimension of 0 or less.
- `HarmonicOscillator` and `fourier_matrix` raise `ValueError` for a dimension below 1.
- `TimeDeveloper` raises `ValueError` for fewer than two time steps.
- `EigenCalculator.compute` raises `RuntimeError` if no matrix has been loaded.

## Example

```python
from qtelab.rand_herm import RandomHermitian
from qtelab.eigen_calc import EigenCalculator

gen = RandomHermitian(n=3, im_min=-1.0, im_max=1.0)
matrix = gen.generate()            # 18 floats: real, imag pairs, row-major

calc = EigenCalculator(3)
calc.load(matrix)
result = calc.compute()
print(result.eigenvalues)
print(result.flat_eigenvectors())  # column by column, real/imag interleaved
```

```python
from qtelab.quantum_ho import HarmonicOscillator

osc = HarmonicOscillator(n=8, a=1.0)
H = osc.hamiltonian()   # complex 8×8 array, rounded to 5 decimals
flat = osc.flat()       # 128 floats: real, imag pairs, row-major
```

## What it does not do

- It is a library only: there is no command-line tool and nothing that
  connects the tools into a running signal chain; you call them yourself.
- `TimeDeveloper` does not take eigenvalues or coefficients as input. It
  always uses `E_k = 1 + k` and coefficients of 1, so it cannot yet evolve
  the results of `EigenCalculator` and `InitialStateCalculator`.

## Running the tests

```
pip install .[test]
pytest
```