"""Hamiltonian of a discretised quantum harmonic oscillator."""

from __future__ import annotations

import numpy as np

DEFAULT_DIMENSION = 8
DEFAULT_POTENTIAL = 1.0


def fourier_matrix(n: int) -> np.ndarray:
    """Return the unitary ``n``x``n`` matrix ``F[k][l] = exp(2*pi*i*k*l/n) / sqrt(n)``."""
    n = int(n)
    if n < 1:
        raise ValueError("Dimension must be greater than 0")
    index = np.arange(n)
    angles = 2.0 * np.pi * np.outer(index, index) / n
    return np.exp(1j * angles) / np.sqrt(n)


def _round5(values: np.ndarray) -> np.ndarray:
    # Round half away from zero to five decimal places.
    scaled = values * 100000.0
    return np.sign(scaled) * np.floor(np.abs(scaled) + 0.5) / 100000.0


class HarmonicOscillator:
    """Builds ``H = 0.5 * (P^2 + Q^2)`` for an ``n``-point grid.

    ``P`` is the momentum operator ``F^H diag(0, 1, ..., n-1) F`` and ``Q`` is
    the diagonal position operator ``Q[i] = -((n-1) * a / 2) + i``.
    """

    def __init__(self, n: int | float = DEFAULT_DIMENSION, a: float = DEFAULT_POTENTIAL) -> None:
        n = int(n)
        if n < 1:
            raise ValueError("Dimension must be greater than 0")
        self.n = n
        self.a = float(a)

    def hamiltonian(self) -> np.ndarray:
        """Return ``H`` as an ``n``x``n`` complex array, rounded to 5 decimals."""
        n = self.n
        fourier = fourier_matrix(n)
        impulse = np.arange(n, dtype=float)
        momentum = fourier.conj().T @ (impulse[:, None] * fourier)
        momentum_sq = momentum @ momentum
        position = -((n - 1) * self.a / 2.0) + np.arange(n, dtype=float)
        hamiltonian = 0.5 * (momentum_sq + np.diag(position * position))
        return _round5(hamiltonian.real) + 1j * _round5(hamiltonian.imag)

    def flat(self) -> list[float]:
        """Return ``H`` as ``2*n*n`` floats: row-major (real, imag) pairs."""
        entries = self.hamiltonian().ravel()
        return np.column_stack((entries.real, entries.imag)).ravel().tolist()