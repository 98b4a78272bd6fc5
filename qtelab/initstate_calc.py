"""Expansion coefficients of an initial state in an eigenbasis."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

DEFAULT_DIMENSION = 3


class InitialStateCalculator:
    """Computes ``R_k = <e_k, psi> = sum_i conj(e_k[i]) * psi[i]``."""

    def __init__(self, n: int = DEFAULT_DIMENSION) -> None:
        self.n = int(n)

    def coefficients(self, values: Sequence[float]) -> list[float]:
        """Project the initial state onto each eigenstate.

        ``values`` holds ``n`` eigenstates of ``n`` (re, im) pairs each,
        followed by the initial state as ``n`` (re, im) pairs. Returns the
        coefficients as ``n`` interleaved (re, im) pairs.
        """
        n = self.n
        eigen_count = 2 * n * n
        expected = eigen_count + 2 * n
        if len(values) != expected:
            raise ValueError(f"Expected {expected} numbers, received {len(values)}")
        data = np.asarray(values, dtype=float)
        pairs = data[:eigen_count].reshape(n, n, 2)
        states = pairs[..., 0] + 1j * pairs[..., 1]
        initial = data[eigen_count:].reshape(n, 2)
        psi = initial[:, 0] + 1j * initial[:, 1]
        result = states.conj() @ psi
        return np.column_stack((result.real, result.imag)).ravel().tolist()