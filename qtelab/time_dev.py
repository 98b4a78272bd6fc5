"""Time development of a superposition of energy eigenstates."""

from __future__ import annotations

import numpy as np


class TimeDeveloper:
    """Evaluates ``psi(t) = sum_k c_k * exp(-i * E_k * t)`` over a time grid.

    Eigenvalues are ``E_k = 1 + k`` and all coefficients are 1.
    """

    def __init__(
        self,
        n: int = 3,
        tsteps: int = 100,
        tmin: float = 0.0,
        tmax: float = 1.0,
    ) -> None:
        tsteps = int(tsteps)
        if tsteps < 2:
            raise ValueError("At least two time steps are required")
        self.n = int(n)
        self.tsteps = tsteps
        self.tmin = float(tmin)
        self.tmax = float(tmax)

    def compute(self) -> list[float]:
        """Return ``2*tsteps`` floats: (magnitude, phase) for each time step."""
        dt = (self.tmax - self.tmin) / (self.tsteps - 1)
        times = self.tmin + np.arange(self.tsteps) * dt
        eigenvalues = 1.0 + np.arange(self.n)
        coefficients = np.ones(self.n, dtype=complex)
        psi = np.exp(-1j * np.outer(times, eigenvalues)) @ coefficients
        return np.column_stack((np.abs(psi), np.angle(psi))).ravel().tolist()