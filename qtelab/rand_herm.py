"""Random Hermitian matrix generator."""

from __future__ import annotations

import random

import numpy as np

DEFAULT_DIMENSION = 3


def _single(value: float) -> float:
    return float(np.float32(value))


class RandomHermitian:
    """Generates random Hermitian matrices with complex off-diagonals.

    Diagonal entries are real and drawn from the real range; each upper
    off-diagonal entry takes a real part from the real range and an imaginary
    part from the imaginary range, and its mirror is the conjugate.
    """

    def __init__(
        self,
        n: int = DEFAULT_DIMENSION,
        re_min: float = 0.0,
        re_max: float = 1.0,
        im_min: float = 0.0,
        im_max: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        n = int(n)
        self.n = n if n > 0 else DEFAULT_DIMENSION
        self.re_min = float(re_min)
        self.re_max = float(re_max)
        self.im_min = float(im_min)
        self.im_max = float(im_max)
        self.rng = rng if rng is not None else random.Random()

    def set_dimension(self, n: int) -> None:
        """Set the matrix dimension; it must be greater than 0."""
        n = int(n)
        if n <= 0:
            raise ValueError("Dimension must be greater than 0")
        self.n = n

    def set_re_range(self, re_min: float, re_max: float) -> None:
        """Set the range of real parts."""
        self.re_min = float(re_min)
        self.re_max = float(re_max)

    def set_im_range(self, im_min: float, im_max: float) -> None:
        """Set the range of imaginary parts."""
        self.im_min = float(im_min)
        self.im_max = float(im_max)

    def _draw(self, low: float, high: float) -> float:
        return _single(low + self.rng.random() * (high - low))

    def generate(self) -> list[float]:
        """Return ``2*n*n`` floats: row-major entries as (real, imag) pairs."""
        n = self.n
        matrix = np.zeros((n, n), dtype=complex)
        for i in range(n):
            matrix[i, i] = self._draw(self.re_min, self.re_max)
        for i in range(n):
            for j in range(i + 1, n):
                re = self._draw(self.re_min, self.re_max)
                im = self._draw(self.im_min, self.im_max)
                matrix[i, j] = complex(re, im)
                matrix[j, i] = complex(re, -im)
        flat = matrix.ravel()
        return np.column_stack((flat.real, flat.imag)).ravel().tolist()