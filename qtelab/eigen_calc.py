"""Eigen-decomposition of a complex Hermitian matrix."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

DEFAULT_DIMENSION = 3


@dataclass(frozen=True)
class EigenResult:
    """Eigenvalues in ascending order and the eigenvectors as matrix columns."""

    eigenvalues: list[float]
    eigenvectors: np.ndarray

    def flat_eigenvectors(self) -> list[float]:
        """Return ``2*n*n`` floats, column by column, as (real, imag) pairs."""
        columns = self.eigenvectors.T.ravel()
        return np.column_stack((columns.real, columns.imag)).ravel().tolist()


class EigenCalculator:
    """Diagonalises an ``n``x``n`` Hermitian matrix using its upper triangle."""

    def __init__(self, n: int = DEFAULT_DIMENSION) -> None:
        n = int(n)
        self.n = n if n > 0 else DEFAULT_DIMENSION
        self.matrix: np.ndarray | None = None

    def load(self, values: Sequence[float]) -> None:
        """Store a matrix given as ``2*n*n`` row-major (real, imag) floats."""
        n = self.n
        total = 2 * n * n
        if len(values) != total:
            raise ValueError(
                f"Expected {total} floats for complex matrix, got {len(values)}"
            )
        pairs = np.asarray(values, dtype=float).reshape(n, n, 2)
        self.matrix = pairs[..., 0] + 1j * pairs[..., 1]

    def compute(self) -> EigenResult:
        """Return the eigenvalues and eigenvectors of the stored matrix."""
        if self.matrix is None:
            raise RuntimeError("No matrix stored. Load a matrix first.")
        eigenvalues, eigenvectors = np.linalg.eigh(self.matrix, UPLO="U")
        return EigenResult(eigenvalues.tolist(), eigenvectors)