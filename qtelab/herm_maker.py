"""Build a full Hermitian matrix from an upper-triangular one."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

DEFAULT_DIMENSION = 3


class HermitianMaker:
    """Turns an upper-triangular ``n``x``n`` matrix into ``U + U^T``.

    Diagonal entries become ``2 * U[i][i]`` and off-diagonal entries become
    ``U[i][j] + U[j][i]``.
    """

    def __init__(self, n: int | float = DEFAULT_DIMENSION) -> None:
        n = int(n)
        self.n = n if n > 0 else DEFAULT_DIMENSION

    def make(self, values: Sequence[float]) -> list[float]:
        """Return the Hermitian matrix as a flat row-major list of ``n*n`` floats."""
        total = self.n * self.n
        if len(values) != total:
            raise ValueError(f"Expected {total} numbers, received {len(values)}")
        upper = np.asarray(values, dtype=float).reshape(self.n, self.n)
        return (upper + upper.T).ravel().tolist()