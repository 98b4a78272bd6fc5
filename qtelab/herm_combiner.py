"""Linear combination of two real matrices."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

DEFAULT_DIMENSION = 3


class HermitianCombiner:
    """Combines two ``n``x``n`` matrices as ``c1 * M1 + c2 * M2``."""

    def __init__(self, n: int = DEFAULT_DIMENSION) -> None:
        self.n = int(n)

    def combine(self, values: Sequence[float]) -> list[float]:
        """Combine a list laid out as ``M1 (n*n), M2 (n*n), c1, c2``.

        Returns the flat row-major result of ``n*n`` floats.
        """
        size = self.n * self.n
        expected = 2 * size + 2
        if len(values) != expected:
            raise ValueError(f"Expected {expected} numbers, received {len(values)}")
        data = np.asarray(values, dtype=float)
        first, second = data[:size], data[size : 2 * size]
        c1, c2 = data[2 * size], data[2 * size + 1]
        return (c1 * first + c2 * second).tolist()