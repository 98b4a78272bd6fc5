"""Tools for building Hermitian matrices, harmonic oscillator Hamiltonians, eigen-decompositions and time development."""

__version__ = "0.1.0"