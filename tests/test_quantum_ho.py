import numpy as np
import pytest

from qtelab.quantum_ho import HarmonicOscillator, fourier_matrix


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_fourier_matrix_is_unitary(n):
    f = fourier_matrix(n)
    assert f.shape == (n, n)
    assert np.allclose(f.conj().T @ f, np.eye(n))


def test_fourier_matrix_first_row_and_column_are_constant():
    f = fourier_matrix(4)
    assert np.allclose(f[0], 0.5)
    assert np.allclose(f[:, 0], 0.5)


def test_fourier_matrix_rejects_zero():
    with pytest.raises(ValueError):
        fourier_matrix(0)


def test_default_dimension_gives_128_numbers():
    osc = HarmonicOscillator()
    assert osc.n == 8
    assert osc.a == 1.0
    assert len(osc.flat()) == 2 * 8 * 8


def test_float_dimension_is_truncated():
    osc = HarmonicOscillator(4.7)
    assert osc.n == 4
    assert osc.hamiltonian().shape == (4, 4)


def test_invalid_dimension_raises():
    with pytest.raises(ValueError):
        HarmonicOscillator(0)


def test_single_point_hamiltonian_is_zero():
    h = HarmonicOscillator(1).hamiltonian()
    assert h.shape == (1, 1)
    assert h[0, 0] == 0


def test_two_point_hamiltonian():
    h = HarmonicOscillator(2, 1.0).hamiltonian()
    expected = np.array([[0.375, -0.25], [-0.25, 0.375]])
    assert np.allclose(h, expected)


@pytest.mark.parametrize("n,a", [(3, 1.0), (5, 0.5), (8, 2.0)])
def test_hamiltonian_is_hermitian(n, a):
    h = HarmonicOscillator(n, a).hamiltonian()
    assert np.allclose(h, h.conj().T, atol=2e-5)


@pytest.mark.parametrize("n,a", [(3, 1.0), (6, 0.25)])
def test_diagonal_sum_matches_operator_spectra(n, a):
    h = HarmonicOscillator(n, a).hamiltonian()
    impulse = np.arange(n, dtype=float)
    position = -((n - 1) * a / 2.0) + impulse
    expected = 0.5 * (np.sum(impulse**2) + np.sum(position**2))
    diagonal_sum = h.diagonal().sum().real
    assert diagonal_sum == pytest.approx(expected, abs=n * 1e-5)


def test_entries_are_rounded_to_five_decimals():
    h = HarmonicOscillator(5, 0.3).hamiltonian()
    scaled = np.concatenate((h.real.ravel(), h.imag.ravel())) * 100000.0
    assert np.allclose(scaled, np.round(scaled), atol=1e-6)


def test_flat_interleaves_real_and_imaginary_parts():
    osc = HarmonicOscillator(3, 1.0)
    h = osc.hamiltonian()
    flat = osc.flat()
    assert flat[0::2] == pytest.approx(h.real.ravel().tolist())
    assert flat[1::2] == pytest.approx(h.imag.ravel().tolist())