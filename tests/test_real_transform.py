"""Unit tests for packed real transforms and unpack."""
import numpy as np
import pytest

from dft import Operation, Plan, transform, unpack

SIZES = [2, 4, 8, 16, 128, 1024]


@pytest.fixture
def rng():
    return np.random.default_rng(7)


class TestForward:
    def test_two_points(self):
        a, b = 3.0, 5.0
        data = np.array([a, b])
        transform(data, Plan(Operation.FORWARD, 2))
        np.testing.assert_allclose(data, [a + b, a - b])

    def test_packed_layout(self, rng):
        x = rng.standard_normal(16)
        data = x.copy()
        transform(data, Plan(Operation.FORWARD, 16))
        spectrum = np.fft.fft(x)
        assert data[0] == pytest.approx(spectrum[0].real)
        assert data[1] == pytest.approx(spectrum[8].real)
        np.testing.assert_allclose(data[2::2], spectrum[1:8].real, atol=1e-12)
        np.testing.assert_allclose(data[3::2], spectrum[1:8].imag, atol=1e-12)

    @pytest.mark.parametrize("n", SIZES)
    def test_unpack_matches_complex_path(self, rng, n):
        x = rng.standard_normal(n)
        plan = Plan(Operation.FORWARD, n)
        padded = x.astype(np.complex128)
        transform(padded, plan)
        packed = x.copy()
        transform(packed, plan)
        np.testing.assert_allclose(unpack(packed), padded, atol=1e-10)

    def test_single_precision(self, rng):
        x = rng.standard_normal(64).astype(np.float32)
        data = x.copy()
        transform(data, Plan(Operation.FORWARD, 64, np.float32))
        assert data.dtype == np.float32
        np.testing.assert_allclose(unpack(data), np.fft.fft(x), rtol=1e-3, atol=1e-3)


class TestRoundTrip:
    @pytest.mark.parametrize("n", SIZES)
    def test_inverse_of_forward(self, rng, n):
        x = rng.standard_normal(n)
        data = x.copy()
        transform(data, Plan(Operation.FORWARD, n))
        transform(data, Plan(Operation.INVERSE, n))
        np.testing.assert_allclose(data, x, atol=1e-12)

    @pytest.mark.parametrize("n", SIZES)
    def test_backward_of_forward_is_scaled(self, rng, n):
        x = rng.standard_normal(n)
        data = x.copy()
        transform(data, Plan(Operation.FORWARD, n))
        transform(data, Plan(Operation.BACKWARD, n))
        np.testing.assert_allclose(data, n * x, atol=1e-10 * n)

    def test_inverse_of_packed_spectrum(self, rng):
        x = rng.standard_normal(32)
        spectrum = np.fft.rfft(x)
        data = np.empty(32)
        data[0] = spectrum[0].real
        data[1] = spectrum[16].real
        data[2::2] = spectrum[1:16].real
        data[3::2] = spectrum[1:16].imag
        transform(data, Plan(Operation.INVERSE, 32))
        np.testing.assert_allclose(data, x, atol=1e-12)


class TestUnpack:
    def test_two_points(self):
        np.testing.assert_array_equal(unpack(np.array([8.0, -2.0])), [8.0, -2.0])

    def test_conjugate_symmetry(self, rng):
        data = rng.standard_normal(16)
        spectrum = unpack(data)
        assert len(spectrum) == 16
        assert spectrum[0] == data[0]
        assert spectrum[8] == data[1]
        for k in range(1, 8):
            assert spectrum[k] == complex(data[2 * k], data[2 * k + 1])
            assert spectrum[16 - k] == np.conj(spectrum[k])

    def test_idempotent_and_non_mutating(self, rng):
        data = rng.standard_normal(32)
        original = data.copy()
        first = unpack(data)
        second = unpack(data)
        np.testing.assert_array_equal(first, second)
        np.testing.assert_array_equal(data, original)

    @pytest.mark.parametrize("bad", [np.zeros(3), np.zeros(0), np.zeros((2, 2))])
    def test_rejects_bad_shapes(self, bad):
        with pytest.raises(ValueError):
            unpack(bad)


class TestPreconditions:
    def test_single_point_real_buffer(self):
        with pytest.raises(ValueError):
            transform(np.array([1.0]), Plan(Operation.FORWARD, 1))

    def test_length_mismatch_leaves_buffer_untouched(self):
        data = np.arange(4.0)
        with pytest.raises(ValueError):
            transform(data, Plan(Operation.FORWARD, 8))
        np.testing.assert_array_equal(data, np.arange(4.0))

    def test_half_precision_is_unsupported(self):
        with pytest.raises(TypeError):
            transform(np.zeros(4, dtype=np.float16), Plan(Operation.FORWARD, 4))

    @pytest.mark.parametrize("buffer_type, plan_type", [
        (np.float64, np.float32),
        (np.float32, np.float64),
    ])
    def test_precision_mismatch(self, buffer_type, plan_type):
        data = np.arange(1024).astype(buffer_type)
        with pytest.raises(TypeError):
            transform(data, Plan(Operation.FORWARD, 1024, plan_type))
        np.testing.assert_array_equal(data, np.arange(1024))
