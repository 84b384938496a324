import time

import numpy as np

from dft.dispatch import transform
from dft.plan import Operation, Plan
from dft.real_transform import unpack
from dft.scalars import complex_dtype

TOLERANCE = {
    np.dtype(np.float64): 1e-9,
    np.dtype(np.float32): 1e-3,
}


def random_vector(rng, N: int, mode: str = "complex", dtype=np.float64) -> np.ndarray:
    """Generate a random test vector of size N."""
    if mode == "complex":
        values = rng.standard_normal(N) + 1j * rng.standard_normal(N)
        return values.astype(complex_dtype(dtype))
    return rng.standard_normal(N).astype(dtype)


def _relative_error(expected: np.ndarray, actual: np.ndarray) -> float:
    scale = max(1.0, float(np.max(np.abs(expected))))
    return float(np.max(np.abs(expected - actual))) / scale


def test_complex_roundtrip(N: int, num_tests: int = 1, dtype=np.float64, seed=None, verbose: bool = False) -> bool:
    """Check forward/inverse and forward/backward round trips on complex buffers."""
    rng = np.random.default_rng(seed)
    tolerance = TOLERANCE[np.dtype(dtype)]
    forward = Plan(Operation.FORWARD, N, dtype)
    backward = Plan(Operation.BACKWARD, N, dtype)
    inverse = Plan(Operation.INVERSE, N, dtype)

    all_passed = True
    max_error = 0.0
    for i in range(num_tests):
        coeffs = random_vector(rng, N, "complex", dtype)

        spectrum = coeffs.copy()
        transform(spectrum, forward)
        reference = np.fft.fft(coeffs.astype(np.complex128))
        error = _relative_error(reference, spectrum)

        recovered = spectrum.copy()
        transform(recovered, inverse)
        error = max(error, _relative_error(coeffs, recovered))

        scaled = spectrum.copy()
        transform(scaled, backward)
        error = max(error, _relative_error(N * coeffs, scaled))

        max_error = max(max_error, error)
        status = "✓ PASS" if error < tolerance else "✗ FAIL"
        if error >= tolerance:
            all_passed = False
        if verbose:
            print(f"Test {i+1}: random complex vector, error {error:.2e} {status}")

    if verbose:
        print(f"Summary: {num_tests} tests, max error: {max_error:.2e}")
    return all_passed


def test_real_roundtrip(N: int, num_tests: int = 1, dtype=np.float64, seed=None, verbose: bool = False) -> bool:
    """Check the packed real transform against numpy and its own inverse."""
    rng = np.random.default_rng(seed)
    tolerance = TOLERANCE[np.dtype(dtype)]
    forward = Plan(Operation.FORWARD, N, dtype)
    inverse = Plan(Operation.INVERSE, N, dtype)

    all_passed = True
    max_error = 0.0
    for i in range(num_tests):
        samples = random_vector(rng, N, "real", dtype)

        packed = samples.copy()
        transform(packed, forward)
        error = _relative_error(np.fft.fft(samples.astype(np.float64)), unpack(packed))

        transform(packed, inverse)
        error = max(error, _relative_error(samples, packed))

        max_error = max(max_error, error)
        status = "✓ PASS" if error < tolerance else "✗ FAIL"
        if error >= tolerance:
            all_passed = False
        if verbose:
            print(f"Test {i+1}: random real vector, error {error:.2e} {status}")

    if verbose:
        print(f"Summary: {num_tests} tests, max error: {max_error:.2e}")
    return all_passed


def test_real_against_complex(N: int, num_tests: int = 1, dtype=np.float64, seed=None, verbose: bool = False) -> bool:
    """Unpacked real spectra must match the complex transform of the same samples."""
    rng = np.random.default_rng(seed)
    tolerance = TOLERANCE[np.dtype(dtype)]
    plan = Plan(Operation.FORWARD, N, dtype)

    max_error = 0.0
    for _ in range(num_tests):
        samples = random_vector(rng, N, "real", dtype)
        padded = samples.astype(complex_dtype(dtype))
        transform(padded, plan)
        packed = samples.copy()
        transform(packed, plan)
        max_error = max(max_error, _relative_error(padded, unpack(packed)))

    if verbose:
        print(f"Real vs complex path: {num_tests} tests, max error: {max_error:.2e}")
    return max_error < tolerance


def benchmark_transform(N: int, mode: str = "complex", num_runs: int = 100, dtype=np.float64, verbose: bool = False) -> float:
    """Average time of a forward plus inverse transform of size N."""
    try:
        forward = Plan(Operation.FORWARD, N, dtype)
        inverse = Plan(Operation.INVERSE, N, dtype)
        data = random_vector(np.random.default_rng(0), N, mode, dtype)

        # Warmup
        for _ in range(5):
            transform(data, forward)
            transform(data, inverse)

        start_time = time.perf_counter()
        for _ in range(num_runs):
            transform(data, forward)
            transform(data, inverse)
        end_time = time.perf_counter()

        avg_time = (end_time - start_time) / num_runs
        if verbose:
            print(f"Average time for N={N} ({mode}): {avg_time*1000:.3f} ms")
        return avg_time

    except (ValueError, TypeError) as e:
        if verbose:
            print(f"Benchmark failed: {e}")
        return float("inf")
