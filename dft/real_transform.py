"""
In-place transform of real buffers through a half-length complex transform.

The n reals are viewed as n/2 complex values z[m] = x[2m] + i x[2m+1]. The
forward transform of z mixes the spectra E (even samples) and O (odd samples):

    E[k] = (Z[k] + conj(Z[N-k])) / 2
    O[k] = (Z[k] - conj(Z[N-k])) / 2i
    X[k] = E[k] + W^k O[k],   W = e^{-2 pi i / n},   N = n/2

and X[N-k] = conj(E[k] - W^k O[k]), so bins k and N-k are recombined
together. The factors W^k are the last stage of the plan's own factors.

Packed layout of a forward result: x[0] = X[0], x[1] = X[N] (both real),
x[2k] + i x[2k+1] = X[k] for 0 < k < N.
"""
import numpy as np

from dft.complex_transform import butterflies, check_buffer
from dft.plan import Operation, Plan
from dft.scalars import complex_dtype


def _check_real(data, plan: Plan) -> None:
    check_buffer(data, plan)
    if plan.n < 2:
        raise ValueError("a real buffer needs at least two elements")
    if data.dtype != plan.dtype:
        raise TypeError(f"buffer of type {data.dtype} does not match a {plan.dtype} plan")


def transform(data: np.ndarray, plan: Plan) -> None:
    """Transform a real buffer in place according to the plan."""
    _check_real(data, plan)
    ctype = complex_dtype(data.dtype)
    z = data.view(ctype)
    half = len(z)
    factors = plan.factors
    twiddles = factors[half - 1:]

    if plan.operation is Operation.FORWARD:
        butterflies(z, factors, plan.bits - 1)
        for k in range(1, half // 2 + 1):
            a = z[k]
            b = np.conj(z[half - k])
            e = (a + b) / 2
            t = twiddles[k] * (a - b) * -0.5j
            z[k] = e + t
            z[half - k] = np.conj(e - t)
        first = z[0]
        data[0] = first.real + first.imag
        data[1] = first.real - first.imag
    else:
        dc, nyquist = data[0], data[1]
        data[0] = dc + nyquist
        data[1] = dc - nyquist
        for k in range(1, half // 2 + 1):
            a = z[k]
            b = np.conj(z[half - k])
            e = a + b
            o = 1j * twiddles[k] * (a - b)
            z[k] = e + o
            z[half - k] = np.conj(e - o)
        butterflies(z, factors, plan.bits - 1)
        if plan.operation is Operation.INVERSE:
            data /= plan.n


def unpack(data: np.ndarray) -> np.ndarray:
    """
    Expand a packed real spectrum into the full complex spectrum.

    Returns a new array of len(data) bins; bin n-k is the conjugate of bin k.
    The input is not modified.
    """
    if not isinstance(data, np.ndarray):
        raise TypeError(f"expected a numpy array, got {type(data).__name__}")
    n = len(data)
    if data.ndim != 1 or n < 2 or n % 2:
        raise ValueError(f"packed buffer must be one-dimensional with even length, got shape {data.shape}")
    half = n // 2
    out = np.empty(n, dtype=complex_dtype(data.dtype))
    out[0] = data[0]
    out[half] = data[1]
    out[1:half] = data[2::2] + 1j * data[3::2]
    out[half + 1:] = np.conj(out[half - 1:0:-1])
    return out
