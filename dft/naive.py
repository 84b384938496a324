import numpy as np

from dft.plan import Operation


def naive_dft(coeffs, operation: Operation = Operation.FORWARD) -> np.ndarray:
    """Direct O(n^2) DFT of coeffs, returned as a new array."""
    x = np.asarray(coeffs, dtype=np.complex128)
    N = len(x)
    sign = -1 if operation is Operation.FORWARD else 1
    out = np.zeros(N, dtype=np.complex128)
    for k in range(N):
        for j in range(N):
            out[k] += x[j] * np.exp(sign * 2j * np.pi * k * j / N)
    if operation is Operation.INVERSE:
        out /= N
    return out
