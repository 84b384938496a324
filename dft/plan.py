import enum
import operator

import numpy as np
from sympy import multiplicity

from dft.scalars import c, complex_dtype


class Operation(enum.Enum):
    """A transform operation."""

    FORWARD = "forward"
    BACKWARD = "backward"
    INVERSE = "inverse"


def factorize_length(n) -> int:
    """
    Return log2(n) for a transform length n.

    Only powers of two are supported, n = 1 included. Any other value,
    including zero and negative numbers, raises ValueError.
    """
    try:
        n = operator.index(n)
    except TypeError:
        raise ValueError(f"n={n!r} is not an integer") from None
    if n < 1:
        raise ValueError(f"n={n} must be positive")
    if n & (n - 1):
        raise ValueError(f"n={n} is not a power of two")
    return int(multiplicity(2, n))


class Plan:
    """
    A transform plan for a specific operation and number of points.

    The plan precomputes the twiddle factors of every butterfly stage. Stage
    `step` (1, 2, 4, ..., n/2) contributes `step` factors e^{sign*i*pi*k/step},
    k = 0..step-1, so a plan holds n - 1 factors in total, stored stage after
    stage in the order the transform consumes them.

    Args:
        operation: The Operation the plan is built for.
        n: Number of points, a power of two.
        dtype: Floating type of the factor parts (float64 or float32).
    """

    def __init__(self, operation: Operation, n: int, dtype=np.float64):
        if not isinstance(operation, Operation):
            raise TypeError(f"operation must be an Operation, got {operation!r}")
        self._bits = factorize_length(n)
        self._n = int(n)
        self._operation = operation
        self._dtype = np.dtype(dtype)
        self._factors = self._build_factors()
        self._factors.flags.writeable = False

    def _build_factors(self) -> np.ndarray:
        """
        Generate the factors of each stage by repeated rotation.

        Within a stage the factor is advanced by `multiplier * factor + factor`,
        where multiplier = (-2 sin^2(theta/2), sign * sin(theta)), which is a
        rotation by theta = pi/step written to avoid cancellation in
        cos(theta) - 1.
        """
        real = self._dtype.type
        ctype = complex_dtype(self._dtype)
        one = real(1)
        two = real(2)
        pi = np.arccos(-one)
        sign = -one if self._operation is Operation.FORWARD else one

        factors = np.empty(self._n - 1, dtype=ctype)
        idx = 0
        step = 1
        while step < self._n:
            theta = pi / real(step)
            sine = np.sin(theta / two)
            multiplier = c(-two * sine * sine, sign * np.sin(theta), ctype)
            factor = c(1, 0, ctype)
            for _ in range(step):
                factors[idx] = factor
                idx += 1
                factor = multiplier * factor + factor
            step <<= 1
        return factors

    @property
    def n(self) -> int:
        return self._n

    @property
    def bits(self) -> int:
        """log2(n), the width of the bit-reversed indices."""
        return self._bits

    @property
    def operation(self) -> Operation:
        return self._operation

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def factors(self) -> np.ndarray:
        return self._factors

    def __repr__(self):
        return f"Plan({self._operation}, n={self._n}, dtype={self._dtype})"
