"""
In-place radix-2 transform of complex buffers.

The transform is the iterative decimation-in-time Cooley-Tukey algorithm:
1. bit-reverse the buffer.
2. for each stage with half-block size step = 1, 2, ..., n/2 and each
   position j < step, take the next plan factor w and apply the butterfly
        a, b = a + w*b, a - w*b
   to every pair (j + s, j + s + step), s = 0, 2*step, 4*step, ...
3. for the inverse operation, divide by n.
"""
import numpy as np

from dft.permutation import bit_reverse
from dft.plan import Operation, Plan
from dft.scalars import complex_dtype


def check_buffer(data, plan: Plan) -> None:
    """Validate that data is a 1-D contiguous array of plan.n elements."""
    if not isinstance(data, np.ndarray):
        raise TypeError(f"expected a numpy array, got {type(data).__name__}")
    if data.ndim != 1:
        raise ValueError(f"buffer must be one-dimensional, got shape {data.shape}")
    if len(data) != plan.n:
        raise ValueError(f"buffer has {len(data)} elements, plan expects {plan.n}")
    if not data.flags.c_contiguous:
        raise ValueError("buffer must be contiguous")


def butterflies(data: np.ndarray, factors: np.ndarray, bits: int) -> None:
    """
    Run the bit reversal and butterfly network over data of 2**bits elements.

    Consumes exactly len(data) - 1 factors from the front of `factors`, so
    a plan built for a larger size also drives its sub-transforms.
    """
    n = len(data)
    bit_reverse(data, bits)
    k = 0
    step = 1
    while step < n:
        span = step << 1
        for j in range(step):
            w = factors[k]
            k += 1
            t = w * data[j + step::span]
            data[j + step::span] = data[j::span] - t
            data[j::span] += t
        step = span


def transform(data: np.ndarray, plan: Plan) -> None:
    """Transform a complex buffer in place according to the plan."""
    check_buffer(data, plan)
    if data.dtype != complex_dtype(plan.dtype):
        raise TypeError(f"buffer of type {data.dtype} does not match a {plan.dtype} plan, expected {complex_dtype(plan.dtype)}")
    butterflies(data, plan.factors, plan.bits)
    if plan.operation is Operation.INVERSE:
        data /= plan.n
