import numpy as np


def reverse_bits(i: int, bits: int) -> int:
    """Reverse the lowest `bits` bits of i."""
    r = 0
    for _ in range(bits):
        r = (r << 1) | (i & 1)
        i >>= 1
    return r


def bit_reverse(data: np.ndarray, bits: int) -> None:
    """
    Reorder data in place into bit-reversal order over `bits`-bit indices.

    The length must be 2**bits. The reversed index j is carried along
    incrementally: adding one to a reversed counter means clearing the
    leading ones from the top and setting the next bit. Each pair is swapped
    once, when i < j.
    """
    n = 1 << bits
    if len(data) != n:
        raise ValueError(f"buffer has {len(data)} elements, {bits}-bit indices need {n}")
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            data[i], data[j] = data[j], data[i]
