import numpy as np

# A complex number with 32-bit parts.
c32 = np.complex64

# A complex number with 64-bit parts.
c64 = np.complex128

_COMPLEX_OF = {
    np.dtype(np.float32): np.dtype(c32),
    np.dtype(np.float64): np.dtype(c64),
}


def c(re, im, dtype=c64):
    """Build a complex scalar of the given type from its two parts."""
    return np.dtype(dtype).type(complex(re, im))


def complex_dtype(real_dtype) -> np.dtype:
    """Complex type whose parts have the given real floating type."""
    real_dtype = np.dtype(real_dtype)
    if real_dtype not in _COMPLEX_OF:
        raise TypeError(f"unsupported floating type {real_dtype}, expected float32 or float64")
    return _COMPLEX_OF[real_dtype]
