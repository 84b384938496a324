import numpy as np

from dft import complex_transform, real_transform
from dft.plan import Plan

# Buffer implementations keyed by numpy dtype kind.
TRANSFORMS = {
    "c": complex_transform.transform,
    "f": real_transform.transform,
}


def transform(data: np.ndarray, plan: Plan) -> None:
    """
    Perform the transform in place.

    Complex buffers are transformed directly. Real buffers are replaced by
    (or read from) the packed half-spectrum: data[0] holds the DC bin,
    data[1] the Nyquist bin, and data[2k], data[2k+1] the real and imaginary
    parts of bin k.
    """
    kind = getattr(getattr(data, "dtype", None), "kind", None)
    try:
        impl = TRANSFORMS[kind]
    except KeyError:
        raise TypeError(f"cannot transform buffer of type {getattr(data, 'dtype', type(data).__name__)}") from None
    impl(data, plan)
