"""
Discrete Fourier transform of power-of-two lengths, in place.

There are three operations: forward, backward and inverse. The operation is
chosen by the Operation passed to Plan, which precomputes the twiddle factors
needed by transform(). Complex buffers are transformed directly; real buffers
are replaced by the positive frequency half of their spectrum, with the two
real bins (DC and Nyquist) stored in data[0] and data[1]. unpack() expands
that packed form into the full spectrum.

Example:

    import numpy as np
    from dft import Operation, Plan, transform

    plan = Plan(Operation.FORWARD, 512)
    data = np.full(512, 42.0 + 69.0j)
    transform(data, plan)

Reference: W. Press, S. Teukolsky, W. Vetterling, and B. Flannery,
"Numerical Recipes 3rd Edition: The Art of Scientific Computing",
Cambridge University Press, 2007.
"""

from dft.plan import Operation, Plan
from dft.real_transform import unpack
from dft.scalars import c, c32, c64
from dft.dispatch import transform

__all__ = ["Operation", "Plan", "transform", "unpack", "c", "c32", "c64"]
