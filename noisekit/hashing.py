# noisekit/hashing.py
"""
32-bit integer hash used to pick lattice gradients.

The mixing steps follow the final mix of Bob Jenkins' lookup3
(http://burtleburtle.net/bob/c/lookup3.c). Every intermediate value is
wrapped to a signed 32-bit integer, so the output for a given seed is the
same on every platform. Callers must treat seeds as 32-bit values: wider
integers are wrapped, not rejected.
"""

from numba import jit

_MASK_32 = 0xFFFFFFFF
_SIGN_32 = 0x80000000
_WRAP_32 = 0x100000000


def to_int32(value: int) -> int:
    """Wrap an arbitrary Python integer to a signed 32-bit value."""
    value = int(value) & _MASK_32
    return value - _WRAP_32 if value >= _SIGN_32 else value


@jit(nopython=True, cache=True)
def _wrap(v):
    v &= _MASK_32
    if v >= _SIGN_32:
        v -= _WRAP_32
    return v


@jit(nopython=True, cache=True)
def _rot(v, k):
    # left shift combined with a sign-propagating right shift
    return _wrap((v << k) | (v >> (32 - k)))


@jit(nopython=True, cache=True)
def hash3(a, b, c):
    """
    Mix three integers into one signed 32-bit hash.

    Args:
        a, b, c: Integers already inside the int64 range

    Returns:
        Hash in [-2**31, 2**31)
    """
    a = _wrap(a)
    b = _wrap(b)
    c = _wrap(c)

    c = _wrap(c ^ b)
    c = _wrap(c - _rot(b, 14))
    a = _wrap(a ^ c)
    a = _wrap(a - _rot(c, 11))
    b = _wrap(b ^ a)
    b = _wrap(b - _rot(a, 25))
    c = _wrap(c ^ b)
    c = _wrap(c - _rot(b, 16))
    a = _wrap(a ^ c)
    a = _wrap(a - _rot(c, 4))
    b = _wrap(b ^ a)
    b = _wrap(b - _rot(a, 14))
    c = _wrap(c ^ b)
    c = _wrap(c - _rot(b, 24))
    return c
