# noisekit/simplex_noise.py
"""
2D, 3D and 4D simplex noise with analytic derivatives, plus 2D and 3D
flow noise (rotated gradients).

Based on "Simplex noise demystified" by Stefan Gustavson. Gradients are
picked by hashing the absolute lattice coordinates with the seed, so no
permutation table is needed and any 32-bit seed gives a distinct field.
The flow variant follows Simon Geilfus' construction.
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np
from numba import jit, prange

from .config import DEFAULT_SEED
from .hashing import hash3, to_int32
from .tables import (
    F2, G2, G2_2,
    F3, G3, G3_2, G3_3,
    F4, G4, G4_2, G4_3, G4_4,
    RADIUS_SQ, SCALE_2, SCALE_3, SCALE_4,
    GRAD_2, GRAD_3, GRAD_4, GRAD3_U, GRAD3_V, PERMUTE_4,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def _fast_floor(x: float) -> int:
    """Floor for both positive and negative numbers"""
    xi = int(x)
    return xi if x >= xi else xi - 1


def _check_out(out, size: int, name: str) -> None:
    if len(out) != size:
        raise ValueError(f"{name} must hold {size} components, got {len(out)}")


def _store(out, values: Sequence[float]) -> None:
    """Write values into a caller-supplied buffer component by component"""
    for axis, value in enumerate(values):
        out[axis] = value


def _flat(a: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(a, dtype=np.float64).ravel()

# ----------------------------------------------------------------------
# Gradient selection
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def _grad2(i, j, seed, cosa, sina, flow):
    g = GRAD_2[hash3(i, j, seed) & 0x7]
    if flow:
        return cosa * g[0] - sina * g[1], cosa * g[1] + sina * g[0]
    return g[0], g[1]


@jit(nopython=True, cache=True)
def _grad3(i, j, k, seed, cosa, sina, flow):
    h = hash3(i, j, hash3(k, seed, 0)) & 0xf
    if flow:
        u = GRAD3_U[h]
        v = GRAD3_V[h]
        return (cosa * u[0] + sina * v[0],
                cosa * u[1] + sina * v[1],
                cosa * u[2] + sina * v[2])
    g = GRAD_3[h]
    return g[0], g[1], g[2]


@jit(nopython=True, cache=True)
def _grad4(i, j, k, l, seed):
    g = GRAD_4[hash3(i, j, hash3(k, l, seed)) & 0x1f]
    return g[0], g[1], g[2], g[3]


def gradient2(i: int, j: int, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Gradient assigned to the 2D lattice corner (i, j)"""
    return np.array(_grad2(int(i), int(j), to_int32(seed), 1.0, 0.0, False))


def gradient3(i: int, j: int, k: int, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Gradient assigned to the 3D lattice corner (i, j, k)"""
    return np.array(_grad3(int(i), int(j), int(k), to_int32(seed), 1.0, 0.0, False))


def gradient4(i: int, j: int, k: int, l: int, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Gradient assigned to the 4D lattice corner (i, j, k, l)"""
    return np.array(_grad4(int(i), int(j), int(k), int(l), to_int32(seed)))


def gradient_rot2(i: int, j: int, seed: int = DEFAULT_SEED,
                  cosa: float = 1.0, sina: float = 0.0) -> np.ndarray:
    """2D gradient of corner (i, j) rotated in plane by the given angle"""
    return np.array(_grad2(int(i), int(j), to_int32(seed),
                           float(cosa), float(sina), True))


def gradient_rot3(i: int, j: int, k: int, seed: int = DEFAULT_SEED,
                  cosa: float = 1.0, sina: float = 0.0) -> np.ndarray:
    """
    3D flow gradient of corner (i, j, k).

    The hash selects two basis vectors u and v; the result is
    cosa * u + sina * v, so it sweeps continuously as the angle changes.
    """
    return np.array(_grad3(int(i), int(j), int(k), to_int32(seed),
                           float(cosa), float(sina), True))

# ----------------------------------------------------------------------
# 2D simplex noise
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def _simplex2(x, y, seed, cosa, sina, flow, want_deriv):
    """
    Evaluate 2D simplex (or flow) noise.

    Returns:
        Tuple (value, dx, dy); the derivative is zero unless want_deriv
    """
    # Skew into lattice space to find the cell
    s = (x + y) * F2
    i = _fast_floor(x + s)
    j = _fast_floor(y + s)

    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Lower or upper triangle
    i1 = 0
    j1 = 0
    if x0 > y0:
        i1 = 1
    else:
        j1 = 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + G2_2
    y2 = y0 - 1.0 + G2_2

    t20 = 0.0
    t40 = 0.0
    n0 = 0.0
    g0x = 0.0
    g0y = 0.0
    t0 = RADIUS_SQ - (x0 * x0 + y0 * y0)
    if t0 >= 0.0:
        g0x, g0y = _grad2(i, j, seed, cosa, sina, flow)
        t20 = t0 * t0
        t40 = t20 * t20
        n0 = g0x * x0 + g0y * y0

    t21 = 0.0
    t41 = 0.0
    n1 = 0.0
    g1x = 0.0
    g1y = 0.0
    t1 = RADIUS_SQ - (x1 * x1 + y1 * y1)
    if t1 >= 0.0:
        g1x, g1y = _grad2(i + i1, j + j1, seed, cosa, sina, flow)
        t21 = t1 * t1
        t41 = t21 * t21
        n1 = g1x * x1 + g1y * y1

    t22 = 0.0
    t42 = 0.0
    n2 = 0.0
    g2x = 0.0
    g2y = 0.0
    t2 = RADIUS_SQ - (x2 * x2 + y2 * y2)
    if t2 >= 0.0:
        g2x, g2y = _grad2(i + 1, j + 1, seed, cosa, sina, flow)
        t22 = t2 * t2
        t42 = t22 * t22
        n2 = g2x * x2 + g2y * y2

    dx = 0.0
    dy = 0.0
    if want_deriv:
        tmp0 = t20 * t0 * n0
        tmp1 = t21 * t1 * n1
        tmp2 = t22 * t2 * n2
        dx = -8.0 * (tmp0 * x0 + tmp1 * x1 + tmp2 * x2)
        dy = -8.0 * (tmp0 * y0 + tmp1 * y1 + tmp2 * y2)
        dx += t40 * g0x + t41 * g1x + t42 * g2x
        dy += t40 * g0y + t41 * g1y + t42 * g2y
        dx *= SCALE_2
        dy *= SCALE_2

    return SCALE_2 * (t40 * n0 + t41 * n1 + t42 * n2), dx, dy

# ----------------------------------------------------------------------
# 3D simplex noise
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def _simplex3(x, y, z, seed, cosa, sina, flow, want_deriv):
    """
    Evaluate 3D simplex (or flow) noise.

    Returns:
        Tuple (value, dx, dy, dz); the derivative is zero unless want_deriv
    """
    s = (x + y + z) * F3
    i = _fast_floor(x + s)
    j = _fast_floor(y + s)
    k = _fast_floor(z + s)

    t = (i + j + k) * G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Which of the six tetrahedra holds the point
    i1 = 0
    j1 = 0
    k1 = 0
    i2 = 0
    j2 = 0
    k2 = 0
    if x0 >= y0:
        if y0 >= z0:        # XYZ
            i1 = 1
            i2 = 1
            j2 = 1
        elif x0 >= z0:      # XZY
            i1 = 1
            i2 = 1
            k2 = 1
        else:               # ZXY
            k1 = 1
            i2 = 1
            k2 = 1
    else:
        if y0 < z0:         # ZYX
            k1 = 1
            j2 = 1
            k2 = 1
        elif x0 < z0:       # YZX
            j1 = 1
            j2 = 1
            k2 = 1
        else:               # YXZ
            j1 = 1
            i2 = 1
            j2 = 1

    x1 = x0 - i1 + G3
    y1 = y0 - j1 + G3
    z1 = z0 - k1 + G3
    x2 = x0 - i2 + G3_2
    y2 = y0 - j2 + G3_2
    z2 = z0 - k2 + G3_2
    x3 = x0 - 1.0 + G3_3
    y3 = y0 - 1.0 + G3_3
    z3 = z0 - 1.0 + G3_3

    t20 = 0.0
    t40 = 0.0
    n0 = 0.0
    g0x = 0.0
    g0y = 0.0
    g0z = 0.0
    t0 = RADIUS_SQ - (x0 * x0 + y0 * y0 + z0 * z0)
    if t0 >= 0.0:
        g0x, g0y, g0z = _grad3(i, j, k, seed, cosa, sina, flow)
        t20 = t0 * t0
        t40 = t20 * t20
        n0 = g0x * x0 + g0y * y0 + g0z * z0

    t21 = 0.0
    t41 = 0.0
    n1 = 0.0
    g1x = 0.0
    g1y = 0.0
    g1z = 0.0
    t1 = RADIUS_SQ - (x1 * x1 + y1 * y1 + z1 * z1)
    if t1 >= 0.0:
        g1x, g1y, g1z = _grad3(i + i1, j + j1, k + k1, seed, cosa, sina, flow)
        t21 = t1 * t1
        t41 = t21 * t21
        n1 = g1x * x1 + g1y * y1 + g1z * z1

    t22 = 0.0
    t42 = 0.0
    n2 = 0.0
    g2x = 0.0
    g2y = 0.0
    g2z = 0.0
    t2 = RADIUS_SQ - (x2 * x2 + y2 * y2 + z2 * z2)
    if t2 >= 0.0:
        g2x, g2y, g2z = _grad3(i + i2, j + j2, k + k2, seed, cosa, sina, flow)
        t22 = t2 * t2
        t42 = t22 * t22
        n2 = g2x * x2 + g2y * y2 + g2z * z2

    t23 = 0.0
    t43 = 0.0
    n3 = 0.0
    g3x = 0.0
    g3y = 0.0
    g3z = 0.0
    t3 = RADIUS_SQ - (x3 * x3 + y3 * y3 + z3 * z3)
    if t3 >= 0.0:
        g3x, g3y, g3z = _grad3(i + 1, j + 1, k + 1, seed, cosa, sina, flow)
        t23 = t3 * t3
        t43 = t23 * t23
        n3 = g3x * x3 + g3y * y3 + g3z * z3

    dx = 0.0
    dy = 0.0
    dz = 0.0
    if want_deriv:
        tmp0 = t20 * t0 * n0
        tmp1 = t21 * t1 * n1
        tmp2 = t22 * t2 * n2
        tmp3 = t23 * t3 * n3
        dx = -8.0 * (tmp0 * x0 + tmp1 * x1 + tmp2 * x2 + tmp3 * x3)
        dy = -8.0 * (tmp0 * y0 + tmp1 * y1 + tmp2 * y2 + tmp3 * y3)
        dz = -8.0 * (tmp0 * z0 + tmp1 * z1 + tmp2 * z2 + tmp3 * z3)
        dx += t40 * g0x + t41 * g1x + t42 * g2x + t43 * g3x
        dy += t40 * g0y + t41 * g1y + t42 * g2y + t43 * g3y
        dz += t40 * g0z + t41 * g1z + t42 * g2z + t43 * g3z
        dx *= SCALE_3
        dy *= SCALE_3
        dz *= SCALE_3

    value = SCALE_3 * (t40 * n0 + t41 * n1 + t42 * n2 + t43 * n3)
    return value, dx, dy, dz

# ----------------------------------------------------------------------
# 4D simplex noise
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def _simplex4(x, y, z, w, seed, want_deriv):
    """
    Evaluate 4D simplex noise.

    Returns:
        Tuple (value, dx, dy, dz, dw); the derivative is zero unless
        want_deriv
    """
    s = (x + y + z + w) * F4
    i = _fast_floor(x + s)
    j = _fast_floor(y + s)
    k = _fast_floor(z + s)
    l = _fast_floor(w + s)

    t = (i + j + k + l) * G4
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)
    w0 = w - (l - t)

    # Rank the offsets to pick one of the 24 simplices
    c = 0
    if x0 > y0:
        c |= 0x20
    if x0 > z0:
        c |= 0x10
    if y0 > z0:
        c |= 0x8
    if x0 > w0:
        c |= 0x4
    if y0 > w0:
        c |= 0x2
    if z0 > w0:
        c |= 0x1
    sc = PERMUTE_4[c]
    sc0 = sc[0]
    sc1 = sc[1]
    sc2 = sc[2]
    sc3 = sc[3]

    i1 = 1 if sc0 >= 3 else 0
    j1 = 1 if sc1 >= 3 else 0
    k1 = 1 if sc2 >= 3 else 0
    l1 = 1 if sc3 >= 3 else 0

    i2 = 1 if sc0 >= 2 else 0
    j2 = 1 if sc1 >= 2 else 0
    k2 = 1 if sc2 >= 2 else 0
    l2 = 1 if sc3 >= 2 else 0

    i3 = 1 if sc0 >= 1 else 0
    j3 = 1 if sc1 >= 1 else 0
    k3 = 1 if sc2 >= 1 else 0
    l3 = 1 if sc3 >= 1 else 0

    x1 = x0 - i1 + G4
    y1 = y0 - j1 + G4
    z1 = z0 - k1 + G4
    w1 = w0 - l1 + G4
    x2 = x0 - i2 + G4_2
    y2 = y0 - j2 + G4_2
    z2 = z0 - k2 + G4_2
    w2 = w0 - l2 + G4_2
    x3 = x0 - i3 + G4_3
    y3 = y0 - j3 + G4_3
    z3 = z0 - k3 + G4_3
    w3 = w0 - l3 + G4_3
    x4 = x0 - 1.0 + G4_4
    y4 = y0 - 1.0 + G4_4
    z4 = z0 - 1.0 + G4_4
    w4 = w0 - 1.0 + G4_4

    t20 = 0.0
    t40 = 0.0
    n0 = 0.0
    g0x = 0.0
    g0y = 0.0
    g0z = 0.0
    g0w = 0.0
    t0 = RADIUS_SQ - (x0 * x0 + y0 * y0 + z0 * z0 + w0 * w0)
    if t0 >= 0.0:
        g0x, g0y, g0z, g0w = _grad4(i, j, k, l, seed)
        t20 = t0 * t0
        t40 = t20 * t20
        n0 = g0x * x0 + g0y * y0 + g0z * z0 + g0w * w0

    t21 = 0.0
    t41 = 0.0
    n1 = 0.0
    g1x = 0.0
    g1y = 0.0
    g1z = 0.0
    g1w = 0.0
    t1 = RADIUS_SQ - (x1 * x1 + y1 * y1 + z1 * z1 + w1 * w1)
    if t1 >= 0.0:
        g1x, g1y, g1z, g1w = _grad4(i + i1, j + j1, k + k1, l + l1, seed)
        t21 = t1 * t1
        t41 = t21 * t21
        n1 = g1x * x1 + g1y * y1 + g1z * z1 + g1w * w1

    t22 = 0.0
    t42 = 0.0
    n2 = 0.0
    g2x = 0.0
    g2y = 0.0
    g2z = 0.0
    g2w = 0.0
    t2 = RADIUS_SQ - (x2 * x2 + y2 * y2 + z2 * z2 + w2 * w2)
    if t2 >= 0.0:
        g2x, g2y, g2z, g2w = _grad4(i + i2, j + j2, k + k2, l + l2, seed)
        t22 = t2 * t2
        t42 = t22 * t22
        n2 = g2x * x2 + g2y * y2 + g2z * z2 + g2w * w2

    t23 = 0.0
    t43 = 0.0
    n3 = 0.0
    g3x = 0.0
    g3y = 0.0
    g3z = 0.0
    g3w = 0.0
    t3 = RADIUS_SQ - (x3 * x3 + y3 * y3 + z3 * z3 + w3 * w3)
    if t3 >= 0.0:
        g3x, g3y, g3z, g3w = _grad4(i + i3, j + j3, k + k3, l + l3, seed)
        t23 = t3 * t3
        t43 = t23 * t23
        n3 = g3x * x3 + g3y * y3 + g3z * z3 + g3w * w3

    t24 = 0.0
    t44 = 0.0
    n4 = 0.0
    g4x = 0.0
    g4y = 0.0
    g4z = 0.0
    g4w = 0.0
    t4 = RADIUS_SQ - (x4 * x4 + y4 * y4 + z4 * z4 + w4 * w4)
    if t4 >= 0.0:
        g4x, g4y, g4z, g4w = _grad4(i + 1, j + 1, k + 1, l + 1, seed)
        t24 = t4 * t4
        t44 = t24 * t24
        n4 = g4x * x4 + g4y * y4 + g4z * z4 + g4w * w4

    dx = 0.0
    dy = 0.0
    dz = 0.0
    dw = 0.0
    if want_deriv:
        tmp0 = t20 * t0 * n0
        tmp1 = t21 * t1 * n1
        tmp2 = t22 * t2 * n2
        tmp3 = t23 * t3 * n3
        tmp4 = t24 * t4 * n4
        dx = -8.0 * (tmp0 * x0 + tmp1 * x1 + tmp2 * x2 + tmp3 * x3 + tmp4 * x4)
        dy = -8.0 * (tmp0 * y0 + tmp1 * y1 + tmp2 * y2 + tmp3 * y3 + tmp4 * y4)
        dz = -8.0 * (tmp0 * z0 + tmp1 * z1 + tmp2 * z2 + tmp3 * z3 + tmp4 * z4)
        dw = -8.0 * (tmp0 * w0 + tmp1 * w1 + tmp2 * w2 + tmp3 * w3 + tmp4 * w4)
        dx += t40 * g0x + t41 * g1x + t42 * g2x + t43 * g3x + t44 * g4x
        dy += t40 * g0y + t41 * g1y + t42 * g2y + t43 * g3y + t44 * g4y
        dz += t40 * g0z + t41 * g1z + t42 * g2z + t43 * g3z + t44 * g4z
        dw += t40 * g0w + t41 * g1w + t42 * g2w + t43 * g3w + t44 * g4w
        dx *= SCALE_4
        dy *= SCALE_4
        dz *= SCALE_4
        dw *= SCALE_4

    value = SCALE_4 * (t40 * n0 + t41 * n1 + t42 * n2 + t43 * n3 + t44 * n4)
    return value, dx, dy, dz, dw

# ----------------------------------------------------------------------
# Scalar API
# ----------------------------------------------------------------------

def eval2(x: float, y: float, seed: int = DEFAULT_SEED,
          deriv: Optional[np.ndarray] = None) -> float:
    """
    2D simplex noise

    Args:
        x, y: Coordinates
        seed: Seed, consumed as a 32-bit value
        deriv: Optional 2-component buffer receiving the gradient

    Returns:
        Noise value, roughly in [-1, 1]
    """
    want = deriv is not None
    if want:
        _check_out(deriv, 2, "deriv")
    value, dx, dy = _simplex2(float(x), float(y), to_int32(seed),
                              1.0, 0.0, False, want)
    if want:
        _store(deriv, (dx, dy))
    return value


def eval3(x: float, y: float, z: float, seed: int = DEFAULT_SEED,
          deriv: Optional[np.ndarray] = None) -> float:
    """
    3D simplex noise

    Args:
        x, y, z: Coordinates
        seed: Seed, consumed as a 32-bit value
        deriv: Optional 3-component buffer receiving the gradient

    Returns:
        Noise value, roughly in [-1, 1]
    """
    want = deriv is not None
    if want:
        _check_out(deriv, 3, "deriv")
    value, dx, dy, dz = _simplex3(float(x), float(y), float(z), to_int32(seed),
                                  1.0, 0.0, False, want)
    if want:
        _store(deriv, (dx, dy, dz))
    return value


def eval4(x: float, y: float, z: float, w: float, seed: int = DEFAULT_SEED,
          deriv: Optional[np.ndarray] = None) -> float:
    """
    4D simplex noise

    Args:
        x, y, z, w: Coordinates
        seed: Seed, consumed as a 32-bit value
        deriv: Optional 4-component buffer receiving the gradient

    Returns:
        Noise value, roughly in [-1, 1]
    """
    want = deriv is not None
    if want:
        _check_out(deriv, 4, "deriv")
    value, dx, dy, dz, dw = _simplex4(float(x), float(y), float(z), float(w),
                                      to_int32(seed), want)
    if want:
        _store(deriv, (dx, dy, dz, dw))
    return value


def flow2(x: float, y: float, radians: float = 0.0, seed: int = DEFAULT_SEED,
          deriv: Optional[np.ndarray] = None) -> float:
    """
    2D flow noise: simplex noise whose gradients are all rotated by
    `radians`. Animating the angle changes the field smoothly.
    """
    want = deriv is not None
    if want:
        _check_out(deriv, 2, "deriv")
    value, dx, dy = _simplex2(float(x), float(y), to_int32(seed),
                              math.cos(radians), math.sin(radians), True, want)
    if want:
        _store(deriv, (dx, dy))
    return value


def flow3(x: float, y: float, z: float, radians: float = 0.0,
          seed: int = DEFAULT_SEED, deriv: Optional[np.ndarray] = None) -> float:
    """3D flow noise, see gradient_rot3 for how gradients change with the angle."""
    want = deriv is not None
    if want:
        _check_out(deriv, 3, "deriv")
    value, dx, dy, dz = _simplex3(float(x), float(y), float(z), to_int32(seed),
                                  math.cos(radians), math.sin(radians), True, want)
    if want:
        _store(deriv, (dx, dy, dz))
    return value

# ----------------------------------------------------------------------
# Vectorized versions for arrays
# ----------------------------------------------------------------------

@jit(nopython=True, parallel=True, cache=True)
def _simplex2_array(x, y, seed, cosa, sina, flow):
    n = x.shape[0]
    result = np.empty(n, dtype=np.float64)
    for idx in prange(n):
        result[idx] = _simplex2(x[idx], y[idx], seed, cosa, sina, flow, False)[0]
    return result


@jit(nopython=True, parallel=True, cache=True)
def _simplex3_array(x, y, z, seed, cosa, sina, flow):
    n = x.shape[0]
    result = np.empty(n, dtype=np.float64)
    for idx in prange(n):
        result[idx] = _simplex3(x[idx], y[idx], z[idx], seed,
                                cosa, sina, flow, False)[0]
    return result


@jit(nopython=True, parallel=True, cache=True)
def _simplex4_array(x, y, z, w, seed):
    n = x.shape[0]
    result = np.empty(n, dtype=np.float64)
    for idx in prange(n):
        result[idx] = _simplex4(x[idx], y[idx], z[idx], w[idx], seed, False)[0]
    return result


def _broadcast(*coords):
    arrays = np.broadcast_arrays(*[np.asarray(c, dtype=np.float64) for c in coords])
    return arrays[0].shape, [_flat(a) for a in arrays]


def eval2_array(x, y, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Vectorized eval2 over broadcast coordinate arrays"""
    shape, (fx, fy) = _broadcast(x, y)
    logger.debug(f"2D simplex batch of shape {shape}")
    return _simplex2_array(fx, fy, to_int32(seed), 1.0, 0.0, False).reshape(shape)


def eval3_array(x, y, z, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Vectorized eval3 over broadcast coordinate arrays"""
    shape, (fx, fy, fz) = _broadcast(x, y, z)
    logger.debug(f"3D simplex batch of shape {shape}")
    return _simplex3_array(fx, fy, fz, to_int32(seed),
                           1.0, 0.0, False).reshape(shape)


def eval4_array(x, y, z, w, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Vectorized eval4 over broadcast coordinate arrays"""
    shape, (fx, fy, fz, fw) = _broadcast(x, y, z, w)
    logger.debug(f"4D simplex batch of shape {shape}")
    return _simplex4_array(fx, fy, fz, fw, to_int32(seed)).reshape(shape)


def flow2_array(x, y, radians: float = 0.0, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Vectorized flow2; one angle is shared by every point"""
    shape, (fx, fy) = _broadcast(x, y)
    logger.debug(f"2D flow batch of shape {shape} at {radians:.4f} rad")
    return _simplex2_array(fx, fy, to_int32(seed),
                           math.cos(radians), math.sin(radians), True).reshape(shape)


def flow3_array(x, y, z, radians: float = 0.0, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Vectorized flow3; one angle is shared by every point"""
    shape, (fx, fy, fz) = _broadcast(x, y, z)
    logger.debug(f"3D flow batch of shape {shape} at {radians:.4f} rad")
    return _simplex3_array(fx, fy, fz, to_int32(seed),
                           math.cos(radians), math.sin(radians), True).reshape(shape)
