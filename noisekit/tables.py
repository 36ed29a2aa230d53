# noisekit/tables.py
"""
Constants and look-up tables shared by the simplex noise kernels.

All arrays are created once at import and marked read-only, so numba
kernels may freeze them as constants and threads may read them freely.
"""

import numpy as np

# ----------------------------------------------------------------------
# Skew / unskew factors
# ----------------------------------------------------------------------

F2 = 0.5 * (np.sqrt(3.0) - 1.0)
G2 = (3.0 - np.sqrt(3.0)) / 6.0
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0
F4 = (np.sqrt(5.0) - 1.0) / 4.0
G4 = (5.0 - np.sqrt(5.0)) / 20.0

# Offsets of the n-th corner after the first, n * G
G2_2 = 2.0 * G2
G3_2 = 2.0 * G3
G3_3 = 3.0 * G3
G4_2 = 2.0 * G4
G4_3 = 3.0 * G4
G4_4 = 4.0 * G4

# ----------------------------------------------------------------------
# Normalization and vector-noise steps
# ----------------------------------------------------------------------

# Squared falloff radius; must agree with the G constants above
RADIUS_SQ = 0.5

SCALE_2 = 64.0
SCALE_3 = 68.0
SCALE_4 = 54.0

STEP_2 = 1.0 / np.sqrt(2.0)
STEP_3 = 1.0 / np.sqrt(3.0)
STEP_4 = 0.5

# sqrt(2) / sqrt(3), used by the rotation basis tables
RT2_RT3 = np.sqrt(2.0) / np.sqrt(3.0)


def _frozen(rows, dtype=np.float64) -> np.ndarray:
    arr = np.array(rows, dtype=dtype)
    arr.flags.writeable = False
    return arr


# ----------------------------------------------------------------------
# Gradient tables
# ----------------------------------------------------------------------

GRAD_2 = _frozen([
    [-1.0, -1.0], [1.0, 0.0], [-1.0, 0.0], [1.0, 1.0],
    [-1.0, 1.0], [0.0, -1.0], [0.0, 1.0], [1.0, -1.0],
])

GRAD_3 = _frozen([
    [1.0, 0.0, 1.0], [0.0, 1.0, 1.0], [-1.0, 0.0, 1.0], [0.0, -1.0, 1.0],
    [1.0, 0.0, -1.0], [0.0, 1.0, -1.0], [-1.0, 0.0, -1.0], [0.0, -1.0, -1.0],
    [1.0, -1.0, 0.0], [1.0, 1.0, 0.0], [-1.0, 1.0, 0.0], [-1.0, -1.0, 0.0],
    # padding to 16 entries repeats four edge directions
    [1.0, 0.0, 1.0], [-1.0, 0.0, 1.0], [0.0, 1.0, -1.0], [0.0, -1.0, -1.0],
])

GRAD_4 = _frozen([
    [0, 1, 1, 1], [0, 1, 1, -1], [0, 1, -1, 1], [0, 1, -1, -1],
    [0, -1, 1, 1], [0, -1, 1, -1], [0, -1, -1, 1], [0, -1, -1, -1],
    [1, 0, 1, 1], [1, 0, 1, -1], [1, 0, -1, 1], [1, 0, -1, -1],
    [-1, 0, 1, 1], [-1, 0, 1, -1], [-1, 0, -1, 1], [-1, 0, -1, -1],
    [1, 1, 0, 1], [1, 1, 0, -1], [1, -1, 0, 1], [1, -1, 0, -1],
    [-1, 1, 0, 1], [-1, 1, 0, -1], [-1, -1, 0, 1], [-1, -1, 0, -1],
    [1, 1, 1, 0], [1, 1, -1, 0], [1, -1, 1, 0], [1, -1, -1, 0],
    [-1, 1, 1, 0], [-1, 1, -1, 0], [-1, -1, 1, 0], [-1, -1, -1, 0],
])

_R = RT2_RT3

# Flow basis: a rotated 3D gradient is cos(a) * U[h] + sin(a) * V[h]
GRAD3_U = _frozen([
    [1.0, 0.0, 1.0], [0.0, 1.0, 1.0], [-1.0, 0.0, 1.0], [0.0, -1.0, 1.0],
    [1.0, 0.0, -1.0], [0.0, 1.0, -1.0], [-1.0, 0.0, -1.0], [0.0, -1.0, -1.0],
    [_R, _R, _R], [-_R, _R, -_R], [-_R, -_R, _R], [_R, -_R, -_R],
    [-_R, _R, _R], [_R, -_R, _R], [_R, -_R, -_R], [-_R, _R, -_R],
])

GRAD3_V = _frozen([
    [-_R, _R, _R], [-_R, -_R, _R], [_R, -_R, _R], [_R, _R, _R],
    [-_R, -_R, -_R], [_R, -_R, -_R], [_R, _R, -_R], [-_R, _R, -_R],
    [1.0, -1.0, 0.0], [1.0, 1.0, 0.0], [-1.0, 1.0, 0.0], [-1.0, -1.0, 0.0],
    [1.0, 0.0, 1.0], [-1.0, 0.0, 1.0], [0.0, 1.0, -1.0], [0.0, -1.0, -1.0],
])

# ----------------------------------------------------------------------
# 4D corner ranking
# ----------------------------------------------------------------------

# Indexed by the 6-bit pattern
#   (x0>y0)<<5 | (x0>z0)<<4 | (y0>z0)<<3 | (x0>w0)<<2 | (y0>w0)<<1 | (z0>w0)
# Each row gives the rank (0..3) of x, y, z, w. Inconsistent patterns
# cannot occur and hold zeros.
PERMUTE_4 = _frozen([
    [0, 1, 2, 3], [0, 1, 3, 2], [0, 0, 0, 0], [0, 2, 3, 1],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [1, 2, 3, 0],
    [0, 2, 1, 3], [0, 0, 0, 0], [0, 3, 1, 2], [0, 3, 2, 1],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [1, 3, 2, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [1, 2, 0, 3], [0, 0, 0, 0], [1, 3, 0, 2], [0, 0, 0, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [2, 3, 0, 1], [2, 3, 1, 0],
    [1, 0, 2, 3], [1, 0, 3, 2], [0, 0, 0, 0], [0, 0, 0, 0],
    [0, 0, 0, 0], [2, 0, 3, 1], [0, 0, 0, 0], [2, 1, 3, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [2, 0, 1, 3], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [3, 0, 1, 2], [3, 0, 2, 1], [0, 0, 0, 0], [3, 1, 2, 0],
    [2, 1, 0, 3], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0],
    [3, 1, 0, 2], [0, 0, 0, 0], [3, 2, 0, 1], [3, 2, 1, 0],
], dtype=np.int64)
