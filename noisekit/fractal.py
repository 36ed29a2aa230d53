# noisekit/fractal.py
"""
Noise built on top of the base simplex evaluators: fractal Brownian
motion (fBm) and vector-valued noise.
"""

import logging
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_SEED
from .simplex_noise import (
    _check_out, _store,
    eval2, eval3, eval4,
    eval2_array, eval3_array,
)
from .tables import STEP_2, STEP_3, STEP_4

logger = logging.getLogger(__name__)


def _components(v, size: int) -> Tuple[float, ...]:
    arr = np.asarray(v, dtype=np.float64)
    if arr.shape != (size,):
        raise ValueError(f"Expected a {size}-component vector, got shape {arr.shape}")
    return tuple(float(c) for c in arr)

# ----------------------------------------------------------------------
# Fractal Brownian motion
# ----------------------------------------------------------------------

def _fbm(evaluate: Callable, size: int, v, seed: int, octaves: int,
         lacunarity: float, gain: float, deriv) -> float:
    coords = _components(v, size)
    want = deriv is not None
    if want:
        _check_out(deriv, size, "deriv")

    total = np.zeros(size, dtype=np.float64) if want else None
    octave_deriv = np.empty(size, dtype=np.float64) if want else None

    frequency = 1.0
    amplitude = 0.5
    value = 0.0
    for _ in range(octaves):
        scaled = [c * frequency for c in coords]
        value += evaluate(*scaled, seed, octave_deriv) * amplitude
        if want:
            total += octave_deriv * amplitude
        frequency *= lacunarity
        amplitude *= gain

    if want:
        _store(deriv, total)
    return value


def fbm2(v: Sequence[float], seed: int = DEFAULT_SEED, octaves: int = 4,
         lacunarity: float = 2.0, gain: float = 0.5,
         deriv: Optional[np.ndarray] = None) -> float:
    """
    Fractal Brownian motion over 2D simplex noise.

    Each octave samples eval2 at v * frequency and adds the result times
    amplitude. Frequency starts at 1 and is multiplied by lacunarity per
    octave; amplitude starts at 0.5 and is multiplied by gain.

    Args:
        v: Input coordinate (2 components)
        seed: Seed shared by all octaves
        octaves: Number of octaves; 0 yields 0.0
        lacunarity: Frequency multiplier between octaves
        gain: Amplitude multiplier between octaves
        deriv: Optional 2-component buffer receiving the amplitude-weighted
            sum of per-octave derivatives. Each octave's derivative is taken
            at v * frequency and is not scaled by frequency, so this is not
            the true gradient of the result.

    Returns:
        Sum of the octaves
    """
    return _fbm(eval2, 2, v, seed, octaves, lacunarity, gain, deriv)


def fbm3(v: Sequence[float], seed: int = DEFAULT_SEED, octaves: int = 4,
         lacunarity: float = 2.0, gain: float = 0.5,
         deriv: Optional[np.ndarray] = None) -> float:
    """Fractal Brownian motion over 3D simplex noise, see fbm2."""
    return _fbm(eval3, 3, v, seed, octaves, lacunarity, gain, deriv)


def fbm4(v: Sequence[float], seed: int = DEFAULT_SEED, octaves: int = 4,
         lacunarity: float = 2.0, gain: float = 0.5,
         deriv: Optional[np.ndarray] = None) -> float:
    """Fractal Brownian motion over 4D simplex noise, see fbm2."""
    return _fbm(eval4, 4, v, seed, octaves, lacunarity, gain, deriv)


def fbm2_array(x: np.ndarray, y: np.ndarray, seed: int = DEFAULT_SEED,
               octaves: int = 4, lacunarity: float = 2.0,
               gain: float = 0.5) -> np.ndarray:
    """fBm over coordinate grids; element-wise equal to fbm2"""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    logger.debug(f"2D fBm batch, {octaves} octaves")
    result = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    frequency = 1.0
    amplitude = 0.5

    for _ in range(octaves):
        result += amplitude * eval2_array(x * frequency, y * frequency, seed)
        frequency *= lacunarity
        amplitude *= gain

    return result


def fbm3_array(x: np.ndarray, y: np.ndarray, z: np.ndarray,
               seed: int = DEFAULT_SEED, octaves: int = 4,
               lacunarity: float = 2.0, gain: float = 0.5) -> np.ndarray:
    """fBm over 3D coordinate grids; element-wise equal to fbm3"""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)
    logger.debug(f"3D fBm batch, {octaves} octaves")
    result = np.zeros(np.broadcast(x, y, z).shape, dtype=np.float64)
    frequency = 1.0
    amplitude = 0.5

    for _ in range(octaves):
        result += amplitude * eval3_array(x * frequency, y * frequency,
                                          z * frequency, seed)
        frequency *= lacunarity
        amplitude *= gain

    return result

# ----------------------------------------------------------------------
# Vector-valued noise
# ----------------------------------------------------------------------

def _vector_noise(evaluate: Callable, size: int, step_factor: float, v,
                  seed: int, target, derivs) -> np.ndarray:
    coords = _components(v, size)
    if target is None:
        target = np.zeros(size, dtype=np.float64)
    else:
        _check_out(target, size, "target")

    # channel a is sampled with axis a shifted by step
    step = float(np.linalg.norm(coords)) * step_factor
    values = []
    for axis in range(size):
        shifted = list(coords)
        shifted[axis] += step
        values.append(evaluate(*shifted, seed, derivs[axis]))

    _store(target, values)
    return target


def noise2(v: Sequence[float], seed: int = DEFAULT_SEED,
           target: Optional[np.ndarray] = None,
           x_deriv: Optional[np.ndarray] = None,
           y_deriv: Optional[np.ndarray] = None) -> np.ndarray:
    """
    2D noise with a 2D output.

    Component a of the result is eval2 at v with a step of
    |v| / sqrt(2) added to axis a. The matching derivative goes to
    x_deriv or y_deriv when given.

    Returns:
        target, or a new array when target is None
    """
    return _vector_noise(eval2, 2, STEP_2, v, seed, target, (x_deriv, y_deriv))


def noise3(v: Sequence[float], seed: int = DEFAULT_SEED,
           target: Optional[np.ndarray] = None,
           x_deriv: Optional[np.ndarray] = None,
           y_deriv: Optional[np.ndarray] = None,
           z_deriv: Optional[np.ndarray] = None) -> np.ndarray:
    """3D noise with a 3D output; the step is |v| / sqrt(3). See noise2."""
    return _vector_noise(eval3, 3, STEP_3, v, seed, target,
                         (x_deriv, y_deriv, z_deriv))


def noise4(v: Sequence[float], seed: int = DEFAULT_SEED,
           target: Optional[np.ndarray] = None,
           x_deriv: Optional[np.ndarray] = None,
           y_deriv: Optional[np.ndarray] = None,
           z_deriv: Optional[np.ndarray] = None,
           w_deriv: Optional[np.ndarray] = None) -> np.ndarray:
    """4D noise with a 4D output; the step is |v| / 2. See noise2."""
    return _vector_noise(eval4, 4, STEP_4, v, seed, target,
                         (x_deriv, y_deriv, z_deriv, w_deriv))
