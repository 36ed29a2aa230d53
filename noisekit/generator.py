# noisekit/generator.py
"""
Seeded front end over the noise functions.
"""

import logging
from typing import Optional, Union

import numpy as np

from .config import DEFAULT_SEED, FbmParams
from .fractal import fbm2, fbm3, fbm4, fbm2_array, fbm3_array, noise2, noise3, noise4
from .hashing import to_int32
from .simplex_noise import (
    eval2, eval3, eval4,
    eval2_array, eval3_array, eval4_array,
    flow2, flow3, flow2_array, flow3_array,
)

logger = logging.getLogger(__name__)

Number = Union[float, np.ndarray]


def _any_array(*values) -> bool:
    return any(isinstance(v, np.ndarray) for v in values)


def _no_array_deriv(deriv) -> None:
    if deriv is not None:
        raise ValueError("deriv is only supported for single points, not coordinate arrays")


class SimplexNoise:
    """Convenient interface bound to one seed and one set of fBm parameters"""

    def __init__(self, seed: Optional[int] = None, params: Optional[FbmParams] = None):
        """
        Args:
            seed: Seed for every evaluation; DEFAULT_SEED when omitted
            params: Octave settings used by the fbm_* methods
        """
        self.seed = to_int32(DEFAULT_SEED if seed is None else seed)
        self.params = params or FbmParams()
        logger.debug(f"SimplexNoise created with seed {self.seed} and {self.params}")

    def noise_2d(self, x: Number, y: Number) -> Number:
        """2D simplex noise"""
        if _any_array(x, y):
            return eval2_array(x, y, self.seed)
        return eval2(x, y, self.seed)

    def noise_3d(self, x: Number, y: Number, z: Number) -> Number:
        """3D simplex noise"""
        if _any_array(x, y, z):
            return eval3_array(x, y, z, self.seed)
        return eval3(x, y, z, self.seed)

    def noise_4d(self, x: Number, y: Number, z: Number, w: Number) -> Number:
        """4D simplex noise"""
        if _any_array(x, y, z, w):
            return eval4_array(x, y, z, w, self.seed)
        return eval4(x, y, z, w, self.seed)

    def flow_2d(self, x: Number, y: Number, radians: float) -> Number:
        if _any_array(x, y):
            return flow2_array(x, y, radians, self.seed)
        return flow2(x, y, radians, self.seed)

    def flow_3d(self, x: Number, y: Number, z: Number, radians: float) -> Number:
        if _any_array(x, y, z):
            return flow3_array(x, y, z, radians, self.seed)
        return flow3(x, y, z, radians, self.seed)

    def fbm_2d(self, x: Number, y: Number,
               deriv: Optional[np.ndarray] = None) -> Number:
        """
        Fractal noise using self.params

        Arrays are evaluated point by point without derivatives and reject
        deriv. For a single point the amplitude-weighted sum of per-octave
        derivatives can be written into deriv.
        """
        p = self.params
        if _any_array(x, y):
            _no_array_deriv(deriv)
            return fbm2_array(x, y, self.seed, p.octaves, p.lacunarity, p.gain)
        return fbm2((x, y), self.seed, p.octaves, p.lacunarity, p.gain, deriv)

    def fbm_3d(self, x: Number, y: Number, z: Number,
               deriv: Optional[np.ndarray] = None) -> Number:
        p = self.params
        if _any_array(x, y, z):
            _no_array_deriv(deriv)
            return fbm3_array(x, y, z, self.seed, p.octaves, p.lacunarity, p.gain)
        return fbm3((x, y, z), self.seed, p.octaves, p.lacunarity, p.gain, deriv)

    def fbm_4d(self, x: float, y: float, z: float, w: float,
               deriv: Optional[np.ndarray] = None) -> float:
        p = self.params
        return fbm4((x, y, z, w), self.seed, p.octaves, p.lacunarity, p.gain, deriv)

    def vector_2d(self, v, target: Optional[np.ndarray] = None) -> np.ndarray:
        return noise2(v, self.seed, target)

    def vector_3d(self, v, target: Optional[np.ndarray] = None) -> np.ndarray:
        return noise3(v, self.seed, target)

    def vector_4d(self, v, target: Optional[np.ndarray] = None) -> np.ndarray:
        return noise4(v, self.seed, target)

    def __repr__(self) -> str:
        return f"SimplexNoise(seed={self.seed}, params={self.params})"
