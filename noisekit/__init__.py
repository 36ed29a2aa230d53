"""noisekit public API."""

import logging

from .config import DEFAULT_SEED, FbmParams, resolve_default_seed
from .hashing import hash3, to_int32
from .simplex_noise import (
    gradient2,
    gradient3,
    gradient4,
    gradient_rot2,
    gradient_rot3,
    eval2,
    eval3,
    eval4,
    flow2,
    flow3,
    eval2_array,
    eval3_array,
    eval4_array,
    flow2_array,
    flow3_array,
)
from .fractal import (
    fbm2,
    fbm3,
    fbm4,
    fbm2_array,
    fbm3_array,
    noise2,
    noise3,
    noise4,
)
from .generator import SimplexNoise

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_SEED",
    "FbmParams",
    "resolve_default_seed",
    "hash3",
    "to_int32",
    "gradient2",
    "gradient3",
    "gradient4",
    "gradient_rot2",
    "gradient_rot3",
    "eval2",
    "eval3",
    "eval4",
    "flow2",
    "flow3",
    "eval2_array",
    "eval3_array",
    "eval4_array",
    "flow2_array",
    "flow3_array",
    "fbm2",
    "fbm3",
    "fbm4",
    "fbm2_array",
    "fbm3_array",
    "noise2",
    "noise3",
    "noise4",
    "SimplexNoise",
]

__version__ = "0.1.0"
