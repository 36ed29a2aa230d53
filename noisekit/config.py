# noisekit/config.py
"""
Process-wide defaults: the default seed and fBm octave parameters.
"""

import logging
import os
import time
import warnings
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .hashing import to_int32

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "NOISEKIT_SEED"


def _parse_seed(raw: str) -> int:
    text = raw.strip()
    try:
        return int(text, 0)
    except ValueError:
        # base 0 refuses decimal literals such as "0123"
        return int(text, 10)


def resolve_default_seed(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Pick the process-wide default seed.

    NOISEKIT_SEED is used when it holds an integer (decimal, leading zeros
    allowed, or with a 0x, 0o or 0b prefix); otherwise the current time
    in milliseconds is used.

    Returns:
        Seed as a signed 32-bit value
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(SEED_ENV_VAR)
    if raw is not None:
        try:
            seed = to_int32(_parse_seed(raw))
        except ValueError:
            warnings.warn(f"{SEED_ENV_VAR}={raw!r} is not a decimal, 0x, 0o or 0b integer, "
                          "using a time-based seed")
        else:
            logger.debug(f"Default seed {seed} taken from {SEED_ENV_VAR}")
            return seed

    seed = to_int32(time.time_ns() // 1_000_000)
    logger.debug(f"Default seed {seed} taken from the clock")
    return seed


DEFAULT_SEED = resolve_default_seed()


@dataclass
class FbmParams:
    """Octave settings for fractal Brownian motion"""
    octaves: int = 4
    lacunarity: float = 2.0  # Frequency multiplier between octaves
    gain: float = 0.5        # Amplitude multiplier between octaves

    def __post_init__(self):
        if self.octaves < 0:
            raise ValueError(f"octaves must be non-negative, got {self.octaves}")
        if abs(self.gain) >= 1.0:
            warnings.warn(f"gain {self.gain} does not shrink the octaves; fBm will not converge")

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "FbmParams":
        """Build parameters from a mapping, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})
