# standingwaves/config.py
from __future__ import annotations
from dataclasses import dataclass, astuple

# Angular sampling resolution (deg). Must divide 180 so table lookups stay aligned.
ANGLE_STEP: float = 2

SPEED_OF_SOUND: float = 343.0  # m/s

# Analysis range (Hz)
MIN_FREQUENCY: float = 20.0
MAX_FREQUENCY: float = 500.0

# Highest wave order evaluated per direction
MAX_ORDER: int = 50

# Curve resolution (Hz)
BUCKET_WIDTH: float = 5.0

# -----------------------------
# Heuristic weighting
# -----------------------------
# Empirical perceptual weights, not derived from physics. Changing any of
# these changes the curve.

# Added to the squared |cos(2*angle)| terms so diagonal (45 deg) directions
# keep a little weight instead of none.
ANGLE_WEIGHT_FLOOR: float = 0.1

# Weight is divided by max(this, wall-to-wall length in m): long cavities
# diffuse, and an endless corridor must not dominate.
DIFFUSION_REFERENCE_LENGTH: float = 1.0


@dataclass(frozen=True)
class ModeConfig:
    angle_step: float = ANGLE_STEP
    c: float = SPEED_OF_SOUND
    min_frequency: float = MIN_FREQUENCY
    max_frequency: float = MAX_FREQUENCY
    max_order: int = MAX_ORDER
    bucket_width: float = BUCKET_WIDTH

    def __post_init__(self):
        if self.angle_step <= 0 or 180 % self.angle_step != 0:
            raise ValueError(f"angle_step must be a positive divisor of 180, got {self.angle_step}")
        if self.c <= 0:
            raise ValueError(f"speed of sound must be positive, got {self.c}")
        if not 0 < self.min_frequency < self.max_frequency:
            raise ValueError(
                f"need 0 < min_frequency < max_frequency, got {self.min_frequency}..{self.max_frequency}"
            )
        if int(self.max_order) < 1:
            raise ValueError(f"max_order must be >= 1, got {self.max_order}")
        if self.bucket_width <= 0:
            raise ValueError(f"bucket_width must be positive, got {self.bucket_width}")

    def key(self) -> tuple:
        """Plain tuple for cache keys; ``ModeConfig(*key)`` rebuilds it."""
        return astuple(self)


DEFAULT_CONFIG = ModeConfig()
