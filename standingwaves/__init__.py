# standingwaves/__init__.py
from __future__ import annotations

# ---- Public config / constants ----
from .config import (
    ModeConfig,
    DEFAULT_CONFIG,
    ANGLE_STEP,
    SPEED_OF_SOUND,
    MIN_FREQUENCY,
    MAX_FREQUENCY,
    MAX_ORDER,
    BUCKET_WIDTH,
    ANGLE_WEIGHT_FLOOR,
    DIFFUSION_REFERENCE_LENGTH,
)

# ---- Trig table ----
from .trig import (
    TrigCache,
    TrigTableError,
    DEFAULT_TRIG,
    trig_cache,
    abs_sin,
    abs_cos,
    inclusive_range,
)

# ---- Geometry / plane distances ----
from .geometry import (
    Room,
    Position,
    Geometry,
    PlaneDistances,
    plane_distances,
    is_off_center,
)

# ---- Standing waves ----
from .modes import (
    StandingWave,
    standing_waves_for_direction,
    compute_wave_field,
)

# ---- Frequency curve ----
from .bands import (
    FrequencyAmplitude,
    waves_to_arrays,
    bucket_starts,
    build_frequency_curve,
)

# ---- Logging ----
from .logging_config import setup_logging

__all__ = [
    # Config
    "ModeConfig", "DEFAULT_CONFIG", "ANGLE_STEP", "SPEED_OF_SOUND",
    "MIN_FREQUENCY", "MAX_FREQUENCY", "MAX_ORDER", "BUCKET_WIDTH",
    "ANGLE_WEIGHT_FLOOR", "DIFFUSION_REFERENCE_LENGTH",
    # Trig
    "TrigCache", "TrigTableError", "DEFAULT_TRIG", "trig_cache",
    "abs_sin", "abs_cos", "inclusive_range",
    # Geometry
    "Room", "Position", "Geometry", "PlaneDistances", "plane_distances",
    "is_off_center",
    # Modes
    "StandingWave", "standing_waves_for_direction", "compute_wave_field",
    # Curve
    "FrequencyAmplitude", "waves_to_arrays", "bucket_starts", "build_frequency_curve",
    # Logging
    "setup_logging",
]
