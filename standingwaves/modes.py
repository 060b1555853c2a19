# standingwaves/modes.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging
import math
import numpy as np

from .config import ModeConfig, DEFAULT_CONFIG, ANGLE_WEIGHT_FLOOR, DIFFUSION_REFERENCE_LENGTH
from .geometry import Geometry, plane_distances
from .trig import inclusive_range, trig_cache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandingWave:
    frequency: float  # Hz
    amplitude: float  # 0..1, where the listener sits in the cycle
    weight: float     # heuristic importance, >= 0


def standing_waves_for_direction(geometry: Geometry, alpha: float, beta: float,
                                 cfg: Optional[ModeConfig] = None) -> List[StandingWave]:
    cfg = cfg or DEFAULT_CONFIG
    trig = trig_cache(cfg.angle_step)

    # The two nearest planes bound the wave in this direction and its opposite.
    # nan (0/0 for a position on a wall) sorts last.
    distances = np.sort(plane_distances(geometry, alpha, beta, trig).as_array())
    d1, d2 = distances[0], distances[1]
    wall_to_wall = d1 + d2

    # Longer cavities diffuse energy; an endless corridor gets next to nothing.
    weight = 1.0 / max(DIFFUSION_REFERENCE_LENGTH, float(wall_to_wall))
    # Strongest when bouncing straight between parallel walls. |cos(2x)| is
    # 1 at 0, 90, 180... and 0 at 45, 135...; squaring narrows the peaks.
    weight = (weight
              * (ANGLE_WEIGHT_FLOOR + trig.abs_cos(2 * alpha) * trig.abs_cos(2 * alpha))
              * (ANGLE_WEIGHT_FLOOR + trig.abs_cos(2 * beta) * trig.abs_cos(2 * beta)))

    waves: List[StandingWave] = []
    with np.errstate(divide="ignore", invalid="ignore"):
        for n in range(1, int(cfg.max_order) + 1):
            half_waves = n / 2
            wave_length = wall_to_wall / half_waves
            frequency = cfg.c / wave_length

            # frequency grows with n: skip the low ones, stop at the first high one
            if frequency < cfg.min_frequency:
                continue
            if frequency > cfg.max_frequency:
                break

            phase = 2 * math.pi * d1 / wave_length
            waves.append(StandingWave(
                frequency=float(frequency),
                amplitude=abs(math.sin(phase)),
                weight=weight,
            ))

    return waves


def compute_wave_field(geometry: Geometry, cfg: Optional[ModeConfig] = None) -> List[StandingWave]:
    """
    Standing waves for every (alpha, beta) on the [-90, 90] grid, in sweep
    order. Coincident frequencies from different directions are all kept.
    """
    cfg = cfg or DEFAULT_CONFIG
    angles = inclusive_range(-90, 90, cfg.angle_step)

    waves: List[StandingWave] = []
    for alpha in angles:
        for beta in angles:
            waves.extend(standing_waves_for_direction(geometry, alpha, beta, cfg))

    logger.debug("wave field: %d waves over %d directions", len(waves), len(angles) ** 2)
    return waves
