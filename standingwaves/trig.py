# standingwaves/trig.py
from __future__ import annotations
import logging
import math
from functools import lru_cache
from typing import Dict, List

from .config import ANGLE_STEP

logger = logging.getLogger(__name__)


class TrigTableError(RuntimeError):
    """Aligned angle missing from the sine table (a bug, not bad input)."""


def inclusive_range(start: float, end: float, step: float) -> List[float]:
    """
    start, start+step, ... below end, then end itself even when the step
    does not land on it exactly.
    """
    assert step > 0
    out = []
    i = 0
    while start + i * step < end:
        out.append(start + i * step)
        i += 1
    out.append(end)
    return out


class TrigCache:
    """
    Absolute sine/cosine looked up from a table of sin(angle) for
    angle in [0, 90] at a fixed resolution. Read-only once built.
    """

    def __init__(self, step: float = ANGLE_STEP):
        if step <= 0 or 180 % step != 0:
            raise ValueError(f"step must be a positive divisor of 180, got {step}")
        self.step = step
        self._table: Dict[float, float] = {
            angle: math.sin(math.radians(angle)) for angle in inclusive_range(0, 90, step)
        }

    def __len__(self) -> int:
        return len(self._table)

    def abs_sin(self, angle_deg: float) -> float:
        if angle_deg % self.step != 0:
            logger.warning(
                "%s not divisible by %s, cannot use sine table", angle_deg, self.step
            )
            return abs(math.sin(math.radians(angle_deg)))

        angle = angle_deg
        while angle < 0:
            angle += 360
        while angle > 180:
            angle -= 180
        if angle > 90:
            angle = 180 - angle

        try:
            return self._table[angle]
        except KeyError:
            raise TrigTableError(
                f"{angle_deg} reduced to {angle}, which is not in the sine table (step {self.step})"
            ) from None

    def abs_cos(self, angle_deg: float) -> float:
        return self.abs_sin(90 - angle_deg)


@lru_cache(maxsize=None)
def trig_cache(step: float = ANGLE_STEP) -> TrigCache:
    return TrigCache(step)


# Built at import so no reader ever sees a half-filled table
DEFAULT_TRIG = trig_cache(ANGLE_STEP)


def abs_sin(angle_deg: float) -> float:
    return DEFAULT_TRIG.abs_sin(angle_deg)


def abs_cos(angle_deg: float) -> float:
    return DEFAULT_TRIG.abs_cos(angle_deg)
