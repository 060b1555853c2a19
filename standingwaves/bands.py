# standingwaves/bands.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging
import numpy as np

from .config import ModeConfig, DEFAULT_CONFIG
from .modes import StandingWave

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrequencyAmplitude:
    frequency: float  # bucket start (Hz)
    amplitude: float  # mean-centred


def waves_to_arrays(waves: Sequence[StandingWave]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    f = np.fromiter((w.frequency for w in waves), dtype=float, count=len(waves))
    a = np.fromiter((w.amplitude for w in waves), dtype=float, count=len(waves))
    wt = np.fromiter((w.weight for w in waves), dtype=float, count=len(waves))
    return f, a, wt


def bucket_starts(cfg: Optional[ModeConfig] = None) -> np.ndarray:
    """Start frequency of every bucket covering [min_frequency, max_frequency)."""
    cfg = cfg or DEFAULT_CONFIG
    n = int(np.ceil((cfg.max_frequency - cfg.min_frequency) / cfg.bucket_width))
    return cfg.min_frequency + np.arange(n) * cfg.bucket_width


def build_frequency_curve(waves: Sequence[StandingWave],
                          cfg: Optional[ModeConfig] = None) -> List[FrequencyAmplitude]:
    """
    Weighted-mean amplitude per fixed-width frequency bucket, shifted so the
    curve averages to zero. Buckets without any wave are left out, not zeroed.
    """
    cfg = cfg or DEFAULT_CONFIG
    starts = bucket_starts(cfg)
    if len(waves) == 0 or starts.size == 0:
        return []

    f, a, wt = waves_to_arrays(waves)

    # nan / out-of-range frequencies never satisfy these
    with np.errstate(invalid="ignore"):
        idx = np.floor((f - cfg.min_frequency) / cfg.bucket_width)
        inside = (idx >= 0) & (idx < starts.size)
    idx = idx[inside].astype(np.int64)

    weighted = np.bincount(idx, weights=a[inside] * wt[inside], minlength=starts.size)
    weights = np.bincount(idx, weights=wt[inside], minlength=starts.size)
    counts = np.bincount(idx, minlength=starts.size)

    use = counts > 0
    if not np.any(use):
        return []

    amps = weighted[use] / weights[use]
    amps = amps - amps.mean()

    logger.debug("frequency curve: %d of %d buckets populated", int(use.sum()), starts.size)
    return [FrequencyAmplitude(frequency=float(fr), amplitude=float(am))
            for fr, am in zip(starts[use], amps)]
