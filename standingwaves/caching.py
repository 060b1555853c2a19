# standingwaves/caching.py
from __future__ import annotations

from typing import List

import streamlit as st

from .config import ModeConfig
from .geometry import Geometry
from .modes import StandingWave, compute_wave_field
from .bands import FrequencyAmplitude, build_frequency_curve


# Slider drags revisit the same geometries a lot; keys are plain tuples
# (Geometry.key(), ModeConfig.key()) so Streamlit can hash them cheaply.

@st.cache_data(show_spinner=False, max_entries=256)
def wave_field_cached(geometry_key: tuple, cfg_key: tuple) -> List[StandingWave]:
    return compute_wave_field(Geometry.from_key(geometry_key), ModeConfig(*cfg_key))


@st.cache_data(show_spinner=False, max_entries=256)
def frequency_curve_cached(geometry_key: tuple, cfg_key: tuple) -> List[FrequencyAmplitude]:
    waves = wave_field_cached(geometry_key, cfg_key)
    return build_frequency_curve(waves, ModeConfig(*cfg_key))
