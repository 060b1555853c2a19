from __future__ import annotations
import logging

import streamlit as st

# Local package (modularized)
from standingwaves import (
    # Config & geometry
    DEFAULT_CONFIG, Room, Position, Geometry, is_off_center,
    # Logging
    setup_logging,
)
from standingwaves.caching import frequency_curve_cached
from standingwaves.viz import frequency_response_figure, format_length

# ===== Streamlit setup =====
st.set_page_config(page_title="Standing Wave Explorer", layout="wide")
setup_logging(logging.INFO)

# Smallest listener distance from any surface and smallest gap to the opposite one (m)
MIN_POSITION = 0.5
MIN_GAP = 0.5
STEP = 0.05

# axis: (room key, position key, room label, position label, slider max, default room, default position)
AXES = {
    "width": ("room_width", "pos_left", "Room width", "Distance from left wall", 10.0, 3.5, 1.40),
    "depth": ("room_depth", "pos_front", "Room depth", "Distance from front wall", 10.0, 5.6, 1.6),
    "height": ("room_height", "pos_floor", "Room height", "Ear level height", 5.0, 2.5, 1.05),
}


def _init_state():
    for room_key, pos_key, _, _, _, room_default, pos_default in AXES.values():
        st.session_state.setdefault(room_key, room_default)
        st.session_state.setdefault(pos_key, pos_default)


def _center_left():
    st.session_state["pos_left"] = round(st.session_state["room_width"] / 2, 2)


def _axis_sliders(axis: str) -> tuple[float, float]:
    room_key, pos_key, room_label, pos_label, max_m, _, _ = AXES[axis]
    # one step above the tightest fit so the listener always has room to move
    room_dim = st.slider(f"{room_label} (m)", MIN_POSITION + MIN_GAP + STEP, max_m, key=room_key, step=STEP)

    # Bounds stay fixed: Streamlit resets a keyed slider whose min/max change.
    # Clamp into the (possibly just shrunk) room before the slider is drawn.
    pos_max = room_dim - MIN_GAP
    if st.session_state[pos_key] > pos_max:
        st.session_state[pos_key] = pos_max
    pos = st.slider(f"{pos_label} (m)", MIN_POSITION, max_m - MIN_GAP, key=pos_key, step=STEP)

    st.caption(f"{room_label}: {format_length(room_dim)} · {pos_label.lower()}: {format_length(pos)}")
    return room_dim, pos


# ===== Main UI =====
def main():
    st.title("Standing Wave Explorer")
    st.caption("Heuristic room-mode response at the listening position. Not a full acoustic simulation.")
    _init_state()

    with st.sidebar:
        st.subheader("Width")
        width, left = _axis_sliders("width")
        st.button("Center", on_click=_center_left, key="center", width="stretch")
        st.subheader("Depth")
        depth, front = _axis_sliders("depth")
        st.subheader("Height")
        height, floor = _axis_sliders("height")

    geometry = Geometry(Room(width, depth, height), Position(left, front, floor))
    cfg = DEFAULT_CONFIG

    curve = frequency_curve_cached(geometry.key(), cfg.key())
    if not curve:
        st.info("No standing waves fall inside the analysed frequency range for this geometry.")
    st.plotly_chart(frequency_response_figure(curve, cfg.bucket_width), width="stretch")

    if is_off_center(geometry):
        st.warning("Being horizontally off center will cause stereo image to be imbalanced")


if __name__ == "__main__":
    main()
