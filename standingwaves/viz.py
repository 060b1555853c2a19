# standingwaves/viz.py
from __future__ import annotations
import math
from typing import Sequence
import plotly.graph_objects as go

from .config import BUCKET_WIDTH
from .bands import FrequencyAmplitude


# -----------------------------
# Colors / styles
# -----------------------------

CURVE_LINE = "rgb(255, 99, 132)"
CURVE_FILL = "rgba(255, 99, 132, 0.5)"
ZERO_LINE = "#6fa1c4"
GRID_C = "rgba(120,120,120,0.25)"


# -----------------------------
# Labels
# -----------------------------

def format_length(meters: float) -> str:
    """Whole centimetres below 1 m, otherwise metres cut to two decimals: '85 cm', '1.4 m'."""
    if meters < 1:
        return f"{math.floor(meters * 100)} cm"
    return f"{math.floor(meters * 100) / 100:g} m"


# -----------------------------
# Frequency response chart
# -----------------------------

def frequency_response_figure(curve: Sequence[FrequencyAmplitude],
                              bucket_width: float = BUCKET_WIDTH,
                              title: str = "Simulated Frequency Response") -> "go.Figure":
    # plot each bucket at its centre
    x = [p.frequency + bucket_width / 2 for p in curve]
    y = [p.amplitude for p in curve]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x, y=y,
        mode="lines+markers",
        line=dict(width=2, color=CURVE_LINE),
        marker=dict(size=4, color=CURVE_FILL),
        name="Response",
    ))

    fig.update_layout(
        title=dict(text=title, font=dict(size=32)),
        showlegend=False,
        margin=dict(l=50, r=20, t=70, b=40),
        xaxis=dict(title="Frequency (Hz)", type="log", gridcolor=GRID_C),
        yaxis=dict(title="Relative amplitude", range=[-1, 1], gridcolor=GRID_C,
                   zeroline=True, zerolinewidth=3, zerolinecolor=ZERO_LINE),
    )
    return fig
