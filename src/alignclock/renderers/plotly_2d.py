"""Plotly 2D animated shadow renderer.

Turns animate_shadows() output into a figure with one Plotly frame per
animation step and a play button.
"""

from collections.abc import Sequence

import numpy as np
import plotly.graph_objects as go

from alignclock.models import PlanetPosition, Star

_BG = "#050a1a"
_STAR_COLOR = "gold"
_PLANET_COLOR = "#8ecae6"


def _planet_trace(frame: Sequence[PlanetPosition]) -> go.Scatter:
    shadows = np.array([p.shadow for p in frame], dtype=float)
    # Shadow lengths span orders of magnitude; log keeps markers readable.
    sizes = np.clip(np.log10(shadows + 1) * 2, 6, 30)
    return go.Scatter(
        x=[p.px for p in frame],
        y=[p.py for p in frame],
        mode="markers+text",
        text=[p.name for p in frame],
        textposition="top center",
        textfont=dict(color="#dddddd"),
        marker=dict(size=list(sizes), color=_PLANET_COLOR, line=dict(width=0)),
        customdata=shadows,
        hovertemplate="%{text}<br>shadow %{customdata:.2f}<extra></extra>",
        name="planets",
    )


def render_shadow_animation(
    frames: Sequence[Sequence[PlanetPosition]], star: Star
) -> go.Figure:
    """Render animation frames as a Plotly figure.

    Args:
        frames: animate_shadows() output.
        star: Star at the orbit centre.

    Returns:
        Plotly Figure object. The first frame is shown initially.
    """
    star_trace = go.Scatter(
        x=[star.x],
        y=[star.y],
        mode="markers",
        marker=dict(size=24, color=_STAR_COLOR),
        hoverinfo="text",
        hovertext=[star.name],
        name=star.name,
    )
    first = frames[0] if frames else ()

    fig = go.Figure(
        data=[star_trace, _planet_trace(first)],
        frames=[
            go.Frame(data=[star_trace, _planet_trace(frame)], name=str(i))
            for i, frame in enumerate(frames)
        ],
    )

    extent = max(
        (abs(p.px - star.x) for frame in frames for p in frame), default=100.0
    ) * 1.2 + 20
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=600,
        height=600,
        xaxis=dict(visible=False, range=[star.x - extent, star.x + extent]),
        yaxis=dict(
            visible=False,
            range=[star.y - extent, star.y + extent],
            scaleanchor="x",
        ),
        updatemenus=[
            dict(
                type="buttons",
                showactive=False,
                buttons=[
                    dict(
                        label="▶",
                        method="animate",
                        args=[None, dict(frame=dict(duration=120, redraw=False), fromcurrent=True)],
                    )
                ],
            )
        ],
    )
    return fig
