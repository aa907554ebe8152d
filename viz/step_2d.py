from __future__ import annotations

import math

import numpy as np
import plotly.graph_objects as go

from noisekit.gradient_noise_2d import gradient_noise_2d_to_1d
from noisekit.vectors import cubic, quintic

_ACCENT = "#ffb000"
_FAINT = "rgba(255,255,255,0.55)"

# Simplex corners stop contributing beyond this distance.
SIMPLEX_RADIUS = math.sqrt(0.5)


def _finish(fig: go.Figure, *, title: str, height: int) -> go.Figure:
    fig.update_layout(
        title=title,
        height=height,
        margin=dict(l=0, r=0, t=40, b=0),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        legend=dict(orientation="h"),
    )
    return fig


def gradient_field_figure(debug: dict, *, steps: int = 48) -> go.Figure:
    """Gradient noise over the inspected cell with the hashed corner vectors.

    Arrows are drawn at their raw length: `random_noise_2d_to_2d` returns
    vectors in [-1, 1)^2, not unit gradients.
    """

    steps = max(4, int(steps))
    ix = float(debug["cell"]["ix"])
    iy = float(debug["cell"]["iy"])
    hash_params = debug["hash"]

    t = np.linspace(0.0, 1.0, steps)
    xg, yg = np.meshgrid(ix + t, iy + t)
    z = gradient_noise_2d_to_1d(
        (xg, yg),
        debug["kernel"],
        v1=hash_params["v1"],
        v2=hash_params["v2"],
        a=hash_params["a"],
    )

    fig = go.Figure(
        go.Heatmap(x=ix + t, y=iy + t, z=z, colorscale="RdBu", zmid=0.0, showscale=False)
    )

    origins = {"c00": (0.0, 0.0), "c10": (1.0, 0.0), "c01": (0.0, 1.0), "c11": (1.0, 1.0)}
    for key, (ox, oy) in origins.items():
        c = debug["corners"][key]
        x0, y0 = ix + ox, iy + oy
        x1, y1 = x0 + 0.5 * c["gx"], y0 + 0.5 * c["gy"]
        length = math.hypot(c["gx"], c["gy"])
        fig.add_trace(
            go.Scatter(
                x=[x0, x1],
                y=[y0, y1],
                mode="lines+markers",
                marker=dict(symbol=["circle", "arrow"], angleref="previous", size=[7, 12]),
                line=dict(color="black", width=2),
                hovertext=f"{key} g=({c['gx']:.3f}, {c['gy']:.3f}) |g|={length:.3f} dot={c['dot']:.3f}",
                hoverinfo="text",
                showlegend=False,
            )
        )

    fig.add_trace(
        go.Scatter(
            x=[debug["input"]["x"]],
            y=[debug["input"]["y"]],
            mode="markers",
            marker=dict(size=11, color=_ACCENT, line=dict(color="black", width=1)),
            hovertext=f"noise={debug['noise']:.4f}",
            hoverinfo="text",
            showlegend=False,
        )
    )
    fig.update_yaxes(scaleanchor="x")
    return _finish(fig, title="Gradient noise: hashed corner vectors", height=420)


def value_blend_figure(debug: dict) -> go.Figure:
    """Corner values a..d next to the three terms that sum to the noise value."""

    corners = debug["corners"]
    terms = debug["terms"]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=["a", "b", "c", "d"],
            y=[corners[k] for k in ("a", "b", "c", "d")],
            name="corner hash",
            marker_color=_FAINT,
        )
    )
    fig.add_trace(
        go.Bar(
            x=["mix(a, b, u)", "(c-a)·v·(1-u)", "(d-b)·u·v"],
            y=[terms["lerp"], terms["edge_y"], terms["diagonal"]],
            name="blend term",
            marker_color="rgba(0, 200, 255, 0.8)",
        )
    )
    fig.add_hline(y=debug["noise"], line_dash="dot", line_color=_ACCENT)
    weights = debug["weights"]
    return _finish(
        fig,
        title=f"Value noise = {debug['noise']:.4f} (u={weights['u']:.3f}, v={weights['v']:.3f})",
        height=300,
    )


def simplex_triangle_figure(debug: dict) -> go.Figure:
    """The simplex containing the sample, with each corner's falloff disc."""

    corners = debug["corners"]
    px = [c["px"] for c in corners]
    py = [c["py"] for c in corners]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=px + [px[0]],
            y=py + [py[0]],
            mode="lines+markers+text",
            text=[f"x{k}: {c['contribution']:+.3f}" for k, c in enumerate(corners)] + [""],
            textposition="top center",
            line=dict(color=_FAINT, width=2),
            showlegend=False,
        )
    )
    for c in corners:
        fig.add_shape(
            type="circle",
            x0=c["px"] - SIMPLEX_RADIUS,
            x1=c["px"] + SIMPLEX_RADIUS,
            y0=c["py"] - SIMPLEX_RADIUS,
            y1=c["py"] + SIMPLEX_RADIUS,
            line=dict(color="rgba(0, 200, 255, 0.5)", dash="dot"),
            opacity=0.3 + 0.7 * min(1.0, c["falloff"] / 0.0625),
        )
    fig.add_trace(
        go.Scatter(
            x=[debug["input"]["x"]],
            y=[debug["input"]["y"]],
            mode="markers",
            marker=dict(size=11, color=_ACCENT),
            hovertext=f"noise={debug['noise']:.4f}",
            hoverinfo="text",
            showlegend=False,
        )
    )
    fig.update_yaxes(scaleanchor="x")
    middle = debug["middle"]
    step = "x" if middle["x"] == 1.0 else "y"
    return _finish(fig, title=f"Simplex cell (middle corner steps along {step})", height=420)


def kernel_curves_figure(*, t_value: float) -> go.Figure:
    t = np.linspace(0.0, 1.0, 129)
    tv = float(np.clip(t_value, 0.0, 1.0))

    fig = go.Figure()
    for name, fn in (("cubic", cubic), ("quintic", quintic)):
        fig.add_trace(go.Scatter(x=t, y=fn(t), mode="lines", name=name))
    fig.add_trace(
        go.Scatter(
            x=[tv, tv],
            y=[cubic(tv), quintic(tv)],
            mode="markers",
            marker=dict(size=9, color=_ACCENT),
            name=f"t={tv:.3f}",
        )
    )
    fig.update_xaxes(range=[0, 1])
    fig.update_yaxes(range=[0, 1])
    return _finish(fig, title="Interpolation kernels", height=260)
