from __future__ import annotations

import streamlit as st

from noisekit.gradient_noise_2d import debug_gradient_point
from noisekit.map2d import BASES, SIGNED_BASES, noise_map_2d, to_image
from noisekit.random_noise import (
    DEFAULT_1D_V1,
    DEFAULT_2D_V1,
    DEFAULT_2D_V2,
    DEFAULT_A,
    random_noise_2d_to_1d,
)
from noisekit.simplex_noise_2d import debug_simplex_point
from noisekit.value_noise_2d import debug_value_point
from viz.step_2d import (
    gradient_field_figure,
    kernel_curves_figure,
    simplex_triangle_figure,
    value_blend_figure,
)

st.set_page_config(
    page_title="Noise Functions",
    page_icon="~",
    layout="wide",
)


@st.cache_data(show_spinner=False)
def _render(
    basis: str,
    kernel: str,
    size: int,
    scale: float,
    v1: tuple[float, float],
    v2: tuple[float, float],
    a: float,
):
    z = noise_map_2d(
        basis=basis,
        width=size,
        height=size,
        scale=scale,
        kernel=kernel,
        v1=v1,
        v2=v2,
        a=a,
    )
    return to_image(z, signed=basis in SIGNED_BASES)


with st.sidebar:
    st.header("Noise")
    basis = st.selectbox("Basis", BASES, index=BASES.index("value"))
    kernel = st.radio("Interpolation", ["cubic", "quintic"], horizontal=True)
    size = int(st.select_slider("Resolution", options=[64, 128, 256, 512], value=256))
    scale = float(st.slider("Scale", 1.0, 40.0, 10.0, 0.5))

    st.subheader("Hash")
    default_v1 = DEFAULT_2D_V1 if basis == "gradient" else DEFAULT_1D_V1
    v1x = st.number_input("v1.x", value=float(default_v1[0]), format="%.4f")
    v1y = st.number_input("v1.y", value=float(default_v1[1]), format="%.4f")
    v2x = st.number_input("v2.x", value=float(DEFAULT_2D_V2[0]), format="%.4f")
    v2y = st.number_input("v2.y", value=float(DEFAULT_2D_V2[1]), format="%.4f")
    a = st.number_input("a", value=float(DEFAULT_A), format="%.7f")
    if basis == "simplex":
        st.caption("Simplex noise uses its own permutation and ignores v1, v2 and a.")

st.title("Noise Functions")

img = _render(basis, kernel, size, scale, (v1x, v1y), (v2x, v2y), float(a))
st.image(img, caption=f"{basis} noise, {size}x{size}")

st.subheader(f"Inspect one {basis}-noise sample")
col_in, col_fig = st.columns([1, 2])
with col_in:
    px = float(st.number_input("x", value=2.3, step=0.05))
    py = float(st.number_input("y", value=4.7, step=0.05))

if basis == "random":
    value = random_noise_2d_to_1d((px, py), (v1x, v1y), float(a))
    with col_in:
        st.metric("hash", f"{float(value):.6f}")
    fig = None
elif basis == "value":
    dbg = debug_value_point(px, py, kernel, v=(v1x, v1y), a=float(a))
    fig = value_blend_figure(dbg)
elif basis == "gradient":
    dbg = debug_gradient_point(px, py, kernel, v1=(v1x, v1y), v2=(v2x, v2y), a=float(a))
    fig = gradient_field_figure(dbg)
else:
    dbg = debug_simplex_point(px, py)
    fig = simplex_triangle_figure(dbg)

if fig is not None:
    with col_in:
        st.metric("noise", f"{dbg['noise']:.4f}")
        st.json(dbg["corners"], expanded=False)
    with col_fig:
        st.plotly_chart(fig, use_container_width=True)

if basis in {"value", "gradient"}:
    st.plotly_chart(
        kernel_curves_figure(t_value=dbg["relative"]["xf"]),
        use_container_width=True,
    )
