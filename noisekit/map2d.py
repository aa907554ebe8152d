from __future__ import annotations

import logging
from typing import Callable

import numpy as np
from PIL import Image

from .gradient_noise_2d import gradient_noise_2d_to_1d
from .random_noise import (
    DEFAULT_1D_V1,
    DEFAULT_2D_V1,
    DEFAULT_2D_V2,
    DEFAULT_A,
    random_noise_2d_to_1d,
)
from .simplex_noise_2d import simplex_noise_2d_to_1d
from .value_noise_2d import value_noise_2d_to_1d
from .vectors import Color, Vec2, add, divide, interpolation_kernel, multiply, vec2

logger = logging.getLogger(__name__)

BASES = ("random", "value", "gradient", "simplex")
SIGNED_BASES = frozenset({"gradient", "simplex"})

DEFAULT_SCALE = 10.0


def _basis_fn(
    basis: str,
    *,
    kernel: str,
    v1: Vec2 | None,
    v2: Vec2 | None,
    a: float,
) -> Callable[[Vec2], np.ndarray]:
    kernel_fn = interpolation_kernel(kernel)
    if basis == "random":
        v = DEFAULT_1D_V1 if v1 is None else v1
        return lambda xy: random_noise_2d_to_1d(xy, v, a)
    if basis == "value":
        v = DEFAULT_1D_V1 if v1 is None else v1
        return lambda xy: value_noise_2d_to_1d(xy, kernel_fn, v=v, a=a)
    if basis == "gradient":
        g1 = DEFAULT_2D_V1 if v1 is None else v1
        g2 = DEFAULT_2D_V2 if v2 is None else v2
        return lambda xy: gradient_noise_2d_to_1d(xy, kernel_fn, v1=g1, v2=g2, a=a)
    if basis == "simplex":
        return simplex_noise_2d_to_1d
    raise ValueError(f"unknown basis: {basis}")


def noise_map_2d(
    *,
    basis: str,
    width: int,
    height: int,
    scale: float = DEFAULT_SCALE,
    kernel: str = "cubic",
    v1: Vec2 | None = None,
    v2: Vec2 | None = None,
    a: float = DEFAULT_A,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
    normalize: bool = False,
) -> np.ndarray:
    """Evaluate a noise basis over a pixel grid.

    Pixel (row, column) samples `(row, column) / (width, height) * scale`,
    shifted by the offsets. Returns a float64 array of shape (height, width).
    `v1`/`v2` default to the basis' own hash vectors; simplex ignores them.
    """

    basis = str(basis)
    fn = _basis_fn(basis, kernel=str(kernel), v1=v1, v2=v2, a=float(a))

    width = int(width)
    height = int(height)
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")

    scale = float(scale)

    rows, cols = np.meshgrid(
        np.arange(height, dtype=np.float64),
        np.arange(width, dtype=np.float64),
        indexing="ij",
    )
    res = vec2(float(width), float(height))
    xy = add(
        multiply(divide(vec2(rows, cols), res), scale),
        vec2(float(offset_x), float(offset_y)),
    )

    z = np.asarray(fn(xy), dtype=np.float64)
    z = np.broadcast_to(z, (height, width)).copy()

    logger.debug(
        "rendered %s map %dx%d (scale=%.3f, range=[%.4f, %.4f])",
        basis,
        width,
        height,
        scale,
        float(np.min(z)),
        float(np.max(z)),
    )

    if bool(normalize):
        zmin = float(np.min(z))
        zmax = float(np.max(z))
        if zmax == zmin:
            return np.zeros_like(z)
        z = (z - zmin) / (zmax - zmin)
    return z


def to_rgba(z: np.ndarray, *, signed: bool = False) -> np.ndarray:
    """Grey RGBA buffer (h, w, 4) from a map in [0, 1] (or [-1, 1] if signed)."""

    z = np.asarray(z, dtype=np.float64)
    if z.ndim != 2:
        raise ValueError("expected a 2D array")
    if signed:
        z = (z + 1.0) * 0.5

    grey = np.clip(z * 255.0, 0.0, 255.0).astype(np.uint8)
    out = np.empty(z.shape + (4,), dtype=np.uint8)
    out[..., Color.r] = grey
    out[..., Color.g] = grey
    out[..., Color.b] = grey
    out[..., Color.a] = 255
    return out


def to_image(z: np.ndarray, *, signed: bool = False) -> Image.Image:
    return Image.fromarray(to_rgba(z, signed=signed))
