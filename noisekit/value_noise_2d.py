from __future__ import annotations

from .random_noise import DEFAULT_1D_V1, DEFAULT_A, random_noise_2d_to_1d
from .vectors import (
    Kernel,
    Pos,
    Scalar,
    Vec2,
    add,
    floor,
    fraction,
    interpolation_kernel,
    mix,
    vec2,
)

TOP_LEFT = vec2(0.0, 0.0)
TOP_RIGHT = vec2(1.0, 0.0)
BOTTOM_LEFT = vec2(0.0, 1.0)
BOTTOM_RIGHT = vec2(1.0, 1.0)


def value_noise_2d_to_1d(
    xy: Vec2,
    kernel: str | Kernel = "cubic",
    *,
    v: Vec2 = DEFAULT_1D_V1,
    a: float = DEFAULT_A,
) -> Scalar:
    """2D value noise (hashed lattice values + smooth interpolation), ~[0, 1]."""
    kernel = interpolation_kernel(kernel)

    i = floor(xy)
    f = fraction(xy)

    # Corner values of the lattice cell containing xy.
    ca = random_noise_2d_to_1d(add(i, TOP_LEFT), v, a)
    cb = random_noise_2d_to_1d(add(i, TOP_RIGHT), v, a)
    cc = random_noise_2d_to_1d(add(i, BOTTOM_LEFT), v, a)
    cd = random_noise_2d_to_1d(add(i, BOTTOM_RIGHT), v, a)

    u = kernel(f)

    # Bilinear blend written as one lerp plus two correction terms.
    return (
        mix(ca, cb, u[Pos.x])
        + (cc - ca) * u[Pos.y] * (1.0 - u[Pos.x])
        + (cd - cb) * u[Pos.x] * u[Pos.y]
    )


def debug_value_point(
    x: float,
    y: float,
    kernel: str | Kernel = "cubic",
    *,
    v: Vec2 = DEFAULT_1D_V1,
    a: float = DEFAULT_A,
) -> dict:
    """Corner values and blend terms of one value-noise evaluation.

    `noise == lerp + edge_y + diagonal`: `lerp` blends corners a and b along
    x, the other two terms pull the result toward c and d as y grows.
    """

    kernel_fn = interpolation_kernel(kernel)
    xy = vec2(float(x), float(y))
    i = floor(xy)
    f = fraction(xy)
    u = kernel_fn(f)
    ux = float(u[Pos.x])
    uy = float(u[Pos.y])

    ca, cb, cc, cd = (
        float(random_noise_2d_to_1d(add(i, offset), v, a))
        for offset in (TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT)
    )
    lerp = float(mix(ca, cb, ux))
    edge_y = (cc - ca) * uy * (1.0 - ux)
    diagonal = (cd - cb) * ux * uy

    return {
        "kernel": kernel_fn,
        "cell": {"ix": float(i[Pos.x]), "iy": float(i[Pos.y])},
        "relative": {"xf": float(f[Pos.x]), "yf": float(f[Pos.y])},
        "weights": {"u": ux, "v": uy},
        "corners": {"a": ca, "b": cb, "c": cc, "d": cd},
        "terms": {"lerp": lerp, "edge_y": edge_y, "diagonal": diagonal},
        "noise": lerp + edge_y + diagonal,
    }
