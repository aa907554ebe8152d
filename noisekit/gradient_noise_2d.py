from __future__ import annotations

import math
from dataclasses import dataclass

from .random_noise import DEFAULT_2D_V1, DEFAULT_2D_V2, DEFAULT_A, random_noise_2d_to_2d
from .value_noise_2d import BOTTOM_LEFT, BOTTOM_RIGHT, TOP_LEFT, TOP_RIGHT
from .vectors import (
    Kernel,
    Pos,
    Scalar,
    Vec2,
    add,
    dot_product,
    floor,
    fraction,
    interpolation_kernel,
    mix,
    subtract,
    vec2,
)


@dataclass(frozen=True)
class Corner2D:
    gx: float
    gy: float
    dx: float
    dy: float
    dot: float


def gradient_noise_2d_to_1d(
    xy: Vec2,
    kernel: str | Kernel = "cubic",
    *,
    v1: Vec2 = DEFAULT_2D_V1,
    v2: Vec2 = DEFAULT_2D_V2,
    a: float = DEFAULT_A,
) -> Scalar:
    """Perlin-style gradient noise, ~[-1, 1] and exactly 0 on lattice points."""
    kernel = interpolation_kernel(kernel)

    i = floor(xy)
    f = fraction(xy)

    ga = random_noise_2d_to_2d(add(i, TOP_LEFT), v1, v2, a)
    gb = random_noise_2d_to_2d(add(i, TOP_RIGHT), v1, v2, a)
    gc = random_noise_2d_to_2d(add(i, BOTTOM_LEFT), v1, v2, a)
    gd = random_noise_2d_to_2d(add(i, BOTTOM_RIGHT), v1, v2, a)

    u = kernel(f)

    return mix(
        mix(
            dot_product(ga, subtract(f, TOP_LEFT)),
            dot_product(gb, subtract(f, TOP_RIGHT)),
            u[Pos.x],
        ),
        mix(
            dot_product(gc, subtract(f, BOTTOM_LEFT)),
            dot_product(gd, subtract(f, BOTTOM_RIGHT)),
            u[Pos.x],
        ),
        u[Pos.y],
    )


def debug_gradient_point(
    x: float,
    y: float,
    kernel: str | Kernel = "cubic",
    *,
    v1: Vec2 = DEFAULT_2D_V1,
    v2: Vec2 = DEFAULT_2D_V2,
    a: float = DEFAULT_A,
) -> dict:
    # Scalar breakdown of a single evaluation, for inspection.
    kernel_fn = interpolation_kernel(kernel)
    xy = vec2(float(x), float(y))

    i = vec2(float(math.floor(xy[Pos.x])), float(math.floor(xy[Pos.y])))
    f = subtract(xy, i)
    u = tuple(float(c) for c in kernel_fn(f))

    def corner(offset: Vec2) -> Corner2D:
        g = random_noise_2d_to_2d(add(i, offset), v1, v2, a)
        d = subtract(f, offset)
        return Corner2D(
            gx=float(g[Pos.x]),
            gy=float(g[Pos.y]),
            dx=float(d[Pos.x]),
            dy=float(d[Pos.y]),
            dot=float(dot_product(g, d)),
        )

    c00 = corner(TOP_LEFT)
    c10 = corner(TOP_RIGHT)
    c01 = corner(BOTTOM_LEFT)
    c11 = corner(BOTTOM_RIGHT)

    x_lerp0 = float(mix(c00.dot, c10.dot, u[Pos.x]))
    x_lerp1 = float(mix(c01.dot, c11.dot, u[Pos.x]))
    n = float(mix(x_lerp0, x_lerp1, u[Pos.y]))

    return {
        "kernel": kernel_fn,
        "hash": {"v1": tuple(v1), "v2": tuple(v2), "a": float(a)},
        "input": {"x": xy[Pos.x], "y": xy[Pos.y]},
        "cell": {"ix": i[Pos.x], "iy": i[Pos.y]},
        "relative": {"xf": float(f[Pos.x]), "yf": float(f[Pos.y])},
        "weights": {"u": u[Pos.x], "v": u[Pos.y]},
        "corners": {
            "c00": c00.__dict__,
            "c10": c10.__dict__,
            "c01": c01.__dict__,
            "c11": c11.__dict__,
        },
        "interpolation": {
            "x_lerp0": x_lerp0,
            "x_lerp1": x_lerp1,
        },
        "noise": n,
    }
