from __future__ import annotations

import numpy as np

from .vectors import (
    Pos,
    Scalar,
    Vec2,
    Vec3,
    absolute,
    add,
    dot_product,
    floor,
    fraction,
    maximum,
    multiply,
    subtract,
    vec2,
    vec3,
)

# (3 - sqrt(3)) / 6
C_X = 0.211324865405187
# (sqrt(3) - 1) / 2
C_Y = 0.366025403784439
# -1 + 2 * C_X
C_Z = -0.577350269189626
# 1 / 41
C_W = 0.024390243902439

# Taylor approximation of the inverse gradient length.
_RENORM_A = 1.79284291400159
_RENORM_B = 0.85373472095314

_SCALE = 130.0


def mod289(x: Vec2 | Vec3) -> Vec2 | Vec3:
    return subtract(x, multiply(floor(multiply(x, 1.0 / 289.0)), 289.0))


def permute(x: Vec3) -> Vec3:
    return mod289(multiply(add(multiply(x, 34.0), 1.0), x))


def _greater(lhs: Scalar, rhs: Scalar) -> Scalar:
    out = np.where(np.greater(lhs, rhs), 1.0, 0.0)
    if out.ndim == 0:
        return float(out)
    return out


def middle_corner(x0: Vec2) -> Vec2:
    """Lattice step to the middle corner: (1, 0) if x0.x > x0.y, else (0, 1)."""
    step_x = _greater(x0[Pos.x], x0[Pos.y])
    return vec2(step_x, 1.0 - step_x)


def _simplex_terms(xy: Vec2) -> dict:
    cxx = vec2(C_X)
    cyy = vec2(C_Y)
    czz = vec2(C_Z)
    cwww = vec3(C_W)

    # First corner (skewed to simplex space, then unskewed back).
    i = floor(add(xy, dot_product(xy, cyy)))
    x0 = add(subtract(xy, i), dot_product(i, cxx))

    i1 = middle_corner(x0)
    x1 = subtract(add(x0, cxx), i1)
    x2 = add(x0, czz)

    im = mod289(i)
    p = permute(
        add(
            permute(add(im[Pos.y], vec3(0.0, i1[Pos.y], 1.0))),
            im[Pos.x],
            vec3(0.0, i1[Pos.x], 1.0),
        )
    )

    falloff = maximum(
        subtract(0.5, vec3(dot_product(x0, x0), dot_product(x1, x1), dot_product(x2, x2))),
        0.0,
    )
    falloff = multiply(falloff, falloff)
    falloff = multiply(falloff, falloff)

    # 41 points spread over a line, folded onto a diamond to get gradients.
    x = subtract(multiply(2.0, fraction(multiply(p, cwww))), 1.0)
    h = subtract(absolute(x), 0.5)
    ox = floor(add(x, 0.5))
    a0 = subtract(x, ox)

    weight = multiply(
        falloff,
        subtract(_RENORM_A, multiply(_RENORM_B, add(multiply(a0, a0), multiply(h, h)))),
    )

    gx = a0[Pos.x] * x0[Pos.x] + h[Pos.x] * x0[Pos.y]
    gyz = add(
        multiply(vec2(a0[Pos.y], a0[Pos.z]), vec2(x1[Pos.x], x2[Pos.x])),
        multiply(vec2(h[Pos.y], h[Pos.z]), vec2(x1[Pos.y], x2[Pos.y])),
    )
    return {
        "i": i,
        "i1": i1,
        "offsets": (x0, x1, x2),
        "perm": p,
        "gradients": tuple(vec2(a0[k], h[k]) for k in range(3)),
        "falloff": falloff,
        "weight": weight,
        "dots": vec3(gx, gyz[0], gyz[1]),
    }


def simplex_noise_2d_to_1d(xy: Vec2) -> Scalar:
    """2D simplex noise on a skewed triangular grid, ~[-1, 1]."""
    terms = _simplex_terms(xy)
    return _SCALE * dot_product(terms["weight"], terms["dots"])


def debug_simplex_point(x: float, y: float) -> dict:
    """Per-corner breakdown of one simplex evaluation.

    Corner positions are in input space (sample point minus offset). The
    falloff is zero once a corner is farther than sqrt(0.5) from the sample.
    """

    xy = vec2(float(x), float(y))
    terms = _simplex_terms(xy)

    corners = []
    for k, offset in enumerate(terms["offsets"]):
        corners.append(
            {
                "px": float(xy[Pos.x] - offset[Pos.x]),
                "py": float(xy[Pos.y] - offset[Pos.y]),
                "dx": float(offset[Pos.x]),
                "dy": float(offset[Pos.y]),
                "perm": float(terms["perm"][k]),
                "gx": float(terms["gradients"][k][Pos.x]),
                "gy": float(terms["gradients"][k][Pos.y]),
                "falloff": float(terms["falloff"][k]),
                "contribution": float(_SCALE * terms["weight"][k] * terms["dots"][k]),
            }
        )

    return {
        "input": {"x": xy[Pos.x], "y": xy[Pos.y]},
        "origin": {"ix": float(terms["i"][Pos.x]), "iy": float(terms["i"][Pos.y])},
        "middle": {"x": float(terms["i1"][Pos.x]), "y": float(terms["i1"][Pos.y])},
        "corners": corners,
        "noise": float(simplex_noise_2d_to_1d(xy)),
    }
