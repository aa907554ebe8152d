from __future__ import annotations

from .vectors import Scalar, Vec2, add, dot_product, fraction, multiply, sin, vec2

DEFAULT_1D_V1 = vec2(12.9898, 78.233)
DEFAULT_2D_V1 = vec2(127.1, 311.7)
DEFAULT_2D_V2 = vec2(269.5, 183.3)
DEFAULT_A = 43758.5453123


def random_noise_1d_to_1d(x: Scalar, a: float = DEFAULT_A) -> Scalar:
    """Hash a scalar coordinate to [0, 1)."""
    return fraction(multiply(sin(x), a))


def random_noise_2d_to_1d(
    xy: Vec2, v: Vec2 = DEFAULT_1D_V1, a: float = DEFAULT_A
) -> Scalar:
    """Hash a 2D coordinate to [0, 1) via fract(sin(dot(xy, v)) * a)."""
    return fraction(multiply(sin(dot_product(xy, v)), a))


def random_noise_2d_to_2d(
    xy: Vec2,
    v1: Vec2 = DEFAULT_2D_V1,
    v2: Vec2 = DEFAULT_2D_V2,
    a: float = DEFAULT_A,
) -> Vec2:
    """Hash a 2D coordinate to a pseudo-gradient in [-1, 1)^2."""
    st = vec2(dot_product(xy, v1), dot_product(xy, v2))
    return add(-1.0, multiply(2.0, fraction(multiply(sin(st), a))))
