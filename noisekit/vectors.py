from __future__ import annotations

import functools
import operator
from enum import IntEnum
from typing import Any, Callable, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import ArityMismatch, InvalidOperand, UnsupportedArity

# Components may be Python floats or numpy arrays. An array is a scalar
# operand as far as the algebra is concerned, so every operation below
# evaluates element-wise over whole coordinate grids.
Scalar = Union[float, np.ndarray]
Vec2 = Tuple[Scalar, Scalar]
Vec3 = Tuple[Scalar, Scalar, Scalar]
Vec4 = Tuple[Scalar, Scalar, Scalar, Scalar]
AnyVec = Union[Vec2, Vec3, Vec4]
Operand = Union[Scalar, AnyVec]

SUPPORTED_ARITIES = (2, 3, 4)


class Pos(IntEnum):
    x = 0
    y = 1
    z = 2
    w = 3


class Color(IntEnum):
    r = 0
    g = 1
    b = 2
    a = 3


def vec2(n1: Scalar, n2: Optional[Scalar] = None) -> Vec2:
    return (n1, n1 if n2 is None else n2)


def vec3(n1: Scalar, n2: Optional[Scalar] = None, n3: Optional[Scalar] = None) -> Vec3:
    return (n1, n1 if n2 is None else n2, n1 if n3 is None else n3)


def vec4(
    n1: Scalar,
    n2: Optional[Scalar] = None,
    n3: Optional[Scalar] = None,
    n4: Scalar = 1.0,
) -> Vec4:
    # w is a homogeneous coordinate and defaults to 1 rather than n1.
    return (n1, n1 if n2 is None else n2, n1 if n3 is None else n3, n4)


UNIT2 = vec2(1.0)
UNIT3 = vec3(1.0)
UNIT4 = vec4(1.0)


def _is_vector(value: Any) -> bool:
    return isinstance(value, (tuple, list))


def is_scalar(value: Operand) -> bool:
    return not _is_vector(value)


def is_vec2(value: Operand) -> bool:
    return _is_vector(value) and len(value) == 2


def is_vec3(value: Operand) -> bool:
    return _is_vector(value) and len(value) == 3


def is_vec4(value: Operand) -> bool:
    return _is_vector(value) and len(value) == 4


def is_scalar_array(values: Sequence[Operand]) -> bool:
    return all(is_scalar(v) for v in values)


def _check_arity(vector: Sequence[Scalar]) -> int:
    n = len(vector)
    if n not in SUPPORTED_ARITIES:
        raise UnsupportedArity(n)
    return n


def arity_of(operands: Sequence[Operand]) -> int | None:
    """Return the shared vector arity of a mixed operand list.

    Scalars do not constrain the arity. Returns None when every operand is a
    scalar; raises ArityMismatch when two vectors disagree.
    """

    arity: int | None = None
    for value in operands:
        if not _is_vector(value):
            continue
        n = _check_arity(value)
        if arity is None:
            arity = n
        elif n != arity:
            raise ArityMismatch(arity, n)
    return arity


def _component(value: Operand, index: int) -> Scalar:
    if _is_vector(value):
        return value[index]
    return value


def _fold(
    fn: Callable[[Scalar, Scalar], Scalar],
    operands: Sequence[Operand],
    identity: Scalar,
) -> Operand:
    # Left fold per component. The first operand seeds the accumulator, so a
    # single operand passes through unchanged.
    if not operands:
        return identity
    arity = arity_of(operands)
    if arity is None:
        return functools.reduce(fn, operands)
    return tuple(
        functools.reduce(fn, [_component(v, i) for v in operands]) for i in range(arity)
    )


def _map(fn: Callable[[Scalar], Scalar], operand: Operand) -> Operand:
    if _is_vector(operand):
        _check_arity(operand)
        return tuple(fn(c) for c in operand)
    return fn(operand)


def add(*operands: Operand) -> Operand:
    return _fold(operator.add, operands, 0.0)


def subtract(*operands: Operand) -> Operand:
    return _fold(operator.sub, operands, 0.0)


def multiply(*operands: Operand) -> Operand:
    return _fold(operator.mul, operands, 1.0)


def divide(*operands: Operand) -> Operand:
    # Division by zero gives +-inf (nan for 0/0), for floats and arrays alike.
    return _fold(np.true_divide, operands, 1.0)


def maximum(*operands: Operand) -> Operand:
    if not operands:
        raise InvalidOperand("maximum() requires at least one operand")
    return _fold(np.maximum, operands, 0.0)


def minimum(*operands: Operand) -> Operand:
    if not operands:
        raise InvalidOperand("minimum() requires at least one operand")
    return _fold(np.minimum, operands, 0.0)


def _fraction(x: Scalar) -> Scalar:
    r = x - np.floor(x)
    # Tiny negative inputs round up to exactly 1.0; that is the next cell's 0.
    out = np.where(r >= 1.0, 0.0, r)
    if out.ndim == 0:
        return float(out)
    return out


def _cubic(t: Scalar) -> Scalar:
    return t * t * (3.0 - 2.0 * t)


def _quintic(t: Scalar) -> Scalar:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def sin(operand: Operand) -> Operand:
    return _map(np.sin, operand)


def cos(operand: Operand) -> Operand:
    return _map(np.cos, operand)


def floor(operand: Operand) -> Operand:
    return _map(np.floor, operand)


def fraction(operand: Operand) -> Operand:
    """Component-wise `x - floor(x)`, always in [0, 1)."""
    return _map(_fraction, operand)


def absolute(operand: Operand) -> Operand:
    return _map(np.abs, operand)


def cubic(operand: Operand) -> Operand:
    """Smoothstep kernel 3t^2 - 2t^3."""
    return _map(_cubic, operand)


def quintic(operand: Operand) -> Operand:
    """Quintic kernel 6t^5 - 15t^4 + 10t^3 (Improved Perlin Noise fade)."""
    return _map(_quintic, operand)


Kernel = Callable[[Operand], Operand]

_KERNELS: dict[str, Kernel] = {
    "cubic": cubic,
    "smoothstep": cubic,
    "quintic": quintic,
    "fade": quintic,
}


def interpolation_kernel(name: str | Kernel) -> Kernel:
    if callable(name):
        return name
    name = str(name)
    if name in _KERNELS:
        return _KERNELS[name]
    raise ValueError(f"unknown interpolation kernel: {name}")


def mix(x: Operand, y: Operand, t: Scalar) -> Operand:
    """Linear interpolation x*(1-t) + y*t."""
    if _is_vector(t):
        raise InvalidOperand("mix() interpolant must be a scalar")
    if _is_vector(x) != _is_vector(y):
        raise ArityMismatch(len(x) if _is_vector(x) else 1, len(y) if _is_vector(y) else 1)
    return add(multiply(x, 1.0 - t), multiply(y, t))


def dot_product(v1: AnyVec, v2: AnyVec) -> Scalar:
    if not (_is_vector(v1) and _is_vector(v2)):
        raise InvalidOperand("dot_product() expects two vectors")
    n = _check_arity(v1)
    if _check_arity(v2) != n:
        raise ArityMismatch(n, len(v2))
    return functools.reduce(operator.add, [v1[i] * v2[i] for i in range(n)])


def cross_product(v1: Vec3, v2: Vec3) -> Vec3:
    for v in (v1, v2):
        if not _is_vector(v):
            raise InvalidOperand("cross_product() expects two vectors")
        if len(v) != 3:
            raise UnsupportedArity(len(v), (3,))
    return vec3(
        v1[Pos.y] * v2[Pos.z] - v1[Pos.z] * v2[Pos.y],
        v1[Pos.z] * v2[Pos.x] - v1[Pos.x] * v2[Pos.z],
        v1[Pos.x] * v2[Pos.y] - v1[Pos.y] * v2[Pos.x],
    )
