import functools
import operator

import numpy as np
import pytest

from noisekit.errors import ArityMismatch, InvalidOperand, UnsupportedArity
from noisekit.vectors import (
    UNIT3,
    UNIT4,
    Pos,
    absolute,
    add,
    arity_of,
    cross_product,
    cubic,
    divide,
    dot_product,
    fraction,
    interpolation_kernel,
    is_scalar_array,
    is_vec2,
    is_vec3,
    maximum,
    minimum,
    mix,
    multiply,
    quintic,
    subtract,
    vec2,
    vec3,
    vec4,
)


def test_constructors_fill_components():
    assert vec2(3.0) == (3.0, 3.0)
    assert vec3(1.0, 2.0) == (1.0, 2.0, 1.0)
    assert vec4(2.0) == (2.0, 2.0, 2.0, 1.0)
    assert UNIT3 == (1.0, 1.0, 1.0)
    assert UNIT4 == (1.0, 1.0, 1.0, 1.0)
    assert vec3(1.0, 2.0, 3.0)[Pos.z] == 3.0


def test_type_guards():
    assert is_vec2(vec2(1.0))
    assert not is_vec2(vec3(1.0))
    assert is_vec3(vec3(1.0))
    assert is_scalar_array([1.0, 2.0, np.float64(3.0)])
    assert not is_scalar_array([1.0, vec2(1.0)])
    assert arity_of([1.0, vec3(1.0), 2.0]) == 3
    assert arity_of([1.0, 2.0]) is None


@pytest.mark.parametrize("n", [2, 3, 4])
@pytest.mark.parametrize(
    "op, fn",
    [
        (add, operator.add),
        (subtract, operator.sub),
        (multiply, operator.mul),
        (divide, operator.truediv),
    ],
)
def test_fold_is_componentwise_for_every_arity(n, op, fn):
    rng = np.random.default_rng(n)
    vectors = [tuple(float(c) for c in rng.uniform(0.5, 4.0, n)) for _ in range(4)]
    out = op(*vectors)
    assert len(out) == n
    for i in range(n):
        assert out[i] == functools.reduce(fn, [v[i] for v in vectors])


def test_scalar_broadcast():
    assert add(vec2(1.0, 2.0), 3.0) == (4.0, 5.0)
    assert multiply(2.0, vec3(1.0, 2.0, 3.0)) == (2.0, 4.0, 6.0)
    assert subtract(0.5, vec3(1.0, 2.0, 3.0)) == (-0.5, -1.5, -2.5)
    assert divide(vec4(2.0, 4.0, 8.0, 16.0), 2.0) == (1.0, 2.0, 4.0, 8.0)


def test_scalar_only_operands_return_scalar():
    assert add(1.0, 2.0, 3.0) == 6.0
    assert subtract(10.0, 3.0, 2.0) == 5.0
    assert multiply(2.0, 3.0) == 6.0
    assert divide(12.0, 2.0, 3.0) == 2.0


def test_empty_fold_returns_identity():
    assert add() == 0.0
    assert subtract() == 0.0
    assert multiply() == 1.0
    assert divide() == 1.0


def test_single_operand_passes_through():
    assert subtract(vec2(3.0, 4.0)) == (3.0, 4.0)
    assert divide(vec3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)
    assert divide(5.0) == 5.0
    assert add([1.0, 2.0]) == (1.0, 2.0)


def test_arity_mismatch_rejected():
    with pytest.raises(ArityMismatch):
        add(vec2(1.0, 1.0), vec3(1.0, 1.0, 1.0))
    with pytest.raises(ArityMismatch):
        multiply(vec4(1.0), 2.0, vec2(1.0))
    # Part of the ValueError family, like other bad-argument errors.
    with pytest.raises(ValueError):
        subtract(vec3(1.0), vec4(1.0))


def test_unsupported_arity_rejected():
    with pytest.raises(UnsupportedArity):
        add((1.0,), 2.0)
    with pytest.raises(UnsupportedArity):
        add((1.0, 2.0, 3.0, 4.0, 5.0))
    with pytest.raises(UnsupportedArity):
        fraction((1.0, 2.0, 3.0, 4.0, 5.0))


def test_errors_are_deterministic():
    messages = []
    for _ in range(2):
        with pytest.raises(ArityMismatch) as exc:
            add(vec2(1.0), vec3(1.0))
        messages.append(str(exc.value))
    assert messages[0] == messages[1]
    assert "Vec2" in messages[0] and "Vec3" in messages[0]


def test_dot_product():
    assert dot_product(vec2(1.0, 0.0), vec2(0.0, 1.0)) == 0.0
    assert dot_product(vec2(2.0, 3.0), vec2(4.0, 5.0)) == 23.0
    assert dot_product(vec4(1.0, 2.0, 3.0, 4.0), UNIT4) == 10.0


def test_dot_product_rejects_bad_operands():
    with pytest.raises(ArityMismatch):
        dot_product(vec2(1.0), vec3(1.0))
    with pytest.raises(InvalidOperand):
        dot_product(vec2(1.0), 2.0)


def test_cross_product():
    assert cross_product(vec3(1.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)
    assert cross_product(vec3(0.0, 1.0, 0.0), vec3(1.0, 0.0, 0.0)) == (0.0, 0.0, -1.0)
    with pytest.raises(UnsupportedArity):
        cross_product(vec2(1.0), vec2(0.0, 1.0))


def test_fraction_range_and_idempotence():
    for x in np.linspace(-50.0, 50.0, 1001):
        f = fraction(float(x))
        assert 0.0 <= f < 1.0
        assert fraction(f) == f
    assert fraction(vec2(1.25, -0.75)) == (0.25, 0.25)


def test_fraction_of_tiny_negative_stays_below_one():
    for x in [-1e-20, -5e-324, -1e-17]:
        f = fraction(x)
        assert 0.0 <= f < 1.0
        assert fraction(f) == f
    out = fraction(np.array([-1e-20, -0.25, 0.5]))
    assert np.array_equal(out, np.array([0.0, 0.75, 0.5]))


def test_divide_by_zero_gives_inf_for_floats_and_arrays():
    with np.errstate(divide="ignore"):
        assert divide(1.0, 0.0) == np.inf
        assert divide(vec2(-2.0, 3.0), 0.0) == (-np.inf, np.inf)
        assert np.array_equal(divide(np.array([1.0, -1.0]), 0.0), np.array([np.inf, -np.inf]))


@pytest.mark.parametrize("kernel", [cubic, quintic])
def test_kernel_boundaries(kernel):
    assert kernel(0.0) == 0.0
    assert kernel(1.0) == 1.0
    assert kernel(0.5) == 0.5
    assert kernel(vec2(0.0, 1.0)) == (0.0, 1.0)


def test_kernels_are_monotonic_on_unit_interval():
    t = np.linspace(0.0, 1.0, 257)
    assert np.all(np.diff(cubic(t)) >= 0.0)
    assert np.all(np.diff(quintic(t)) >= 0.0)


def test_interpolation_kernel_lookup():
    assert interpolation_kernel("smoothstep") is cubic
    assert interpolation_kernel("fade") is quintic
    assert interpolation_kernel(quintic) is quintic
    with pytest.raises(ValueError):
        interpolation_kernel("linear")


def test_mix():
    assert mix(2.0, 4.0, 0.25) == 2.5
    assert mix(vec2(0.0, 10.0), vec2(10.0, 20.0), 0.5) == (5.0, 15.0)
    with pytest.raises(ArityMismatch):
        mix(vec2(0.0), 1.0, 0.5)
    with pytest.raises(ArityMismatch):
        mix(vec2(0.0), vec3(1.0), 0.5)
    with pytest.raises(InvalidOperand):
        mix(1.0, 2.0, vec2(0.5))


def test_maximum_minimum_absolute():
    assert maximum(vec3(-1.0, 0.5, 2.0), 0.0) == (0.0, 0.5, 2.0)
    assert minimum(vec3(-1.0, 0.5, 2.0), 1.0) == (-1.0, 0.5, 1.0)
    assert absolute(vec2(-1.5, 2.0)) == (1.5, 2.0)
    with pytest.raises(InvalidOperand):
        maximum()


def test_array_components_evaluate_elementwise():
    xs = np.array([0.25, 1.5, -2.75])
    ys = np.array([3.0, -0.5, 8.25])
    out = add(vec2(xs, ys), 1.0)
    assert np.allclose(out[0], xs + 1.0)
    assert np.allclose(out[1], ys + 1.0)
    d = dot_product(vec2(xs, ys), vec2(2.0, 3.0))
    assert np.allclose(d, 2.0 * xs + 3.0 * ys)
