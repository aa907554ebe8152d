from .errors import ArityMismatch, InvalidOperand, UnsupportedArity
from .gradient_noise_2d import gradient_noise_2d_to_1d
from .random_noise import (
    random_noise_1d_to_1d,
    random_noise_2d_to_1d,
    random_noise_2d_to_2d,
)
from .simplex_noise_2d import simplex_noise_2d_to_1d
from .value_noise_2d import value_noise_2d_to_1d

__all__ = [
    "ArityMismatch",
    "InvalidOperand",
    "UnsupportedArity",
    "gradient_noise_2d_to_1d",
    "random_noise_1d_to_1d",
    "random_noise_2d_to_1d",
    "random_noise_2d_to_2d",
    "simplex_noise_2d_to_1d",
    "value_noise_2d_to_1d",
]
