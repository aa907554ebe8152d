from __future__ import annotations


class InvalidOperand(ValueError):
    """An operand (or combination of operands) the vector algebra cannot accept."""


class ArityMismatch(InvalidOperand):
    def __init__(self, expected: int, got: int):
        self.expected = int(expected)
        self.got = int(got)
        super().__init__(
            f"inconsistent vector sizes: expected Vec{self.expected}, got Vec{self.got}"
        )


class UnsupportedArity(InvalidOperand):
    def __init__(self, arity: int, supported: tuple[int, ...] = (2, 3, 4)):
        self.arity = int(arity)
        self.supported = tuple(supported)
        names = ", ".join(f"Vec{n}" for n in self.supported)
        super().__init__(f"unsupported vector size {self.arity} (expected {names})")
