"""An immutable real-number value with arithmetic operators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Number:
    """A wrapped floating-point value."""

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __add__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self.value + other.value)

    def __sub__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self.value - other.value)

    def __mul__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self.value * other.value)

    def __truediv__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        if other.value == 0.0:
            raise ZeroDivisionError("Division by zero")
        return Number(self.value / other.value)

    def __float__(self) -> float:
        return self.value


ZERO = Number(0.0)
ONE = Number(1.0)