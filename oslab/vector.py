"""A two-dimensional vector built from Number components."""

from __future__ import annotations

import math
from dataclasses import dataclass

from oslab.number import ONE, ZERO, Number


@dataclass
class Vector:
    """A plane vector with Cartesian components ``x`` and ``y``."""

    x: Number = ZERO
    y: Number = ZERO

    def __post_init__(self) -> None:
        if not isinstance(self.x, Number):
            self.x = Number(self.x)
        if not isinstance(self.y, Number):
            self.y = Number(self.y)

    def r(self) -> Number:
        """The length of the vector."""
        square = self.x * self.x + self.y * self.y
        return Number(math.sqrt(float(square)))

    def phi(self) -> Number:
        """The polar angle in radians, in the range [-pi, pi]."""
        return Number(math.atan2(float(self.y), float(self.x)))

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)


ZERO_VECTOR = Vector(ZERO, ZERO)
ONE_ONE_VECTOR = Vector(ONE, ONE)