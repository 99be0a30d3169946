"""
This module implements Vector2, the two-component vector value type used by the
reference force and position integrators.

The class stores plain float fields x and y and supports component-wise arithmetic,
scalar scaling and division, length and dot products, distance helpers and component
min/max queries. Equality is approximate with an absolute per-component tolerance so
that test comparisons survive floating-point rounding; for that reason instances are
unhashable. Scalar division by zero raises ZeroDivisionError instead of producing
infinities. normalized() uses the standard v / |v| definition, while
reference_normalized() keeps the v / sqrt(|v|) variant of the reference vector
library for callers that need bit-compatible output.
"""

from __future__ import annotations
import math
from typing import Iterator, Tuple

from .constants import VECTOR_EPSILON


class Vector2:
    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def splat(cls, value: float) -> "Vector2":
        return cls(value, value)

    def set(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, idx: int) -> float:
        if idx == 0 or idx == -2:
            return self.x
        if idx == 1 or idx == -1:
            return self.y
        raise IndexError(f"Vector2 index out of range: {idx}")

    def __setitem__(self, idx: int, value: float) -> None:
        if idx == 0 or idx == -2:
            self.x = float(value)
        elif idx == 1 or idx == -1:
            self.y = float(value)
        else:
            raise IndexError(f"Vector2 index out of range: {idx}")

    def equals(self, other: "Vector2", epsilon: float = VECTOR_EPSILON) -> bool:
        if abs(self.x - other.x) > epsilon:
            return False
        if abs(self.y - other.y) > epsilon:
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return not self.equals(other)

    __hash__ = None

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, other):
        # Vector2 * Vector2 is the component-wise product
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        s = float(other)
        return Vector2(s * self.x, s * self.y)

    def __rmul__(self, other: float) -> "Vector2":
        s = float(other)
        return Vector2(s * self.x, s * self.y)

    def __truediv__(self, value: float) -> "Vector2":
        value = float(value)
        if value == 0.0:
            raise ZeroDivisionError("Vector2 division by zero")
        return self * (1.0 / value)

    def __iadd__(self, other: "Vector2") -> "Vector2":
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Vector2") -> "Vector2":
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other) -> "Vector2":
        res = self * other
        self.x, self.y = res.x, res.y
        return self

    def __itruediv__(self, value: float) -> "Vector2":
        res = self / value
        self.x, self.y = res.x, res.y
        return self

    def max_component(self) -> float:
        return max(self.x, self.y)

    def min_component(self) -> float:
        return min(self.x, self.y)

    def max_abs_component(self) -> float:
        return max(abs(self.x), abs(self.y))

    def min_abs_component(self) -> float:
        return min(abs(self.x), abs(self.y))

    @staticmethod
    def maximum(a: "Vector2", b: "Vector2") -> "Vector2":
        return Vector2(max(a.x, b.x), max(a.y, b.y))

    @staticmethod
    def minimum(a: "Vector2", b: "Vector2") -> "Vector2":
        return Vector2(min(a.x, b.x), min(a.y, b.y))

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def abs_dot(self, other: "Vector2") -> float:
        return abs(self.dot(other))

    def normalized(self) -> "Vector2":
        return self / self.length()

    def normalize(self) -> None:
        res = self.normalized()
        self.x, self.y = res.x, res.y

    def reference_normalized(self) -> "Vector2":
        """Return v / sqrt(|v|), as computed by the reference vector library.

        The result does not have unit length; use normalized() for direction vectors.
        """
        return self / math.sqrt(self.length())

    @staticmethod
    def distance(p1: "Vector2", p2: "Vector2") -> float:
        return (p2 - p1).length()

    @staticmethod
    def distance_squared(p1: "Vector2", p2: "Vector2") -> float:
        return (p2 - p1).length_squared()

    def __repr__(self) -> str:
        return f"Vector2(x={self.x}, y={self.y})"
