"""
This module defines the Body class, the point-mass record consumed by the reference
integrators.

A body stores its position and velocity as mutable Vector2 values and its mass as a
read-only float. Mass must be a positive finite number: the clamped force law is
undefined otherwise, so construction raises ValueError instead of letting a bad body
reach the integrators. Scalar accessors x, y, vx and vy mirror the vector fields so a
Body can be used wherever the array-backed BodyView is accepted.
"""

from __future__ import annotations
import math
from typing import Iterable

from .vector2 import Vector2


def _as_vector(value: Vector2 | Iterable[float] | None) -> Vector2:
	if value is None:
		return Vector2()
	if isinstance(value, Vector2):
		return value.copy()
	x, y = value
	return Vector2(x, y)


class Body:
	__slots__ = ("_mass", "position", "velocity")

	def __init__(
		self,
		mass: float,
		position: Vector2 | Iterable[float] | None = None,
		velocity: Vector2 | Iterable[float] | None = None,
	) -> None:
		mass = float(mass)
		if not (mass > 0.0 and math.isfinite(mass)):
			raise ValueError(f"body mass must be a positive finite number, got {mass}")
		self._mass = mass
		self.position = _as_vector(position)
		self.velocity = _as_vector(velocity)

	@classmethod
	def from_components(
		cls, mass: float, x: float, y: float, vx: float = 0.0, vy: float = 0.0
	) -> "Body":
		return cls(mass, Vector2(x, y), Vector2(vx, vy))

	@property
	def mass(self) -> float:
		return self._mass

	@property
	def x(self) -> float:
		return self.position.x
	@x.setter
	def x(self, v: float) -> None:
		self.position.x = float(v)

	@property
	def y(self) -> float:
		return self.position.y
	@y.setter
	def y(self, v: float) -> None:
		self.position.y = float(v)

	@property
	def vx(self) -> float:
		return self.velocity.x
	@vx.setter
	def vx(self, v: float) -> None:
		self.velocity.x = float(v)

	@property
	def vy(self) -> float:
		return self.velocity.y
	@vy.setter
	def vy(self, v: float) -> None:
		self.velocity.y = float(v)

	def __repr__(self) -> str:
		return f"Body(mass={self.mass}, x={self.x}, y={self.y}, vx={self.vx}, vy={self.vy})"
