"""
This module implements BodyView, a proxy class providing Body-like access to individual
particles stored in the simulation's numpy arrays.

The class uses properties with getters and setters to map attribute access (position,
velocity, x, y, vx, vy) directly to the appropriate array row in the parent simulation
state, maintaining the same interface as Body while operating on the array storage.
position and velocity return fresh Vector2 copies; augmented assignment such as
view.velocity += dv goes through the setter and writes the row back. Mass is
read-only, as it is on Body.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .vector2 import Vector2

if TYPE_CHECKING:
    from .simulation_state import SimulationState




class BodyView:
	__slots__ = ("_state", "_i")

	def __init__(self, state: "SimulationState", idx: int) -> None:
		self._state = state
		self._i = int(idx)

	@property
	def index(self) -> int:
		return self._i

	@property
	def mass(self) -> float:
		return float(self._state._mass[self._i])

	@property
	def position(self) -> Vector2:
		row = self._state._pos[self._i]
		return Vector2(row[0], row[1])
	@position.setter
	def position(self, v: Vector2) -> None:
		self._state._pos[self._i, 0] = float(v[0])
		self._state._pos[self._i, 1] = float(v[1])

	@property
	def velocity(self) -> Vector2:
		row = self._state._vel[self._i]
		return Vector2(row[0], row[1])
	@velocity.setter
	def velocity(self, v: Vector2) -> None:
		self._state._vel[self._i, 0] = float(v[0])
		self._state._vel[self._i, 1] = float(v[1])

	@property
	def x(self) -> float:
		return float(self._state._pos[self._i, 0])
	@x.setter
	def x(self, v: float) -> None:
		self._state._pos[self._i, 0] = float(v)

	@property
	def y(self) -> float:
		return float(self._state._pos[self._i, 1])
	@y.setter
	def y(self, v: float) -> None:
		self._state._pos[self._i, 1] = float(v)

	@property
	def vx(self) -> float:
		return float(self._state._vel[self._i, 0])
	@vx.setter
	def vx(self, v: float) -> None:
		self._state._vel[self._i, 0] = float(v)

	@property
	def vy(self) -> float:
		return float(self._state._vel[self._i, 1])
	@vy.setter
	def vy(self, v: float) -> None:
		self._state._vel[self._i, 1] = float(v)

	def __repr__(self) -> str:
		return (f"Body(mass={self.mass}, x={self.x}, y={self.y}, "
				f"vx={self.vx}, vy={self.vy})")
