"""
This base class defines the interface for the explicit Euler integration schemes.

An IntegrationScheme splits a step into a kick (ForceIntegrator: velocities advanced by
the clamped pairwise accelerations) followed by a drift (PositionIntegrator: positions
advanced by the freshly updated velocities). Subclasses choose how the two passes are
evaluated, either through the reference Vector2 loop or through numpy arrays. The
ordering inside step is fixed: the kick must finish for every body before any position
moves, so all forces in a step see the same position snapshot.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from .integrator import Integrator



class IntegrationScheme:
	name: str = "base"

	def __init__(self, integrator: "Integrator") -> None:
		self.integ = integrator

	@property
	def sim(self):
		return self.integ.sim

	def kick(self, dt: float) -> None:
		raise NotImplementedError

	def drift(self, dt: float) -> None:
		raise NotImplementedError

	def step(self, dt: float) -> None:
		self.kick(dt)
		self.drift(dt)
