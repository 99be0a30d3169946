from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING
from .integration_scheme_base import IntegrationScheme
from .direct_scheme import DirectScheme
from .vectorized_scheme import VectorizedScheme

if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This module implements the Integrator class that coordinates timestepping for the direct-summation simulation. It selects an integration scheme from the simulation's configured mode, runs exactly one kick (ForceIntegrator) and one drift (PositionIntegrator) per call to step, and keeps the step counter and elapsed simulated time. The timestep is fixed for the whole call; negative timesteps run the system backwards and are accepted, non-finite ones are rejected with ValueError.

"""


logger = logging.getLogger(__name__)


class Integrator:

	def __init__(self, sim: "NBodySimulation") -> None:
		self.sim = sim
		self.steps_taken = 0
		self.time = 0.0
		self._scheme: IntegrationScheme = self._make_scheme(sim.cfg.integrator_mode)

	def _make_scheme(self, mode: str) -> IntegrationScheme:
		if mode == "direct":
			return DirectScheme(self)
		if mode == "vectorized":
			return VectorizedScheme(self)
		raise ValueError(f"unknown integrator mode: {mode!r}")

	@property
	def scheme(self) -> IntegrationScheme:
		return self._scheme

	def step(self, dt: float) -> None:
		dt = float(dt)
		if not math.isfinite(dt):
			raise ValueError(f"timestep must be finite, got {dt}")

		if self.sim.n_bodies > 0:
			self._scheme.step(dt)

		self.steps_taken += 1
		self.time += dt
		logger.debug(
			"step %d done (scheme=%s, dt=%g, t=%g)",
			self.steps_taken, self._scheme.name, dt, self.time,
		)
