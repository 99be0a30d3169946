"""
This module defines NBodySimulation, the object that owns a body collection for the
duration of a run.

The simulation builds its SimulationState from Body objects or raw arrays, exposes the
bodies as BodyView proxies over that state, and advances them through an Integrator
whose scheme is picked by SimConfig.integrator_mode. The body count is fixed once the
state is built; steps only mutate positions and velocities in place. run() repeats
step() and hands the simulation to an optional callback after every step, which is
where the driver hooks persistence. snapshot() and restore() copy the arrays together
with the step counter and clock so a run can be replayed deterministically.
"""

from __future__ import annotations
import logging
from typing import Callable, Iterable, List, Optional
import numpy as np

from .body import Body
from .body_view import BodyView
from .diagnostics import Diagnostics
from .integrator import Integrator
from .sim_config import SimConfig
from .simulation_state import SimulationState


logger = logging.getLogger(__name__)


StepCallback = Callable[["NBodySimulation", int], None]


class NBodySimulation:
	def __init__(
		self,
		bodies: Optional[Iterable[Body]] = None,
		*,
		masses=None,
		positions=None,
		velocities=None,
		G: Optional[float] = None,
		dt: Optional[float] = None,
		mode: Optional[str] = None,
		cfg: Optional[SimConfig] = None,
	) -> None:
		cfg = cfg.copy() if cfg is not None else SimConfig()
		if G is not None:
			cfg.G = float(G)
		if dt is not None:
			cfg.dt = float(dt)
		if mode is not None:
			cfg.integrator_mode = mode
		cfg.__post_init__()
		self.cfg = cfg

		self._state = SimulationState()
		self._state.build_state(bodies, masses, positions, velocities)
		if cfg.fast_float32:
			self._state.set_fast_mode(True)

		self._views: List[BodyView] = [
			BodyView(self._state, i) for i in range(self._state.n_bodies)
		]
		self._integrator = Integrator(self)
		logger.debug(
			"simulation built: n=%d, G=%g, dt=%g, mode=%s, dtype=%s",
			self.n_bodies, self.G, self.dt, cfg.integrator_mode, self._state.dtype,
		)

	@property
	def state(self) -> SimulationState:
		return self._state

	@property
	def bodies(self) -> List[BodyView]:
		return self._views

	@property
	def n_bodies(self) -> int:
		return self._state.n_bodies

	@property
	def G(self) -> float:
		return float(self.cfg.G)

	@property
	def dt(self) -> float:
		return float(self.cfg.dt)

	@property
	def time(self) -> float:
		return self._integrator.time

	@property
	def steps_taken(self) -> int:
		return self._integrator.steps_taken

	@property
	def masses(self) -> np.ndarray:
		return self._state.mass.copy()

	@property
	def positions(self) -> np.ndarray:
		return self._state.pos.copy()

	@property
	def velocities(self) -> np.ndarray:
		return self._state.vel.copy()

	def step(self, dt: Optional[float] = None) -> None:
		self._integrator.step(self.dt if dt is None else dt)

	def run(self, n_steps: int, callback: Optional[StepCallback] = None) -> None:
		n_steps = int(n_steps)
		if n_steps < 0:
			raise ValueError(f"n_steps must be >= 0, got {n_steps}")
		for iteration in range(n_steps):
			self.step()
			if callback is not None:
				callback(self, iteration)

	def diagnostics(self) -> Diagnostics:
		return Diagnostics(self)

	def snapshot(self) -> dict:
		snap = self._state.snapshot()
		snap["time"] = self._integrator.time
		snap["steps_taken"] = self._integrator.steps_taken
		return snap

	def restore(self, snap: dict) -> None:
		self._state.restore(snap)
		self._integrator.time = float(snap.get("time", 0.0))
		self._integrator.steps_taken = int(snap.get("steps_taken", 0))

	def __repr__(self) -> str:
		return (
			f"NBodySimulation(n_bodies={self.n_bodies}, G={self.G}, dt={self.dt}, "
			f"mode={self.cfg.integrator_mode!r}, t={self.time})"
		)
