"""
This module manages the internal state representation for N-body simulations.

The SimulationState class maintains numpy arrays for masses, positions and velocities,
provides property accessors with validation, builds the arrays from Body objects or raw
sequences, and supports snapshot/restore of the full state. Positions and velocities
are mutated in place by the integration schemes; the mass array is fixed once the
state is built. Any assignment that would break the (n, 2) layout or introduce a
non-positive mass raises ValueError; restore() also refuses snapshots whose masses differ
from the current ones.
"""

from __future__ import annotations
import numpy as np
from typing import List, TYPE_CHECKING

from .simulation_validator import SimulationValidator

if TYPE_CHECKING:
	from .body import Body




class SimulationState:

	def __init__(self):
		self.n_bodies: int = 0
		self._mass: np.ndarray = np.empty(0, dtype=np.float64)
		self._pos: np.ndarray = np.empty((0, 2), dtype=np.float64)
		self._vel: np.ndarray = np.empty((0, 2), dtype=np.float64)

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	@property
	def mass(self) -> np.ndarray:
		return self._mass

	@property
	def dtype(self) -> np.dtype:
		return self._pos.dtype

	def _coerce_vectors(self, value, name: str) -> np.ndarray:
		arr = np.asarray(value, dtype=self._pos.dtype)
		if arr.ndim == 1:
			if arr.size % 2 != 0:
				raise ValueError(f"sim.{name} must be shape (N,2) or flat length 2N")
			arr = arr.reshape(-1, 2)
		elif arr.ndim != 2 or arr.shape[1] != 2:
			raise ValueError(f"sim.{name} must be shape (N,2) or flat length 2N")
		if arr.shape != self._pos.shape:
			raise ValueError(
				f"shape mismatch when assigning to sim.{name}: "
				f"expected {self._pos.shape}, got {arr.shape}"
			)
		if not np.all(np.isfinite(arr)):
			raise ValueError(f"sim.{name} must contain finite values only")
		return arr

	@pos.setter
	def pos(self, value: np.ndarray) -> None:
		self._pos[...] = self._coerce_vectors(value, "pos")

	@vel.setter
	def vel(self, value: np.ndarray) -> None:
		self._vel[...] = self._coerce_vectors(value, "vel")

	def build_state(self, bodies: List[Body] | None, masses=None, positions=None, velocities=None) -> None:
		if bodies is None:
			if masses is None or positions is None:
				raise ValueError("either bodies or both masses and positions are required")

			masses = list(masses)
			positions = list(positions)
			if velocities is None:
				velocities = []
			else:
				velocities = list(velocities)

			if len(velocities) == 0:
				velocities = [(0.0, 0.0)] * len(masses)
			elif len(velocities) == 1 and len(masses) > 1:
				velocities = velocities * len(masses)

			mass_arr = np.asarray(masses, dtype=np.float64).ravel()
			pos_arr = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
			vel_arr = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)
		else:
			bodies = list(bodies)
			mass_arr = np.array([b.mass for b in bodies], dtype=np.float64)
			pos_arr = np.array([(b.x, b.y) for b in bodies], dtype=np.float64).reshape(-1, 2)
			vel_arr = np.array([(b.vx, b.vy) for b in bodies], dtype=np.float64).reshape(-1, 2)

		if not SimulationValidator.state_is_valid(mass_arr, pos_arr, vel_arr):
			SimulationValidator.report_invalid_state(
				"build_state", masses=mass_arr, positions=pos_arr, velocities=vel_arr
			)
			raise ValueError(
				"invalid initial state: masses must be positive and finite, "
				"positions and velocities finite with shape (N, 2)"
			)

		self.n_bodies = int(mass_arr.size)
		self._mass = mass_arr
		self._pos = pos_arr.copy()
		self._vel = vel_arr.copy()

	def snapshot(self) -> dict:
		return {
			"masses": self._mass.copy(),
			"positions": self._pos.copy(),
			"velocities": self._vel.copy(),
		}

	def restore(self, snap: dict) -> None:
		masses = np.asarray(snap["masses"], dtype=np.float64).ravel()
		positions = np.asarray(snap["positions"], dtype=np.float64)
		velocities = np.asarray(snap["velocities"], dtype=np.float64)

		if not SimulationValidator.state_is_valid(masses, positions, velocities):
			SimulationValidator.report_invalid_state(
				"restore", masses=masses, positions=positions, velocities=velocities
			)
			raise ValueError(
				"invalid snapshot: masses must be positive and finite, "
				"positions and velocities finite with shape (N, 2)"
			)
		if masses.size != self.n_bodies:
			raise ValueError(
				f"snapshot holds {masses.size} bodies, state holds {self.n_bodies}"
			)
		# masses are fixed for the run
		if not np.array_equal(masses.astype(self._mass.dtype), self._mass):
			raise ValueError("snapshot masses differ from the simulation masses")

		self._pos = positions.reshape(-1, 2).astype(self._pos.dtype, copy=True)
		self._vel = velocities.reshape(-1, 2).astype(self._vel.dtype, copy=True)

	def set_fast_mode(self, float32: bool = True) -> None:
		if float32:
			self._pos = self._pos.astype(np.float32, copy=False)
			self._vel = self._vel.astype(np.float32, copy=False)
			self._mass = self._mass.astype(np.float32, copy=False)
		else:
			self._pos = self._pos.astype(np.float64, copy=False)
			self._vel = self._vel.astype(np.float64, copy=False)
			self._mass = self._mass.astype(np.float64, copy=False)
