from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Dict
from .geometry_cache import clamped_geometry
if TYPE_CHECKING:
    from .simulation import NBodySimulation

"""
This module computes conserved quantities and system health metrics for a running simulation. The Diagnostics class reports kinetic energy, the pair potential evaluated with the same mass-scaled clamped distance used by the force law (-G m_i m_k / r_clamped, summed over unordered pairs), total energy, linear momentum, and the centre of mass position and velocity. None of these values feed back into the integration; they exist so tests and the driver can check momentum conservation and watch the energy drift of the explicit Euler scheme. Sums are always accumulated in float64, even for float32 states.

"""




class Diagnostics:

	def __init__(self, simulation: "NBodySimulation"):
		self.sim = simulation

	def _arrays(self):
		state = self.sim.state
		m = np.asarray(state.mass, dtype=np.float64)
		q = np.asarray(state.pos, dtype=np.float64)
		v = np.asarray(state.vel, dtype=np.float64)
		return m, q, v

	def kinetic_energy(self) -> float:
		m, _, v = self._arrays()
		return 0.5 * float(np.sum(m * np.sum(v * v, axis=1)))

	def potential_energy(self) -> float:
		m, q, _ = self._arrays()
		n = m.size
		G = self.sim.G
		if n < 2 or G == 0.0:
			return 0.0
		_, r, _ = clamped_geometry(q, m)
		iu = np.triu_indices(n, 1)
		return -G * float(np.sum((m[:, None] * m[None, :] / r)[iu]))

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def linear_momentum(self) -> np.ndarray:
		m, _, v = self._arrays()
		if m.size == 0:
			return np.zeros(2)
		return np.sum(m[:, None] * v, axis=0)

	def center_of_mass(self) -> np.ndarray:
		m, q, _ = self._arrays()
		total = float(np.sum(m))
		if total == 0.0:
			return np.zeros(2)
		return np.sum(m[:, None] * q, axis=0) / total

	def center_of_mass_velocity(self) -> np.ndarray:
		m, _, _ = self._arrays()
		total = float(np.sum(m))
		if total == 0.0:
			return np.zeros(2)
		return self.linear_momentum() / total

	def summary(self) -> Dict[str, float]:
		p = self.linear_momentum()
		com = self.center_of_mass()
		return {
			"time": float(self.sim.time),
			"kinetic_energy": self.kinetic_energy(),
			"potential_energy": self.potential_energy(),
			"energy": self.energy(),
			"px": float(p[0]),
			"py": float(p[1]),
			"com_x": float(com[0]),
			"com_y": float(com[1]),
		}
