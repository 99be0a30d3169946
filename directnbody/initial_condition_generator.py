"""
This module generates random initial conditions for direct-summation runs.

The InitialConditionGenerator class scatters bodies uniformly over a rectangular field
centred on the origin, draws masses uniformly from
[min_body_mass, min_body_mass + max_body_mass_variance), and starts every body at rest.
The GeneratorConfig dataclass encapsulates those parameters and defaults to the
reference field of 1000 x 1000 with masses in [2.5, 7.5). Randomness comes from a
numpy Generator seeded from the config, so equal seeds give identical bodies. Methods
include generate_arrays for raw numpy state, generate_bodies for Body objects and
create_simulation for direct simulation instantiation.
"""

from __future__ import annotations

import logging
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .body import Body
from .constants import FIELD_HEIGHT, FIELD_WIDTH, MAX_BODY_MASS_VARIANCE, MIN_BODY_MASS
from .sim_config import SimConfig
from .simulation import NBodySimulation


logger = logging.getLogger(__name__)




@dataclass
class GeneratorConfig:
	field_width: float = FIELD_WIDTH
	field_height: float = FIELD_HEIGHT
	min_body_mass: float = MIN_BODY_MASS
	max_body_mass_variance: float = MAX_BODY_MASS_VARIANCE
	seed: Optional[int] = None

	@classmethod
	def from_sim_config(cls, cfg: SimConfig) -> "GeneratorConfig":
		return cls(
			field_width=cfg.field_width,
			field_height=cfg.field_height,
			min_body_mass=cfg.min_body_mass,
			max_body_mass_variance=cfg.max_body_mass_variance,
			seed=cfg.seed,
		)


class InitialConditionGenerator:

	def __init__(self, config: GeneratorConfig | None = None):
		self.config: GeneratorConfig = config or GeneratorConfig()
		if not self.config.min_body_mass > 0.0:
			raise ValueError(
				f"min_body_mass must be positive, got {self.config.min_body_mass}"
			)
		self._rng = np.random.default_rng(self.config.seed)

	def _generate_masses(self, n: int) -> np.ndarray:
		cfg = self.config
		return self._rng.random(n) * cfg.max_body_mass_variance + cfg.min_body_mass

	def _generate_positions(self, n: int) -> np.ndarray:
		cfg = self.config
		u = self._rng.random((n, 2))
		pos = np.empty((n, 2), dtype=np.float64)
		pos[:, 0] = u[:, 0] * cfg.field_width - 0.5 * cfg.field_width
		pos[:, 1] = u[:, 1] * cfg.field_height - 0.5 * cfg.field_height
		return pos

	def generate_arrays(self, n: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		n = int(n)
		if n < 0:
			raise ValueError(f"body count must be >= 0, got {n}")
		pos = self._generate_positions(n)
		masses = self._generate_masses(n)
		vel = np.zeros((n, 2), dtype=np.float64)
		logger.debug("generated %d bodies", n)
		return masses, pos, vel

	def generate_bodies(self, n: int) -> List[Body]:
		masses, pos, vel = self.generate_arrays(n)
		return [
			Body.from_components(m, p[0], p[1], v[0], v[1])
			for m, p, v in zip(masses, pos, vel)
		]

	def create_simulation(self, n: int, cfg: SimConfig | None = None) -> NBodySimulation:
		masses, pos, vel = self.generate_arrays(n)
		return NBodySimulation(masses=masses, positions=pos, velocities=vel, cfg=cfg)
