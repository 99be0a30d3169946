from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from .constants import (
	DEFAULT_DT,
	DEFAULT_G,
	DEFAULT_N_BODIES,
	DEFAULT_N_ITERATIONS,
	FIELD_HEIGHT,
	FIELD_WIDTH,
	MAX_BODY_MASS_VARIANCE,
	MIN_BODY_MASS,
	SNAPSHOT_PATTERN,
)

"""
This central configuration module defines all run parameters through the SimConfig dataclass. Key parameters are the body count, iteration count, timestep and gravitational constant, the integrator mode (reference Vector2 loop or numpy), the float32 fast mode, the initial field geometry and mass range, and the snapshot output location and cadence. The class validates its values on construction, raising ValueError for negative counts, unknown modes or an empty mass range, and provides a copy method for deriving configurations. It serves as the single source of truth for the driver and the command line; the integrators themselves only ever receive G and dt.

"""
_ALLOWED_MODES = {
	"direct",
	"vectorized",
}

@dataclass
class SimConfig:
	n_bodies: int = DEFAULT_N_BODIES
	n_iterations: int = DEFAULT_N_ITERATIONS
	dt: float = DEFAULT_DT
	G: float = DEFAULT_G
	integrator_mode: str = "vectorized"
	fast_float32: bool = False
	field_width: float = FIELD_WIDTH
	field_height: float = FIELD_HEIGHT
	min_body_mass: float = MIN_BODY_MASS
	max_body_mass_variance: float = MAX_BODY_MASS_VARIANCE
	seed: Optional[int] = None
	output_dir: Optional[str] = "."
	snapshot_pattern: str = SNAPSHOT_PATTERN
	snapshot_every: int = 1

	def __post_init__(self) -> None:
		if self.integrator_mode not in _ALLOWED_MODES:
			raise ValueError(
				f"integrator_mode must be one of {sorted(_ALLOWED_MODES)}, "
				f"got {self.integrator_mode!r}"
			)
		if not math.isfinite(float(self.G)):
			raise ValueError(f"G must be finite, got {self.G}")
		if not math.isfinite(float(self.dt)):
			raise ValueError(f"dt must be finite, got {self.dt}")
		if int(self.n_bodies) < 0:
			raise ValueError(f"n_bodies must be >= 0, got {self.n_bodies}")
		if int(self.n_iterations) < 0:
			raise ValueError(f"n_iterations must be >= 0, got {self.n_iterations}")
		if int(self.snapshot_every) < 1:
			raise ValueError(f"snapshot_every must be >= 1, got {self.snapshot_every}")
		if not self.min_body_mass > 0.0:
			raise ValueError(f"min_body_mass must be positive, got {self.min_body_mass}")
		if self.max_body_mass_variance < 0.0:
			raise ValueError(
				f"max_body_mass_variance must be >= 0, got {self.max_body_mass_variance}"
			)
		if self.field_width < 0.0 or self.field_height < 0.0:
			raise ValueError("field dimensions must be non-negative")

	def copy(self) -> "SimConfig":
		new = object.__new__(SimConfig)
		new.__dict__ = dict(getattr(self, "__dict__", {}))
		return new
