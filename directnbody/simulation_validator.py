"""
This module provides validation utilities for N-body simulation states.

The SimulationValidator class offers static methods to check state validity (positive
masses, finite values, matching (n, 2) shapes) and to report the offending components
of an invalid state through the package logger. SimulationState calls it before
accepting any new arrays, so the integrators never see a non-positive mass or a
non-finite coordinate.
"""

from __future__ import annotations
import logging
import math
from typing import Sequence, Tuple
import numpy as np


logger = logging.getLogger(__name__)


Vec2 = Tuple[float, float]


class SimulationValidator:
	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions: Sequence[Vec2],
		velocities: Sequence[Vec2],
	) -> bool:

		if masses is None or positions is None or velocities is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)

		if m.size == 0:
			return r.size == 0 and v.size == 0

		if r.ndim != 2 or v.ndim != 2 or r.shape != v.shape:
			return False
		if r.shape[0] != m.size or r.shape[1] != 2:
			return False

		for m_i in m:
			if not (m_i > 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)) or not np.all(np.isfinite(v)):
			return False

		return True

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
	) -> None:

		logger.error("invalid state: %s", label)
		if masses is not None:
			m = np.asarray(masses, dtype=float).ravel()
			bad = [i for i, m_i in enumerate(m) if not (m_i > 0.0 and math.isfinite(m_i))]
			if bad:
				logger.error("  non-positive or non-finite masses at indices %s", bad)
		for name, arr in (("position", positions), ("velocity", velocities)):
			if arr is None:
				continue
			a = np.asarray(arr, dtype=float)
			if a.ndim != 2 or (a.size and a.shape[1] != 2):
				logger.error("  %s array has shape %s (expected (n, 2))", name, a.shape)
			elif not np.all(np.isfinite(a)):
				logger.error("  %s array contains non-finite values", name)
