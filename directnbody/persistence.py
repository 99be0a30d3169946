"""
This module persists simulation snapshots and trajectories.

persist_positions writes one line per body in the reference snapshot format
"mass, x, y", load_positions reads such a file back into a pandas DataFrame, and
snapshot_filename expands the per-iteration file pattern. TrajectoryRecorder collects
one row per body per recorded step (iteration, time, body index, mass, position and
velocity) and exports them as a DataFrame or CSV file. Writing never happens inside an
integration step; the driver calls these functions from the run callback.
"""

from __future__ import annotations
import logging
import os
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from .constants import SNAPSHOT_DELIMITER, SNAPSHOT_PATTERN


logger = logging.getLogger(__name__)

SNAPSHOT_COLUMNS = ["mass", "x", "y"]
TRAJECTORY_COLUMNS = ["iteration", "time", "body", "mass", "x", "y", "vx", "vy"]


def snapshot_filename(pattern: str, iteration: int) -> str:
	return pattern.format(iteration=int(iteration))


def persist_positions(path: str, bodies: Sequence) -> str:
	logger.info("Writing to file: %s", path)
	parent = os.path.dirname(path)
	if parent:
		os.makedirs(parent, exist_ok=True)

	rows = np.array([(b.mass, b.x, b.y) for b in bodies], dtype=np.float64).reshape(-1, 3)
	with open(path, "w") as f:
		np.savetxt(f, rows, delimiter=SNAPSHOT_DELIMITER, fmt="%.9g")
	return path


def load_positions(path: str) -> pd.DataFrame:
	if os.path.getsize(path) == 0:
		return pd.DataFrame(columns=SNAPSHOT_COLUMNS, dtype=np.float64)
	return pd.read_csv(
		path,
		header=None,
		names=SNAPSHOT_COLUMNS,
		sep=",",
		skipinitialspace=True,
		dtype=np.float64,
	)


class TrajectoryRecorder:
	def __init__(self) -> None:
		self.rows: List[Dict[str, float]] = []

	def record(self, sim, iteration: int) -> None:
		t = float(sim.time)
		for b in sim.bodies:
			self.rows.append({
				"iteration": int(iteration),
				"time": t,
				"body": b.index,
				"mass": b.mass,
				"x": b.x,
				"y": b.y,
				"vx": b.vx,
				"vy": b.vy,
			})

	__call__ = record

	def __len__(self) -> int:
		return len(self.rows)

	def to_frame(self) -> pd.DataFrame:
		if not self.rows:
			return pd.DataFrame(columns=TRAJECTORY_COLUMNS)
		return pd.DataFrame(self.rows, columns=TRAJECTORY_COLUMNS)

	def save(self, path: str) -> str:
		parent = os.path.dirname(path)
		if parent:
			os.makedirs(parent, exist_ok=True)
		df = self.to_frame()
		df.to_csv(path, index=False)
		logger.info("Saved %d trajectory rows to %s", len(df), path)
		return path


__all__ = [
	"SNAPSHOT_PATTERN",
	"snapshot_filename",
	"persist_positions",
	"load_positions",
	"TrajectoryRecorder",
]
