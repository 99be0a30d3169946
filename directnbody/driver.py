"""
This module implements the outer iteration driver and the command line entry point.

run_simulation generates the initial bodies from a SimConfig, advances them for
cfg.n_iterations steps, and writes a snapshot file every cfg.snapshot_every steps into
cfg.output_dir (snapshots are skipped when output_dir is None). An optional
TrajectoryRecorder receives every step. main parses the command line with argparse,
configures logging and calls run_simulation; its defaults reproduce the reference run
of ten bodies for one iteration with dt = 0.01 and G = 20.
"""

from __future__ import annotations
import argparse
import logging
import os
import time
from typing import List, Optional

from .constants import (
	DEFAULT_DT,
	DEFAULT_G,
	DEFAULT_N_BODIES,
	DEFAULT_N_ITERATIONS,
	SNAPSHOT_PATTERN,
)
from .initial_condition_generator import GeneratorConfig, InitialConditionGenerator
from .persistence import TrajectoryRecorder, persist_positions, snapshot_filename
from .sim_config import SimConfig
from .simulation import NBodySimulation


logger = logging.getLogger(__name__)


def run_simulation(
	cfg: SimConfig,
	recorder: Optional[TrajectoryRecorder] = None,
) -> NBodySimulation:
	generator = InitialConditionGenerator(GeneratorConfig.from_sim_config(cfg))
	sim = generator.create_simulation(cfg.n_bodies, cfg=cfg)
	logger.info(
		"Running %d iterations of %d bodies (G=%g, dt=%g, mode=%s)",
		cfg.n_iterations, sim.n_bodies, sim.G, sim.dt, cfg.integrator_mode,
	)

	def _after_step(s: NBodySimulation, iteration: int) -> None:
		if recorder is not None:
			recorder.record(s, iteration)
		if cfg.output_dir is None:
			return
		if (iteration + 1) % cfg.snapshot_every == 0 or iteration == cfg.n_iterations - 1:
			name = snapshot_filename(cfg.snapshot_pattern, iteration)
			persist_positions(os.path.join(cfg.output_dir, name), s.bodies)

	t0 = time.perf_counter()
	sim.run(cfg.n_iterations, callback=_after_step)
	logger.info(
		"Finished %d iterations in %.3f s (t=%g)",
		sim.steps_taken, time.perf_counter() - t0, sim.time,
	)
	return sim


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="directnbody",
		description="Direct-summation O(n^2) gravitational n-body simulation.",
	)
	parser.add_argument("-b", "--bodies", type=int, default=DEFAULT_N_BODIES,
						help="number of bodies (default: %(default)s)")
	parser.add_argument("-i", "--iterations", type=int, default=DEFAULT_N_ITERATIONS,
						help="number of steps to run (default: %(default)s)")
	parser.add_argument("-d", "--dt", type=float, default=DEFAULT_DT,
						help="timestep (default: %(default)s)")
	parser.add_argument("-g", "--g", dest="G", type=float, default=DEFAULT_G,
						help="gravitational constant (default: %(default)s)")
	parser.add_argument("-o", "--output-dir", default=".",
						help="directory for snapshot files (default: %(default)s)")
	parser.add_argument("--no-output", action="store_true",
						help="do not write snapshot files")
	parser.add_argument("--pattern", default=SNAPSHOT_PATTERN,
						help="snapshot file name pattern (default: %(default)s)")
	parser.add_argument("--snapshot-every", type=int, default=1,
						help="write a snapshot every N steps (default: %(default)s)")
	parser.add_argument("--trajectory", default=None,
						help="also write a per-step trajectory CSV to this path")
	parser.add_argument("--seed", type=int, default=None,
						help="random seed for the initial conditions")
	parser.add_argument("--mode", choices=["direct", "vectorized"], default="vectorized",
						help="integration scheme (default: %(default)s)")
	parser.add_argument("--float32", action="store_true",
						help="run the state in single precision")
	parser.add_argument("--log-level", default="INFO",
						choices=["DEBUG", "INFO", "WARNING", "ERROR"],
						help="logging level (default: %(default)s)")
	return parser


def config_from_args(args: argparse.Namespace) -> SimConfig:
	return SimConfig(
		n_bodies=args.bodies,
		n_iterations=args.iterations,
		dt=args.dt,
		G=args.G,
		integrator_mode=args.mode,
		fast_float32=args.float32,
		seed=args.seed,
		output_dir=None if args.no_output else args.output_dir,
		snapshot_pattern=args.pattern,
		snapshot_every=args.snapshot_every,
	)


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=getattr(logging, args.log_level),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)

	try:
		cfg = config_from_args(args)
	except ValueError as exc:
		parser.error(str(exc))

	recorder = TrajectoryRecorder() if args.trajectory else None
	run_simulation(cfg, recorder=recorder)
	if recorder is not None:
		recorder.save(args.trajectory)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
