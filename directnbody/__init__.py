"""
This initialization file serves as the main entry point for the direct-summation N-body
package, exposing its public API through a single namespace.

It re-exports the Vector2 value type, the Body record and its array-backed BodyView
proxy, the reference integrators (compute_forces and move_bodies) and their numpy
counterpart (pairwise_accelerations), the NBodySimulation container with its
configuration, state, integrator and diagnostics, the random initial condition
generator, snapshot persistence helpers, and the run_simulation driver.
"""

from .vector2 import Vector2
from .body import Body
from .body_view import BodyView
from .sim_config import SimConfig
from .simulation_state import SimulationState
from .simulation_validator import SimulationValidator

from .forces import compute_forces, pairwise_accelerations, clamped_distance, displacement
from .positions import move_bodies
from .geometry_cache import clamped_geometry

from .integrator import Integrator
from .simulation import NBodySimulation
from .diagnostics import Diagnostics

from .initial_condition_generator import InitialConditionGenerator, GeneratorConfig
from .persistence import (
    TrajectoryRecorder,
    load_positions,
    persist_positions,
    snapshot_filename,
)
from .driver import run_simulation


__all__ = [
    "Vector2",
    "Body",
    "BodyView",
    "SimConfig",
    "SimulationState",
    "SimulationValidator",
    "compute_forces",
    "pairwise_accelerations",
    "clamped_distance",
    "displacement",
    "move_bodies",
    "clamped_geometry",
    "Integrator",
    "NBodySimulation",
    "Diagnostics",
    "InitialConditionGenerator",
    "GeneratorConfig",
    "TrajectoryRecorder",
    "load_positions",
    "persist_positions",
    "snapshot_filename",
    "run_simulation",
]
