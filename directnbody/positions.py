from __future__ import annotations
from typing import Sequence


def move_bodies(bodies: Sequence, dt: float) -> None:
    """Advance every body by its current velocity over one timestep.

    Runs after compute_forces in the same step, so the velocity used here already
    includes this step's kick.
    """
    for body in bodies:
        body.position += body.velocity * dt
