"""
This module implements the numpy integration scheme.

The VectorizedScheme class evaluates the same clamped all-pairs sum as the reference
loop through pairwise_accelerations and applies the explicit Euler kick and drift
directly on the simulation state arrays. The work is still O(n^2) per step; only the
constant factor changes. Timestep scalars are cast to the state dtype so float32 runs
stay in single precision.
"""

from __future__ import annotations
from .integration_scheme_base import IntegrationScheme
from .forces import pairwise_accelerations



class VectorizedScheme(IntegrationScheme):
    name = "vectorized"

    def kick(self, dt: float) -> None:
        state = self.sim.state
        if state.n_bodies < 2 or self.sim.G == 0.0:
            return
        acc = pairwise_accelerations(state.pos, state.mass, self.sim.G)
        state.vel[...] += state.dtype.type(dt) * acc

    def drift(self, dt: float) -> None:
        state = self.sim.state
        state.pos[...] += state.dtype.type(dt) * state.vel
