"""
This module implements the reference integration scheme.

The DirectScheme class runs the Vector2 loop integrators (compute_forces and
move_bodies) over the simulation's BodyView proxies. It is the slow but literal
rendition of the algorithm and serves as the baseline the vectorized scheme is checked
against.
"""

from __future__ import annotations
from .integration_scheme_base import IntegrationScheme
from .forces import compute_forces
from .positions import move_bodies



class DirectScheme(IntegrationScheme):
    name = "direct"

    def kick(self, dt: float) -> None:
        compute_forces(self.sim.bodies, self.sim.G, dt)

    def drift(self, dt: float) -> None:
        move_bodies(self.sim.bodies, dt)
