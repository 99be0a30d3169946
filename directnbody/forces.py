"""
This module implements the direct-summation gravitational force pass with mass-scaled
distance clamping.

compute_forces is the reference ForceIntegrator: for every ordered pair of distinct
bodies it forms the displacement d = p_k - p_i, clamps the separation to
r = max(0.5 * (m_i + m_k), |d|), accumulates d / r^3 * m_k, and finally applies
v_i += G * sum * dt. It only reads positions, so every velocity in a call is computed
from the positions at the start of the step. pairwise_accelerations is the numpy
formulation of the same sum, built on clamped_geometry, and is used by the vectorized
integration scheme. Both functions treat empty and single-body collections as a zero
net force.
"""

from __future__ import annotations
from typing import Sequence
import numpy as np
from numpy.typing import NDArray

from .constants import CLAMP_COEFF
from .geometry_cache import clamped_geometry
from .vector2 import Vector2


def displacement(p1, p2) -> Vector2:
    return p2.position - p1.position


def clamped_distance(p1, p2, direction: Vector2 | None = None) -> float:
    if direction is None:
        direction = displacement(p1, p2)
    return max(CLAMP_COEFF * (p2.mass + p1.mass), direction.length())


def compute_forces(bodies: Sequence, G: float, dt: float) -> None:
    n = len(bodies)
    for j in range(n):
        p1 = bodies[j]
        force = Vector2(0.0, 0.0)

        for k in range(n):
            if k == j:
                continue

            p2 = bodies[k]
            direction = displacement(p1, p2)
            distance = clamped_distance(p1, p2, direction)
            force += direction / (distance * distance * distance) * p2.mass

        acceleration = force * G
        p1.velocity += acceleration * dt


def pairwise_accelerations(
    pos: NDArray[np.floating],
    mass: NDArray[np.floating],
    G: float,
) -> NDArray[np.floating]:

    pos_arr = np.asarray(pos)
    if not np.issubdtype(pos_arr.dtype, np.floating):
        pos_arr = pos_arr.astype(np.float64)
    if pos_arr.ndim != 2 or pos_arr.shape[1] != 2:
        raise ValueError(f"positions must have shape (N, 2), got {pos_arr.shape}")
    mass_arr = np.asarray(mass, dtype=pos_arr.dtype)
    if mass_arr.size != pos_arr.shape[0]:
        raise ValueError(
            f"got {mass_arr.size} masses for {pos_arr.shape[0]} positions"
        )

    if pos_arr.shape[0] < 2 or float(G) == 0.0:
        return np.zeros_like(pos_arr)

    diff, _, inv_r3 = clamped_geometry(pos_arr, mass_arr)
    acc = np.einsum("ikd,ik,k->id", diff, inv_r3, mass_arr, optimize=True)
    return (acc * pos_arr.dtype.type(G)).astype(pos_arr.dtype, copy=False)
