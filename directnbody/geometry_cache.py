from __future__ import annotations
import numpy as np
from typing import Tuple

from .constants import CLAMP_COEFF

"""
This module provides the pairwise geometry kernel for the vectorized direct-summation force pass. The clamped_geometry function computes, in one broadcast, the displacement tensor d[i, k] = pos[k] - pos[i], the clamped distance matrix r[i, k] = max(c * (m[i] + m[k]), |d[i, k]|) and the inverse cube 1 / r^3 with a zero diagonal so self-pairs contribute nothing. Because every mass is positive the clamp floor is strictly positive, so the inverse cube never divides by zero, even for coincident bodies. Arrays keep the dtype of the position input so float32 states stay in single precision.

"""




__all__ = ["clamped_geometry"]

def clamped_geometry(
    pos: np.ndarray,
    mass: np.ndarray,
    clamp_coeff: float = CLAMP_COEFF,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    pos = np.asarray(pos)
    mass = np.asarray(mass, dtype=pos.dtype)

    diff = pos[None, :, :] - pos[:, None, :]
    dist = np.sqrt(np.einsum("ijk,ijk->ij", diff, diff, optimize=True))

    floor = clamp_coeff * (mass[:, None] + mass[None, :])
    r = np.maximum(floor, dist)

    inv_r3 = 1.0 / (r * r * r)

    np.fill_diagonal(inv_r3, 0.0)
    return diff, r, inv_r3
