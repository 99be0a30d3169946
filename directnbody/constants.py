from __future__ import annotations

from typing import Final

"""
This module defines the numerical defaults shared by the configuration, the initial condition generator and the command line driver. The values reproduce the reference direct-summation run: a 1000 x 1000 field centred on the origin, masses drawn from [2.5, 7.5), ten bodies advanced for a single iteration with a timestep of 0.01 and a scaled gravitational constant of 20. The clamp coefficient sets the minimum pair separation used by the force law as a fraction of the summed pair mass.


"""


FIELD_WIDTH: Final[float] = 1000.0
FIELD_HEIGHT: Final[float] = 1000.0

MIN_BODY_MASS: Final[float] = 2.5
MAX_BODY_MASS_VARIANCE: Final[float] = 5.0

DEFAULT_N_BODIES: Final[int] = 10
DEFAULT_N_ITERATIONS: Final[int] = 1
DEFAULT_DT: Final[float] = 0.01
DEFAULT_G: Final[float] = 20.0

CLAMP_COEFF: Final[float] = 0.5

VECTOR_EPSILON: Final[float] = 1e-5

SNAPSHOT_PATTERN: Final[str] = "nbody_{iteration}.txt"
SNAPSHOT_DELIMITER: Final[str] = ", "
